"""Runtime configuration (OmegaConf defaults + environment overrides)."""

from slidev_mcp.config.settings import DEFAULTS_PATH, Settings, load_settings

__all__ = ["DEFAULTS_PATH", "Settings", "load_settings"]

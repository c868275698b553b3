"""
Settings resolution for the slidev-mcp server.

Loads `defaults.yaml` with OmegaConf, letting `${oc.env:...}` interpolations
pick up environment variables (after `.env` has been read by python-dotenv),
and freezes the result into a `Settings` value that is passed explicitly to
every component that needs it.

Examples:
    >>> settings = load_settings()
    >>> settings.work_dir
    PosixPath('/srv/app/.slidev-work')

    >>> # Point at a different renderer for one run
    >>> # SLIDEV_BIN=/opt/slidev/bin/slidev slidev-mcp serve --stdio
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from omegaconf import OmegaConf

DEFAULTS_PATH = Path(__file__).parent / "defaults.yaml"


@dataclass(frozen=True)
class Settings:
    """
    Resolved runtime configuration.

    Attributes:
        server_name: MCP server name advertised to clients
        server_version: MCP server version advertised to clients
        host: Bind address for the HTTP transport
        port: Listen port for the HTTP transport
        renderer: Path to the slidev executable
        render_timeout_s: Renderer timeout in seconds (None waits forever)
        work_dir: Root under which one staging directory per invocation is created
        log_level: Console log level
        log_dir: Directory for the file log (None disables it)
    """

    server_name: str
    server_version: str
    host: str
    port: int
    renderer: Path
    render_timeout_s: Optional[float]
    work_dir: Path
    log_level: str = "INFO"
    log_dir: Optional[Path] = None


def _resolve_path(value: Any, base: Path) -> Optional[Path]:
    if value in (None, ""):
        return None
    path = Path(str(value)).expanduser()
    return path if path.is_absolute() else (base / path).resolve()


def _resolve_executable(value: Any, base: Path) -> Path:
    # Bare command names (e.g. "slidev") are looked up on PATH at spawn time
    if "/" not in str(value):
        return Path(str(value))
    return _resolve_path(value, base)


def _optional_float(value: Any) -> Optional[float]:
    if value in (None, ""):
        return None
    return float(value)


def load_settings(config_path: Path = None, base_dir: Path = None) -> Settings:
    """
    Load settings from the YAML defaults and the environment.

    Args:
        config_path: Optional YAML file (defaults to the packaged defaults.yaml)
        base_dir: Directory relative paths are resolved against (default: cwd)

    Returns:
        Frozen Settings instance

    Raises:
        ValueError: If a numeric setting (port, timeout) cannot be parsed
    """
    load_dotenv()

    if config_path is None:
        config_path = DEFAULTS_PATH
    base_dir = Path(base_dir) if base_dir is not None else Path.cwd()

    cfg = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)

    return Settings(
        server_name=str(cfg["server"]["name"]),
        server_version=str(cfg["server"]["version"]),
        host=str(cfg["server"]["host"]),
        port=int(cfg["server"]["port"]),
        renderer=_resolve_executable(cfg["renderer"]["executable"], base_dir),
        render_timeout_s=_optional_float(cfg["renderer"]["timeout_s"]),
        work_dir=_resolve_path(cfg["workspace"]["work_dir"], base_dir),
        log_level=str(cfg["logging"]["level"]).upper(),
        log_dir=_resolve_path(cfg["logging"]["log_dir"], base_dir),
    )

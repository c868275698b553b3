"""
Serving context logger.

Provides logging interface for serving context with automatic [serve] prefix.
All serving modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from slidev_mcp.config import Settings
from slidev_mcp.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[serve]"


def setup_serving_logger(settings: Settings, transport: str) -> Optional[Path]:
    """
    Setup logger for the MCP server process.

    Args:
        settings: Resolved settings (log level, log dir, renderer, work root)
        transport: "stdio" or "http", recorded in the provenance header

    Returns:
        Path to log file, or None when file logging is disabled
    """
    return _setup_logger(
        context_name="serve",
        log_dir=settings.log_dir,
        level=settings.log_level,
        extra_provenance={
            "Transport": transport,
            "Renderer": settings.renderer,
            "Work directory": settings.work_dir,
        },
    )


def _log_info(message: str) -> None:
    """Log info message with [serve] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [serve] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_exception(message: str) -> None:
    """Log message with traceback and [serve] prefix."""
    logger.opt(exception=True).error(f"{CONTEXT_PREFIX} {message}")

"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

CONTEXT_PREFIX = "[render]"


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_export_start(execution_id: str, export_flag: str, theme: str, execution_dir: Path) -> None:
    """Log start of a slidev export with context."""
    _log_info(f"Starting export: {execution_id} ({export_flag}, theme={theme})")
    _log_debug(f"  Directory: {execution_dir}")


def log_export_result(execution_id: str, result, verbose: bool = False) -> None:
    """
    Log export result with diagnostics.

    Args:
        execution_id: Invocation identifier
        result: ExportResult from export_slides()
        verbose: Dump renderer stdout/stderr even on success (default: False)
    """
    if result.success:
        _log_success(f"{execution_id}: export succeeded ({result.elapsed_s:.2f}s)")
    else:
        _log_error(
            f"{execution_id}: export failed with exit code {result.returncode} "
            f"({result.elapsed_s:.2f}s)"
        )

    # Use opt(raw=True) so multi-line renderer output keeps its own formatting
    if verbose or not result.success:
        if result.stdout:
            logger.opt(raw=True).debug(
                f"\n{'=' * 80}\nSLIDEV STDOUT:\n{'=' * 80}\n{result.stdout}\n"
            )
        if result.stderr:
            logger.opt(raw=True).debug(
                f"\n{'=' * 80}\nSLIDEV STDERR:\n{'=' * 80}\n{result.stderr}\n"
            )

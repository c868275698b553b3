"""
Slidev Export Module

Runs `slidev export` inside an execution directory and waits for it to exit.
"""

import asyncio
import os
import signal
import time
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from slidev_mcp.contexts.rendering.exceptions import RenderError
from slidev_mcp.contexts.rendering.formats import INPUT_FILENAME, ExportFormat
from slidev_mcp.contexts.rendering.logger import _log_debug, _log_warning, log_export_result

RENDER_LOG_NAME = "render.log"
DRAIN_TIMEOUT_S = 5.0


@dataclass
class ExportResult:
    """
    Result of one slidev export run.

    Attributes:
        returncode: Exit status of the renderer
        stdout: Standard output from slidev
        stderr: Standard error from slidev
        elapsed_s: Wall-clock time spent waiting on the subprocess
    """

    returncode: int
    stdout: str = ""
    stderr: str = ""
    elapsed_s: float = 0.0

    @property
    def success(self) -> bool:
        return self.returncode == 0


def build_export_command(executable: Path, export_format: ExportFormat, theme: str) -> List[str]:
    """Argument vector for `slidev export`; run with cwd set to the execution directory."""
    return [
        str(executable),
        "export",
        "--format",
        export_format.flag,
        "--theme",
        theme,
        INPUT_FILENAME,
    ]


def _save_render_log(execution_dir: Path, result: ExportResult) -> None:
    """Keep renderer output beside the failed run for later inspection."""
    log_path = execution_dir / RENDER_LOG_NAME
    try:
        log_path.write_text(
            f"exit code: {result.returncode}\n\n"
            f"--- stdout ---\n{result.stdout}\n"
            f"--- stderr ---\n{result.stderr}\n",
            encoding="utf-8",
        )
    except OSError as e:
        _log_warning(f"Could not write {log_path}: {e}")


def _kill_renderer(proc: asyncio.subprocess.Process) -> None:
    """SIGKILL the renderer's whole process group (slidev forks node and chromium)."""
    try:
        os.killpg(proc.pid, signal.SIGKILL)
    except ProcessLookupError:
        pass
    except OSError:
        if proc.returncode is None:
            proc.kill()


async def _drain(proc: asyncio.subprocess.Process):
    """Collect whatever output is left after a kill, giving up on pipes held by stragglers."""
    try:
        return await asyncio.wait_for(proc.communicate(), timeout=DRAIN_TIMEOUT_S)
    except asyncio.TimeoutError:
        _log_warning(f"Renderer output still open {DRAIN_TIMEOUT_S}s after kill, discarding")
        return b"", b""


async def export_slides(
    execution_dir: Path,
    export_format: ExportFormat,
    theme: str,
    executable: Path,
    timeout_s: Optional[float] = None,
) -> ExportResult:
    """
    Export the staged markdown with the slidev CLI.

    The renderer's stdout/stderr are captured and never reach the caller's
    console; stdin is detached so the stdio transport stream is left alone.

    Args:
        execution_dir: Staging directory containing slides.md
        export_format: Output format to request
        theme: Slidev theme name
        executable: Path (or bare command name) of the slidev CLI
        timeout_s: Kill the renderer after this many seconds (None waits forever)

    Returns:
        ExportResult of a successful run

    Raises:
        RenderError: If the renderer cannot be spawned, times out, or exits non-zero
    """
    cmd = build_export_command(executable, export_format, theme)
    _log_debug(f"Running: {' '.join(cmd)}")

    start_time = time.monotonic()
    try:
        proc = await asyncio.create_subprocess_exec(
            *cmd,
            cwd=execution_dir,
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
            start_new_session=True,
        )
    except OSError as e:
        raise RenderError(f"Cannot start renderer {executable}: {e}") from e

    try:
        stdout, stderr = await asyncio.wait_for(proc.communicate(), timeout=timeout_s)
    except asyncio.CancelledError:
        _kill_renderer(proc)
        raise
    except asyncio.TimeoutError:
        _kill_renderer(proc)
        stdout, stderr = await _drain(proc)
        result = ExportResult(
            returncode=-1,
            stdout=stdout.decode("utf-8", errors="replace"),
            stderr=stderr.decode("utf-8", errors="replace"),
            elapsed_s=time.monotonic() - start_time,
        )
        _save_render_log(execution_dir, result)
        raise RenderError(
            f"Renderer timed out after {timeout_s}s", stdout=result.stdout, stderr=result.stderr
        )

    result = ExportResult(
        returncode=proc.returncode,
        stdout=stdout.decode("utf-8", errors="replace"),
        stderr=stderr.decode("utf-8", errors="replace"),
        elapsed_s=time.monotonic() - start_time,
    )
    log_export_result(execution_dir.name, result)

    if not result.success:
        _save_render_log(execution_dir, result)
        raise RenderError(
            f"slidev export exited with code {result.returncode}",
            returncode=result.returncode,
            stdout=result.stdout,
            stderr=result.stderr,
        )

    return result

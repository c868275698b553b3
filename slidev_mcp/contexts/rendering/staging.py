"""
Execution directory management.

Every invocation gets its own directory `<work_root>/<execution_id>` holding
the input markdown and whatever the renderer writes. Directories are never
removed here; `slidev-mcp prune` applies retention out of band.
"""

import uuid
from dataclasses import dataclass, field
from pathlib import Path

from slidev_mcp.contexts.rendering.exceptions import StagingError
from slidev_mcp.contexts.rendering.formats import INPUT_FILENAME, ExportFormat
from slidev_mcp.contexts.rendering.logger import _log_debug


def new_execution_id() -> str:
    return str(uuid.uuid4())


@dataclass
class Invocation:
    """
    One end-to-end request to render a deck.

    Attributes:
        markdown: Slidev markdown source
        theme: Theme name passed to the renderer
        export_format: Requested output format
        execution_id: Unique identifier, also the staging directory name
    """

    markdown: str
    theme: str
    export_format: ExportFormat
    execution_id: str = field(default_factory=new_execution_id)

    @property
    def params(self) -> dict:
        """Original request parameters, as echoed back to the caller."""
        return {"markdown": self.markdown, "theme": self.theme}


def create_execution_dir(work_root: Path, execution_id: str) -> Path:
    """
    Create the staging directory for one invocation.

    The work root is created on demand; the execution directory itself must
    not exist yet, since identifiers are expected to be globally unique.

    Args:
        work_root: Process-wide staging root
        execution_id: Invocation identifier

    Returns:
        Path to the new execution directory

    Raises:
        StagingError: If either directory cannot be created (including a collision)
    """
    try:
        work_root.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise StagingError(f"Cannot create work directory {work_root}: {e}", path=work_root) from e

    execution_dir = work_root / execution_id
    try:
        execution_dir.mkdir()
    except FileExistsError as e:
        raise StagingError(
            f"Execution directory already exists: {execution_dir}", path=execution_dir
        ) from e
    except OSError as e:
        raise StagingError(
            f"Cannot create execution directory {execution_dir}: {e}", path=execution_dir
        ) from e

    _log_debug(f"Created execution directory: {execution_dir}")
    return execution_dir


def write_input(execution_dir: Path, markdown: str) -> Path:
    """
    Write the markdown verbatim to the renderer's input file.

    Raises:
        StagingError: If the file cannot be written
    """
    input_path = execution_dir / INPUT_FILENAME
    try:
        with open(input_path, "w", encoding="utf-8", newline="") as f:
            f.write(markdown)
    except OSError as e:
        raise StagingError(f"Cannot write {input_path}: {e}", path=input_path) from e
    return input_path

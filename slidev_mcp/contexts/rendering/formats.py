"""
Export formats and themes understood by the slidev CLI.

Each format names the `--format` flag passed to `slidev export`, where the
renderer leaves its output inside the execution directory, and the MIME type
used when the payload is returned to the caller.
"""

from dataclasses import dataclass
from typing import Dict, Literal, Tuple, get_args

Theme = Literal["default", "bricks", "apple-basic", "seriph", "shibainu"]
THEMES: Tuple[str, ...] = get_args(Theme)
DEFAULT_THEME = "default"

INPUT_FILENAME = "slides.md"

PPTX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.presentationml.presentation"


@dataclass(frozen=True)
class ExportFormat:
    """
    Attributes:
        flag: Value passed to `slidev export --format`
        output: Output path relative to the execution directory
        mime_type: MIME type of each produced payload
        label: Human-readable name used in messages
        multi_page: True when the renderer writes one file per slide into `output`
    """

    flag: str
    output: str
    mime_type: str
    label: str
    multi_page: bool = False


PNG = ExportFormat(
    flag="png", output="slides-export", mime_type="image/png", label="slides", multi_page=True
)
PDF = ExportFormat(flag="pdf", output="slides-export.pdf", mime_type="application/pdf", label="PDF")
PPTX = ExportFormat(flag="pptx", output="slides-export.pptx", mime_type=PPTX_MIME_TYPE, label="PPTX")

EXPORT_FORMATS: Dict[str, ExportFormat] = {fmt.flag: fmt for fmt in (PNG, PDF, PPTX)}


def get_export_format(flag: str) -> ExportFormat:
    """Look up an export format by its CLI flag (png, pdf, pptx)."""
    try:
        return EXPORT_FORMATS[flag]
    except KeyError:
        raise ValueError(
            f"Unknown export format: {flag!r}. Options: {', '.join(EXPORT_FORMATS)}"
        ) from None

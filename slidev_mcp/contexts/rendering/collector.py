"""
Output collection for finished exports.

Slidev writes one PNG per slide into `slides-export/` (1.png, 2.png, ...) or a
single `slides-export.pdf` / `slides-export.pptx`. Payloads are loaded and
base64-encoded for transport.
"""

import base64
import re
from dataclasses import dataclass
from pathlib import Path
from typing import List

from slidev_mcp.contexts.rendering.exceptions import MissingOutputError
from slidev_mcp.contexts.rendering.logger import _log_debug

LEADING_INT = re.compile(r"^(\d+)")


@dataclass
class EncodedPayload:
    """
    One rendered artifact ready for transport.

    Attributes:
        path: File the payload was read from
        data: Base64-encoded file contents
        mime_type: MIME type of the decoded bytes
    """

    path: Path
    data: str
    mime_type: str


def _encode_file(path: Path, mime_type: str) -> EncodedPayload:
    return EncodedPayload(
        path=path,
        data=base64.b64encode(path.read_bytes()).decode("ascii"),
        mime_type=mime_type,
    )


def slide_number(path: Path) -> int:
    """Numeric slide index from a filename such as `12.png`."""
    match = LEADING_INT.match(path.name)
    if match is None:
        raise ValueError(f"No leading slide number in {path.name}")
    return int(match.group(1))


def sorted_slide_files(export_dir: Path, suffix: str = ".png") -> List[Path]:
    """
    List numbered slide images in numeric order.

    Lexical order would put 10.png before 2.png, so files are ordered by the
    integer value of their leading digits. Files without one are skipped.
    """
    slides = []
    for path in export_dir.iterdir():
        if not path.is_file() or path.suffix.lower() != suffix:
            continue
        if LEADING_INT.match(path.name) is None:
            _log_debug(f"Skipping unnumbered export file: {path.name}")
            continue
        slides.append(path)
    return sorted(slides, key=slide_number)


def collect_slide_images(export_dir: Path, mime_type: str = "image/png") -> List[EncodedPayload]:
    """
    Load every numbered slide image from the export directory.

    Raises:
        MissingOutputError: If the directory is missing or holds no slide images
    """
    if not export_dir.is_dir():
        raise MissingOutputError(f"Export directory not found: {export_dir}", expected=export_dir)

    slides = sorted_slide_files(export_dir)
    if not slides:
        raise MissingOutputError(f"No slide images in {export_dir}", expected=export_dir)

    _log_debug(f"Collected {len(slides)} slide images from {export_dir}")
    return [_encode_file(path, mime_type) for path in slides]


def collect_document(document_path: Path, mime_type: str) -> EncodedPayload:
    """
    Load a single exported document (PDF or PPTX).

    Raises:
        MissingOutputError: If the file is missing or empty
    """
    if not document_path.is_file():
        raise MissingOutputError(f"Exported file not found: {document_path}", expected=document_path)
    if document_path.stat().st_size == 0:
        raise MissingOutputError(f"Exported file is empty: {document_path}", expected=document_path)

    return _encode_file(document_path, mime_type)

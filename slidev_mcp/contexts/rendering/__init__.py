"""
Rendering Context

Responsibilities:
- Creates one staging directory per invocation under the work root
- Runs the slidev CLI as a subprocess for png/pdf/pptx export
- Collects and base64-encodes the renderer's output
- Classifies failures (staging, renderer, missing output)

Owns: Staging layout, renderer invocation, output collection
Never: Builds protocol responses or cleans up staging directories
"""

from slidev_mcp.contexts.rendering.collector import (
    EncodedPayload,
    collect_document,
    collect_slide_images,
    sorted_slide_files,
)
from slidev_mcp.contexts.rendering.exceptions import (
    InvalidRequestError,
    MissingOutputError,
    RenderError,
    SlideRenderError,
    StagingError,
)
from slidev_mcp.contexts.rendering.exporter import ExportResult, export_slides
from slidev_mcp.contexts.rendering.formats import (
    DEFAULT_THEME,
    EXPORT_FORMATS,
    PDF,
    PNG,
    PPTX,
    THEMES,
    ExportFormat,
    Theme,
    get_export_format,
)
from slidev_mcp.contexts.rendering.pipeline import RenderedDeck, render_invocation
from slidev_mcp.contexts.rendering.staging import Invocation, create_execution_dir, write_input

__all__ = [
    # Pipeline
    "render_invocation",
    "RenderedDeck",
    "Invocation",
    # Steps
    "create_execution_dir",
    "write_input",
    "export_slides",
    "ExportResult",
    "collect_slide_images",
    "collect_document",
    "sorted_slide_files",
    "EncodedPayload",
    # Formats and themes
    "ExportFormat",
    "EXPORT_FORMATS",
    "PNG",
    "PDF",
    "PPTX",
    "Theme",
    "THEMES",
    "DEFAULT_THEME",
    "get_export_format",
    # Errors
    "SlideRenderError",
    "InvalidRequestError",
    "StagingError",
    "RenderError",
    "MissingOutputError",
]

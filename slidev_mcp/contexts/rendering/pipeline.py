"""
Staging → export → collection for a single invocation.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from slidev_mcp.config import Settings
from slidev_mcp.contexts.rendering.collector import (
    EncodedPayload,
    collect_document,
    collect_slide_images,
)
from slidev_mcp.contexts.rendering.exceptions import InvalidRequestError
from slidev_mcp.contexts.rendering.exporter import ExportResult, export_slides
from slidev_mcp.contexts.rendering.formats import THEMES
from slidev_mcp.contexts.rendering.logger import log_export_start
from slidev_mcp.contexts.rendering.staging import Invocation, create_execution_dir, write_input


@dataclass
class RenderedDeck:
    """
    Outputs of one finished invocation.

    Attributes:
        invocation: The request that produced the deck
        execution_dir: Staging directory holding input and raw output
        payloads: Encoded artifacts (one per slide, or a single document)
        export: Renderer run details
    """

    invocation: Invocation
    execution_dir: Path
    payloads: List[EncodedPayload]
    export: Optional[ExportResult] = None

    @property
    def output_path(self) -> Path:
        return self.execution_dir / self.invocation.export_format.output


async def render_invocation(invocation: Invocation, settings: Settings) -> RenderedDeck:
    """
    Run the full pipeline for one invocation.

    Args:
        invocation: What to render
        settings: Work root, renderer path and timeout

    Returns:
        RenderedDeck with encoded payloads in slide order

    Raises:
        InvalidRequestError: If the theme is not one of THEMES
        StagingError: If the execution directory cannot be prepared
        RenderError: If the renderer fails
        MissingOutputError: If the renderer produced no usable output
    """
    if invocation.theme not in THEMES:
        raise InvalidRequestError(
            f"Unknown theme: {invocation.theme!r}. Options: {', '.join(THEMES)}"
        )

    export_format = invocation.export_format
    execution_dir = create_execution_dir(settings.work_dir, invocation.execution_id)
    write_input(execution_dir, invocation.markdown)

    log_export_start(invocation.execution_id, export_format.flag, invocation.theme, execution_dir)
    export = await export_slides(
        execution_dir,
        export_format,
        invocation.theme,
        executable=settings.renderer,
        timeout_s=settings.render_timeout_s,
    )

    output_path = execution_dir / export_format.output
    if export_format.multi_page:
        payloads = collect_slide_images(output_path, export_format.mime_type)
    else:
        payloads = [collect_document(output_path, export_format.mime_type)]

    return RenderedDeck(
        invocation=invocation, execution_dir=execution_dir, payloads=payloads, export=export
    )

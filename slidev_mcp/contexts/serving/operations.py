"""
Slide generation operations.

`SlideOperations` binds the rendering pipeline to the settings it was built
with and turns every outcome, including failures, into a CallToolResult. No
exception crosses this boundary.
"""

from mcp.types import CallToolResult

from slidev_mcp.config import Settings
from slidev_mcp.contexts.rendering import (
    DEFAULT_THEME,
    PDF,
    PNG,
    PPTX,
    ExportFormat,
    Invocation,
    SlideRenderError,
    render_invocation,
)
from slidev_mcp.contexts.serving.logger import _log_error, _log_exception, _log_info
from slidev_mcp.contexts.serving.packager import (
    package_document,
    package_error,
    package_slide_images,
)


class SlideOperations:
    """
    Handlers behind the generateSlide / generateSlidePDF / generateSlidePPTX tools.

    Args:
        settings: Resolved settings; `work_dir` is the staging root for every call
    """

    def __init__(self, settings: Settings):
        self.settings = settings

    async def generate_slide(self, markdown: str, theme: str = DEFAULT_THEME) -> CallToolResult:
        """Render the deck to one PNG per slide."""
        return await self._generate(markdown, theme, PNG)

    async def generate_slide_pdf(self, markdown: str, theme: str = DEFAULT_THEME) -> CallToolResult:
        """Render the deck to a single PDF."""
        return await self._generate(markdown, theme, PDF)

    async def generate_slide_pptx(self, markdown: str, theme: str = DEFAULT_THEME) -> CallToolResult:
        """Render the deck to a single PPTX."""
        return await self._generate(markdown, theme, PPTX)

    async def _generate(
        self, markdown: str, theme: str, export_format: ExportFormat
    ) -> CallToolResult:
        invocation = Invocation(markdown=markdown, theme=theme, export_format=export_format)
        _log_info(
            f"{invocation.execution_id}: generate {export_format.label} "
            f"(theme={theme}, {len(markdown)} chars)"
        )

        try:
            deck = await render_invocation(invocation, self.settings)
        except SlideRenderError as e:
            _log_error(f"{invocation.execution_id}: {e.kind}: {e.message}")
            return package_error(export_format.label, e)
        except Exception as e:
            _log_exception(f"{invocation.execution_id}: unexpected failure")
            return package_error(export_format.label, e)

        _log_info(f"{invocation.execution_id}: returning {len(deck.payloads)} payload(s)")
        if export_format.multi_page:
            return package_slide_images(deck)
        return package_document(deck, self.settings.work_dir)

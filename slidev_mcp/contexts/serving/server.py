"""
MCP server for Slidev rendering.

Supports:
  - stdio (on-demand / local process)
  - streamable HTTP on /mcp (remote server mode)

Both modes expose the same tools and resources. Tool handlers delegate to
SlideOperations, which is built once from the Settings passed in.
"""

from typing_extensions import Annotated

from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult
from pydantic import Field

from slidev_mcp.config import Settings
from slidev_mcp.contexts.rendering import DEFAULT_THEME, THEMES, Theme
from slidev_mcp.contexts.serving.logger import _log_info, setup_serving_logger
from slidev_mcp.contexts.serving.operations import SlideOperations
from slidev_mcp.contexts.serving.resources import (
    APP_MIME_TYPE,
    APP_RESOURCE_URI,
    SYNTAX_GUIDE,
    SYNTAX_GUIDE_URI,
    render_app_bundle,
)

TOOL_NAMES = {
    "slides": "generateSlide",
    "pdf": "generateSlidePDF",
    "pptx": "generateSlidePPTX",
}

MarkdownArg = Annotated[str, Field(description="Slidev format markdown content for the slides")]
ThemeArg = Annotated[
    Theme,
    Field(
        description=(
            f"Slidev theme to use (defaults to {DEFAULT_THEME}). Options: {', '.join(THEMES)}"
        )
    ),
]

# Document tools are only meant to be called from the mini-app
APP_ONLY_META = {"ui": {"visibility": ["app"]}}


def build_server(settings: Settings) -> FastMCP:
    """
    Create the FastMCP app with all tools and resources registered.

    Args:
        settings: Resolved settings; the same work root is used by every tool call

    Returns:
        Configured FastMCP instance (not yet running)
    """
    mcp = FastMCP(
        settings.server_name,
        host=settings.host,
        port=settings.port,
        stateless_http=True,
    )
    operations = SlideOperations(settings)

    @mcp.tool(
        name=TOOL_NAMES["slides"],
        description="Generate slides from Slidev markdown and export to PNG images",
        meta={"ui": {"resourceUri": APP_RESOURCE_URI}},
        structured_output=False,
    )
    async def generate_slide(markdown: MarkdownArg, theme: ThemeArg = DEFAULT_THEME) -> CallToolResult:
        return await operations.generate_slide(markdown, theme)

    @mcp.tool(
        name=TOOL_NAMES["pdf"],
        description="Generate slides from Slidev markdown and export to PDF",
        meta=APP_ONLY_META,
        structured_output=False,
    )
    async def generate_slide_pdf(
        markdown: MarkdownArg, theme: ThemeArg = DEFAULT_THEME
    ) -> CallToolResult:
        return await operations.generate_slide_pdf(markdown, theme)

    @mcp.tool(
        name=TOOL_NAMES["pptx"],
        description="Generate slides from Slidev markdown and export to PPTX (PowerPoint)",
        meta=APP_ONLY_META,
        structured_output=False,
    )
    async def generate_slide_pptx(
        markdown: MarkdownArg, theme: ThemeArg = DEFAULT_THEME
    ) -> CallToolResult:
        return await operations.generate_slide_pptx(markdown, theme)

    @mcp.resource(
        APP_RESOURCE_URI,
        name=APP_RESOURCE_URI,
        description="Slide editor and preview mini-app",
        mime_type=APP_MIME_TYPE,
    )
    def app_bundle() -> str:
        return render_app_bundle(
            tools=TOOL_NAMES,
            themes=THEMES,
            default_theme=DEFAULT_THEME,
            app_version=settings.server_version,
        )

    @mcp.resource(
        SYNTAX_GUIDE_URI,
        name="Slidev Syntax Guide",
        title="Slidev Syntax Guide",
        description="Slidev Syntax Guide",
        mime_type="text/plain",
    )
    def syntax_guide() -> str:
        return SYNTAX_GUIDE

    return mcp


def run_server(settings: Settings, stdio: bool = False) -> None:
    """
    Build the server and block serving requests.

    Args:
        settings: Resolved settings (host/port apply to HTTP mode only)
        stdio: Serve over stdin/stdout instead of HTTP
    """
    setup_serving_logger(settings, transport="stdio" if stdio else "http")
    mcp = build_server(settings)

    if stdio:
        _log_info("Slidev MCP Server running on stdio")
        mcp.run(transport="stdio")
    else:
        _log_info(
            f"Slidev MCP Server running on "
            f"http://{settings.host}:{settings.port}{mcp.settings.streamable_http_path}"
        )
        mcp.run(transport="streamable-http")

"""
Serving Context

Responsibilities:
- Exposes generateSlide / generateSlidePDF / generateSlidePPTX as MCP tools
- Serves the syntax guide and the mini-app bundle as MCP resources
- Shapes rendering outcomes (and failures) into CallToolResult envelopes
- Runs the stdio and streamable HTTP transports

Owns: Tool/resource registration, response envelopes, transports
Never: Touches the filesystem layout of staging directories
"""

from slidev_mcp.contexts.serving.operations import SlideOperations
from slidev_mcp.contexts.serving.packager import (
    document_locator,
    error_message,
    package_document,
    package_error,
    package_slide_images,
)
from slidev_mcp.contexts.serving.resources import (
    APP_MIME_TYPE,
    APP_RESOURCE_URI,
    SYNTAX_GUIDE,
    SYNTAX_GUIDE_URI,
    render_app_bundle,
)
from slidev_mcp.contexts.serving.server import TOOL_NAMES, build_server, run_server

__all__ = [
    # Server
    "build_server",
    "run_server",
    "TOOL_NAMES",
    "SlideOperations",
    # Envelopes
    "package_slide_images",
    "package_document",
    "package_error",
    "error_message",
    "document_locator",
    # Resources
    "render_app_bundle",
    "SYNTAX_GUIDE",
    "SYNTAX_GUIDE_URI",
    "APP_RESOURCE_URI",
    "APP_MIME_TYPE",
]

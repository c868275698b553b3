"""
Static resources served next to the slide tools: the Slidev syntax guide and
the mini-app bundle.
"""

from pathlib import Path
from typing import Dict, Sequence

from jinja2 import Environment, StrictUndefined

STATIC_DIR = Path(__file__).parent / "static"
SYNTAX_GUIDE_PATH = STATIC_DIR / "syntax_guide.md"
APP_TEMPLATE_PATH = STATIC_DIR / "mcp-app.html.jinja"

SYNTAX_GUIDE_URI = "file://slidev-syntax-guide/"
APP_RESOURCE_URI = "ui://slidev/mcp-app.html"
APP_MIME_TYPE = "text/html;profile=mcp-app"

# MCP Apps protocol revision announced by the mini-app during ui/initialize
APPS_PROTOCOL_VERSION = "2026-01-26"

SYNTAX_GUIDE = SYNTAX_GUIDE_PATH.read_text(encoding="utf-8")


def render_app_bundle(
    tools: Dict[str, str],
    themes: Sequence[str],
    default_theme: str,
    app_name: str = "Slide Generator",
    app_version: str = "1.0.0",
    template_path: Path = APP_TEMPLATE_PATH,
) -> str:
    """
    Render the mini-app HTML.

    The template is read from disk on every call so an edited bundle is
    served without restarting the server.

    Args:
        tools: Tool names keyed by role ("slides", "pdf", "pptx")
        themes: Theme names offered in the theme selector
        default_theme: Initially selected theme
        app_name: Name the app announces to the host
        app_version: Version the app announces to the host
        template_path: Jinja2 template to render

    Returns:
        Self-contained HTML document
    """
    source = template_path.read_text(encoding="utf-8")
    template = Environment(autoescape=True, undefined=StrictUndefined).from_string(source)
    return template.render(
        app_name=app_name,
        app_info={"name": app_name, "version": app_version},
        tools=tools,
        themes=list(themes),
        default_theme=default_theme,
        protocol_version=APPS_PROTOCOL_VERSION,
    )

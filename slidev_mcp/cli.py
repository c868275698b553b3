"""
slidev-mcp command line

Commands:
    serve  - Run the MCP server (streamable HTTP, or stdio with --stdio)
    render - Export a markdown file once through the staging pipeline
    prune  - Delete old execution directories from the work root

Examples:\n

    slidev-mcp serve                          # HTTP on $PORT (default 8000)

    slidev-mcp serve --stdio                  # stdio transport

    slidev-mcp render deck.md --format pdf    # One-shot PDF export

    slidev-mcp prune --older-than 3 --dry-run # Preview cleanup
"""

import asyncio
import dataclasses
from pathlib import Path
from typing import Optional

import typer
from loguru import logger
from typing_extensions import Annotated

from slidev_mcp.config import load_settings
from slidev_mcp.contexts.rendering import (
    DEFAULT_THEME,
    EXPORT_FORMATS,
    THEMES,
    Invocation,
    SlideRenderError,
    get_export_format,
    render_invocation,
)
from slidev_mcp.contexts.rendering.retention import prune_execution_dirs
from slidev_mcp.contexts.serving import run_server
from slidev_mcp.utils.logger import setup_logger

app = typer.Typer(
    help="Render Slidev markdown to PNG, PDF or PPTX over the Model Context Protocol",
    add_completion=False,
    invoke_without_command=True,
)


def display_path(path: Path) -> str:
    """Return path relative to the current directory for cleaner display."""
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("serve")
def serve_command(
    stdio: Annotated[
        bool,
        typer.Option("--stdio", help="Serve over stdin/stdout instead of HTTP"),
    ] = False,
    host: Annotated[
        Optional[str],
        typer.Option("--host", help="Bind address for HTTP mode (default: $HOST or 0.0.0.0)"),
    ] = None,
    port: Annotated[
        Optional[int],
        typer.Option("--port", "-p", help="Port for HTTP mode (default: $PORT or 8000)"),
    ] = None,
):
    """
    Run the MCP server.

    Examples:\n

        $ slidev-mcp serve                 # HTTP on /mcp

        $ slidev-mcp serve --port 9000     # HTTP on another port

        $ slidev-mcp serve --stdio         # For local MCP clients
    """
    try:
        settings = load_settings()
        overrides = {k: v for k, v in {"host": host, "port": port}.items() if v is not None}
        if overrides:
            settings = dataclasses.replace(settings, **overrides)
        run_server(settings, stdio=stdio)
    except Exception:
        logger.opt(exception=True).critical("Fatal error in main()")
        raise typer.Exit(code=1)


@app.command("render")
def render_command(
    markdown_file: Annotated[
        Path,
        typer.Argument(help="Slidev markdown file", exists=True, dir_okay=False, readable=True),
    ],
    export_format: Annotated[
        str,
        typer.Option("--format", "-f", help=f"Export format: {', '.join(EXPORT_FORMATS)}"),
    ] = "png",
    theme: Annotated[
        str,
        typer.Option("--theme", "-t", help=f"Slidev theme: {', '.join(THEMES)}"),
    ] = DEFAULT_THEME,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug output"),
    ] = False,
):
    """
    Export a markdown file once, using the same staging layout as the server.

    Examples:\n

        $ slidev-mcp render deck.md                      # PNG per slide

        $ slidev-mcp render deck.md -f pptx -t seriph    # PPTX with a theme
    """
    settings = load_settings()
    setup_logger(context_name="render", level="DEBUG" if verbose else settings.log_level)

    try:
        fmt = get_export_format(export_format)
    except ValueError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    invocation = Invocation(
        markdown=markdown_file.read_text(encoding="utf-8"), theme=theme, export_format=fmt
    )
    typer.secho(f"\nRendering: {markdown_file} ({fmt.flag}, {theme})", fg=typer.colors.BLUE, bold=True)

    try:
        deck = asyncio.run(render_invocation(invocation, settings))
    except SlideRenderError as e:
        typer.secho(f"✗ {e.kind}: {e}", fg=typer.colors.RED, bold=True)
        raise typer.Exit(code=1)

    typer.secho(f"✓ Rendered {len(deck.payloads)} file(s)", fg=typer.colors.GREEN, bold=True)
    typer.echo(f"  Execution: {invocation.execution_id}")
    typer.echo(f"  Directory: {display_path(deck.execution_dir)}")
    for payload in deck.payloads:
        typer.echo(f"  - {display_path(payload.path)}")
    typer.echo("")


@app.command("prune")
def prune_command(
    older_than: Annotated[
        float,
        typer.Option("--older-than", "-d", help="Age threshold in days", min=0),
    ] = 7,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", "-n", help="List directories without deleting them"),
    ] = False,
):
    """
    Delete execution directories older than a threshold.

    Examples:\n

        $ slidev-mcp prune                      # Older than a week

        $ slidev-mcp prune -d 1 --dry-run       # Preview a one-day cutoff
    """
    settings = load_settings()
    pruned = prune_execution_dirs(settings.work_dir, older_than, dry_run=dry_run)

    if not pruned:
        typer.echo(f"Nothing older than {older_than:g} day(s) in {display_path(settings.work_dir)}")
        raise typer.Exit(code=0)

    verb = "Would remove" if dry_run else "Removed"
    for entry in pruned:
        typer.echo(f"  {verb} {entry.path.name} ({entry.age})")
    typer.secho(f"{verb} {len(pruned)} execution directories", fg=typer.colors.GREEN, bold=True)


if __name__ == "__main__":
    app()

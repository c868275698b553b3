"""
Response envelopes for the slide tools.

Image results carry the execution id and the original parameters both as the
first two text parts (read by agents) and as `structuredContent` (read by the
mini-app), followed by one image part per slide. Document results carry one
embedded resource whose locator is relative to the work root.
"""

import json
from pathlib import Path

from mcp.types import (
    BlobResourceContents,
    CallToolResult,
    EmbeddedResource,
    ImageContent,
    TextContent,
)

from slidev_mcp.contexts.rendering import RenderedDeck, SlideRenderError


def document_locator(output_path: Path, work_dir: Path) -> str:
    """`file://` locator for an export, relative to the work root."""
    return f"file://{output_path.relative_to(work_dir).as_posix()}"


def package_slide_images(deck: RenderedDeck) -> CallToolResult:
    invocation = deck.invocation
    images = [
        ImageContent(type="image", data=payload.data, mimeType=payload.mime_type)
        for payload in deck.payloads
    ]
    return CallToolResult(
        content=[
            TextContent(type="text", text=invocation.execution_id),
            TextContent(type="text", text=json.dumps(invocation.params)),
            *images,
        ],
        structuredContent={
            "executionId": invocation.execution_id,
            "params": invocation.params,
        },
    )


def package_document(deck: RenderedDeck, work_dir: Path) -> CallToolResult:
    payload = deck.payloads[0]
    return CallToolResult(
        content=[
            EmbeddedResource(
                type="resource",
                resource=BlobResourceContents(
                    uri=document_locator(deck.output_path, work_dir),
                    blob=payload.data,
                    mimeType=payload.mime_type,
                ),
            )
        ]
    )


def error_message(label: str, error: Exception) -> str:
    """Caller-visible failure text, tagged with the failure kind."""
    kind = error.kind if isinstance(error, SlideRenderError) else "unexpected-error"
    return f"Failed to generate {label} ({kind}): {error}"


def package_error(label: str, error: Exception) -> CallToolResult:
    return CallToolResult(
        content=[TextContent(type="text", text=error_message(label, error))],
        isError=True,
    )

"""
Integration tests for the slide operations - runs the real subprocess path
against the fake slidev executable from conftest.
"""

import asyncio
import base64
import dataclasses
import json
import time

import pytest

from slidev_mcp.contexts.rendering import PDF, PPTX
from slidev_mcp.contexts.serving import SlideOperations


def _images(result):
    return [part for part in result.content if part.type == "image"]


def _decoded(part):
    return base64.b64decode(part.data).decode("utf-8")


@pytest.mark.integration
def test_generate_slide_returns_images_in_numeric_order(settings, make_deck):
    operations = SlideOperations(settings)
    markdown = make_deck(12)

    result = asyncio.run(operations.generate_slide(markdown, theme="seriph"))

    assert not result.isError
    images = _images(result)
    assert len(images) == 12
    headers = [_decoded(image).splitlines()[0] for image in images]
    assert headers == [f"PNG {n} seriph" for n in range(1, 13)]
    assert all(image.mimeType == "image/png" for image in images)


@pytest.mark.integration
def test_generate_slide_metadata_parts(settings, make_deck):
    operations = SlideOperations(settings)
    markdown = make_deck(2)

    result = asyncio.run(operations.generate_slide(markdown))

    execution_id = result.content[0].text
    assert json.loads(result.content[1].text) == {"markdown": markdown, "theme": "default"}
    assert result.structuredContent["executionId"] == execution_id

    execution_dir = settings.work_dir / execution_id
    assert (execution_dir / "slides.md").read_text(encoding="utf-8") == markdown
    assert (execution_dir / "slides-export" / "1.png").is_file()


@pytest.mark.integration
@pytest.mark.parametrize(
    "export_format, method",
    [(PDF, "generate_slide_pdf"), (PPTX, "generate_slide_pptx")],
)
def test_generate_document_payload_matches_file(settings, make_deck, export_format, method):
    operations = SlideOperations(settings)

    result = asyncio.run(getattr(operations, method)(make_deck(3), theme="bricks"))

    assert not result.isError
    assert len(result.content) == 1
    resource = result.content[0].resource
    assert resource.mimeType == export_format.mime_type

    relative = str(resource.uri)[len("file://"):]
    output_file = settings.work_dir / relative
    assert output_file.name == export_format.output
    assert base64.b64decode(resource.blob) == output_file.read_bytes()


@pytest.mark.integration
def test_renderer_failure_returns_single_error_part(settings, make_deck):
    operations = SlideOperations(settings)

    result = asyncio.run(operations.generate_slide(make_deck(2, marker="FAIL")))

    assert result.isError is True
    assert len(result.content) == 1
    text = result.content[0].text
    assert text.startswith("Failed to generate slides (render-error): ")
    assert "exited with code 2" in text
    assert "boom: renderer failed" in text


@pytest.mark.integration
def test_renderer_failure_keeps_render_log(settings, make_deck):
    operations = SlideOperations(settings)

    asyncio.run(operations.generate_slide_pdf(make_deck(1, marker="FAIL")))

    (execution_dir,) = list(settings.work_dir.iterdir())
    log = (execution_dir / "render.log").read_text(encoding="utf-8")
    assert "exit code: 2" in log
    assert "boom: renderer failed" in log


@pytest.mark.integration
@pytest.mark.parametrize(
    "method, label",
    [
        ("generate_slide", "slides"),
        ("generate_slide_pdf", "PDF"),
        ("generate_slide_pptx", "PPTX"),
    ],
)
def test_missing_output_is_reported(settings, make_deck, method, label):
    operations = SlideOperations(settings)

    result = asyncio.run(getattr(operations, method)(make_deck(1, marker="NO-OUTPUT")))

    assert result.isError is True
    assert len(result.content) == 1
    assert result.content[0].text.startswith(
        f"Failed to generate {label} (missing-output-error): "
    )


@pytest.mark.integration
def test_staging_failure_is_reported(settings, make_deck, tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    operations = SlideOperations(dataclasses.replace(settings, work_dir=blocker / "work"))

    result = asyncio.run(operations.generate_slide(make_deck(1)))

    assert result.isError is True
    assert result.content[0].text.startswith("Failed to generate slides (staging-error): ")


@pytest.mark.integration
def test_missing_renderer_is_reported(settings, make_deck, tmp_path):
    operations = SlideOperations(dataclasses.replace(settings, renderer=tmp_path / "nope" / "slidev"))

    result = asyncio.run(operations.generate_slide_pptx(make_deck(1)))

    assert result.isError is True
    assert result.content[0].text.startswith("Failed to generate PPTX (render-error): ")
    assert "Cannot start renderer" in result.content[0].text


@pytest.mark.integration
def test_renderer_timeout(settings, make_deck):
    operations = SlideOperations(dataclasses.replace(settings, render_timeout_s=0.2))

    result = asyncio.run(operations.generate_slide(make_deck(1, marker="SLOW")))

    assert result.isError is True
    assert "timed out" in result.content[0].text


@pytest.mark.integration
def test_unknown_theme_is_rejected(settings, make_deck):
    operations = SlideOperations(settings)

    result = asyncio.run(operations.generate_slide(make_deck(1), theme="comic-sans"))

    assert result.isError is True
    assert "(invalid-request)" in result.content[0].text
    assert not settings.work_dir.exists()


@pytest.mark.integration
def test_concurrent_invocations_are_isolated(settings, make_deck):
    operations = SlideOperations(settings)
    deck_a = make_deck(3, marker="SLOW alpha")
    deck_b = make_deck(5, marker="SLOW beta")

    async def _run():
        return await asyncio.gather(
            operations.generate_slide(deck_a, theme="seriph"),
            operations.generate_slide(deck_b, theme="shibainu"),
        )

    result_a, result_b = asyncio.run(_run())

    assert result_a.content[0].text != result_b.content[0].text
    assert len(_images(result_a)) == 3
    assert len(_images(result_b)) == 5
    assert all("alpha" in _decoded(i) and "seriph" in _decoded(i) for i in _images(result_a))
    assert all("beta" in _decoded(i) and "shibainu" in _decoded(i) for i in _images(result_b))
    assert len(list(settings.work_dir.iterdir())) == 2


@pytest.mark.integration
def test_repeated_calls_render_from_scratch(settings, make_deck):
    operations = SlideOperations(settings)
    markdown = make_deck(4)

    first = asyncio.run(operations.generate_slide(markdown, theme="apple-basic"))
    second = asyncio.run(operations.generate_slide(markdown, theme="apple-basic"))

    assert first.content[0].text != second.content[0].text
    assert first.content[1:] == second.content[1:]
    assert len(list(settings.work_dir.iterdir())) == 2


def _forking_renderer(tmp_path):
    """Launcher that leaves a background child holding its output pipes, like node does."""
    launcher = tmp_path / "bin" / "forking-slidev"
    launcher.write_text(
        '#!/bin/sh\n(sleep 1; touch "$PWD/late-child") &\nsleep 30\n', encoding="utf-8"
    )
    launcher.chmod(0o755)
    return launcher


@pytest.mark.integration
def test_renderer_timeout_kills_background_children(settings, make_deck, tmp_path):
    operations = SlideOperations(
        dataclasses.replace(settings, renderer=_forking_renderer(tmp_path), render_timeout_s=0.5)
    )

    start = time.monotonic()
    result = asyncio.run(operations.generate_slide(make_deck(1)))
    elapsed = time.monotonic() - start

    assert result.isError is True
    assert "Renderer timed out after 0.5s" in result.content[0].text
    assert elapsed < 5

    time.sleep(1.5)
    (execution_dir,) = settings.work_dir.iterdir()
    assert not (execution_dir / "late-child").exists()


@pytest.mark.integration
def test_cancelled_call_kills_renderer(settings, make_deck, tmp_path):
    operations = SlideOperations(dataclasses.replace(settings, renderer=_forking_renderer(tmp_path)))

    async def _run():
        task = asyncio.create_task(operations.generate_slide(make_deck(1)))
        await asyncio.sleep(0.3)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

    asyncio.run(_run())

    time.sleep(1.5)
    (execution_dir,) = settings.work_dir.iterdir()
    assert not (execution_dir / "late-child").exists()

"""
Shared fixtures: a fake `slidev` executable and settings pointing at it.

The fake renderer mimics `slidev export`: it reads slides.md from its working
directory and writes numbered PNGs into slides-export/ or a single
slides-export.<format> file. Markers in the markdown change its behaviour:

    FAIL       exit 2 with a message on stderr
    NO-OUTPUT  exit 0 without writing anything
    SLOW       sleep before writing output
"""

import stat
import sys
import textwrap
from pathlib import Path

import pytest
from loguru import logger

from slidev_mcp.config import Settings

FAKE_SLIDEV = textwrap.dedent(
    """
    import pathlib
    import sys
    import time

    args = sys.argv[1:]
    assert args[0] == "export", args
    fmt = args[args.index("--format") + 1]
    theme = args[args.index("--theme") + 1]
    source = pathlib.Path(args[-1]).read_text(encoding="utf-8")

    print(f"exporting {fmt} with {theme}")
    if "FAIL" in source:
        sys.stderr.write("boom: renderer failed\\n")
        sys.exit(2)
    if "NO-OUTPUT" in source:
        sys.exit(0)
    if "SLOW" in source:
        time.sleep(1.0)

    slides = source.split("\\n---\\n")
    if fmt == "png":
        out = pathlib.Path("slides-export")
        out.mkdir()
        for number, body in enumerate(slides, 1):
            (out / f"{number}.png").write_bytes(f"PNG {number} {theme}\\n{body}".encode("utf-8"))
        (out / "README.txt").write_text("not a slide")
    else:
        pathlib.Path(f"slides-export.{fmt}").write_bytes(
            f"{fmt.upper()} {theme}\\n{source}".encode("utf-8")
        )
    """
)


def _make_deck(num_slides: int, marker: str = "") -> str:
    """Markdown with `num_slides` slides separated by `---`."""
    slides = [f"# Slide {n}\n\n{marker}".rstrip() for n in range(1, num_slides + 1)]
    return "\n---\n".join(slides)


@pytest.fixture(autouse=True)
def _reset_logger():
    """Drop sinks added by CLI runs; they point at streams closed after the test."""
    yield
    logger.remove()


@pytest.fixture
def make_deck():
    return _make_deck


@pytest.fixture
def fake_slidev(tmp_path) -> Path:
    """Executable wrapper that runs the fake renderer with this interpreter."""
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()

    script = bin_dir / "fake_slidev.py"
    script.write_text(FAKE_SLIDEV, encoding="utf-8")

    wrapper = bin_dir / "slidev"
    wrapper.write_text(f'#!/bin/sh\nexec "{sys.executable}" "{script}" "$@"\n', encoding="utf-8")
    wrapper.chmod(wrapper.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return wrapper


@pytest.fixture
def settings(tmp_path, fake_slidev) -> Settings:
    return Settings(
        server_name="slidev",
        server_version="1.0.0",
        host="127.0.0.1",
        port=8000,
        renderer=fake_slidev,
        render_timeout_s=None,
        work_dir=tmp_path / "work",
    )

"""Pytest configuration and shared fixtures for hersheytext tests."""

from collections.abc import Generator
from pathlib import Path

import pytest

from hersheytext import FontCatalog

# Paths
PROJECT_ROOT = Path(__file__).parent.parent
FIXTURES_DIR = Path(__file__).parent / "fixtures"
STROKE_DEMO_SVG = FIXTURES_DIR / "stroke_demo.svg"

# Raw glyph-space path of "A" in the stroke demo font
STROKE_DEMO_A = "M100 0L300 700L500 0M170 250H430"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the test fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def stroke_demo_source() -> bytes:
    """Return the raw bytes of the stroke demo SVG font."""
    return STROKE_DEMO_SVG.read_bytes()


@pytest.fixture
def catalog() -> FontCatalog:
    """Return a catalog holding only the bundled Hershey fonts."""
    return FontCatalog.default()


@pytest.fixture
def outline_catalog(catalog: FontCatalog, stroke_demo_source: bytes) -> FontCatalog:
    """Return the bundled catalog plus the stroke demo outline font."""
    font_id = catalog.register_outline_font(stroke_demo_source)
    assert font_id == "stroke_demo"
    return catalog


@pytest.fixture
def svg_font_without_widths() -> str:
    """SVG font with neither a font-level nor a glyph-level advance on "B"."""
    return """<svg xmlns="http://www.w3.org/2000/svg">
  <font id="narrow">
    <font-face font-family="No Width" units-per-em="500"/>
    <glyph unicode="A" glyph-name="A" horiz-adv-x="250" d="M0 0L125 400L250 0"/>
    <glyph unicode="B" glyph-name="B" d="M0 0V400"/>
  </font>
</svg>"""


@pytest.fixture
def font_dir(tmp_path: Path, stroke_demo_source: bytes) -> Generator[Path, None, None]:
    """Directory with one valid SVG font and one file that is not a font."""
    (tmp_path / "stroke_demo.svg").write_bytes(stroke_demo_source)
    (tmp_path / "drawing.svg").write_text(
        '<svg xmlns="http://www.w3.org/2000/svg"><rect width="10" height="10"/></svg>',
        encoding="utf-8",
    )
    (tmp_path / "notes.txt").write_text("not a font", encoding="utf-8")
    yield tmp_path

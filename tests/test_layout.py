"""Unit tests for hersheytext.layout.

Tests cover both render entry points: per-character records, pen
advance left-to-right and right-to-left, outline glyph flipping, line
breaks, wrapping, centering and the None failure contract.
"""

from __future__ import annotations

import re

import pytest
from lxml import etree

from conftest import STROKE_DEMO_A
from hersheytext import GlyphRecord, normalize_path, render_array, render_svg
from hersheytext.fonts.models import RECORD_GLYPH, RECORD_NEWLINE, RECORD_SPACE

TRANSLATE_RE = re.compile(r"translate\(([-\d.]+), ([-\d.]+)\)")


def _paths(markup: str) -> list[etree._Element]:
    return etree.fromstring(markup).findall(".//path")


def _pen(path: etree._Element) -> tuple[float, float]:
    match = TRANSLATE_RE.match(path.get("transform"))
    assert match, path.get("transform")
    return float(match.group(1)), float(match.group(2))


class TestRenderArray:
    """Tests for per-character glyph records."""

    def test_hi_in_futural(self, catalog):
        """Two records with path data, in text order."""
        records = render_array("Hi", {"font": "futural"}, catalog=catalog)
        assert [r.character for r in records] == ["H", "i"]
        assert all(r.d for r in records)
        assert all(r.kind == RECORD_GLYPH for r in records)

    def test_crlf_folds_to_lf(self, catalog):
        """CRLF input produces the same records as LF input."""
        crlf = render_array("A\r\nB", {"font": "futural"}, catalog=catalog)
        lf = render_array("A\nB", {"font": "futural"}, catalog=catalog)
        assert crlf == lf
        assert len(lf) == 3

    def test_newline_marker(self, catalog):
        """An unresolved newline becomes a zero-width newline record."""
        records = render_array("A\nB", {"font": "futural"}, catalog=catalog)
        assert records[1].kind == RECORD_NEWLINE
        assert records[1].width == 0
        assert records[1].to_dict() == {"type": "newline", "name": "newline", "width": 0}

    def test_unresolved_character_becomes_space(self, catalog):
        """Characters the font lacks fall back to the space record."""
        records = render_array("A☃ B", {"font": "futural"}, catalog=catalog)
        assert len(records) == 4
        assert records[1].kind == RECORD_SPACE
        assert records[1].character == " "
        assert records[1].d is None
        assert records[1] == records[2]

    def test_default_font_is_futural(self, catalog):
        """Omitting options resolves against futural."""
        records = render_array("A", catalog=catalog)
        assert records[0].d == catalog.get_font("futural").glyph("A").d

    def test_compact_paths_are_untouched(self, catalog):
        """Compact path data is already canonical and is never rescaled."""
        records = render_array("A", {"font": "futural", "scale": 3}, catalog=catalog)
        assert records[0].d == catalog.get_font("futural").glyph("A").d

    def test_outline_paths_normalized_once(self, outline_catalog):
        """Outline glyphs are flipped into line space exactly once."""
        records = render_array("A", {"font": "stroke_demo"}, catalog=outline_catalog)
        once = normalize_path(STROKE_DEMO_A, 1, 1000)
        assert records[0].d == once
        assert records[0].d != normalize_path(once, 1, 1000)

    def test_outline_paths_stay_in_native_units(self, outline_catalog):
        """Path data and width share the font's units whatever the scale."""
        records = render_array("A", {"font": "stroke_demo", "scale": 0.1}, catalog=outline_catalog)
        assert records[0].width == 600
        assert records[0].d == normalize_path(STROKE_DEMO_A, 1, 1000)
        assert records[0].d.startswith("M 100 1000 L 300 300")

    def test_outline_space_is_real_glyph(self, outline_catalog):
        """Outline fonts resolve the space character directly."""
        records = render_array("A A", {"font": "stroke_demo"}, catalog=outline_catalog)
        assert records[1].kind == RECORD_GLYPH
        assert records[1].width == 300

    def test_unknown_font_gives_blank_records(self, catalog):
        """Every character of an unknown font becomes a zero-width space."""
        records = render_array("ab", {"font": "nope"}, catalog=catalog)
        assert records == [GlyphRecord(" ", "space", 0, None, RECORD_SPACE)] * 2

    def test_records_are_pure(self, catalog):
        """Repeated calls give equal results."""
        assert render_array("Hello", catalog=catalog) == render_array("Hello", catalog=catalog)

    def test_failure_returns_none(self, catalog):
        """Bad input is reported as None, not raised."""
        assert render_array(None, catalog=catalog) is None  # type: ignore[arg-type]
        assert render_array("A", {"scale": "big"}, catalog=catalog) is None


class TestRenderSvgStructure:
    """Tests for the markup produced by render_svg."""

    def test_single_letter(self, catalog):
        """One path with its letter and a zero pen offset."""
        markup = render_svg("A", {"font": "futural", "id": "t", "pos": {"x": 0, "y": 0}}, catalog=catalog)
        assert markup.count("<path") == 1
        assert 'letter="A"' in markup
        assert "translate(0, 0)" in markup

    def test_group_attributes(self, catalog):
        """Outer group carries id, stroke, fill and the scale/translate transform."""
        markup = render_svg("A", {"id": "t", "pos": {"x": 5, "y": 7}, "scale": 2}, catalog=catalog)
        root = etree.fromstring(markup)
        assert root.tag == "g"
        assert root.get("id") == "t"
        assert root.get("stroke") == "black"
        assert root.get("fill") == "none"
        assert root.get("transform") == "scale(2) translate(5,7)"
        assert root[0].get("id") == "t-line-0"

    def test_path_attributes(self, catalog):
        """Each path carries d, stroke width, transform and letter."""
        markup = render_svg("A", {"id": "t", "pos": {"x": 0, "y": 0}, "strokeWidth": 3}, catalog=catalog)
        path = _paths(markup)[0]
        assert path.get("d") == catalog.get_font("futural").glyph("A").d
        assert path.get("stroke-width") == "3"
        assert path.get("letter") == "A"

    def test_missing_position_fails(self, catalog):
        """pos is required for SVG output."""
        assert render_svg("A", {"font": "futural", "id": "t"}, catalog=catalog) is None

    def test_malformed_position_fails(self, catalog):
        """A pos without both coordinates is rejected."""
        assert render_svg("A", {"id": "t", "pos": {"x": 1}}, catalog=catalog) is None

    def test_unknown_keys_are_ignored(self, catalog):
        """Extra option keys do not cause failures."""
        markup = render_svg("A", {"id": "t", "pos": {"x": 0, "y": 0}, "colour": "red"}, catalog=catalog)
        assert markup is not None

    def test_unknown_font_renders_blank(self, catalog):
        """An unknown font gives an empty layout instead of failing."""
        markup = render_svg("Hello", {"font": "nope", "id": "t", "pos": {"x": 0, "y": 0}}, catalog=catalog)
        assert markup is not None
        assert "<path" not in markup


class TestRenderSvgAdvance:
    """Tests for pen movement."""

    def test_left_to_right_advance(self, catalog):
        """Each glyph advances by half its stored width."""
        paths = _paths(render_svg("AB", {"id": "t", "pos": {"x": 0, "y": 0}}, catalog=catalog))
        assert [_pen(p) for p in paths] == [(0, 0), (18, 0)]

    def test_spacing_adds_per_character(self, catalog):
        """Spacing is added after every glyph."""
        paths = _paths(render_svg("AB", {"id": "t", "pos": {"x": 0, "y": 0}, "spacing": 2}, catalog=catalog))
        assert _pen(paths[1]) == (20, 0)

    def test_word_gap(self, catalog):
        """Words are separated by the font's default advance."""
        paths = _paths(render_svg("A B", {"id": "t", "pos": {"x": 0, "y": 0}}, catalog=catalog))
        assert _pen(paths[1]) == (18 + 10, 0)

    def test_unresolved_character_mid_word(self, catalog):
        """A missing glyph advances like a space and does not disturb neighbours."""
        paths = _paths(render_svg("A☃B", {"id": "t", "pos": {"x": 0, "y": 0}}, catalog=catalog))
        assert [p.get("letter") for p in paths] == ["A", "B"]
        assert _pen(paths[1]) == (18 + 10, 0)

    def test_right_to_left_from_canvas_edge(self, catalog):
        """Glyphs retreat from the right edge so their trailing edge meets the pen."""
        options = {"id": "t", "pos": {"x": 0, "y": 0}, "fromRight": True, "canvasSize": {"w": 200, "h": 50}}
        paths = _paths(render_svg("AB", options, catalog=catalog))
        assert [_pen(p) for p in paths] == [(182, 0), (161, 0)]

    def test_right_to_left_start_scales_inversely(self, catalog):
        """The right-edge start is divided by the render scale."""
        options = {"id": "t", "pos": {"x": 0, "y": 0}, "scale": 2, "fromRight": True, "canvasSize": {"w": 200, "h": 50}}
        paths = _paths(render_svg("A", options, catalog=catalog))
        assert _pen(paths[0]) == (100 - 18, 0)

    def test_directions_cover_same_distance(self, catalog):
        """Total advance has the same magnitude in both directions."""
        text = "Hello World"
        ltr = _paths(render_svg(text, {"id": "t", "pos": {"x": 0, "y": 0}}, catalog=catalog))
        rtl = _paths(
            render_svg(
                text,
                {"id": "t", "pos": {"x": 0, "y": 0}, "fromRight": True, "canvasSize": {"w": 500, "h": 0}},
                catalog=catalog,
            )
        )
        ltr_span = _pen(ltr[-1])[0] - _pen(ltr[0])[0]
        rtl_span = _pen(rtl[0])[0] - _pen(rtl[-1])[0]
        first = catalog.get_font("futural").advance(catalog.get_font("futural").glyph("H").width)
        last = catalog.get_font("futural").advance(catalog.get_font("futural").glyph("d").width)
        # Left-to-right measures leading edges, right-to-left trailing edges
        assert ltr_span + last == pytest.approx(rtl_span + first)

    def test_right_to_left_requires_canvas(self, catalog):
        """Right-to-left without a canvas size fails."""
        assert render_svg("A", {"id": "t", "pos": {"x": 0, "y": 0}, "fromRight": True}, catalog=catalog) is None


class TestRenderSvgOutline:
    """Tests for laying out outline font glyphs."""

    def test_outline_glyph_flipped_and_raw(self, outline_catalog):
        """Outline paths keep glyph-space data and are flipped by transform."""
        markup = render_svg("AH", {"font": "stroke_demo", "id": "t", "pos": {"x": 0, "y": 0}}, catalog=outline_catalog)
        paths = _paths(markup)
        assert paths[0].get("d") == STROKE_DEMO_A
        assert paths[0].get("transform") == "translate(0, 1000) scale(1, -1)"
        assert paths[1].get("transform") == "translate(600, 1000) scale(1, -1)"

    def test_outline_word_gap_uses_default_advance(self, outline_catalog):
        """The word gap is the font-level horiz-adv-x."""
        markup = render_svg("A H", {"font": "stroke_demo", "id": "t", "pos": {"x": 0, "y": 0}}, catalog=outline_catalog)
        assert _pen(_paths(markup)[1]) == (600 + 500, 1000)


class TestRenderSvgLines:
    """Tests for line breaks, wrapping and centering."""

    def test_newline_starts_new_line_group(self, catalog):
        """A newline moves the pen down one line and back to the start."""
        markup = render_svg("A\r\nB", {"id": "t", "pos": {"x": 0, "y": 0}}, catalog=catalog)
        root = etree.fromstring(markup)
        assert [g.get("id") for g in root] == ["t-line-0", "t-line-1"]
        assert _pen(root[1][0]) == (0, 28)

    def test_line_height_adjustment(self, catalog):
        """lineHeight is added to the font's line height."""
        markup = render_svg("A\nB", {"id": "t", "pos": {"x": 0, "y": 0}, "lineHeight": 2}, catalog=catalog)
        assert _pen(_paths(markup)[1]) == (0, 30)

    def test_wrap_width(self, catalog):
        """A line that grows past wrapWidth continues on the next line."""
        markup = render_svg("AA AA", {"id": "t", "pos": {"x": 0, "y": 0}, "wrapWidth": 30}, catalog=catalog)
        root = etree.fromstring(markup)
        assert len(root[0]) == 2
        assert [_pen(p) for p in root[1]] == [(0, 28), (18, 28)]

    def test_center_width(self, catalog):
        """Each line is offset to sit in the middle of centerWidth."""
        markup = render_svg("A", {"id": "t", "pos": {"x": 0, "y": 0}, "centerWidth": 100}, catalog=catalog)
        root = etree.fromstring(markup)
        assert root[0].get("transform") == "translate(41,0)"

    def test_center_height(self, catalog):
        """The whole block is moved to the middle of centerHeight."""
        markup = render_svg("A", {"id": "t", "pos": {"x": 0, "y": 10}, "centerHeight": 100}, catalog=catalog)
        root = etree.fromstring(markup)
        assert root.get("transform") == "scale(1) translate(0,46)"

    def test_wrap_before_newline_breaks_once(self, catalog):
        """A newline right after a wrapped word does not leave an empty line."""
        markup = render_svg("AA AA\nB", {"id": "t", "pos": {"x": 0, "y": 0}, "wrapWidth": 30}, catalog=catalog)
        root = etree.fromstring(markup)
        assert [(g.get("id"), len(g)) for g in root] == [("t-line-0", 2), ("t-line-1", 2), ("t-line-2", 1)]
        assert _pen(root[2][0]) == (0, 56)

    def test_wrap_at_end_adds_no_trailing_line(self, catalog):
        """Wrapping the last word does not open an extra line group."""
        options = {"id": "t", "pos": {"x": 0, "y": 0}, "wrapWidth": 30, "centerHeight": 100}
        root = etree.fromstring(render_svg("AA AA", options, catalog=catalog))
        assert len(root) == 2
        assert root.get("transform") == "scale(1) translate(0,22)"

    def test_center_width_right_to_left(self, catalog):
        """Right-to-left lines are centered on the same span as left-to-right ones."""
        ltr = etree.fromstring(
            render_svg("A", {"id": "t", "pos": {"x": 0, "y": 0}, "centerWidth": 100}, catalog=catalog)
        )
        options = {
            "id": "t",
            "pos": {"x": 0, "y": 0},
            "centerWidth": 100,
            "fromRight": True,
            "canvasSize": {"w": 200, "h": 50},
        }
        rtl = etree.fromstring(render_svg("A", options, catalog=catalog))
        assert rtl[0].get("transform") == "translate(-141,0)"
        rtl_left = _pen(rtl[0][0])[0] - 141
        ltr_left = _pen(ltr[0][0])[0] + 41
        assert rtl_left == ltr_left == 41

"""Text layout: turns a string into placed glyph paths.

Two entry points share glyph resolution:

- ``render_svg`` lays the text out and returns an SVG ``<g>`` fragment.
- ``render_array`` returns one ``GlyphRecord`` per character, with no
  positioning, for callers that do their own drawing.

Both return None instead of raising; the cause is logged.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any

from lxml import etree

from hersheytext.exceptions import InvalidOptionsError
from hersheytext.fonts.catalog import FontCatalog
from hersheytext.fonts.models import NEWLINE_RECORD, Font, GlyphRecord
from hersheytext.fonts.resolver import font_for
from hersheytext.options import RenderOptions
from hersheytext.paths import format_number

logger = logging.getLogger(__name__)


def normalize_newlines(text: str) -> str:
    """Fold CRLF into LF."""
    return text.replace("\r\n", "\n")


@dataclass
class LayoutState:
    """Pen state for a single ``render_svg`` call."""

    left: float = 0.0
    top: float = 0.0
    line: int = 0
    line_start: float = 0.0
    # Distance covered by the words of the current line, trailing gap excluded
    line_extent: float = 0.0
    # Set when a word overflowed the wrap width; the break happens before the next word
    wrap_pending: bool = False
    line_groups: list[etree._Element] = field(default_factory=list)


class _SvgLayout:
    def __init__(self, font: Font, options: RenderOptions) -> None:
        self.font = font
        self.options = options
        self.pos = options.require_position()
        self.direction = -1 if options.from_right else 1
        self.line_step = font.line_height + options.line_height

        start = 0.0
        if options.from_right:
            if options.canvas_size is None:
                raise InvalidOptionsError("canvas size is required for right-to-left text", key="canvas_size")
            start = options.canvas_size.w / options.scale
        self.state = LayoutState(left=start, line_start=start)

        self.root = etree.Element("g")
        self.root.set("id", options.id)
        self.root.set("stroke", "black")
        self.root.set("fill", "none")
        self._set_root_transform(self.pos.y)
        self._open_line()

    def _set_root_transform(self, y: float) -> None:
        self.root.set(
            "transform",
            f"scale({format_number(self.options.scale)}) translate({format_number(self.pos.x)},{format_number(y)})",
        )

    @property
    def line_group(self) -> etree._Element:
        return self.state.line_groups[-1]

    def _open_line(self) -> None:
        group = etree.SubElement(self.root, "g")
        group.set("id", f"{self.options.id}-line-{self.state.line}")
        self.state.line_groups.append(group)

    def _close_line(self) -> None:
        if self.options.center_width is not None:
            extent = self.state.line_extent
            # Right-to-left lines end at line_start instead of starting there
            low = self.state.line_start - extent if self.options.from_right else self.state.line_start
            offset = self.options.center_width / 2 - extent / 2 - low
            self.line_group.set("transform", f"translate({format_number(offset)},0)")

    def _break_line(self) -> None:
        self._close_line()
        state = self.state
        state.left = state.line_start
        state.top += self.line_step
        state.line += 1
        state.line_extent = 0.0
        state.wrap_pending = False
        self._open_line()

    def _place(self, char: str) -> None:
        glyph = self.font.glyph(char)
        width = glyph.width if glyph is not None else self.font.space_glyph().width
        advance = self.font.advance(width) + self.options.spacing

        state = self.state
        if self.options.from_right:
            # Retreat first so the glyph's trailing edge lands on the old pen position
            state.left -= advance

        if glyph is not None and glyph.d:
            path = etree.SubElement(self.line_group, "path")
            path.set("d", glyph.d)
            path.set("stroke-width", format_number(self.options.stroke_width))
            path.set("transform", self.font.placement_transform(state.left, state.top))
            path.set("letter", char)
        elif glyph is None:
            logger.debug("No glyph for %r in font %s", char, self.font.font_id)

        if not self.options.from_right:
            state.left += advance

    def _gap(self) -> None:
        self.state.left += self.direction * (self.font.word_gap + self.options.spacing)

    def run(self, text: str) -> str:
        state = self.state
        for line_no, line in enumerate(normalize_newlines(text).split("\n")):
            if line_no:
                self._break_line()
            for word in line.split(" "):
                if state.wrap_pending:
                    self._break_line()
                for char in word:
                    self._place(char)
                state.line_extent = abs(state.left - state.line_start)

                wrap = self.options.wrap_width
                if wrap is not None and state.line_extent > wrap:
                    state.wrap_pending = True
                else:
                    self._gap()
        self._close_line()

        if self.options.center_height is not None:
            block = self.line_step * (state.line + 1)
            self._set_root_transform(self.options.center_height / 2 - block / 2 + self.pos.y)

        return etree.tostring(self.root, encoding="unicode")


def render_svg(
    text: str,
    options: Mapping[str, Any] | RenderOptions | None = None,
    *,
    catalog: FontCatalog,
) -> str | None:
    """Render text to an SVG group of stroked glyph paths.

    Words are split on spaces and laid out left to right, or right to left
    from the canvas edge when ``fromRight`` is set. A newline starts a new
    line group.

    Args:
        text: Text to render.
        options: Render options (see ``RenderOptions``); ``pos`` is required.
        catalog: Catalog to resolve the font in.

    Returns:
        The ``<g>`` markup, or None if the options are invalid or rendering
        failed.
    """
    try:
        opts = RenderOptions.from_mapping(options)
        layout = _SvgLayout(font_for(catalog, opts.font), opts)
        return layout.run(text)
    except Exception:
        logger.exception("Failed to render text as SVG")
        return None


def render_array(
    text: str,
    options: Mapping[str, Any] | RenderOptions | None = None,
    *,
    catalog: FontCatalog,
) -> list[GlyphRecord] | None:
    """Resolve every character of ``text`` in order.

    Resolved characters yield their glyph, with outline paths mapped to
    line space once. Paths and widths are both in font-native units, so
    scaling is left to the caller for every font kind. An unresolved newline yields a
    newline marker and any other unresolved character yields the font's
    space record instead, so check ``record.kind`` rather than assuming the
    record matches the input character.

    Args:
        text: Text to resolve.
        options: Render options, only ``font`` is used.
        catalog: Catalog to resolve the font in.

    Returns:
        Records in text order, or None if resolution failed.
    """
    try:
        opts = RenderOptions.from_mapping(options)
        font = font_for(catalog, opts.font)
        records: list[GlyphRecord] = []
        for char in normalize_newlines(text):
            glyph = font.glyph(char)
            if glyph is not None:
                records.append(replace(glyph, d=font.line_space_path(glyph.d)))
            elif char == "\n":
                records.append(NEWLINE_RECORD)
            else:
                records.append(font.space_glyph())
        return records
    except Exception:
        logger.exception("Failed to render text as glyph records")
        return None

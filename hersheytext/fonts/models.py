"""Font and glyph models.

Two font sources share one interface:

- ``CompactFont``: Hershey engraving fonts stored as a list indexed by
  ``ord(char) - 33``, each entry a path string and an offset width.
- ``OutlineFont``: SVG fonts keyed by unicode character, each glyph with
  its own name, advance width and glyph-space path data.

``EmptyFont`` stands in for any unknown font id.
"""

from __future__ import annotations

import logging
import unicodedata
from abc import ABC, abstractmethod
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from hersheytext.exceptions import FontParseError
from hersheytext.paths import format_number, normalize_path

logger = logging.getLogger(__name__)

# Code point of the first entry in a compact table ("!")
COMPACT_ZERO_POINT = 33

# Compact widths are stored in half units
COMPACT_ADVANCE_MULTIPLIER = 0.5
OUTLINE_ADVANCE_MULTIPLIER = 1.0

KIND_COMPACT = "hershey"
KIND_OUTLINE = "svg"
KIND_EMPTY = "empty"

RECORD_GLYPH = "glyph"
RECORD_SPACE = "space"
RECORD_NEWLINE = "newline"


@dataclass(frozen=True)
class GlyphRecord:
    """A resolved character.

    Attributes:
        character: The character this record stands for.
        name: Display name of the glyph.
        width: Advance width in font-native units.
        d: Path data, None for whitespace.
        kind: ``glyph``, ``space`` (substitute for an unresolved character)
            or ``newline``.
    """

    character: str
    name: str
    width: float
    d: str | None = None
    kind: str = RECORD_GLYPH

    def to_dict(self) -> dict[str, Any]:
        """Plain dict form used for JSON output."""
        if self.kind == RECORD_NEWLINE:
            return {"type": "newline", "name": "newline", "width": 0}
        return {
            "type": self.character if self.kind == RECORD_GLYPH else "space",
            "name": self.name,
            "width": self.width,
            "d": self.d,
        }


NEWLINE_RECORD = GlyphRecord(character="\n", name="newline", width=0, kind=RECORD_NEWLINE)


def _slug(char: str) -> str:
    return unicodedata.name(char, f"U+{ord(char):04X}").lower()


def _parse_width(font_id: str, index: int, value: Any) -> int | None:
    """Read a compact ``o`` offset as an int, truncating any fraction."""
    if value is None:
        return None
    try:
        return int(float(value))
    except (TypeError, ValueError) as e:
        char = chr(index + COMPACT_ZERO_POINT)
        raise FontParseError(f"Bad width {value!r} for {char!r} in font {font_id}", source=font_id) from e


class Font(ABC):
    """Common interface for both font sources."""

    kind: str = KIND_EMPTY
    advance_multiplier: float = 1.0

    def __init__(
        self,
        font_id: str,
        name: str,
        units_per_em: float,
        default_width: float | None,
        line_height: float,
    ) -> None:
        self.font_id = font_id
        self.name = name
        self.units_per_em = units_per_em
        self.default_width = default_width
        self.line_height = line_height

    @abstractmethod
    def glyph(self, char: str) -> GlyphRecord | None:
        """Look up a single character, None when the font has no glyph for it."""

    @abstractmethod
    def characters(self) -> Iterator[str]:
        """Iterate over every character the font has a glyph for."""

    def __len__(self) -> int:
        return sum(1 for _ in self.characters())

    def __contains__(self, char: object) -> bool:
        return isinstance(char, str) and self.glyph(char) is not None

    def advance(self, width: float) -> float:
        """Convert a native width to a layout advance."""
        return width * self.advance_multiplier

    @property
    def word_gap(self) -> float:
        """Advance used between words."""
        return self.advance(self.default_width or 0)

    def placement_transform(self, left: float, top: float) -> str:
        """SVG transform placing a glyph at the pen position."""
        return f"translate({format_number(left)}, {format_number(top)})"

    def line_space_path(self, d: str | None) -> str | None:
        """Path data mapped into upright line space, in font-native units."""
        return d

    def space_glyph(self) -> GlyphRecord:
        """Record used in place of a character the font cannot resolve."""
        space = self.glyph(" ")
        if space is not None:
            return GlyphRecord(" ", space.name, space.width, space.d, kind=RECORD_SPACE)
        return GlyphRecord(" ", "space", self.default_width or 0, None, kind=RECORD_SPACE)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.font_id!r}, name={self.name!r})"


class CompactFont(Font):
    """Hershey font stored as an ASCII-offset indexed list."""

    kind = KIND_COMPACT
    advance_multiplier = COMPACT_ADVANCE_MULTIPLIER

    def __init__(
        self,
        font_id: str,
        name: str,
        chars: Sequence[Mapping[str, Any]],
        default_width: float = 20,
        line_height: float = 28,
    ) -> None:
        super().__init__(font_id, name, units_per_em=line_height, default_width=default_width, line_height=line_height)
        self._chars = tuple(
            (entry.get("d"), _parse_width(font_id, index, entry.get("o"))) for index, entry in enumerate(chars)
        )

    @classmethod
    def from_dict(cls, font_id: str, data: Mapping[str, Any]) -> CompactFont:
        """Build from one entry of a ``hersheytext.json`` style table."""
        return cls(
            font_id,
            name=data.get("name", font_id),
            chars=data["chars"],
            default_width=data.get("defaultWidth", 20),
            line_height=data.get("lineHeight", 28),
        )

    def glyph(self, char: str) -> GlyphRecord | None:
        if len(char) != 1:
            return None
        index = ord(char) - COMPACT_ZERO_POINT
        if index < 0 or index >= len(self._chars):
            return None
        d, offset = self._chars[index]
        if d is None or offset is None:
            return None
        return GlyphRecord(character=char, name=_slug(char), width=offset, d=d)

    def characters(self) -> Iterator[str]:
        for index, (d, offset) in enumerate(self._chars):
            if d is not None and offset is not None:
                yield chr(index + COMPACT_ZERO_POINT)


@dataclass(frozen=True)
class OutlineGlyph:
    """One ``<glyph>`` entry of an SVG font."""

    unicode: str
    name: str
    width: float | None = None
    d: str | None = None


class OutlineFont(Font):
    """SVG font keyed by unicode character."""

    kind = KIND_OUTLINE
    advance_multiplier = OUTLINE_ADVANCE_MULTIPLIER

    def __init__(
        self,
        font_id: str,
        name: str,
        glyphs: Mapping[str, OutlineGlyph],
        units_per_em: float = 1000,
        default_width: float | None = None,
        info: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(font_id, name, units_per_em=units_per_em, default_width=default_width, line_height=units_per_em)
        self._glyphs = MappingProxyType(dict(glyphs))
        self.info = MappingProxyType(dict(info or {}))

    def glyph(self, char: str) -> GlyphRecord | None:
        entry = self._glyphs.get(char)
        if entry is None:
            return None
        width = entry.width if entry.width is not None else self.default_width
        if width is None:
            logger.debug("Glyph %r in %s has no advance width", char, self.font_id)
            return None
        return GlyphRecord(character=char, name=entry.name, width=width, d=entry.d)

    def placement_transform(self, left: float, top: float) -> str:
        # Outline paths are Y-up in glyph space
        return f"translate({format_number(left)}, {format_number(top + self.units_per_em)}) scale(1, -1)"

    def line_space_path(self, d: str | None) -> str | None:
        return normalize_path(d, 1.0, self.units_per_em)

    def characters(self) -> Iterator[str]:
        return iter(self._glyphs)


class EmptyFont(Font):
    """Font for an unknown id; every lookup misses."""

    kind = KIND_EMPTY

    def __init__(self, font_id: str) -> None:
        super().__init__(font_id, name=font_id, units_per_em=0, default_width=0, line_height=0)

    def glyph(self, char: str) -> GlyphRecord | None:
        return None

    def characters(self) -> Iterator[str]:
        return iter(())

"""Glyph resolution.

Maps a font id and a character to a ``GlyphRecord`` regardless of which
font source holds it. A miss is a normal outcome and returns None.
"""

from __future__ import annotations

from hersheytext.fonts.catalog import FontCatalog
from hersheytext.fonts.models import EmptyFont, Font, GlyphRecord


def font_for(catalog: FontCatalog, font_id: str) -> Font:
    """Return the font for ``font_id``, or an ``EmptyFont`` when it is unknown.

    Ids are compared exactly as stored; no case folding.
    """
    font = catalog.get_font(font_id)
    if font is None:
        return EmptyFont(font_id)
    return font


def resolve(catalog: FontCatalog, font_id: str, char: str) -> GlyphRecord | None:
    """Resolve a single character in the given font."""
    return font_for(catalog, font_id).glyph(char)

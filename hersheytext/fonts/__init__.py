"""Font handling for hersheytext.

This subpackage provides:
- Compact (Hershey) and outline (SVG font) models behind one interface
- The font catalog registry with the bundled Hershey table
- Glyph resolution by font id and character
"""

from hersheytext.fonts.catalog import FontCatalog, load_bundled_table
from hersheytext.fonts.models import (
    CompactFont,
    EmptyFont,
    Font,
    GlyphRecord,
    OutlineFont,
    OutlineGlyph,
)
from hersheytext.fonts.resolver import font_for, resolve
from hersheytext.fonts.svgfont import font_id_from_family, parse_svg_font, read_svg_font

__all__ = [
    "FontCatalog",
    "load_bundled_table",
    "Font",
    "CompactFont",
    "OutlineFont",
    "OutlineGlyph",
    "EmptyFont",
    "GlyphRecord",
    "font_for",
    "resolve",
    "font_id_from_family",
    "parse_svg_font",
    "read_svg_font",
]

"""hersheytext: render text as stroked vector paths.

This library converts plain text into SVG path data using single-stroke
engraving fonts:
- Hershey fonts from the bundled compact table
- SVG 1.1 outline fonts registered at runtime
- Left-to-right and right-to-left layout, wrapping and centering
- Per-character glyph records for custom renderers

Example:
    >>> from hersheytext import HersheyText
    >>> ht = HersheyText()
    >>> records = ht.render_array("Hi", {"font": "futural"})
"""

from hersheytext.api import HersheyText
from hersheytext.config import Config
from hersheytext.exceptions import (
    ConfigError,
    FontParseError,
    HersheyTextError,
    InvalidOptionsError,
)
from hersheytext.fonts import EmptyFont, Font, FontCatalog, GlyphRecord, resolve
from hersheytext.layout import render_array, render_svg
from hersheytext.options import RenderOptions
from hersheytext.paths import normalize_path

__version__ = "0.1.0"

__all__ = [
    # Main API
    "HersheyText",
    "render_svg",
    "render_array",
    "RenderOptions",
    "Config",
    # Fonts
    "FontCatalog",
    "Font",
    "EmptyFont",
    "GlyphRecord",
    "resolve",
    "normalize_path",
    # Exceptions
    "HersheyTextError",
    "FontParseError",
    "InvalidOptionsError",
    "ConfigError",
    # Metadata
    "__version__",
]

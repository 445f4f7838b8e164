"""High-level API.

``HersheyText`` ties a font catalog and a config together and exposes the
two render entry points with the configured defaults applied.

Example:
    >>> from hersheytext import HersheyText
    >>> ht = HersheyText()
    >>> ht.render_svg("Hello", {"id": "greeting", "pos": {"x": 10, "y": 10}})
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from hersheytext.config import Config
from hersheytext.exceptions import InvalidOptionsError
from hersheytext.fonts.catalog import FontCatalog
from hersheytext.fonts.models import Font, GlyphRecord
from hersheytext.fonts.resolver import font_for, resolve
from hersheytext.layout import render_array, render_svg
from hersheytext.options import RenderOptions

logger = logging.getLogger(__name__)


class HersheyText:
    """Render text with Hershey and SVG stroke fonts."""

    def __init__(self, catalog: FontCatalog | None = None, config: Config | None = None) -> None:
        self.config = config if config is not None else Config()
        self.catalog = catalog if catalog is not None else FontCatalog.default(self.config)

    def _options(self, options: Mapping[str, Any] | RenderOptions | None) -> RenderOptions | None:
        try:
            return RenderOptions.from_mapping(
                options,
                font=self.config.default_font,
                stroke_width=self.config.stroke_width,
            )
        except InvalidOptionsError:
            logger.exception("Invalid render options")
            return None

    def render_svg(self, text: str, options: Mapping[str, Any] | RenderOptions | None = None) -> str | None:
        """Lay out ``text`` as an SVG group, None on failure."""
        opts = self._options(options)
        if opts is None:
            return None
        return render_svg(text, opts, catalog=self.catalog)

    def render_array(
        self, text: str, options: Mapping[str, Any] | RenderOptions | None = None
    ) -> list[GlyphRecord] | None:
        """Resolve ``text`` into glyph records, None on failure."""
        opts = self._options(options)
        if opts is None:
            return None
        return render_array(text, opts, catalog=self.catalog)

    def resolve(self, char: str, font_id: str | None = None) -> GlyphRecord | None:
        return resolve(self.catalog, font_id or self.config.default_font, char)

    def font(self, font_id: str) -> Font:
        return font_for(self.catalog, font_id)

    def register_outline_font(self, source: bytes | str) -> str | None:
        return self.catalog.register_outline_font(source)

    def list_font_ids(self) -> list[str]:
        return self.catalog.list_font_ids()

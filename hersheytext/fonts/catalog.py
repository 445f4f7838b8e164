"""Font catalog: the registry every lookup and render goes through.

A catalog is built once (``FontCatalog.default``) and passed explicitly to
the layout functions. Fonts are only ever added; an outline font registered
under an id that already exists replaces the previous one.
"""

from __future__ import annotations

import json
import logging
import threading
from collections.abc import Iterator, Mapping
from importlib import resources
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from hersheytext.exceptions import FontParseError
from hersheytext.fonts.models import CompactFont, Font, OutlineFont
from hersheytext.fonts.svgfont import parse_svg_font, read_svg_font

if TYPE_CHECKING:
    from hersheytext.config import Config

logger = logging.getLogger(__name__)

BUNDLED_TABLE = "hersheytext.json"


def load_bundled_table() -> dict[str, Any]:
    """Read the compact font table shipped with the package."""
    data_dir = resources.files("hersheytext.fonts").joinpath("data")
    with data_dir.joinpath(BUNDLED_TABLE).open("r", encoding="utf-8") as fh:
        return json.load(fh)


class FontCatalog:
    """Registry of compact and outline fonts keyed by font id."""

    def __init__(self) -> None:
        self._fonts: dict[str, Font] = {}
        self._lock = threading.RLock()

    @classmethod
    def default(cls, config: Config | None = None) -> FontCatalog:
        """Catalog with the bundled Hershey fonts plus outline fonts from ``config.font_dirs``."""
        catalog = cls()
        catalog.load_compact_table(load_bundled_table())
        if config is not None:
            for font_dir in config.font_dirs:
                catalog.load_svg_font_dir(font_dir)
        return catalog

    def get_font(self, font_id: str) -> Font | None:
        """Return the font registered under ``font_id``, None when unknown."""
        with self._lock:
            return self._fonts.get(font_id)

    def list_font_ids(self) -> list[str]:
        """All registered ids, sorted."""
        with self._lock:
            return sorted(self._fonts)

    def fonts(self) -> Mapping[str, Font]:
        """Read-only snapshot of the registry."""
        with self._lock:
            return MappingProxyType(dict(self._fonts))

    def __contains__(self, font_id: object) -> bool:
        with self._lock:
            return font_id in self._fonts

    def __iter__(self) -> Iterator[Font]:
        return iter(self.fonts().values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._fonts)

    def _add(self, font: Font) -> None:
        with self._lock:
            if font.font_id in self._fonts:
                logger.warning("Font id %r already registered, replacing it", font.font_id)
            self._fonts[font.font_id] = font

    def add_compact_font(self, font_id: str, data: Mapping[str, Any]) -> CompactFont:
        """Register one compact (Hershey) font from its table entry.

        Raises:
            FontParseError: If a glyph width is not a number.
        """
        font = CompactFont.from_dict(font_id, data)
        self._add(font)
        return font

    def load_compact_table(self, table: Mapping[str, Mapping[str, Any]]) -> int:
        """Register every font of a ``hersheytext.json`` style table.

        Returns:
            Number of fonts added.
        """
        for font_id, data in table.items():
            self.add_compact_font(font_id, data)
        return len(table)

    def add_outline_font(self, font: OutlineFont) -> str:
        """Register an already parsed outline font."""
        self._add(font)
        return font.font_id

    def register_outline_font(self, source: bytes | str) -> str | None:
        """Parse SVG font markup and register it.

        The id is the font-face family name, lowercased with spaces replaced
        by underscores. Registering a family that is already present replaces
        the earlier font.

        Args:
            source: SVG font document.

        Returns:
            The new font id, or None when the source cannot be parsed or
            has no family name.
        """
        try:
            font = parse_svg_font(source)
        except Exception:
            logger.exception("Could not register outline font")
            return None
        return self.add_outline_font(font)

    def load_svg_font_dir(self, directory: Path | str) -> list[str]:
        """Register every ``*.svg`` font in a directory, skipping unreadable files."""
        directory = Path(directory)
        if not directory.is_dir():
            logger.warning("Font directory %s does not exist", directory)
            return []

        added: list[str] = []
        for path in sorted(directory.glob("*.svg")):
            try:
                font = read_svg_font(path)
            except FontParseError as e:
                logger.warning("Skipping %s: %s", path.name, e)
                continue
            added.append(self.add_outline_font(font))
        return added

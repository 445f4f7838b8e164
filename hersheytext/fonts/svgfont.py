"""Reader for SVG 1.1 ``<font>`` documents.

Parsing goes through defusedxml so font files from untrusted sources cannot
trigger entity expansion or external entity attacks.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING
from xml.etree.ElementTree import ParseError

import defusedxml.ElementTree as ET
from defusedxml import DefusedXmlException

from hersheytext.exceptions import FontParseError
from hersheytext.fonts.models import OutlineFont, OutlineGlyph

if TYPE_CHECKING:
    from xml.etree.ElementTree import Element

logger = logging.getLogger(__name__)

DEFAULT_UNITS_PER_EM = 1000.0


def font_id_from_family(family: str) -> str:
    """Derive a catalog id from a family name: lowercase, spaces to underscores."""
    return family.strip().lower().replace(" ", "_")


def _local(tag: str) -> str:
    return tag.split("}", 1)[1] if tag.startswith("{") else tag


def _find(root: Element, name: str) -> Element | None:
    if _local(root.tag) == name:
        return root
    for elem in root.iter():
        if _local(elem.tag) == name:
            return elem
    return None


def _number(value: str | None, what: str) -> float | None:
    if value is None or value.strip() == "":
        return None
    try:
        return float(value)
    except ValueError as e:
        raise FontParseError(f"Invalid {what}: {value!r}") from e


def parse_svg_font(source: bytes | str) -> OutlineFont:
    """Parse SVG font markup into an ``OutlineFont``.

    Args:
        source: Raw document bytes or text.

    Returns:
        The parsed font, its id derived from the ``font-face`` family name.

    Raises:
        FontParseError: If the markup is malformed, has no ``<font>``
            element or no family name.
    """
    try:
        root = ET.fromstring(source)
    except (ParseError, DefusedXmlException) as e:
        raise FontParseError(f"Could not parse SVG font: {e}") from e

    font_elem = _find(root, "font")
    if font_elem is None:
        raise FontParseError("No <font> element found")

    face = _find(font_elem, "font-face")
    family = face.get("font-family") if face is not None else None
    if not family or not family.strip():
        raise FontParseError("SVG font has no font-family")

    units_per_em = _number(face.get("units-per-em"), "units-per-em") or DEFAULT_UNITS_PER_EM
    default_width = _number(font_elem.get("horiz-adv-x"), "horiz-adv-x")

    glyphs: dict[str, OutlineGlyph] = {}
    for elem in font_elem.iter():
        if _local(elem.tag) != "glyph":
            continue
        char = elem.get("unicode")
        if not char or len(char) != 1:
            # Ligatures and unmapped glyphs cannot be reached by single-character lookup
            continue
        glyphs[char] = OutlineGlyph(
            unicode=char,
            name=elem.get("glyph-name") or char,
            width=_number(elem.get("horiz-adv-x"), f"horiz-adv-x of {char!r}"),
            d=elem.get("d") or None,
        )

    if " " not in glyphs and default_width is not None:
        glyphs[" "] = OutlineGlyph(unicode=" ", name="space", width=default_width)

    info = {k: v for k, v in face.attrib.items() if k != "font-family"}
    family = family.strip()
    font = OutlineFont(
        font_id_from_family(family),
        name=family,
        glyphs=glyphs,
        units_per_em=units_per_em,
        default_width=default_width,
        info=info,
    )
    logger.debug("Parsed SVG font %s with %d glyphs", font.font_id, len(glyphs))
    return font


def read_svg_font(path: Path | str) -> OutlineFont:
    """Parse an SVG font file from disk."""
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise FontParseError(f"Could not read {path}: {e}", source=str(path)) from e
    return parse_svg_font(data)

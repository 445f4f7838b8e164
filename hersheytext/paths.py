"""Path data cleanup and rescaling for outline font glyphs.

Outline (SVG font) glyph paths are authored in glyph space with the Y axis
pointing up, and are frequently written without separators
(``M100-20L30 40``). ``normalize_path`` tokenizes such strings and maps them
into upright line space in one step.
"""

from __future__ import annotations

import re

_WHITESPACE_RE = re.compile(r"\s+")


def format_number(value: float) -> str:
    """Format a coordinate without a trailing ``.0`` (``3.0`` -> ``3``)."""
    value = round(float(value), 4)
    if value == int(value):
        return str(int(value))
    return repr(value)


def clean_path(d: str | None) -> str | None:
    """Insert separators so every command and coordinate is its own token.

    A space goes before every command letter, before a digit that directly
    follows anything other than a digit, space, period or minus, and before
    a minus sign that follows a digit or a command. Commas count as
    separators.

    Args:
        d: Raw path data.

    Returns:
        Space separated path data, or None when ``d`` is None.
    """
    if d is None:
        return None

    out: list[str] = []
    prev = ""
    for ch in d.replace(",", " "):
        if ch.isalpha():
            out.append(" ")
        elif ch.isdigit() and prev and not (prev.isdigit() or prev.isspace() or prev in ".-"):
            out.append(" ")
        elif ch == "-" and (prev.isdigit() or prev.isalpha()):
            out.append(" ")
        elif ch == "." and prev.isalpha():
            out.append(" ")
        out.append(ch)
        prev = ch

    return _WHITESPACE_RE.sub(" ", "".join(out)).strip()


def _is_number(token: str) -> bool:
    try:
        float(token)
    except ValueError:
        return False
    return True


def scale_path(d: str | None, scale: float, height: float) -> str | None:
    """Scale cleaned path data and flip it vertically.

    Numeric tokens alternate X then Y; every command letter resets the
    alternation to X, except ``V``/``v`` whose arguments are all Y values and
    ``H``/``h`` whose arguments are all X values.
    X becomes ``x * scale`` and Y becomes ``(height - y) * scale``, both
    rounded to two decimals.

    Args:
        d: Path data as produced by ``clean_path``.
        scale: Multiplier applied after the flip.
        height: Glyph height (units-per-em) to flip against.

    Returns:
        Transformed path data, or None when ``d`` is None.
    """
    if d is None:
        return None

    out: list[str] = []
    expect_x = True
    single_axis = False
    for token in d.split():
        if not _is_number(token):
            out.append(token)
            single_axis = token in ("H", "h", "V", "v")
            expect_x = token not in ("V", "v")
            continue

        value = float(token)
        if expect_x:
            out.append(format_number(round(value * scale, 2)))
        else:
            out.append(format_number(round((height - value) * scale, 2)))
        if not single_axis:
            expect_x = not expect_x

    return " ".join(out)


def normalize_path(d: str | None, scale: float = 1.0, height: float = 1000) -> str | None:
    """Clean then scale/flip raw outline path data.

    Applying this to already normalized output flips it a second time, so
    callers must normalize a glyph path exactly once.
    """
    return scale_path(clean_path(d), scale, height)

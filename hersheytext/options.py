"""Render options.

Callers pass a plain mapping; ``RenderOptions.from_mapping`` merges it over
the defaults. Both camelCase keys (``fromRight``, ``wrapWidth``) and their
snake_case forms are accepted, unknown keys are ignored.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import Any

from hersheytext.exceptions import InvalidOptionsError

DEFAULT_FONT = "futural"
DEFAULT_ID = "hersheytext"
DEFAULT_STROKE_WIDTH = 2.0

_ALIASES = {
    "font": "font",
    "id": "id",
    "scale": "scale",
    "pos": "pos",
    "position": "pos",
    "size": "canvas_size",
    "canvasSize": "canvas_size",
    "canvas_size": "canvas_size",
    "spacing": "spacing",
    "charSpacing": "spacing",
    "char_spacing": "spacing",
    "lineHeight": "line_height",
    "line_height": "line_height",
    "fromRight": "from_right",
    "from_right": "from_right",
    "wrapWidth": "wrap_width",
    "wrap_width": "wrap_width",
    "centerWidth": "center_width",
    "center_width": "center_width",
    "centerHeight": "center_height",
    "center_height": "center_height",
    "strokeWidth": "stroke_width",
    "stroke_width": "stroke_width",
}


@dataclass(frozen=True)
class Point:
    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class Size:
    w: float = 0.0
    h: float = 0.0


def _number(key: str, value: Any) -> float:
    if isinstance(value, bool):
        raise InvalidOptionsError(f"{key} must be a number, got {value!r}", key=key)
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise InvalidOptionsError(f"{key} must be a number, got {value!r}", key=key) from e


def _pair(key: str, value: Any, first: str, second: str) -> tuple[float, float]:
    if isinstance(value, Mapping):
        try:
            return _number(key, value[first]), _number(key, value[second])
        except KeyError as e:
            raise InvalidOptionsError(f"{key} needs both {first!r} and {second!r}", key=key) from e
    if isinstance(value, (tuple, list)) and len(value) == 2:
        return _number(key, value[0]), _number(key, value[1])
    if isinstance(value, (Point, Size)):
        return tuple(getattr(value, f.name) for f in fields(value))  # type: ignore[return-value]
    raise InvalidOptionsError(f"{key} must be a {{{first}, {second}}} mapping, got {value!r}", key=key)


@dataclass(frozen=True)
class RenderOptions:
    """Options for one render call.

    Attributes:
        font: Catalog id of the font.
        id: Id of the outer SVG group; line groups are ``<id>-line-<n>``.
        scale: Scale applied to the whole group.
        pos: Group translation. Required for SVG output.
        canvas_size: Canvas size, only used to seed right-to-left layout.
        spacing: Extra advance after every character and word.
        line_height: Extra vertical advance per line.
        from_right: Lay text out right-to-left from the canvas edge.
        wrap_width: Wrap to a new line once a line grows past this width.
        center_width: Center every line within this width.
        center_height: Center the block of lines within this height.
        stroke_width: Stroke width of each glyph path.
    """

    font: str = DEFAULT_FONT
    id: str = DEFAULT_ID
    scale: float = 1.0
    pos: Point | None = None
    canvas_size: Size | None = None
    spacing: float = 0.0
    line_height: float = 0.0
    from_right: bool = False
    wrap_width: float | None = None
    center_width: float | None = None
    center_height: float | None = None
    stroke_width: float = DEFAULT_STROKE_WIDTH

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any] | None = None, **defaults: Any) -> RenderOptions:
        """Merge caller options over the defaults.

        Args:
            options: Caller supplied options, any unknown keys are dropped.
            **defaults: Overrides for the built-in defaults (e.g. the
                configured default font).

        Raises:
            InvalidOptionsError: If a recognised key has a value of the wrong shape.
        """
        base = replace(cls(), **defaults) if defaults else cls()
        if options is None:
            return base
        if isinstance(options, RenderOptions):
            return options
        if not isinstance(options, Mapping):
            raise InvalidOptionsError(f"options must be a mapping, got {type(options).__name__}")

        values: dict[str, Any] = {}
        for key, value in options.items():
            name = _ALIASES.get(key)
            if name is None or value is None:
                continue
            values[name] = value

        if "font" in values:
            values["font"] = str(values["font"])
        if "id" in values:
            values["id"] = str(values["id"])
        if "pos" in values:
            values["pos"] = Point(*_pair("pos", values["pos"], "x", "y"))
        if "canvas_size" in values:
            values["canvas_size"] = Size(*_pair("canvas_size", values["canvas_size"], "w", "h"))
        for key in ("scale", "spacing", "line_height", "stroke_width", "wrap_width", "center_width", "center_height"):
            if key in values:
                values[key] = _number(key, values[key])
        if "from_right" in values and not isinstance(values["from_right"], bool):
            raise InvalidOptionsError(f"from_right must be true or false, got {values['from_right']!r}", key="from_right")

        if values.get("scale", base.scale) == 0:
            raise InvalidOptionsError("scale must not be zero", key="scale")
        return replace(base, **values)

    def require_position(self) -> Point:
        if self.pos is None:
            raise InvalidOptionsError("pos is required for SVG output", key="pos")
        return self.pos

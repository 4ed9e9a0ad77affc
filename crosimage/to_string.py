"""Text forms of common values."""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any, Sequence, Union

Number = Union[int, float]

_BOOL_TEXT = {True: "true", False: "false"}


def _number(value: Number) -> str:
    if isinstance(value, bool) or isinstance(value, int):
        return str(int(value))
    return format(float(value), "g")


def _is_float(*values: Number) -> bool:
    return any(isinstance(v, float) for v in values)


def format_bool(value: bool) -> str:
    """Return "true" or "false" for the truth of value."""
    truth = bool(value)
    text = _BOOL_TEXT[truth]
    return text


def format_size(width: Number, height: Number) -> str:
    """Return "QSize(w, h)", or "QSizeF(w, h)" for fractional sizes."""
    name = "QSizeF" if _is_float(width, height) else "QSize"
    return f"{name}({_number(width)}, {_number(height)})"


def format_rect(left: Number, top: Number, width: Number, height: Number) -> str:
    """Return "QRect(l, t, w, h)", or "QRectF(...)" for fractional rectangles."""
    name = "QRectF" if _is_float(left, top, width, height) else "QRect"
    fields = ", ".join(_number(v) for v in (left, top, width, height))
    return f"{name}({fields})"


def format_point(x: Number, y: Number) -> str:
    """Return "QPoint(x, y)", or "QPointF(x, y)" for fractional points."""
    name = "QPointF" if _is_float(x, y) else "QPoint"
    return f"{name}({_number(x)}, {_number(y)})"


def format_color(color: Sequence[int] | None) -> str:
    """Return "#rrggbb" for an (r, g, b[, a]) colour, "#invalid" for None."""
    if color is None:
        return "#invalid"
    if len(color) not in (3, 4):
        raise ValueError("a colour needs three or four components")
    red, green, blue = color[:3]
    for component in (red, green, blue):
        if not 0 <= component <= 255:
            raise ValueError(f"colour component {component!r} is outside 0..255")
    return f"#{red:02x}{green:02x}{blue:02x}"


def format_datetime(moment: datetime) -> str:
    """Return the moment as "yyyy.MM.dd hh:mm:ss"."""
    return f"{moment.year:04d}.{moment:%m.%d %H:%M:%S}"


def format_json(value: Any) -> str:
    """Return a JSON value as text; arrays and objects as indented documents."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return format_bool(value)
    if isinstance(value, (int, float)):
        return format(float(value), "g")
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple, dict)):
        return json.dumps(value, indent=4, sort_keys=True, ensure_ascii=False) + "\n"
    raise TypeError(f"not a JSON value: {type(value).__name__}")


def reversed_text(text: str) -> str:
    """Return the characters of text in reverse order."""
    return text[::-1]
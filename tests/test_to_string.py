import json
from datetime import datetime

import pytest

from crosimage.to_string import (
    format_bool,
    format_color,
    format_datetime,
    format_json,
    format_point,
    format_rect,
    format_size,
    reversed_text,
)


def _fields(text):
    inner = text[text.index("(") + 1:text.rindex(")")]
    return [float(part) for part in inner.split(", ")]


def test_format_bool():
    assert format_bool(True) == "true"
    assert format_bool(False) == "false"


def test_format_size_pinned():
    assert format_size(3, 4) == "QSize(3, 4)"


def test_format_size_fractional_uses_float_name():
    text = format_size(1.5, 2)
    assert text.startswith("QSizeF(")
    assert _fields(text) == [1.5, 2.0]


def test_format_rect_fields_round_trip():
    values = (10, -20, 300, 40)
    text = format_rect(*values)
    assert text.startswith("QRect(")
    assert _fields(text) == [float(v) for v in values]


def test_format_point_float_round_trip():
    text = format_point(0.25, -3.5)
    assert text.startswith("QPointF(")
    assert _fields(text) == [0.25, -3.5]


def test_format_color_invalid():
    assert format_color(None) == "#invalid"


def test_format_color_pinned():
    assert format_color((255, 0, 16)) == "#ff0010"


def test_format_color_round_trip_ignores_alpha():
    color = (18, 52, 86, 200)
    text = format_color(color)
    assert text.startswith("#")
    value = int(text[1:], 16)
    assert ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF) == color[:3]


def test_format_color_rejects_out_of_range():
    with pytest.raises(ValueError):
        format_color((256, 0, 0))


def test_format_datetime_round_trip():
    moment = datetime(2021, 3, 4, 15, 6, 7)
    text = format_datetime(moment)
    assert datetime.strptime(text, "%Y.%m.%d %H:%M:%S") == moment


def test_format_json_scalars():
    assert format_json(None) == "null"
    assert format_json(True) == "true"
    assert format_json("plain") == "plain"
    assert float(format_json(2.5)) == 2.5


def test_format_json_object_sorted_and_parseable():
    data = {"b": 1, "a": [1, 2]}
    text = format_json(data)
    assert json.loads(text) == data
    assert text.endswith("\n")
    assert text.index('"a"') < text.index('"b"')


def test_format_json_rejects_other_types():
    with pytest.raises(TypeError):
        format_json(object())


def test_reversed_text_invariants():
    text = "thumbnail"
    flipped = reversed_text(text)
    assert reversed_text(flipped) == text
    assert flipped[0] == text[-1]
    assert sorted(flipped) == sorted(text)
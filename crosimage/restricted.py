"""A numeric value kept inside a closed range."""

from __future__ import annotations

from typing import Union

Number = Union[int, float]


def _midpoint(low: Number, high: Number) -> Number:
    total = low + high
    if isinstance(total, int):
        half = abs(total) // 2
        return half if total >= 0 else -half
    return total / 2


class RestrictedValue:
    """A value that every assignment clamps into [minimum, maximum]."""

    __slots__ = ("_minimum", "_maximum", "_value")

    def __init__(self, minimum: Number, maximum: Number, value: Number | None = None) -> None:
        if minimum > maximum:
            raise ValueError(f"minimum {minimum!r} is greater than maximum {maximum!r}")
        self._minimum = minimum
        self._maximum = maximum
        if value is None:
            self._value = _midpoint(minimum, maximum)
        else:
            if not minimum <= value <= maximum:
                raise ValueError(f"value {value!r} is outside [{minimum!r}, {maximum!r}]")
            self._value = value

    @property
    def minimum(self) -> Number:
        return self._minimum

    @property
    def maximum(self) -> Number:
        return self._maximum

    @property
    def value(self) -> Number:
        return self._value

    @value.setter
    def value(self, value: Number) -> None:
        self.set(value)

    def set(self, value: Number) -> Number:
        """Store value clamped into the range and return what was stored."""
        self._value = min(max(value, self._minimum), self._maximum)
        return self._value

    def shift(self, delta: Number) -> Number:
        """Add delta, clamp into the range and return the new value."""
        return self.set(self._value + delta)

    def to_unit(self) -> float:
        """Return the value as a fraction of the maximum; needs minimum 0."""
        if self._minimum != 0 or not self._maximum > 0:
            raise ValueError("to_unit needs minimum 0 and a positive maximum")
        return float(self._value) / float(self._maximum)

    def __int__(self) -> int:
        return int(self._value)

    def __float__(self) -> float:
        return float(self._value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, RestrictedValue):
            return (self._minimum, self._value, self._maximum) == (
                other._minimum,
                other._value,
                other._maximum,
            )
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._minimum, self._value, self._maximum))

    def __repr__(self) -> str:
        return f"RestrictedValue({self._minimum!r}, {self._maximum!r}, {self._value!r})"
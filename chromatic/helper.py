"""Numeric helpers shared by the colour types."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal

__all__ = [
    "Fraction",
    "Hue",
    "clamp",
    "format_scalar",
    "interpolate",
    "interpolate_angle",
    "max_precision",
    "mod_positive",
    "round_half_away",
]


def mod_positive(x: float, y: float) -> float:
    """Remainder of ``x / y`` that always carries the sign of ``y``."""
    return math.fmod(math.fmod(x, y) + y, y)


def clamp(lower: float, upper: float, x: float) -> float:
    """Trim ``x`` so that it lies within ``[lower, upper]``."""
    return max(min(upper, x), lower)


def round_half_away(x: float) -> float:
    """Round to the nearest integer, with halves rounded away from zero."""
    if math.isnan(x) or math.isinf(x):
        return x
    if x < 0:
        return -round_half_away(-x)
    floor = math.floor(x)
    return float(floor + 1) if x - floor >= 0.5 else float(floor)


def format_scalar(x: float) -> str:
    """Shortest positional decimal form of ``x``, without a trailing ``.0``."""
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "inf" if x > 0 else "-inf"
    text = format(Decimal(repr(float(x))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


class Fraction:
    """A number clamped to the unit interval ``[0, 1]``."""

    __slots__ = ("_value",)

    def __init__(self, value: float) -> None:
        self._value = clamp(0.0, 1.0, float(value))

    @classmethod
    def from_value(cls, s: float) -> Fraction:
        return cls(s)

    def value(self) -> float:
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"Fraction({self._value!r})"


@dataclass(frozen=True)
class Hue:
    """A hue angle in degrees, stored as given and wrapped on access."""

    unclipped: float

    def value(self) -> float:
        """The hue in the interval ``[0, 360]``."""
        if self.unclipped == 360.0:
            return self.unclipped
        return mod_positive(self.unclipped, 360.0)


def interpolate(a: float, b: float, fraction: Fraction) -> float:
    """Linearly interpolate between ``a`` and ``b``."""
    return a + fraction.value() * (b - a)


def interpolate_angle(a: float, b: float, fraction: Fraction) -> float:
    """Interpolate between two angles along the shorter arc of the circle."""
    paths = [(a, b), (a, b + 360.0), (a + 360.0, b)]
    start, end = min(paths, key=lambda p: abs(p[0] - p[1]))
    return mod_positive(interpolate(start, end, fraction), 360.0)


def max_precision(precision: int, value: float) -> str:
    """Format ``value`` rounded to at most ``precision`` decimals, no trailing zeros."""
    pow_10 = float(10**precision)
    rounded = round_half_away(value * pow_10) / pow_10
    return format_scalar(rounded)
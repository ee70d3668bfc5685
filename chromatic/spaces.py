"""Plain value types for the colour spaces a colour can be expressed in."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from chromatic.helper import Fraction, format_scalar, interpolate, interpolate_angle

__all__ = [
    "CMYK",
    "HSLA",
    "LCh",
    "LMS",
    "RGBA",
    "XYZ",
    "ColorblindnessType",
    "Format",
    "Lab",
]


def _fmt(value: float) -> str:
    if isinstance(value, int):
        return str(value)
    return format_scalar(value)


class Format(enum.Enum):
    """Whether formatted colour strings put a space after each comma."""

    SPACES = "spaces"
    NO_SPACES = "no_spaces"


class ColorblindnessType(enum.Enum):
    """Kinds of colour blindness that can be simulated."""

    PROTANOPIA = "protanopia"
    DEUTERANOPIA = "deuteranopia"
    TRITANOPIA = "tritanopia"


@dataclass(frozen=True)
class RGBA:
    """Red, green, blue and alpha; channels are ints 0-255 or floats 0-1."""

    r: float
    g: float
    b: float
    alpha: float = 1.0

    def mix(self, other: RGBA, fraction: Fraction) -> RGBA:
        return RGBA(
            interpolate(self.r, other.r, fraction),
            interpolate(self.g, other.g, fraction),
            interpolate(self.b, other.b, fraction),
            interpolate(self.alpha, other.alpha, fraction),
        )

    def __str__(self) -> str:
        return f"rgb({_fmt(self.r)}, {_fmt(self.g)}, {_fmt(self.b)})"


@dataclass(frozen=True)
class HSLA:
    """Hue in degrees, saturation, lightness and alpha in ``[0, 1]``."""

    h: float
    s: float
    l: float  # noqa: E741
    alpha: float = 1.0

    def mix(self, other: HSLA, fraction: Fraction) -> HSLA:
        # Gray colours have no meaningful hue; borrow the other one's.
        self_hue = other.h if self.s < 0.0001 else self.h
        other_hue = self.h if other.s < 0.0001 else other.h
        return HSLA(
            interpolate_angle(self_hue, other_hue, fraction),
            interpolate(self.s, other.s, fraction),
            interpolate(self.l, other.l, fraction),
            interpolate(self.alpha, other.alpha, fraction),
        )

    def __str__(self) -> str:
        return f"hsl({_fmt(self.h)}, {_fmt(self.s)}, {_fmt(self.l)})"


@dataclass(frozen=True)
class XYZ:
    """Coordinates in the CIE 1931 XYZ colour space."""

    x: float
    y: float
    z: float
    alpha: float = 1.0

    def __str__(self) -> str:
        return f"XYZ({_fmt(self.x)}, {_fmt(self.y)}, {_fmt(self.z)})"


@dataclass(frozen=True)
class LMS:
    """Long-, medium- and short-wavelength cone responses."""

    l: float  # noqa: E741
    m: float
    s: float
    alpha: float = 1.0

    def __str__(self) -> str:
        return f"LMS({_fmt(self.l)}, {_fmt(self.m)}, {_fmt(self.s)})"


@dataclass(frozen=True)
class Lab:
    """Coordinates in the CIE L*a*b* colour space."""

    l: float  # noqa: E741
    a: float
    b: float
    alpha: float = 1.0

    def mix(self, other: Lab, fraction: Fraction) -> Lab:
        return Lab(
            interpolate(self.l, other.l, fraction),
            interpolate(self.a, other.a, fraction),
            interpolate(self.b, other.b, fraction),
            interpolate(self.alpha, other.alpha, fraction),
        )

    def __str__(self) -> str:
        return f"Lab({_fmt(self.l)}, {_fmt(self.a)}, {_fmt(self.b)})"


@dataclass(frozen=True)
class LCh:
    """Lightness, chroma and hue: the cylindrical form of Lab."""

    l: float  # noqa: E741
    c: float
    h: float
    alpha: float = 1.0

    def mix(self, other: LCh, fraction: Fraction) -> LCh:
        # Nearly achromatic colours have no meaningful hue; borrow the other one's.
        self_hue = other.h if self.c < 0.1 else self.h
        other_hue = self.h if other.c < 0.1 else other.h
        return LCh(
            interpolate(self.l, other.l, fraction),
            interpolate(self.c, other.c, fraction),
            interpolate_angle(self_hue, other_hue, fraction),
            interpolate(self.alpha, other.alpha, fraction),
        )

    def __str__(self) -> str:
        return f"LCh({_fmt(self.l)}, {_fmt(self.c)}, {_fmt(self.h)})"


@dataclass(frozen=True)
class CMYK:
    """Cyan, magenta, yellow and black fractions."""

    c: float
    m: float
    y: float
    k: float

    def __str__(self) -> str:
        return f"cmyk({_fmt(self.c)}, {_fmt(self.m)}, {_fmt(self.y)}, {_fmt(self.k)})"
"""Pure numeric conversions between the colour spaces.

Every function takes plain floats (or 0-255 ints for integer RGB) and
returns a tuple of floats, leaving alpha handling to the caller.
"""

from __future__ import annotations

import math

from chromatic.helper import clamp, mod_positive, round_half_away

__all__ = [
    "D65_XN",
    "D65_YN",
    "D65_ZN",
    "cmyk_to_rgb_float",
    "hsl_to_rgb_float",
    "lab_to_lch",
    "lab_to_xyz",
    "lch_to_lab",
    "lms_to_xyz",
    "rgb_float_to_rgb",
    "rgb_to_cmyk",
    "rgb_to_hsl",
    "srgb_to_xyz",
    "xyz_to_lab",
    "xyz_to_lms",
    "xyz_to_srgb",
]

# Reference white of illuminant D65, used by the Lab conversions.
D65_XN = 0.950470
D65_YN = 1.0
D65_ZN = 1.088830

_LAB_DELTA = 6.0 / 29.0
_LAB_CUT = _LAB_DELTA**3
_DEG2RAD = math.pi / 180.0
_RAD2DEG = 180.0 / math.pi


def rgb_to_hsl(r: int, g: int, b: int) -> tuple[float, float, float]:
    """Convert integer RGB channels (0-255) to hue (degrees), saturation and lightness."""
    max_chroma = max(r, g, b)
    min_chroma = min(r, g, b)
    chroma = max_chroma - min_chroma
    chroma_s = chroma / 255.0

    r_s = r / 255.0
    g_s = g / 255.0
    b_s = b / 255.0

    if chroma == 0:
        sector = 0.0
    elif r == max_chroma:
        sector = mod_positive((g_s - b_s) / chroma_s, 6.0)
    elif g == max_chroma:
        sector = (b_s - r_s) / chroma_s + 2.0
    else:
        sector = (r_s - g_s) / chroma_s + 4.0
    hue = 60.0 * sector

    lightness = (max_chroma + min_chroma) / (255.0 * 2.0)
    if chroma == 0:
        saturation = 0.0
    else:
        saturation = chroma_s / (1.0 - abs(2.0 * lightness - 1.0))
    return hue, saturation, lightness


def hsl_to_rgb_float(h: float, s: float, l: float) -> tuple[float, float, float]:  # noqa: E741
    """Convert hue (degrees in ``[0, 360]``), saturation and lightness to RGB floats."""
    h_s = h / 60.0
    chr_ = (1.0 - abs(2.0 * l - 1.0)) * s
    m = l - chr_ / 2.0
    x = chr_ * (1.0 - abs(math.fmod(h_s, 2.0) - 1.0))

    if h_s < 1.0:
        col = (chr_, x, 0.0)
    elif h_s < 2.0:
        col = (x, chr_, 0.0)
    elif h_s < 3.0:
        col = (0.0, chr_, x)
    elif h_s < 4.0:
        col = (0.0, x, chr_)
    elif h_s < 5.0:
        col = (x, 0.0, chr_)
    else:
        col = (chr_, 0.0, x)

    return col[0] + m, col[1] + m, col[2] + m


def _to_byte(c: float) -> int:
    return int(round_half_away(clamp(0.0, 255.0, 255.0 * c)))


def rgb_float_to_rgb(r: float, g: float, b: float) -> tuple[int, int, int]:
    """Scale RGB floats to integer channels, clamping to ``0..255``."""
    return _to_byte(r), _to_byte(g), _to_byte(b)


def _srgb_linearize(c: float) -> float:
    if c <= 0.04045:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def _srgb_compand(c: float) -> float:
    if c <= 0.0031308:
        return 12.92 * c
    return 1.055 * c ** (1.0 / 2.4) - 0.055


def srgb_to_xyz(r: float, g: float, b: float) -> tuple[float, float, float]:
    """Convert gamma-encoded sRGB floats to CIE 1931 XYZ."""
    r = _srgb_linearize(r)
    g = _srgb_linearize(g)
    b = _srgb_linearize(b)
    x = 0.4124 * r + 0.3576 * g + 0.1805 * b
    y = 0.2126 * r + 0.7152 * g + 0.0722 * b
    z = 0.0193 * r + 0.1192 * g + 0.9505 * b
    return x, y, z


def xyz_to_srgb(x: float, y: float, z: float) -> tuple[float, float, float]:
    """Convert CIE 1931 XYZ to gamma-encoded sRGB floats (not clamped)."""
    r = _srgb_compand(3.2406 * x - 1.5372 * y - 0.4986 * z)
    g = _srgb_compand(-0.9689 * x + 1.8758 * y + 0.0415 * z)
    b = _srgb_compand(0.0557 * x - 0.2040 * y + 1.0570 * z)
    return r, g, b


def xyz_to_lms(x: float, y: float, z: float) -> tuple[float, float, float]:
    """Convert XYZ to LMS cone responses."""
    l = 0.38971 * x + 0.68898 * y - 0.07868 * z  # noqa: E741
    m = -0.22981 * x + 1.18340 * y + 0.04641 * z
    s = z
    return l, m, s


def lms_to_xyz(l: float, m: float, s: float) -> tuple[float, float, float]:  # noqa: E741
    """Convert LMS cone responses back to XYZ."""
    x = 1.91020 * l - 1.112120 * m + 0.201908 * s
    y = 0.37095 * l + 0.629054 * m
    z = s
    return x, y, z


def _lab_f(t: float) -> float:
    if t > _LAB_CUT:
        return t ** (1.0 / 3.0)
    return (1.0 / 3.0) * (29.0 / 6.0) ** 2 * t + 4.0 / 29.0


def _lab_finv(t: float) -> float:
    if t > _LAB_DELTA:
        return t**3
    return 3.0 * _LAB_DELTA * _LAB_DELTA * (t - 4.0 / 29.0)


def xyz_to_lab(x: float, y: float, z: float) -> tuple[float, float, float]:
    """Convert XYZ to CIE L*a*b* relative to D65 white."""
    fy = _lab_f(y / D65_YN)
    l = 116.0 * fy - 16.0  # noqa: E741
    a = 500.0 * (_lab_f(x / D65_XN) - fy)
    b = 200.0 * (fy - _lab_f(z / D65_ZN))
    return l, a, b


def lab_to_xyz(l: float, a: float, b: float) -> tuple[float, float, float]:  # noqa: E741
    """Convert CIE L*a*b* (D65) to XYZ."""
    l_ = (l + 16.0) / 116.0
    x = D65_XN * _lab_finv(l_ + a / 500.0)
    y = D65_YN * _lab_finv(l_)
    z = D65_ZN * _lab_finv(l_ - b / 200.0)
    return x, y, z


def lab_to_lch(l: float, a: float, b: float) -> tuple[float, float, float]:  # noqa: E741
    """Convert Lab to lightness, chroma and hue (degrees in ``[0, 360)``)."""
    c = math.sqrt(a * a + b * b)
    h = mod_positive(math.atan2(b, a) * _RAD2DEG, 360.0)
    return l, c, h


def lch_to_lab(l: float, c: float, h: float) -> tuple[float, float, float]:  # noqa: E741
    """Convert lightness, chroma and hue (degrees) to Lab."""
    a = c * math.cos(h * _DEG2RAD)
    b = c * math.sin(h * _DEG2RAD)
    return l, a, b


def rgb_to_cmyk(r: int, g: int, b: int) -> tuple[float, float, float, float]:
    """Convert integer RGB channels (0-255) to cyan, magenta, yellow and black."""
    r_f = r / 255.0
    g_f = g / 255.0
    b_f = b / 255.0
    biggest = max(r_f, g_f, b_f)
    k = 1.0 - biggest
    if biggest == 0.0:
        # Pure black: the chromatic components are undefined and reported as zero.
        return 0.0, 0.0, 0.0, k
    c = (1.0 - r_f - k) / biggest
    m = (1.0 - g_f - k) / biggest
    y = (1.0 - b_f - k) / biggest
    return c, m, y, k


def cmyk_to_rgb_float(c: float, m: float, y: float, k: float) -> tuple[float, float, float]:
    """Convert CMYK components to RGB floats."""
    key = (1.0 - k) / 100.0
    r = 255.0 * ((1.0 - c) / 100.0) * key
    g = 255.0 * ((1.0 - m) / 100.0) * key
    b = 255.0 * ((1.0 - y) / 100.0) * key
    return r, g, b
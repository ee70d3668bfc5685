"""The central colour type and its conversions, adjustments and formatting."""

from __future__ import annotations

import math
from typing import Callable

from chromatic.conversions import (
    cmyk_to_rgb_float,
    hsl_to_rgb_float,
    lab_to_lch,
    lab_to_xyz,
    lch_to_lab,
    lms_to_xyz,
    rgb_float_to_rgb,
    rgb_to_cmyk,
    rgb_to_hsl,
    srgb_to_xyz,
    xyz_to_lab,
    xyz_to_lms,
    xyz_to_srgb,
)
from chromatic.helper import (
    Fraction,
    Hue,
    clamp,
    format_scalar,
    max_precision,
    round_half_away,
)
from chromatic.spaces import (
    CMYK,
    HSLA,
    LMS,
    RGBA,
    XYZ,
    ColorblindnessType,
    Format,
    LCh,
    Lab,
)

__all__ = ["Color"]

# Luminance at which black and white text give the same WCAG contrast.
_TEXT_COLOR_THRESHOLD = 0.179


def _space(format: Format) -> str:
    return " " if format == Format.SPACES else ""


def _check_byte(name: str, value: int) -> int:
    value = int(value)
    if not 0 <= value <= 255:
        raise ValueError(f"{name} channel must be between 0 and 255, got {value}")
    return value


class Color:
    """A colour in the sRGB gamut, stored as hue, saturation, lightness and alpha.

    Two colours compare equal when their integer RGB values and alpha agree,
    so e.g. every HSL representation of black is the same colour.
    """

    __slots__ = ("_hue", "_saturation", "_lightness", "_alpha")

    def __init__(
        self, hue: float, saturation: float, lightness: float, alpha: float = 1.0
    ) -> None:
        self._hue = Hue(float(hue))
        self._saturation = clamp(0.0, 1.0, float(saturation))
        self._lightness = clamp(0.0, 1.0, float(lightness))
        self._alpha = clamp(0.0, 1.0, float(alpha))

    # Construction -----------------------------------------------------------

    @classmethod
    def from_hsla(
        cls, hue: float, saturation: float, lightness: float, alpha: float
    ) -> Color:
        return cls(hue, saturation, lightness, alpha)

    @classmethod
    def from_hsl(cls, hue: float, saturation: float, lightness: float) -> Color:
        return cls(hue, saturation, lightness, 1.0)

    @classmethod
    def from_rgba(cls, r: int, g: int, b: int, alpha: float) -> Color:
        """Create a colour from 0-255 integer channels and an alpha in ``[0, 1]``."""
        h, s, l = rgb_to_hsl(_check_byte("red", r), _check_byte("green", g), _check_byte("blue", b))  # noqa: E741
        return cls(h, s, l, alpha)

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> Color:
        return cls.from_rgba(r, g, b, 1.0)

    @classmethod
    def from_rgba_float(cls, r: float, g: float, b: float, alpha: float) -> Color:
        """Create a colour from channels in ``[0, 1]``; values outside are clamped."""
        return cls.from_rgba(*rgb_float_to_rgb(r, g, b), alpha)

    @classmethod
    def from_rgb_float(cls, r: float, g: float, b: float) -> Color:
        return cls.from_rgba_float(r, g, b, 1.0)

    @classmethod
    def from_xyz(cls, x: float, y: float, z: float, alpha: float) -> Color:
        """Create a colour from CIE 1931 XYZ; out-of-gamut values are clamped."""
        return cls.from_rgba_float(*xyz_to_srgb(x, y, z), alpha)

    @classmethod
    def from_lms(cls, l: float, m: float, s: float, alpha: float) -> Color:  # noqa: E741
        return cls.from_xyz(*lms_to_xyz(l, m, s), alpha)

    @classmethod
    def from_lab(cls, l: float, a: float, b: float, alpha: float) -> Color:  # noqa: E741
        return cls.from_xyz(*lab_to_xyz(l, a, b), alpha)

    @classmethod
    def from_lch(cls, l: float, c: float, h: float, alpha: float) -> Color:  # noqa: E741
        return cls.from_lab(*lch_to_lab(l, c, h), alpha)

    @classmethod
    def from_cmyk(cls, c: float, m: float, y: float, k: float) -> Color:
        return cls.from_rgb_float(*cmyk_to_rgb_float(c, m, y, k))

    # Conversion -------------------------------------------------------------

    def to_hsla(self) -> HSLA:
        return HSLA(self._hue.value(), self._saturation, self._lightness, self._alpha)

    def to_rgba_float(self) -> RGBA:
        r, g, b = hsl_to_rgb_float(self._hue.value(), self._saturation, self._lightness)
        return RGBA(r, g, b, self._alpha)

    def to_rgba(self) -> RGBA:
        c = self.to_rgba_float()
        r, g, b = rgb_float_to_rgb(c.r, c.g, c.b)
        return RGBA(r, g, b, self._alpha)

    def to_u32(self) -> int:
        """The colour as an integer ``0xRRGGBB``."""
        c = self.to_rgba()
        return (c.r << 16) + (c.g << 8) + c.b

    def to_xyz(self) -> XYZ:
        c = self.to_rgba_float()
        return XYZ(*srgb_to_xyz(c.r, c.g, c.b), self._alpha)

    def to_lms(self) -> LMS:
        xyz = self.to_xyz()
        return LMS(*xyz_to_lms(xyz.x, xyz.y, xyz.z), self._alpha)

    def to_lab(self) -> Lab:
        xyz = self.to_xyz()
        return Lab(*xyz_to_lab(xyz.x, xyz.y, xyz.z), self._alpha)

    def to_lch(self) -> LCh:
        lab = self.to_lab()
        return LCh(*lab_to_lch(lab.l, lab.a, lab.b), self._alpha)

    def to_cmyk(self) -> CMYK:
        c = self.to_rgba()
        return CMYK(*rgb_to_cmyk(c.r, c.g, c.b))

    # Formatting -------------------------------------------------------------

    def _alpha_suffix(self, alpha: float, space: str) -> str:
        if self._alpha == 1.0:
            return ""
        return f",{space}{max_precision(3, alpha)}"

    def to_hsl_string(self, format: Format = Format.SPACES) -> str:
        space = _space(format)
        prefix = "" if self._alpha == 1.0 else "a"
        alpha = self._alpha_suffix(self._alpha, space)
        h = self._hue.value()
        s = 100.0 * self._saturation
        l = 100.0 * self._lightness  # noqa: E741
        return f"hsl{prefix}({h:.0f},{space}{s:.1f}%,{space}{l:.1f}%{alpha})"

    def to_rgb_string(self, format: Format = Format.SPACES) -> str:
        c = self.to_rgba()
        space = _space(format)
        prefix = "" if self._alpha == 1.0 else "a"
        alpha = self._alpha_suffix(c.alpha, space)
        return f"rgb{prefix}({c.r},{space}{c.g},{space}{c.b}{alpha})"

    def to_rgb_float_string(self, format: Format = Format.SPACES) -> str:
        c = self.to_rgba_float()
        space = _space(format)
        prefix = "" if self._alpha == 1.0 else "a"
        alpha = self._alpha_suffix(c.alpha, space)
        return f"rgb{prefix}({c.r:.3f},{space}{c.g:.3f},{space}{c.b:.3f}{alpha})"

    def to_cmyk_string(self, format: Format = Format.SPACES) -> str:
        cmyk = self.to_cmyk()
        space = _space(format)
        parts = (
            format_scalar(round_half_away(v * 100.0))
            for v in (cmyk.c, cmyk.m, cmyk.y, cmyk.k)
        )
        return f"cmyk({f',{space}'.join(parts)})"

    def to_rgb_hex_string(self, leading_hash: bool = True) -> str:
        c = self.to_rgba()
        text = f"{'#' if leading_hash else ''}{c.r:02x}{c.g:02x}{c.b:02x}"
        if c.alpha != 1.0:
            text += f"{int(clamp(0.0, 255.0, round_half_away(c.alpha * 255.0))):02x}"
        return text

    def to_lab_string(self, format: Format = Format.SPACES) -> str:
        lab = self.to_lab()
        space = _space(format)
        alpha = self._alpha_suffix(self._alpha, space)
        return f"Lab({lab.l:.0f},{space}{lab.a:.0f},{space}{lab.b:.0f}{alpha})"

    def to_lch_string(self, format: Format = Format.SPACES) -> str:
        lch = self.to_lch()
        space = _space(format)
        alpha = self._alpha_suffix(self._alpha, space)
        return f"LCh({lch.l:.0f},{space}{lch.c:.0f},{space}{lch.h:.0f}{alpha})"

    # Named colours ----------------------------------------------------------

    @classmethod
    def black(cls) -> Color:
        return cls.from_hsl(0.0, 0.0, 0.0)

    @classmethod
    def white(cls) -> Color:
        return cls.from_hsl(0.0, 0.0, 1.0)

    @classmethod
    def red(cls) -> Color:
        return cls.from_rgb(255, 0, 0)

    @classmethod
    def green(cls) -> Color:
        return cls.from_rgb(0, 128, 0)

    @classmethod
    def blue(cls) -> Color:
        return cls.from_rgb(0, 0, 255)

    @classmethod
    def yellow(cls) -> Color:
        return cls.from_rgb(255, 255, 0)

    @classmethod
    def fuchsia(cls) -> Color:
        return cls.from_rgb(255, 0, 255)

    @classmethod
    def aqua(cls) -> Color:
        return cls.from_rgb(0, 255, 255)

    @classmethod
    def lime(cls) -> Color:
        return cls.from_rgb(0, 255, 0)

    @classmethod
    def maroon(cls) -> Color:
        return cls.from_rgb(128, 0, 0)

    @classmethod
    def olive(cls) -> Color:
        return cls.from_rgb(128, 128, 0)

    @classmethod
    def navy(cls) -> Color:
        return cls.from_rgb(0, 0, 128)

    @classmethod
    def purple(cls) -> Color:
        return cls.from_rgb(128, 0, 128)

    @classmethod
    def teal(cls) -> Color:
        return cls.from_rgb(0, 128, 128)

    @classmethod
    def silver(cls) -> Color:
        return cls.from_rgb(192, 192, 192)

    @classmethod
    def gray(cls) -> Color:
        return cls.from_rgb(128, 128, 128)

    @classmethod
    def graytone(cls, lightness: float) -> Color:
        """A gray with the given lightness (0 is black, 1 is white)."""
        return cls.from_hsl(0.0, 0.0, lightness)

    # Adjustments ------------------------------------------------------------

    def rotate_hue(self, delta: float) -> Color:
        return Color(self._hue.value() + delta, self._saturation, self._lightness, self._alpha)

    def complementary(self) -> Color:
        return self.rotate_hue(180.0)

    def lighten(self, f: float) -> Color:
        return Color(self._hue.value(), self._saturation, self._lightness + f, self._alpha)

    def darken(self, f: float) -> Color:
        return self.lighten(-f)

    def saturate(self, f: float) -> Color:
        return Color(self._hue.value(), self._saturation + f, self._lightness, self._alpha)

    def desaturate(self, f: float) -> Color:
        return self.saturate(-f)

    def simulate_colorblindness(self, cb_ty: ColorblindnessType) -> Color:
        """Approximate how the colour looks with the given kind of colour blindness."""
        lms = self.to_lms()
        l, m, s = lms.l, lms.m, lms.s  # noqa: E741
        if cb_ty == ColorblindnessType.PROTANOPIA:
            l = 1.05118294 * m - 0.05116099 * s  # noqa: E741
        elif cb_ty == ColorblindnessType.DEUTERANOPIA:
            m = 0.9513092 * l + 0.04866992 * s
        elif cb_ty == ColorblindnessType.TRITANOPIA:
            s = -0.86744736 * l + 1.86727089 * m
        else:
            raise ValueError(f"unknown colorblindness type: {cb_ty!r}")
        return Color.from_lms(l, m, s, lms.alpha)

    def to_gray(self) -> Color:
        """A gray tone with the same perceived lightness, keeping this colour's hue."""
        lch = self.to_lch()
        gray = Color.from_lch(lch.l, 0.0, 0.0, 1.0).desaturate(1.0)
        return Color(self._hue.unclipped, gray._saturation, gray._lightness, gray._alpha)

    # Perception -------------------------------------------------------------

    def brightness(self) -> float:
        """Perceived brightness between 0 and 1."""
        c = self.to_rgba_float()
        return (299.0 * c.r + 587.0 * c.g + 114.0 * c.b) / 1000.0

    def is_light(self) -> bool:
        return self.brightness() > 0.5

    def luminance(self) -> float:
        """Relative luminance as defined by the WCAG."""

        def f(s: float) -> float:
            if s <= 0.03928:
                return s / 12.92
            return ((s + 0.055) / 1.055) ** 2.4

        c = self.to_rgba_float()
        return 0.2126 * f(c.r) + 0.7152 * f(c.g) + 0.0722 * f(c.b)

    def contrast_ratio(self, other: Color) -> float:
        """WCAG contrast ratio, between 1 and 21."""
        lighter, darker = sorted((self.luminance(), other.luminance()), reverse=True)
        return (lighter + 0.05) / (darker + 0.05)

    def text_color(self) -> Color:
        """Black or white, whichever reads better on this background."""
        if self.luminance() > _TEXT_COLOR_THRESHOLD:
            return Color.black()
        return Color.white()

    # Combination ------------------------------------------------------------

    def mix(
        self, other: Color, fraction: Fraction | float, space: type = Lab
    ) -> Color:
        """Interpolate towards ``other`` in the given colour space (RGBA, HSLA, Lab or LCh)."""
        try:
            to_space, from_space = _MIX_SPACES[space]
        except (KeyError, TypeError):
            raise ValueError(f"cannot mix colours in {space!r}") from None
        if not isinstance(fraction, Fraction):
            fraction = Fraction(fraction)
        return from_space(to_space(self).mix(to_space(other), fraction))

    def composite(self, source: Color) -> Color:
        """Place ``source`` over this colour using alpha compositing."""
        backdrop = self.to_rgba()
        src = source.to_rgba()
        a_o = src.alpha + backdrop.alpha * (1.0 - src.alpha)

        def channel(c_a: int, a_a: float, c_b: int, a_b: float) -> int:
            if a_o == 0.0:
                return 0
            value = math.floor((c_a * a_a + c_b * a_b * (1.0 - a_a)) / a_o)
            return int(clamp(0, 255, value))

        return Color.from_rgba(
            channel(src.r, src.alpha, backdrop.r, backdrop.alpha),
            channel(src.g, src.alpha, backdrop.g, backdrop.alpha),
            channel(src.b, src.alpha, backdrop.b, backdrop.alpha),
            a_o,
        )

    # Protocols --------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.to_rgba() == other.to_rgba()

    def __hash__(self) -> int:
        return hash(self.to_rgba())

    def __str__(self) -> str:
        return str(self.to_hsla())

    def __repr__(self) -> str:
        return f"Color.from_{self.to_rgb_string(Format.NO_SPACES)}"


_MIX_SPACES: dict[type, tuple[Callable[[Color], object], Callable[[object], Color]]] = {
    RGBA: (
        Color.to_rgba_float,
        lambda v: Color.from_rgba_float(v.r, v.g, v.b, v.alpha),
    ),
    HSLA: (
        Color.to_hsla,
        lambda v: Color.from_hsla(v.h, v.s, v.l, v.alpha),
    ),
    Lab: (
        Color.to_lab,
        lambda v: Color.from_lab(v.l, v.a, v.b, v.alpha),
    ),
    LCh: (
        Color.to_lch,
        lambda v: Color.from_lch(v.l, v.c, v.h, v.alpha),
    ),
}
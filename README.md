# chromatic

A small library for working with colors. A `Color` is stored as hue,
saturation, lightness and alpha, and can be created from or converted to
RGB, HSL, CIE XYZ, LMS, CIE Lab, CIE LCh and CMYK. It has no dependencies
beyond the standard library.

## Installation

```
pip install .
```

Tests need the `test` extra:

```
pip install ".[test]"
pytest
```

## Modules

- `chromatic.color`: the `Color` class.
- `chromatic.spaces`: value types `RGBA`, `HSLA`, `XYZ`, `LMS`, `Lab`, `LCh`,
  `CMYK`, and the enums `Format` and `ColorblindnessType`.
- `chromatic.conversions`: plain-float conversion functions between the
  spaces (`rgb_to_hsl`, `srgb_to_xyz`, `xyz_to_lab`, `lab_to_lch`, ...).
- `chromatic.helper`: `Fraction` (a number clamped to `[0, 1]`), `Hue`,
  `interpolate`, `interpolate_angle`, `max_precision` and friends.
- `chromatic.scale`: `ColorScale`.
- `chromatic.named`: the CSS named colors, `NAMED_COLORS` and
  `find_named_color`.
- `chromatic.parser`: `parse_color` and `ColorParseError`.

## Creating colors

```python
from chromatic.color import Color
from chromatic.parser import parse_color

c = Color.from_rgb(255, 127, 4)
d = Color.from_hsl(280.0, 0.2, 0.5)
e = Color.from_lab(41.0, 83.0, -93.0, 1.0)

parse_color("#ff0099")
parse_color("rgb(100%, 0%, 60%)")
parse_color("hsl(0.25turn, 20%, 50%)")
parse_color("CIELab(15, 23, -43)")
parse_color("gray(20%)")
parse_color("deeppink")
```

`Color.from_rgb` and `Color.from_rgba` raise `ValueError` for channels
outside 0..255; the float, HSL, XYZ, LMS, Lab and LCh constructors clamp to
the sRGB gamut instead.

`parse_color` raises `ColorParseError` (a `ValueError`) when the text is not
a color it understands. Accepted forms are hex (3, 4, 6 or 8 digits, with or
without `#`), `rgb()`/`rgba()` with numbers or percentages (the prefix may be
left out, as in `255, 0, 153`), `hsl()`/`hsla()` with angles in degrees,
`rad`, `grad` or `turn`, `gray()`, `lab()`/`cielab()`, `lch()`/`cielch()` and
the CSS named colors (case-insensitive). Values may be separated by commas or
spaces, and an optional fourth value gives the alpha.

Two colors compare equal when their integer RGB values and alpha agree.

## Formatting

```python
from chromatic.spaces import Format

c.to_rgb_hex_string(True)              # '#ff7f04'
c.to_rgb_string(Format.SPACES)         # 'rgb(255, 127, 4)'
c.to_rgb_float_string(Format.SPACES)
c.to_hsl_string(Format.NO_SPACES)
c.to_lab_string(Format.SPACES)
c.to_lch_string(Format.SPACES)
c.to_cmyk_string(Format.SPACES)
c.to_u32()                             # 0xff7f04
```

The alpha channel is included (as `rgba(...)`, `hsla(...)` or a trailing
hex pair) only when it is not 1.0.

## Manipulation and analysis

```python
from chromatic.helper import Fraction
from chromatic.spaces import ColorblindnessType, HSLA, Lab

Color.red().rotate_hue(120.0)          # lime
Color.lime().complementary()           # fuchsia
c.lighten(0.1).desaturate(0.2)
c.to_gray()
c.simulate_colorblindness(ColorblindnessType.DEUTERANOPIA)

Color.black().contrast_ratio(Color.white())   # 21.0
c.luminance()
c.brightness()
c.is_light()
c.text_color()                                # black or white

Color.red().mix(Color.blue(), Fraction.from_value(0.5), HSLA)   # fuchsia
Color.red().mix(Color.blue(), 0.5)            # mixed in Lab by default
Color.white().composite(Color.from_rgba(0, 0, 0, 0.5))
```

`mix` works in `RGBA`, `HSLA`, `Lab` or `LCh`; any other space raises
`ValueError`.

## Color scales

```python
from chromatic.scale import ColorScale

scale = ColorScale()
scale.add_stop(Color.red(), 0.0).add_stop(Color.blue(), 1.0)
scale.sample(0.25)                                   # mixed in Lab
scale.sample(0.25, lambda a, b, f: a.mix(b, f, HSLA))
```

Adding a stop at a position that already has one replaces its color.
`sample` returns `None` when the scale holds fewer than two stops or the
position does not lie between two stops.

## What it does not do

The package is a library only: it has no command-line tool, no generation
of random colors, and no functions for picking sets of maximally distinct
colors or for measuring delta-E color distances.
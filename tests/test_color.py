import pytest

from chromatic.color import Color
from chromatic.helper import Fraction
from chromatic.spaces import HSLA, RGBA, ColorblindnessType, Format, Lab


def assert_almost_equal(c1, c2):
    a = c1.to_rgba()
    b = c2.to_rgba()
    assert abs(a.r - b.r) <= 1
    assert abs(a.g - b.g) <= 1
    assert abs(a.b - b.b) <= 1


def test_color_equality():
    assert Color.from_hsl(120.0, 0.3, 0.5) == Color.from_hsl(360.0 + 120.0, 0.3, 0.5)
    assert Color.from_rgba(1, 2, 3, 0.3) == Color.from_rgba(1, 2, 3, 0.3)
    assert Color.black() == Color.from_hsl(123.0, 0.3, 0.0)
    assert Color.white() == Color.from_hsl(123.0, 0.3, 1.0)

    assert Color.from_hsl(120.0, 0.3, 0.5) != Color.from_hsl(122.0, 0.3, 0.5)
    assert Color.from_hsl(120.0, 0.3, 0.5) != Color.from_hsl(120.0, 0.32, 0.5)
    assert Color.from_hsl(120.0, 0.3, 0.5) != Color.from_hsl(120.0, 0.3, 0.52)
    assert Color.from_hsla(120.0, 0.3, 0.5, 0.9) != Color.from_hsla(120.0, 0.3, 0.5, 0.901)
    assert Color.from_rgba(1, 2, 3, 0.3) != Color.from_rgba(2, 2, 3, 0.3)
    assert Color.from_rgba(1, 2, 3, 0.3) != Color.from_rgba(1, 3, 3, 0.3)
    assert Color.from_rgba(1, 2, 3, 0.3) != Color.from_rgba(1, 2, 4, 0.3)


def test_equal_colors_hash_equal():
    assert hash(Color.black()) == hash(Color.from_hsl(200.0, 0.7, 0.0))


def test_rgb_to_hsl_conversion():
    assert Color.white() == Color.from_rgb_float(1.0, 1.0, 1.0)
    assert Color.gray() == Color.from_rgb_float(0.5, 0.5, 0.5)
    assert Color.black() == Color.from_rgb_float(0.0, 0.0, 0.0)
    assert Color.red() == Color.from_rgb_float(1.0, 0.0, 0.0)
    assert Color.from_hsl(60.0, 1.0, 0.375) == Color.from_rgb_float(0.75, 0.75, 0.0)
    assert Color.green() == Color.from_rgb_float(0.0, 0.5, 0.0)
    assert Color.from_hsl(240.0, 1.0, 0.75) == Color.from_rgb_float(0.5, 0.5, 1.0)
    assert Color.from_hsl(49.5, 0.893, 0.497) == Color.from_rgb_float(0.941, 0.785, 0.053)
    assert Color.from_hsl(162.4, 0.779, 0.447) == Color.from_rgb_float(0.099, 0.795, 0.591)


@pytest.mark.parametrize(
    "h,s,l",
    [
        (0.0, 0.0, 1.0),
        (0.0, 0.0, 0.5),
        (0.0, 0.0, 0.0),
        (60.0, 1.0, 0.375),
        (120.0, 1.0, 0.25),
        (240.0, 1.0, 0.75),
        (49.5, 0.893, 0.497),
        (162.4, 0.779, 0.447),
    ],
)
def test_rgb_roundtrip(h, s, l):  # noqa: E741
    color1 = Color.from_hsl(h, s, l)
    rgb = color1.to_rgba()
    assert Color.from_rgb(rgb.r, rgb.g, rgb.b) == color1


def test_rgb_roundtrip_all_hues():
    for degree in range(360):
        color1 = Color.from_hsl(float(degree), 0.5, 0.8)
        rgb = color1.to_rgba()
        assert Color.from_rgb(rgb.r, rgb.g, rgb.b) == color1


def test_from_rgb_rejects_out_of_range_channel():
    with pytest.raises(ValueError):
        Color.from_rgb(256, 0, 0)


def test_to_u32():
    assert Color.black().to_u32() == 0
    assert Color.red().to_u32() == 0xFF0000
    assert Color.white().to_u32() == 0xFFFFFF
    assert Color.from_rgb(0xF4, 0x23, 0x0F).to_u32() == 0xF4230F


def test_xyz_conversion():
    assert Color.white() == Color.from_xyz(0.9505, 1.0, 1.0890, 1.0)
    assert Color.red() == Color.from_xyz(0.4123, 0.2126, 0.01933, 1.0)
    assert Color.from_hsl(109.999, 0.08654, 0.407843) == Color.from_xyz(
        0.13123, 0.15372, 0.13174, 1.0
    )
    for hue in range(360):
        color1 = Color.from_hsl(float(hue), 0.2, 0.8)
        xyz = color1.to_xyz()
        assert_almost_equal(color1, Color.from_xyz(xyz.x, xyz.y, xyz.z, 1.0))


def test_lms_conversion():
    for hue in range(360):
        color1 = Color.from_hsl(float(hue), 0.2, 0.8)
        lms = color1.to_lms()
        assert_almost_equal(color1, Color.from_lms(lms.l, lms.m, lms.s, 1.0))


def test_lab_conversion():
    assert Color.red() == Color.from_lab(53.233, 80.109, 67.22, 1.0)
    for hue in range(360):
        color1 = Color.from_hsl(float(hue), 0.2, 0.8)
        lab = color1.to_lab()
        assert_almost_equal(color1, Color.from_lab(lab.l, lab.a, lab.b, 1.0))


def test_lch_conversion():
    assert Color.from_hsl(0.0, 1.0, 0.245) == Color.from_lch(24.829, 60.093, 38.18, 1.0)
    for hue in range(360):
        color1 = Color.from_hsl(float(hue), 0.2, 0.8)
        lch = color1.to_lch()
        assert_almost_equal(color1, Color.from_lch(lch.l, lch.c, lch.h, 1.0))


def test_rotate_hue():
    assert Color.red().rotate_hue(120.0) == Color.lime()


def test_complementary():
    assert Color.lime().complementary() == Color.fuchsia()
    assert Color.fuchsia().complementary() == Color.lime()


def test_lighten():
    assert Color.from_hsl(90.0, 0.5, 0.3).lighten(0.4) == Color.from_hsl(90.0, 0.5, 0.7)
    assert Color.from_hsl(90.0, 0.5, 0.3).lighten(0.8) == Color.from_hsl(90.0, 0.5, 1.0)


def test_darken_and_desaturate_are_inverse_adjustments():
    c = Color.from_hsl(90.0, 0.5, 0.3)
    assert c.darken(-0.4) == c.lighten(0.4)
    assert c.desaturate(0.5).to_hsla().s == 0.0
    assert c.saturate(0.2) == Color.from_hsl(90.0, 0.7, 0.3)


def test_to_gray():
    salmon = Color.from_rgb(250, 128, 114)
    assert salmon.to_gray().to_hsla().s == 0.0
    assert salmon.to_gray().luminance() == pytest.approx(salmon.luminance(), rel=0.01)
    assert Color.graytone(0.3).to_gray() == Color.graytone(0.3)


def test_to_gray_keeps_hue():
    c = Color.from_hsl(200.0, 0.6, 0.4)
    assert c.to_gray().to_hsla().h == 200.0


def test_brightness():
    assert Color.black().brightness() == 0.0
    assert Color.white().brightness() == 1.0
    assert Color.graytone(0.5).brightness() == 0.5


def test_is_light():
    assert Color.white().is_light()
    assert not Color.black().is_light()


def test_luminance():
    assert Color.white().luminance() == 1.0
    assert Color.from_rgb(255, 105, 180).luminance() == pytest.approx(0.347, rel=0.01)
    assert Color.black().luminance() == 0.0


def test_contrast_ratio():
    assert Color.black().contrast_ratio(Color.white()) == pytest.approx(21.0)
    assert Color.white().contrast_ratio(Color.black()) == pytest.approx(21.0)
    assert Color.white().contrast_ratio(Color.white()) == pytest.approx(1.0)
    assert Color.red().contrast_ratio(Color.red()) == pytest.approx(1.0)
    assert Color.from_rgb(255, 119, 153).contrast_ratio(
        Color.from_rgb(0, 68, 85)
    ) == pytest.approx(4.26, rel=0.01)


def test_text_color():
    assert Color.graytone(0.4).text_color() == Color.white()
    assert Color.graytone(0.6).text_color() == Color.black()


def test_to_hsl_string():
    c = Color.from_hsl(91.3, 0.541, 0.983)
    assert c.to_hsl_string(Format.SPACES) == "hsl(91, 54.1%, 98.3%)"


def test_to_rgb_string():
    c = Color.from_rgb(255, 127, 4)
    assert c.to_rgb_string(Format.SPACES) == "rgb(255, 127, 4)"
    assert c.to_rgb_string(Format.NO_SPACES) == "rgb(255,127,4)"


def test_to_rgb_float_string():
    assert Color.black().to_rgb_float_string(Format.SPACES) == "rgb(0.000, 0.000, 0.000)"
    assert Color.white().to_rgb_float_string(Format.SPACES) == "rgb(1.000, 1.000, 1.000)"
    c = Color.from_rgb_float(0.12, 0.45, 0.78)
    assert c.to_rgb_float_string(Format.SPACES) == "rgb(0.122, 0.451, 0.780)"


def test_to_rgb_hex_string():
    c = Color.from_rgb(255, 127, 4)
    assert c.to_rgb_hex_string(False) == "ff7f04"
    assert c.to_rgb_hex_string(True) == "#ff7f04"


def test_to_lab_string():
    c = Color.from_lab(41.0, 83.0, -93.0, 1.0)
    assert c.to_lab_string(Format.SPACES) == "Lab(41, 83, -93)"


def test_to_lch_string():
    c = Color.from_lch(52.0, 44.0, 271.0, 1.0)
    assert c.to_lch_string(Format.SPACES) == "LCh(52, 44, 271)"


def test_to_cmyk_string():
    assert Color.from_rgb(255, 255, 255).to_cmyk_string(Format.SPACES) == "cmyk(0, 0, 0, 0)"
    assert Color.from_rgb(0, 0, 0).to_cmyk_string(Format.SPACES) == "cmyk(0, 0, 0, 100)"
    assert Color.from_rgb(19, 19, 1).to_cmyk_string(Format.SPACES) == "cmyk(0, 0, 95, 93)"
    assert Color.from_rgb(55, 55, 55).to_cmyk_string(Format.SPACES) == "cmyk(0, 0, 0, 78)"
    assert Color.from_rgb(136, 117, 78).to_cmyk_string(Format.SPACES) == "cmyk(0, 14, 43, 47)"
    assert Color.from_rgb(143, 111, 76).to_cmyk_string(Format.SPACES) == "cmyk(0, 22, 47, 44)"


def test_mix():
    assert Color.red().mix(Color.blue(), Fraction(0.5), RGBA) == Color.purple()
    assert Color.red().mix(Color.blue(), Fraction(0.5), HSLA) == Color.fuchsia()


def test_mix_rejects_unknown_space():
    with pytest.raises(ValueError):
        Color.red().mix(Color.blue(), Fraction(0.5), int)


def test_mix_endpoints_in_lab():
    assert Color.red().mix(Color.blue(), Fraction(0.0), Lab) == Color.red()
    assert Color.red().mix(Color.blue(), Fraction(1.0), Lab) == Color.blue()


@pytest.mark.parametrize(
    "other",
    [Color.black(), Color.graytone(0.2), Color.graytone(0.7), Color.white()],
)
def test_mixing_with_gray_preserves_hue(other):
    hue = 123.0
    source = Color.from_hsla(hue, 0.5, 0.5, 1.0)
    assert source.mix(other, Fraction(0.5), HSLA).to_hsla().h == hue


def test_composite_half_transparent_red_over_white():
    result = Color.white().composite(Color.from_rgba(255, 0, 0, 0.5))
    assert result == Color.from_rgb(255, 127, 127)


def test_simulate_colorblindness_keeps_black():
    for kind in ColorblindnessType:
        assert Color.black().simulate_colorblindness(kind) == Color.black()


def test_from_cmyk_full_ink_is_black():
    assert Color.from_cmyk(1.0, 1.0, 1.0, 0.0) == Color.black()


def test_str_and_repr():
    assert str(Color.red()) == "hsl(0, 1, 0.5)"
    assert repr(Color.red()) == "Color.from_rgb(255,0,0)"
    assert repr(Color.from_rgba(10, 0, 0, 0.5)) == "Color.from_rgba(10,0,0,0.5)"
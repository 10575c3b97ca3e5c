from chromaconv.colors import (
    Color, ColorBase, ColorRGB, ColorHSV, ColorHSL, ColorCIELAB, ColorXYZ, ColorLMS,
    color_convert, get_color_class, unified_space_to_class,
)
from chromaconv.numbers import BoundedAngle, UnitInterval
from chromaconv.types import ColorSpace
from ..samples import samples_rgb_hsv, samples_rgb_hsl
import pytest


def test_from_hex():
    color = Color.from_hex(0xece5db)
    assert isinstance(color, ColorRGB)
    assert color.red() == 236
    assert color.green() == 229
    assert color.blue() == 219


def test_from_hex_ignores_high_bits():
    with pytest.warns(UserWarning, match="0xFFFFFF"):
        color = Color.from_hex(0x1ece5db)
    assert color.rgb_tuple() == (236, 229, 219)


def test_from_hex_rejects_negative():
    with pytest.raises(ValueError):
        Color.from_hex(-1)


def test_rgb_to_hsv_reference():
    end = Color.rgb(165, 102, 173).as_hsv()

    assert isinstance(end, ColorHSV)
    assert end.hue().value == 293
    assert 0.405 <= end.saturation_hsv().value < 0.415
    assert 0.675 <= end.value_hsv().value < 0.685


def test_black_and_white_to_hsv():
    assert Color.rgb(0, 0, 0).hsv_tuple() == (0, 0.0, 0.0)
    assert Color.rgb(255, 255, 255).hsv_tuple() == (0, 0.0, 1.0)


def test_achromatic_hsl_midpoint_to_rgb():
    assert Color.hsl(0, 0.0, 0.5).rgb_tuple() == (128, 128, 128)


def test_class_conversion_rgb_to_hsv():
    for rgb, (h_exp, s_exp, v_exp) in samples_rgb_hsv.items():
        color = ColorRGB(rgb)
        hsv = color.convert("hsv")
        h, s, v = hsv.value

        assert isinstance(hsv, ColorHSV)
        assert h == h_exp
        assert abs(float(s) - s_exp) < 1e-5
        assert abs(float(v) - v_exp) < 1e-5


def test_class_conversion_rgb_to_hsl():
    for rgb, (h_exp, s_exp, l_exp) in samples_rgb_hsl.items():
        hsl = Color.rgb(*rgb).as_hsl()
        h, s, l = hsl.value

        assert isinstance(hsl, ColorHSL)
        assert h == h_exp
        assert abs(float(s) - s_exp) < 1e-5
        assert abs(float(l) - l_exp) < 1e-5


def test_single_components_match_tuples():
    for rgb in samples_rgb_hsv:
        color = Color.rgb(*rgb)
        assert color.hsv_tuple() == (color.hue(), color.saturation_hsv(), color.value_hsv())
        assert color.hsl_tuple() == (color.hue(), color.saturation_hsl(), color.luminosity())
        assert color.rgb_tuple() == rgb


def test_accessors_from_hue_spaces():
    hsl = Color.hsl(120, 0.5, 0.25)
    assert hsl.hue() == 120
    assert hsl.luminosity() == 0.25
    assert abs(float(hsl.value_hsv()) - 0.375) < 1e-6
    assert abs(float(hsl.saturation_hsv()) - 0.666667) < 1e-5

    hsv = hsl.as_hsv()
    assert hsv.hue() == 120
    assert abs(float(hsv.saturation_hsl()) - 0.5) < 1e-5
    assert abs(float(hsv.luminosity()) - 0.25) < 1e-5


def test_as_same_space_returns_equal_color():
    hsv = Color.hsv(200, 0.25, 0.75)
    assert hsv.as_hsv() == hsv
    assert color_convert(hsv) is hsv
    assert hsv.as_hsv().hsv_tuple() == hsv.hsv_tuple()


def test_constructing_from_another_color_converts():
    hsv = ColorHSV(Color.rgb(255, 0, 0))
    assert hsv.hsv_tuple() == (0, 1.0, 1.0)
    assert ColorRGB(hsv) == Color.rgb(255, 0, 0)


def test_fields_are_bounded_types():
    hue, saturation, value = Color.hsv(10, 0.5, 0.5).value
    assert isinstance(hue, BoundedAngle)
    assert isinstance(saturation, UnitInterval)
    assert isinstance(value, UnitInterval)
    assert Color.hsv(BoundedAngle(10), UnitInterval(0.5), 0.5) == Color.hsv(10, 0.5, 0.5)


@pytest.mark.parametrize("factory, args", [
    (Color.rgb, (256, 0, 0)),
    (Color.rgb, (0, -1, 0)),
    (Color.hsv, (360, 0.5, 0.5)),
    (Color.hsv, (0, 1.5, 0.5)),
    (Color.hsl, (0, 0.5, -0.1)),
    (Color.cielab, (0.5, 128, 0)),
    (Color.xyz, (0, 0, -129)),
])
def test_out_of_range_fields(factory, args):
    with pytest.raises(ValueError):
        factory(*args)


def test_wrong_types_and_arity():
    with pytest.raises(TypeError):
        Color.rgb(1.0, 0, 0)
    with pytest.raises(TypeError):
        ColorRGB("abc")
    with pytest.raises(ValueError):
        ColorRGB((1, 2))


def test_colors_are_immutable():
    color = Color.rgb(1, 2, 3)
    with pytest.raises(AttributeError):
        color._value = (4, 5, 6)
    with pytest.raises(AttributeError):
        color.extra = 1


def test_equality_and_hash():
    assert Color.rgb(1, 2, 3) == Color.from_hex(0x010203)
    assert Color.rgb(0, 0, 0) != Color.hsv(0, 0.0, 0.0)
    assert len({Color.rgb(1, 2, 3), Color.from_hex(0x010203)}) == 1


def test_repr():
    assert repr(Color.rgb(165, 102, 173)) == "Color.RGB(165, 102, 173)"
    assert repr(Color.hsl(0, 0.0, 0.5)) == "Color.HSL(0, 0.0, 0.5)"


def test_registry():
    assert get_color_class("rgb") is ColorRGB
    assert get_color_class(ColorSpace.HSV) is ColorHSV
    assert Color is ColorBase
    with pytest.raises(ValueError):
        get_color_class("cmyk")


@pytest.mark.parametrize("color", [
    Color.cielab(0.5, -10, 20),
    Color.xyz(1, -2, 3),
    Color.lms(10, 20, 30),
])
def test_unconverted_spaces(color):
    assert not color.is_convertible
    with pytest.raises(NotImplementedError):
        color.as_hsv()
    with pytest.raises(NotImplementedError):
        color.rgb_tuple()
    with pytest.raises(NotImplementedError):
        color.hue()
    with pytest.raises(NotImplementedError):
        Color.rgb(1, 2, 3).convert(color.mode)


def test_unconverted_fields():
    lab = Color.cielab(0.5, -10, 20)
    assert isinstance(lab, ColorCIELAB)
    assert (lab.l_star, lab.a_star, lab.b_star) == (0.5, -10, 20)

    xyz = Color.xyz(1, -2, 3)
    assert isinstance(xyz, ColorXYZ)
    assert (xyz.x, xyz.y, xyz.z) == (1, -2, 3)

    lms = Color.lms(10, 20, 30)
    assert isinstance(lms, ColorLMS)
    assert lms.as_dict() == {"l": 10, "m": 20, "s": 30}


def test_registry_covers_every_space():
    assert set(unified_space_to_class) == set(ColorSpace)
    for space, cls in unified_space_to_class.items():
        assert cls.mode is space
        assert get_color_class(space.value) is cls


def test_has_hue():
    assert Color.hsv(10, 0.5, 0.5).has_hue
    assert Color.hsl(10, 0.5, 0.5).has_hue
    assert not Color.rgb(1, 2, 3).has_hue
    assert not Color.lms(1, 2, 3).has_hue


def test_hue_reads_stored_field_of_hue_spaces():
    assert Color.hsl(200, 0.6, 0.8).hue() == 200
    assert Color.hsv(359, 0.0, 0.0).hue() == 359


def test_full_value_hsv_is_achromatic_in_hsl():
    assert Color.hsv(0, 1.0, 1.0).hsl_tuple() == (0, 0.0, 0.5)
    assert Color.hsv(0, 0.5, 1.0).saturation_hsl() == 0.0
    assert ColorHSL(Color.hsv(120, 1.0, 1.0)).value == (120, 0.0, 0.5)

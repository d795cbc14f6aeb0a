import math

import pytest

from chromashade.channels import Deg, F32, Rev, Rev8, U8
from chromashade.colors import (
    BaseColor,
    LinHSVColor,
    LinRGBColor,
    SRGB24Color,
    SRGBColor,
    StdHSVColor,
    hsv_class,
)
from chromashade.errors import InvalidChannelValue
from chromashade.samples.colors import PRIMARY_SAMPLES
from chromashade.spaces import SRGBSpace


def test_constructor_normalizes():
    assert StdHSVColor(-90, 0.5, 0.5).tuple() == (270.0, 0.5, 0.5)
    assert StdHSVColor(270.0, 1.0, 0.0).tuple() == (0.0, 0.0, 0.0)
    assert StdHSVColor(120.0, 0.0, 0.7).tuple() == (0.0, 0.0, 0.7)
    assert isinstance(StdHSVColor(-90, 0.5, 0.5).h, Deg)


def test_constructor_validates():
    with pytest.raises(InvalidChannelValue):
        StdHSVColor(0.0, 1.5, 0.5)
    with pytest.raises(InvalidChannelValue):
        StdHSVColor(0.0, 0.5, -0.1)
    with pytest.raises(InvalidChannelValue):
        StdHSVColor(0.0, math.nan, 0.5)
    with pytest.raises(InvalidChannelValue):
        StdHSVColor(math.inf, 0.5, 0.5)
    with pytest.raises(InvalidChannelValue):
        StdHSVColor(math.nan, 0.5, 0.5)


def test_invalid_channel_value_carries_context():
    with pytest.raises(InvalidChannelValue) as info:
        StdHSVColor(0.0, 2.0, 0.5)
    assert info.value.channel == "saturation"
    assert info.value.value == 2.0
    assert isinstance(info.value, ValueError)


def test_raw_and_normalize():
    assert StdHSVColor.raw(Deg(270.0), 1.0, 0.0).normalize().tuple() == (0.0, 0.0, 0.0)
    assert StdHSVColor.raw(Deg(120.0), 0.0, 0.7).normalize().tuple() == (0.0, 0.0, 0.7)
    assert StdHSVColor.raw(400.0, 2.0, 0.5).normalize().tuple() == (40.0, 1.0, 0.5)
    assert StdHSVColor.raw(math.nan, 0.5, 0.5).normalize().tuple() == (0.0, 0.5, 0.5)


def test_is_normal():
    assert StdHSVColor(10.0, 0.5, 0.5).is_normal()
    assert not StdHSVColor.raw(Deg(270.0), 1.0, 0.0).is_normal()
    assert not StdHSVColor.raw(Deg(120.0), 0.0, 0.7).is_normal()
    assert not StdHSVColor.raw(Deg(0.0), 0.0, 1.5).is_normal()
    assert not StdHSVColor.raw(360.0, 0.5, 0.5).is_normal()
    for color in (StdHSVColor.raw(Deg(270.0), 1.0, 0.0), StdHSVColor.raw(400.0, 2.0, 0.5)):
        assert color.normalize().is_normal()


def test_rgb_to_hsv_samples():
    for rgb, (h, s, v) in PRIMARY_SAMPLES:
        hsv = SRGB24Color(*rgb).conv(F32).hsv()
        assert type(hsv) is StdHSVColor
        assert hsv.tuple() == pytest.approx((h, s, v))


def test_hsv_to_rgb_samples():
    for rgb, hsv in PRIMARY_SAMPLES:
        assert StdHSVColor(*hsv).rgb().conv(U8) == SRGB24Color(*rgb)


def test_8bit_round_trip_example():
    color = SRGB24Color(128, 255, 55)
    hsv = color.hsv()
    assert type(hsv) is hsv_class(Deg, U8, SRGBSpace)
    assert hsv.normalize().rgb() == color


def test_space_is_kept():
    lin = LinRGBColor(0.5, 0.25, 0.0)
    hsv = lin.hsv()
    assert type(hsv) is LinHSVColor
    assert type(hsv.rgb()) is LinRGBColor
    assert hsv.rgb().tuple() == pytest.approx(lin.tuple())


def test_hue_kinds():
    color = SRGBColor(0.0, 0.0, 1.0)
    assert color.hsv(Rev).h == pytest.approx(2 / 3)
    assert color.hsv(Rev8).h == 171
    assert isinstance(color.hsv(Rev8).h, Rev8)
    assert color.hsv(Rev).rgb().tuple() == pytest.approx(color.tuple())


def test_conv():
    hsv = StdHSVColor(180.0, 0.5, 1.0)
    rev = hsv.conv(Rev)
    assert rev.h == pytest.approx(0.5)
    assert rev.s == 0.5
    as_u8 = hsv.conv(Deg, U8)
    assert as_u8.tuple() == (180.0, 128, 255)
    assert type(as_u8) is hsv_class(Deg, U8, SRGBSpace)


def test_hue_of_another_kind_is_converted():
    assert StdHSVColor(Rev(0.25), 1.0, 1.0).h == 90.0


def test_from_base():
    assert StdHSVColor.from_base(BaseColor.CYAN).tuple() == (180.0, 1.0, 1.0)
    assert StdHSVColor.from_base(BaseColor.GREY).tuple() == (0.0, 0.0, 0.5)
    assert BaseColor.BLUE.hsv().tuple() == (240.0, 1.0, 1.0)
    lin_grey = LinHSVColor.from_base(BaseColor.GREY)
    assert lin_grey.v == pytest.approx(0.21404114)


def test_immutable():
    hsv = StdHSVColor(10.0, 0.5, 0.5)
    with pytest.raises(AttributeError):
        hsv.h = 20.0


def test_display():
    assert str(StdHSVColor(30.0, 1.0, 0.5)) == " 30.0°,100.0%, 50.0%"

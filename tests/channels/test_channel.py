import math

import numpy as np
import pytest

from chromashade.channels import Channel, U8, U16, U32, U64, F32, F64, CHANNEL_KINDS


def test_ranges():
    assert (U8.ch_zero(), U8.ch_max(), U8.ch_mid()) == (0, 255, 127)
    assert (U16.ch_zero(), U16.ch_max(), U16.ch_mid()) == (0, 65535, 32767)
    assert U32.ch_max() == 2**32 - 1
    assert U64.ch_max() == 2**64 - 1
    assert (F32.ch_zero(), F32.ch_max(), F32.ch_mid()) == (0.0, 1.0, 0.5)
    assert F64.ch_max() == 1.0


def test_to_range_clamps():
    assert U8.to_range(300) == 255
    assert U8.to_range(-4) == 0
    assert U8.to_range(127.5) == 128
    assert U16.to_range(70000) == 65535
    assert F32.to_range(2.0) == 1.0
    assert F32.to_range(-10.0) == 0.0
    assert F32.to_range(0.25) == 0.25


def test_to_range_non_finite():
    for ch in CHANNEL_KINDS:
        assert ch.to_range(math.nan) == ch.ch_zero()
        assert ch.to_range(math.inf) == ch.ch_max()
        assert ch.to_range(-math.inf) == ch.ch_zero()


def test_in_range():
    assert U8.in_range(0)
    assert U8.in_range(255)
    assert not U8.in_range(256)
    assert not U8.in_range(-1)
    assert F32.in_range(1.0)
    assert not F32.in_range(1.5)
    assert not F32.in_range(math.nan)


def test_conv_integer_to_float():
    assert U8.conv(255, F32) == 1.0
    assert U8.conv(0, F32) == 0.0
    assert U16.conv(65535, F64) == 1.0
    assert U8.conv(51, F32) == pytest.approx(0.2)


def test_conv_float_to_integer_rounds():
    assert F32.conv(1.0, U8) == 255
    assert F32.conv(0.5, U8) == 128  # 127.5 rounds away from zero
    assert F32.conv(0.2, U8) == 51
    assert F64.conv(1.5, U8) == 255  # clamped first


def test_conv_integer_to_integer():
    assert U8.conv(128, U16) == 32896
    assert U16.conv(32896, U8) == 128
    assert U8.conv(255, U64) == U64.ch_max()
    assert U64.conv(U64.ch_max(), U8) == 255
    assert U16.conv(0, U32) == 0


def test_widen_then_narrow_is_identity():
    for value in range(256):
        assert U16.conv(U8.conv(value, U16), U8) == value
        assert U32.conv(U8.conv(value, U32), U8) == value
        assert F32.conv(U8.conv(value, F32), U8) == value


def test_conv_same_kind_clamps():
    assert U8.conv(400, U8) == 255
    assert F32.conv(-1.0, F32) == 0.0


def test_fraction_round_trip():
    assert U8.fraction(255) == 1.0
    assert U8.from_fraction(U8.fraction(200)) == 200
    assert F64.from_fraction(0.3) == 0.3


def test_np_conv_matches_scalar():
    values = np.arange(256, dtype=np.uint8)
    wide = U8.np_conv(values, U16)
    assert wide.dtype == np.uint16
    assert wide.tolist() == [U8.conv(int(v), U16) for v in values]

    back = U16.np_conv(wide, U8)
    assert back.dtype == np.uint8
    assert np.array_equal(back, values)

    floats = np.array([0.0, 0.2, 0.5, 1.0, 1.5, -1.0, np.nan])
    as_u8 = F64.np_conv(floats, U8)
    assert as_u8.tolist() == [F64.conv(float(f), U8) for f in floats]


def test_np_conv_matches_scalar_at_64_bits():
    values = np.array([0, 1, 127, 128, 254, 255], dtype=np.uint8)
    wide = U8.np_conv(values, U64)
    assert wide.dtype == np.uint64
    assert wide.tolist() == [U8.conv(int(v), U64) for v in values]
    assert wide.tolist()[-1] == 2**64 - 1
    assert np.array_equal(U64.np_conv(wide, U8), values)

    mixed = np.array([0, 2**32, 2**63, 2**64 - 1], dtype=np.uint64)
    assert U64.np_conv(mixed, U32).tolist() == [U64.conv(int(v), U32) for v in mixed]

    floats = np.array([0.0, 0.25, 0.5, 1.0, 2.0, np.nan])
    as_u64 = F64.np_conv(floats, U64)
    assert as_u64.dtype == np.uint64
    assert as_u64.tolist() == [F64.conv(float(f), U64) for f in floats]


def test_np_conv_keeps_shape():
    grid = np.array([[0, 255], [128, 1]], dtype=np.uint8)
    assert U8.np_conv(grid, U64).shape == (2, 2)
    assert U8.np_conv(np.uint8(255), U16) == 65535


def test_channel_base_is_abstract():
    with pytest.raises(TypeError):
        Channel()

import numpy as np
import pytest

from chromashade.conversions.gamma import (
    SRGB_CUTOFF,
    SRGB_INV_CUTOFF,
    std_gamma_decode,
    std_gamma_encode,
    np_std_gamma_decode,
    np_std_gamma_encode,
)


def test_known_values():
    assert std_gamma_decode(0.0) == 0.0
    assert std_gamma_decode(1.0) == pytest.approx(1.0)
    assert std_gamma_encode(1.0) == pytest.approx(1.0)
    assert std_gamma_decode(0.5) == pytest.approx(0.21404114, abs=1e-7)
    assert std_gamma_encode(0.21404114) == pytest.approx(0.5, abs=1e-7)


def test_linear_segment():
    assert std_gamma_decode(SRGB_INV_CUTOFF) == pytest.approx(SRGB_INV_CUTOFF / 12.92)
    assert std_gamma_encode(SRGB_CUTOFF) == pytest.approx(SRGB_CUTOFF * 12.92)
    assert std_gamma_encode(0.001) == pytest.approx(0.01292)


def test_curve_is_continuous_at_the_cutoffs():
    eps = 1e-9
    assert std_gamma_decode(SRGB_INV_CUTOFF + eps) == pytest.approx(std_gamma_decode(SRGB_INV_CUTOFF), abs=1e-5)
    assert std_gamma_encode(SRGB_CUTOFF + eps) == pytest.approx(std_gamma_encode(SRGB_CUTOFF), abs=1e-5)


def test_round_trip_8bit_levels():
    for level in range(256):
        encoded = level / 255
        back = std_gamma_encode(std_gamma_decode(encoded))
        assert round(back * 255) == level


def test_numpy_matches_scalar():
    values = np.linspace(0.0, 1.0, 1001)
    decoded = np_std_gamma_decode(values)
    encoded = np_std_gamma_encode(values)
    assert np.allclose(decoded, [std_gamma_decode(v) for v in values])
    assert np.allclose(encoded, [std_gamma_encode(v) for v in values])


def test_numpy_handles_negative_input():
    values = np.array([-0.5, -0.001, 0.0])
    with np.errstate(invalid="raise"):
        encoded = np_std_gamma_encode(values)
        decoded = np_std_gamma_decode(values)
    assert not np.any(np.isnan(encoded))
    assert not np.any(np.isnan(decoded))

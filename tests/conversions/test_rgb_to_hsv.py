import numpy as np
import pytest

from chromashade.conversions.to_hsv import unit_rgb_to_hsv, np_unit_rgb_to_hsv
from chromashade.samples.colors import PRIMARY_SAMPLES


def test_primary_samples():
    for rgb, (h_exp, s_exp, v_exp) in PRIMARY_SAMPLES:
        h, s, v = unit_rgb_to_hsv(*(c / 255 for c in rgb))
        assert h == pytest.approx(h_exp)
        assert s == pytest.approx(s_exp)
        assert v == pytest.approx(v_exp)


def test_orange():
    h, s, v = unit_rgb_to_hsv(1.0, 0.5, 0.0)
    assert (h, s, v) == (30.0, 1.0, 1.0)


def test_red_branch_wraps_negative_hue():
    # max is red and blue > green: hue comes out just below 360
    h, s, v = unit_rgb_to_hsv(1.0, 0.0, 0.2)
    assert h == pytest.approx(348.0)
    assert s == 1.0
    assert v == 1.0


def test_tie_break_prefers_red_then_green():
    # red == green is yellow, computed on the red branch
    assert unit_rgb_to_hsv(1.0, 1.0, 0.0)[0] == pytest.approx(60.0)
    # green == blue is cyan, computed on the green branch
    assert unit_rgb_to_hsv(0.0, 1.0, 1.0)[0] == pytest.approx(180.0)


def test_grey_and_black():
    assert unit_rgb_to_hsv(0.5, 0.5, 0.5) == (0.0, 0.0, 0.5)
    assert unit_rgb_to_hsv(0.0, 0.0, 0.0) == (0.0, 0.0, 0.0)


def test_numpy_matches_scalar():
    rng = np.random.default_rng(1234)
    rgb = rng.random((500, 3))
    rgb[:10] = np.repeat(rgb[:10, :1], 3, axis=1)  # some greys
    rgb[10:20, 1] = rgb[10:20, 0]  # red/green ties
    result = np_unit_rgb_to_hsv(rgb[:, 0], rgb[:, 1], rgb[:, 2])
    expected = np.array([unit_rgb_to_hsv(*row) for row in rgb])
    assert result.shape == (500, 3)
    assert np.allclose(result, expected)

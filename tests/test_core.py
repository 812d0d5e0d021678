"""Tests for math and colour helpers."""

import numpy as np
import pytest

from procnoise.core import clamp, fade, inverse_lerp, lerp, map_range, smooth, smoothstep
from procnoise.core.color import color_lerp, hex_to_rgb, hsl_to_rgb, rgb_to_hex, rgb_to_hsl


def test_interpolation_endpoints():
    assert lerp(2.0, 6.0, 0.0) == 2.0
    assert lerp(2.0, 6.0, 1.0) == 6.0
    assert lerp(2.0, 6.0, 0.25) == 3.0
    assert inverse_lerp(2.0, 6.0, 3.0) == 0.25


@pytest.mark.parametrize("curve", [smooth, fade])
def test_curves_fixed_points(curve):
    """Fade curves pass through 0, 0.5 and 1 exactly."""
    assert curve(0.0) == 0.0
    assert curve(0.5) == 0.5
    assert curve(1.0) == 1.0


def test_smoothstep_clamps():
    assert smoothstep(0.0, 10.0, -5.0) == 0.0
    assert smoothstep(0.0, 10.0, 15.0) == 1.0
    assert smoothstep(0.0, 10.0, 5.0) == 0.5


def test_clamp_and_map_range_arrays():
    np.testing.assert_array_equal(clamp(np.array([-1.0, 0.5, 2.0]), 0.0, 1.0), [0.0, 0.5, 1.0])
    assert map_range(5.0, 0.0, 10.0, -1.0, 1.0) == 0.0


@pytest.mark.parametrize("hsl,rgb", [
    ((0.0, 100.0, 50.0), (255, 0, 0)),
    ((120.0, 100.0, 50.0), (0, 255, 0)),
    ((240.0, 100.0, 50.0), (0, 0, 255)),
    ((0.0, 0.0, 100.0), (255, 255, 255)),
    ((360.0, 100.0, 50.0), (255, 0, 0)),
])
def test_hsl_to_rgb(hsl, rgb):
    assert hsl_to_rgb(hsl) == rgb


def test_rgb_to_hsl_primaries():
    assert rgb_to_hsl((255, 0, 0)) == (0.0, 100.0, 50.0)
    assert rgb_to_hsl((0, 0, 255)) == pytest.approx((240.0, 100.0, 50.0))
    assert rgb_to_hsl((128, 128, 128))[1] == 0.0


@pytest.mark.parametrize("text,rgb", [
    ("#ff8000", (255, 128, 0)),
    ("1a2a5a", (26, 42, 90)),
    ("#fff", (255, 255, 255)),
])
def test_hex_to_rgb(text, rgb):
    assert hex_to_rgb(text) == rgb


@pytest.mark.parametrize("text", ["#12345", "", "#zzzzzz", "-12", "+ab", "-1234a", "#12 345", "#0x1234"])
def test_hex_to_rgb_invalid(text):
    with pytest.raises(ValueError):
        hex_to_rgb(text)


def test_rgb_to_hex():
    assert rgb_to_hex((255, 128, 0)) == "#ff8000"


def test_color_lerp():
    assert color_lerp((0, 0, 0), (200, 100, 50), 0.5) == (100, 50, 25)

"""Tests for fractal noise composition."""

import numpy as np
import pytest

from procnoise.noise import FractalNoise, NoiseGenerator, PerlinNoise, TurbulenceNoise, ValueNoise

BASES = {
    "perlin": lambda: PerlinNoise(42),
    "value": ValueNoise,
}


@pytest.mark.parametrize("base_name", list(BASES.keys()))
@pytest.mark.parametrize("persistence,lacunarity", [(0.5, 2.0), (0.8, 1.7), (0.0, 3.0)])
def test_single_octave_equals_base(base_name, persistence, lacunarity):
    """With one octave the composer reduces exactly to the base generator."""
    base = BASES[base_name]()
    fractal = FractalNoise(base, octaves=1, persistence=persistence, lacunarity=lacunarity)
    for x, y, z in [(0.3, 0.7, 0.1), (12.25, -3.5, 8.0), (-0.01, 99.9, -4.4)]:
        assert fractal.noise1d(x) == base.noise1d(x)
        assert fractal.noise2d(x, y) == base.noise2d(x, y)
        assert fractal.noise3d(x, y, z) == base.noise3d(x, y, z)


@pytest.mark.parametrize("octaves", [0, -1, -10, 2.7, 0.5])
def test_rejects_invalid_octaves(octaves):
    """Octaves must be a whole number of at least one."""
    with pytest.raises(ValueError):
        FractalNoise(ValueNoise(), octaves=octaves)


def test_matches_manual_octave_sum():
    base = PerlinNoise(7)
    fractal = FractalNoise(base, octaves=3, persistence=0.5, lacunarity=2.0)
    x, y = 1.37, -2.21
    expected = (
        base.noise2d(x, y)
        + 0.5 * base.noise2d(2 * x, 2 * y)
        + 0.25 * base.noise2d(4 * x, 4 * y)
    ) / 1.75
    assert fractal.noise2d(x, y) == pytest.approx(expected, abs=1e-12)


@pytest.mark.parametrize("octaves", [1, 2, 5, 8])
def test_normalized_value_noise_stays_in_unit_range(octaves):
    """Dividing by the amplitude sum keeps a weighted average of [0, 1) values."""
    fractal = FractalNoise(ValueNoise(), octaves=octaves, persistence=0.7, lacunarity=2.0)
    rng = np.random.default_rng(octaves)
    x, y = rng.uniform(-20, 20, size=(2, 1000))
    values = fractal.noise2d(x, y)
    assert np.all(values >= 0.0)
    assert np.all(values <= 1.0)


def test_array_and_list_inputs():
    fractal = FractalNoise(PerlinNoise(3), octaves=4)
    xs = [0.1, 0.2, 0.3]
    result = fractal.noise1d(xs)
    assert isinstance(result, np.ndarray)
    assert result.shape == (3,)
    assert result[1] == pytest.approx(fractal.noise1d(0.2), abs=1e-15)


def test_scalar_returns_float():
    assert isinstance(FractalNoise(PerlinNoise(3)).noise3d(0.5, 0.25, 0.125), float)


def test_deterministic():
    a = FractalNoise(PerlinNoise(99), octaves=6, persistence=0.45, lacunarity=2.2)
    b = FractalNoise(PerlinNoise(99), octaves=6, persistence=0.45, lacunarity=2.2)
    assert a.noise2d(3.3, 4.4) == b.noise2d(3.3, 4.4)


def test_composer_accepts_any_generator():
    """The composer only needs the noise1d/noise2d/noise3d protocol."""

    class Constant:
        def noise1d(self, x):
            return 0.25

        def noise2d(self, x, y):
            return 0.25

        def noise3d(self, x, y, z):
            return 0.25

    fractal = FractalNoise(Constant(), octaves=5, persistence=0.3)
    assert isinstance(fractal, NoiseGenerator)
    assert fractal.noise2d(1.0, 2.0) == pytest.approx(0.25)


def test_fractal_of_fractal():
    inner = FractalNoise(ValueNoise(), octaves=2)
    outer = FractalNoise(inner, octaves=2)
    assert 0.0 <= outer.noise2d(0.4, 0.6) <= 1.0


def test_turbulence_non_negative():
    turbulence = TurbulenceNoise(PerlinNoise(12), octaves=5)
    rng = np.random.default_rng(4)
    x, y = rng.uniform(-10, 10, size=(2, 1000))
    values = turbulence.noise2d(x, y)
    assert np.all(values >= 0.0)
    assert values.max() > 0.0


def test_turbulence_single_octave_is_abs_base():
    base = PerlinNoise(12)
    turbulence = TurbulenceNoise(base, octaves=1)
    assert turbulence.noise2d(0.3, 0.6) == abs(base.noise2d(0.3, 0.6))


def test_repr():
    fractal = FractalNoise(ValueNoise(), octaves=3, persistence=0.5, lacunarity=2.0)
    assert repr(fractal) == "FractalNoise(ValueNoise(), octaves=3, persistence=0.5, lacunarity=2.0)"


def test_accepts_integral_float_octaves():
    assert FractalNoise(ValueNoise(), octaves=3.0).octaves == 3

"""Fractal noise: several octaves of a base generator summed together."""

from __future__ import annotations

from collections.abc import Callable, Iterator

import numpy as np
from numpy.typing import ArrayLike

from .base import NoiseGenerator, NoiseValue


class FractalNoise:
    """Fractal Brownian motion (fBm) over any noise generator.

    Octave i samples the base generator at frequency lacunarity**i and
    weights it by persistence**i. The sum is divided by the total amplitude,
    so the output stays in the same range as the base noise whatever the
    octave count. With a single octave the output equals the base noise.

    Attributes:
        base: Generator sampled at each octave
        octaves: Number of noise layers to combine (at least 1)
        persistence: Amplitude multiplier per octave (typically 0.5)
        lacunarity: Frequency multiplier per octave (typically 2.0)

    Raises:
        ValueError: If octaves is not a whole number of at least 1
    """

    def __init__(
        self,
        base: NoiseGenerator,
        octaves: int = 4,
        persistence: float = 0.5,
        lacunarity: float = 2.0,
    ) -> None:
        if int(octaves) != octaves:
            raise ValueError(f"octaves must be a whole number, got {octaves}")
        if octaves < 1:
            raise ValueError(f"octaves must be at least 1, got {octaves}")
        self.base = base
        self.octaves = int(octaves)
        self.persistence = persistence
        self.lacunarity = lacunarity

    def _octaves(self) -> Iterator[tuple[float, float]]:
        """Yield (frequency, amplitude) for each octave."""
        frequency = 1.0
        amplitude = 1.0
        for _ in range(self.octaves):
            yield frequency, amplitude
            frequency *= self.lacunarity
            amplitude *= self.persistence

    def _combine(self, sample: Callable[[float], NoiseValue]) -> NoiseValue:
        value = 0.0
        max_amplitude = 0.0
        for frequency, amplitude in self._octaves():
            value = value + self._shape(sample(frequency)) * amplitude
            max_amplitude += amplitude
        return value / max_amplitude

    def _shape(self, octave: NoiseValue) -> NoiseValue:
        """Transform one octave's value before it is weighted."""
        return octave

    def noise1d(self, x: ArrayLike) -> NoiseValue:
        """Sample 1D fractal noise at x."""
        x = _coords(x)
        return self._combine(lambda f: self.base.noise1d(x * f))

    def noise2d(self, x: ArrayLike, y: ArrayLike) -> NoiseValue:
        """Sample 2D fractal noise at (x, y)."""
        x, y = _coords(x), _coords(y)
        return self._combine(lambda f: self.base.noise2d(x * f, y * f))

    def noise3d(self, x: ArrayLike, y: ArrayLike, z: ArrayLike) -> NoiseValue:
        """Sample 3D fractal noise at (x, y, z)."""
        x, y, z = _coords(x), _coords(y), _coords(z)
        return self._combine(lambda f: self.base.noise3d(x * f, y * f, z * f))

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.base!r}, octaves={self.octaves}, "
            f"persistence={self.persistence}, lacunarity={self.lacunarity})"
        )


class TurbulenceNoise(FractalNoise):
    """Turbulence: fractal noise summing the absolute value of each octave.

    Useful for veiny or marble-like patterns. With a base generator in
    [-1, 1] the output is in [0, 1].
    """

    def _shape(self, octave: NoiseValue) -> NoiseValue:
        return abs(octave)


def _coords(value: ArrayLike) -> float | np.ndarray:
    """Keep scalars as floats and turn sequences into arrays."""
    if np.ndim(value) == 0:
        return float(value)
    return np.asarray(value, dtype=np.float64)

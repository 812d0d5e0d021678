"""Noise generators."""

from .base import NoiseGenerator, LatticeNoise
from .value import ValueNoise, lattice_hash
from .perlin import PerlinNoise
from .fractal import FractalNoise, TurbulenceNoise
from .field import grid, noise_field

__all__ = [
    "NoiseGenerator",
    "LatticeNoise",
    "ValueNoise",
    "lattice_hash",
    "PerlinNoise",
    "FractalNoise",
    "TurbulenceNoise",
    "grid",
    "noise_field",
]

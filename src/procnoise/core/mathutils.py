"""Interpolation and range helpers shared by the noise generators.

All functions work on Python floats and numpy arrays alike.
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray


def lerp(a: ArrayLike, b: ArrayLike, t: ArrayLike) -> NDArray[np.float64]:
    """Linear interpolation."""
    return a + t * (b - a)


def inverse_lerp(a: float, b: float, value: ArrayLike) -> NDArray[np.float64]:
    """Position of value between a and b (0 at a, 1 at b)."""
    return (value - a) / (b - a)


def clamp(value: ArrayLike, low: float, high: float) -> NDArray[np.float64]:
    """Clamp value to the closed range [low, high]."""
    return np.clip(value, low, high)


def map_range(
    value: ArrayLike,
    in_min: float,
    in_max: float,
    out_min: float,
    out_max: float,
) -> NDArray[np.float64]:
    """Linearly remap value from [in_min, in_max] to [out_min, out_max]."""
    return out_min + (value - in_min) * (out_max - out_min) / (in_max - in_min)


def smooth(t: ArrayLike) -> NDArray[np.float64]:
    """Hermite smoothstep weight: t*t*(3 - 2t)"""
    return t * t * (3 - 2 * t)


def smoothstep(edge0: float, edge1: float, x: ArrayLike) -> NDArray[np.float64]:
    """Clamped Hermite interpolation between two edges."""
    t = clamp((x - edge0) / (edge1 - edge0), 0.0, 1.0)
    return smooth(t)


def fade(t: ArrayLike) -> NDArray[np.float64]:
    """Perlin fade curve: 6t^5 - 15t^4 + 10t^3"""
    return t * t * t * (t * (t * 6 - 15) + 10)

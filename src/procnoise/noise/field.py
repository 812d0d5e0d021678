"""Sample noise generators over regular 2D grids."""

import numpy as np
from numpy.typing import NDArray

from .base import NoiseGenerator


def grid(
    width: int,
    height: int,
    scale: float = 1.0,
    offset: tuple[float, float] = (0.0, 0.0),
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Build coordinate grids covering [offset, offset + scale] on each axis.

    Args:
        width: Number of samples along x
        height: Number of samples along y
        scale: Extent of the grid in noise space (higher = more zoomed out)
        offset: (x, y) origin of the grid in noise space

    Returns:
        (xv, yv) arrays of shape (height, width)

    Raises:
        ValueError: If width or height is not positive
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Grid size must be positive, got {width}x{height}")
    offset_x, offset_y = offset
    x = np.linspace(offset_x, offset_x + scale, width, dtype=np.float64)
    y = np.linspace(offset_y, offset_y + scale, height, dtype=np.float64)
    xv, yv = np.meshgrid(x, y)
    return xv, yv


def noise_field(
    generator: NoiseGenerator,
    width: int,
    height: int,
    scale: float = 1.0,
    offset: tuple[float, float] = (0.0, 0.0),
    z: float | None = None,
) -> NDArray[np.float64]:
    """Evaluate a generator over a width x height grid.

    Args:
        generator: Any noise generator
        width: Output width in samples
        height: Output height in samples
        scale: Noise scale (higher = more zoomed out)
        offset: (x, y) offset for tiling/variation
        z: Optional slice through 3D noise, e.g. time for animation

    Returns:
        2D array of shape (height, width)
    """
    xv, yv = grid(width, height, scale=scale, offset=offset)
    if z is None:
        return np.asarray(generator.noise2d(xv, yv), dtype=np.float64)
    return np.asarray(generator.noise3d(xv, yv, np.full_like(xv, z)), dtype=np.float64)

"""Classic Perlin gradient noise.

Implements Ken Perlin's improved noise using numpy: a shuffled 256-entry
permutation table picks one of 12 gradient directions at each lattice
corner, and the corner dot products are blended with the quintic fade curve.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from ..core.mathutils import fade, lerp
from ..rng.seeded import SeededRandom, entropy_seed
from .base import LatticeNoise, split_lattice

logger = logging.getLogger(__name__)

TABLE_SIZE = 256


def _generate_permutation(rng: SeededRandom) -> NDArray[np.int64]:
    """Fisher-Yates shuffle of 0..255 driven by the seeded generator."""
    p = list(range(TABLE_SIZE))
    for i in range(TABLE_SIZE - 1, 0, -1):
        j = rng.int(0, i)
        p[i], p[j] = p[j], p[i]
    return np.array(p, dtype=np.int64)


def _grad3d(
    hash_val: NDArray[np.int64],
    x: NDArray[np.float64],
    y: NDArray[np.float64],
    z: NDArray[np.float64],
) -> NDArray[np.float64]:
    """Compute gradient dot product for 3D Perlin noise."""
    h = hash_val & 15
    # 12 edge directions of a cube; hashes 12-15 repeat four of them
    u = np.where(h < 8, x, y)
    v = np.where(h < 4, y, np.where((h == 12) | (h == 14), x, z))
    return np.where(h & 1, -u, u) + np.where(h & 2, -v, v)


class PerlinNoise(LatticeNoise):
    """Perlin gradient noise generator.

    The permutation table is built once at construction and never changes,
    so an instance can be shared freely between readers.

    Output is roughly in [-1, 1]. This is not a hard bound: 3D samples can
    slightly exceed it.

    Args:
        seed: Seed for the table shuffle. When omitted a seed is drawn from
            operating system entropy, so the table differs between runs; the
            chosen value is kept in ``seed``.
    """

    def __init__(self, seed: int | None = None) -> None:
        if seed is None:
            seed = entropy_seed()
            logger.debug("PerlinNoise using entropy seed %d", seed)
        self.seed: int | None = seed
        self._set_permutation(_generate_permutation(SeededRandom(seed)))

    @classmethod
    def from_permutation(cls, permutation: Sequence[int]) -> PerlinNoise:
        """Create a generator from an explicit permutation table.

        Args:
            permutation: 256 integers containing each of 0..255 exactly once

        Raises:
            ValueError: If permutation is not a permutation of 0..255
        """
        table = np.array(permutation, dtype=np.int64)
        if table.shape != (TABLE_SIZE,) or not np.array_equal(np.sort(table), np.arange(TABLE_SIZE)):
            raise ValueError("Permutation must contain each of 0..255 exactly once")

        noise = cls.__new__(cls)
        noise.seed = None
        noise._set_permutation(table)
        return noise

    def _set_permutation(self, table: NDArray[np.int64]) -> None:
        self._permutation = table
        # Doubled so corner lookups never need to wrap
        self._p = np.concatenate([table, table])
        self._p.setflags(write=False)
        self._permutation.setflags(write=False)

    @property
    def permutation(self) -> NDArray[np.int64]:
        """The 256-entry permutation table (read-only)."""
        return self._permutation

    def _sample1d(self, x: NDArray[np.float64]) -> NDArray[np.float64]:
        zero = np.zeros_like(x)
        return self._sample3d(x, zero, zero)

    def _sample2d(self, x: NDArray[np.float64], y: NDArray[np.float64]) -> NDArray[np.float64]:
        return self._sample3d(x, y, np.zeros_like(x))

    def _sample3d(
        self,
        x: NDArray[np.float64],
        y: NDArray[np.float64],
        z: NDArray[np.float64],
    ) -> NDArray[np.float64]:
        p = self._p

        # Unit cube containing the point, and position inside it
        xi, xf = split_lattice(x)
        yi, yf = split_lattice(y)
        zi, zf = split_lattice(z)
        xi &= 255
        yi &= 255
        zi &= 255

        # Fade curves
        u = fade(xf)
        v = fade(yf)
        w = fade(zf)

        # Hash coordinates of cube corners
        a = p[xi] + yi
        aa = p[a] + zi
        ab = p[a + 1] + zi
        b = p[xi + 1] + yi
        ba = p[b] + zi
        bb = p[b + 1] + zi

        # Blend gradient dot products, bottom face then top face
        bottom = lerp(
            lerp(_grad3d(p[aa], xf, yf, zf), _grad3d(p[ba], xf - 1, yf, zf), u),
            lerp(_grad3d(p[ab], xf, yf - 1, zf), _grad3d(p[bb], xf - 1, yf - 1, zf), u),
            v,
        )
        top = lerp(
            lerp(_grad3d(p[aa + 1], xf, yf, zf - 1), _grad3d(p[ba + 1], xf - 1, yf, zf - 1), u),
            lerp(_grad3d(p[ab + 1], xf, yf - 1, zf - 1), _grad3d(p[bb + 1], xf - 1, yf - 1, zf - 1), u),
            v,
        )
        return lerp(bottom, top, w)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(seed={self.seed})"

"""Value noise: hashed lattice values blended with smoothstep."""

import numpy as np
from numpy.typing import ArrayLike, NDArray

from ..core.mathutils import lerp, smooth
from .base import LatticeNoise, split_lattice

_MASK = np.uint64(0xFFFFFFFF)
_HASH_MULTIPLIER = np.uint64(0x45D9F3B)
_SHIFT = np.uint64(16)

# Lattice coordinates are folded into one integer before hashing
Y_STRIDE = 57
Z_STRIDE = 113


def lattice_hash(n: ArrayLike) -> NDArray[np.float64]:
    """Hash integers to pseudo-random values in [0, 1).

    Input is reduced to 32 bits first, so the hash of n and n + 2**32 agree.
    """
    h = (np.asarray(n, dtype=np.int64) & 0xFFFFFFFF).astype(np.uint64)
    h = (((h >> _SHIFT) ^ h) * _HASH_MULTIPLIER) & _MASK
    h = (((h >> _SHIFT) ^ h) * _HASH_MULTIPLIER) & _MASK
    h = (h >> _SHIFT) ^ h
    return h.astype(np.float64) / 4294967296.0


class ValueNoise(LatticeNoise):
    """Value noise generator.

    Every integer lattice point gets a pseudo-random value from an integer
    hash, and samples between lattice points are blended with the smoothstep
    weight t*t*(3 - 2t) along each axis in turn (x, then y, then z).

    The generator has no state: identical coordinates always give identical
    output, and at integer coordinates the result is exactly the lattice
    value. Output lies in [0, 1).
    """

    def lattice1d(self, i: ArrayLike) -> NDArray[np.float64]:
        """Raw lattice value at integer coordinate i."""
        return lattice_hash(i)

    def lattice2d(self, i: ArrayLike, j: ArrayLike) -> NDArray[np.float64]:
        """Raw lattice value at integer coordinates (i, j)."""
        return lattice_hash(np.asarray(i, dtype=np.int64) + np.asarray(j, dtype=np.int64) * Y_STRIDE)

    def lattice3d(self, i: ArrayLike, j: ArrayLike, k: ArrayLike) -> NDArray[np.float64]:
        """Raw lattice value at integer coordinates (i, j, k)."""
        return lattice_hash(
            np.asarray(i, dtype=np.int64)
            + np.asarray(j, dtype=np.int64) * Y_STRIDE
            + np.asarray(k, dtype=np.int64) * Z_STRIDE
        )

    def _sample1d(self, x: NDArray[np.float64]) -> NDArray[np.float64]:
        i, fx = split_lattice(x)
        return lerp(self.lattice1d(i), self.lattice1d(i + 1), smooth(fx))

    def _sample2d(self, x: NDArray[np.float64], y: NDArray[np.float64]) -> NDArray[np.float64]:
        i, fx = split_lattice(x)
        j, fy = split_lattice(y)
        u = smooth(fx)

        a = self.lattice2d(i, j)
        b = self.lattice2d(i + 1, j)
        c = self.lattice2d(i, j + 1)
        d = self.lattice2d(i + 1, j + 1)

        return lerp(lerp(a, b, u), lerp(c, d, u), smooth(fy))

    def _sample3d(
        self,
        x: NDArray[np.float64],
        y: NDArray[np.float64],
        z: NDArray[np.float64],
    ) -> NDArray[np.float64]:
        i, fx = split_lattice(x)
        j, fy = split_lattice(y)
        k, fz = split_lattice(z)
        u = smooth(fx)
        v = smooth(fy)

        # Bottom face (k), then top face (k + 1)
        near = lerp(
            lerp(self.lattice3d(i, j, k), self.lattice3d(i + 1, j, k), u),
            lerp(self.lattice3d(i, j + 1, k), self.lattice3d(i + 1, j + 1, k), u),
            v,
        )
        far = lerp(
            lerp(self.lattice3d(i, j, k + 1), self.lattice3d(i + 1, j, k + 1), u),
            lerp(self.lattice3d(i, j + 1, k + 1), self.lattice3d(i + 1, j + 1, k + 1), u),
            v,
        )
        return lerp(near, far, smooth(fz))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"

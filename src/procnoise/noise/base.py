"""Base classes and protocols for noise generators."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Protocol, runtime_checkable

import numpy as np
from numpy.typing import ArrayLike, NDArray

# Scalars in, float out; arrays in, float64 array out.
NoiseValue = float | NDArray[np.float64]


@runtime_checkable
class NoiseGenerator(Protocol):
    """Protocol for noise generators.

    Any object with noise1d(), noise2d() and noise3d() methods satisfies this
    protocol. Coordinates may be floats or numpy arrays that broadcast
    together.
    """

    def noise1d(self, x: ArrayLike) -> NoiseValue:
        ...

    def noise2d(self, x: ArrayLike, y: ArrayLike) -> NoiseValue:
        ...

    def noise3d(self, x: ArrayLike, y: ArrayLike, z: ArrayLike) -> NoiseValue:
        ...


class LatticeNoise(ABC):
    """Abstract base class for lattice-based noise.

    Subclasses implement the array kernels _sample1d/_sample2d/_sample3d on
    float64 arrays; this class handles broadcasting the inputs and returning
    a plain float when every coordinate was a scalar.
    """

    def noise1d(self, x: ArrayLike) -> NoiseValue:
        """Sample 1D noise at x."""
        return self._evaluate(self._sample1d, x)

    def noise2d(self, x: ArrayLike, y: ArrayLike) -> NoiseValue:
        """Sample 2D noise at (x, y)."""
        return self._evaluate(self._sample2d, x, y)

    def noise3d(self, x: ArrayLike, y: ArrayLike, z: ArrayLike) -> NoiseValue:
        """Sample 3D noise at (x, y, z)."""
        return self._evaluate(self._sample3d, x, y, z)

    @abstractmethod
    def _sample1d(self, x: NDArray[np.float64]) -> NDArray[np.float64]:
        pass

    @abstractmethod
    def _sample2d(self, x: NDArray[np.float64], y: NDArray[np.float64]) -> NDArray[np.float64]:
        pass

    @abstractmethod
    def _sample3d(
        self,
        x: NDArray[np.float64],
        y: NDArray[np.float64],
        z: NDArray[np.float64],
    ) -> NDArray[np.float64]:
        pass

    @staticmethod
    def _evaluate(kernel, *coords: ArrayLike) -> NoiseValue:
        scalar = all(np.ndim(c) == 0 for c in coords)
        arrays = np.broadcast_arrays(*(np.asarray(c, dtype=np.float64) for c in coords))
        # NaN and inf coordinates produce garbage lattice indices when cast to
        # int; their fractional part is NaN, so the result is NaN regardless.
        with np.errstate(invalid="ignore", over="ignore"):
            result = kernel(*arrays)
        if scalar:
            return float(result)
        return result


def split_lattice(coord: NDArray[np.float64]) -> tuple[NDArray[np.int64], NDArray[np.float64]]:
    """Split coordinates into integer lattice index and fractional offset."""
    floor = np.floor(coord)
    return floor.astype(np.int64), coord - floor

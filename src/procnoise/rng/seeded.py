"""Seeded linear congruential generator and the distributions built on it."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from typing import TypeVar

import numpy as np

logger = logging.getLogger(__name__)

T = TypeVar("T")

MULTIPLIER = 1664525
INCREMENT = 1013904223
MODULUS = 2**32


class EmptySequenceError(ValueError):
    """Raised when a value is requested from an empty collection."""


def entropy_seed() -> int:
    """Draw a non-reproducible 32-bit seed from operating system entropy."""
    return int(np.random.SeedSequence().generate_state(1)[0])


class SeededRandom:
    """Deterministic uniform random stream.

    Each draw advances ``state = (state * 1664525 + 1013904223) mod 2**32``
    and returns ``state / 2**32``, so a given seed always reproduces the
    same sequence.

    The state mutates on every call. An instance must not be shared
    between threads without external locking; give each consumer its own.

    Attributes:
        seed: The seed the generator was created or last reseeded with.
            When constructed without a seed this holds the entropy-derived
            value, so the run can be replayed.
    """

    def __init__(self, seed: int | None = None) -> None:
        if seed is None:
            seed = entropy_seed()
            logger.debug("SeededRandom using entropy seed %d", seed)
        self.reseed(seed)

    @property
    def state(self) -> int:
        """Current internal state."""
        return self._state

    def reseed(self, value: int) -> None:
        """Reset the stream to start from value.

        Also discards any cached Gaussian deviate so the sequence after a
        reseed matches a freshly constructed generator.
        """
        self.seed = int(value)
        self._state = self.seed % MODULUS
        self._has_next_gaussian = False
        self._next_gaussian = 0.0

    def next(self) -> float:
        """Advance the stream and return a float in [0, 1)."""
        self._state = (self._state * MULTIPLIER + INCREMENT) % MODULUS
        return self._state / MODULUS

    def int(self, min: int, max: int) -> int:
        """Integer in the inclusive range [min, max]."""
        return math.floor(self.next() * (max - min + 1)) + min

    def float(self, min: float, max: float) -> float:
        """Float in the range [min, max)."""
        return self.next() * (max - min) + min

    def bool(self) -> bool:
        return self.next() > 0.5

    def sign(self) -> int:
        """Either 1 or -1."""
        return 1 if self.bool() else -1

    def angle(self) -> float:
        """Angle in radians in [0, 2*pi)."""
        return self.float(0.0, 2 * math.pi)

    def choice(self, items: Sequence[T]) -> T:
        """Pick one element uniformly.

        Raises:
            EmptySequenceError: If items is empty
        """
        if len(items) == 0:
            raise EmptySequenceError("Cannot choose from an empty sequence")
        return items[self.int(0, len(items) - 1)]

    def gaussian(self, mean: float = 0.0, stddev: float = 1.0) -> float:
        """Normally distributed sample using the Box-Muller transform.

        Each pair of uniform draws yields two deviates; the second one is
        cached and returned by the following call.
        """
        if self._has_next_gaussian:
            self._has_next_gaussian = False
            return self._next_gaussian * stddev + mean

        u = self.next()
        v = self.next()
        # next() can return exactly 0; log(0) is undefined
        radius = math.sqrt(-2.0 * math.log(u if u > 0.0 else 1.0 / MODULUS))
        z0 = radius * math.cos(2 * math.pi * v)
        z1 = radius * math.sin(2 * math.pi * v)

        self._next_gaussian = z1
        self._has_next_gaussian = True
        return z0 * stddev + mean

    def in_circle(self) -> tuple[float, float]:
        """Uniformly distributed point inside the unit disk."""
        angle = self.angle()
        radius = math.sqrt(self.next())
        return (math.cos(angle) * radius, math.sin(angle) * radius)

    def on_circle(self) -> tuple[float, float]:
        """Unit vector with a uniformly distributed angle."""
        angle = self.angle()
        return (math.cos(angle), math.sin(angle))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(seed={self.seed})"

"""Sampling helpers built on a caller-owned SeededRandom."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

import numpy as np
from numpy.typing import NDArray

from .seeded import EmptySequenceError, SeededRandom

T = TypeVar("T")


def _check_weights(choices: Sequence[T], weights: Sequence[float]) -> None:
    if len(choices) != len(weights):
        raise ValueError(
            f"Choices and weights must have the same length ({len(choices)} != {len(weights)})"
        )
    if len(choices) == 0:
        raise EmptySequenceError("Cannot choose from an empty sequence")
    if any(w < 0 for w in weights):
        raise ValueError("Weights must be non-negative")


def weighted_choice(rng: SeededRandom, choices: Sequence[T], weights: Sequence[float]) -> T:
    """Pick one element with probability proportional to its weight.

    Args:
        rng: Random source
        choices: Candidate elements
        weights: Non-negative weight per element

    Returns:
        The selected element

    Raises:
        ValueError: If lengths differ or a weight is negative
        EmptySequenceError: If choices is empty
    """
    _check_weights(choices, weights)

    target = rng.next() * sum(weights)
    cumulative = 0.0
    for item, weight in zip(choices, weights):
        cumulative += weight
        if target <= cumulative:
            return item

    # Only reachable through float rounding in the cumulative sum
    return choices[-1]


def shuffle(rng: SeededRandom, items: Sequence[T]) -> list[T]:
    """Return a shuffled copy of items (Fisher-Yates)."""
    shuffled = list(items)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.int(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def sample(rng: SeededRandom, items: Sequence[T], count: int) -> list[T]:
    """Pick count elements from distinct positions, in draw order.

    A count of zero or less gives an empty list; a count covering the whole
    sequence gives a copy of it.

    Raises:
        EmptySequenceError: If items is empty
    """
    if len(items) == 0:
        raise EmptySequenceError("Cannot sample from an empty sequence")
    if count <= 0:
        return []
    if count >= len(items):
        return list(items)

    result: list[T] = []
    used: set[int] = set()
    while len(result) < count:
        index = rng.int(0, len(items) - 1)
        if index not in used:
            used.add(index)
            result.append(items[index])
    return result


def sample_weighted(
    rng: SeededRandom,
    items: Sequence[T],
    weights: Sequence[float],
    count: int,
) -> list[T]:
    """Draw count independent weighted choices (with replacement)."""
    _check_weights(items, weights)
    return [weighted_choice(rng, items, weights) for _ in range(count)]


def random_color(rng: SeededRandom) -> tuple[int, int, int]:
    """Random RGB colour with each channel in 0-255."""
    return (rng.int(0, 255), rng.int(0, 255), rng.int(0, 255))


def random_color_hsl(
    rng: SeededRandom,
    hue: tuple[float, float] = (0.0, 360.0),
    saturation: tuple[float, float] = (0.0, 100.0),
    lightness: tuple[float, float] = (0.0, 100.0),
) -> tuple[float, float, float]:
    """Random HSL colour with each component drawn from its range."""
    return (
        rng.float(*hue),
        rng.float(*saturation),
        rng.float(*lightness),
    )


def random_distribution(rng: SeededRandom, count: int, min: float, max: float) -> list[float]:
    """List of count uniform floats in [min, max)."""
    return [rng.float(min, max) for _ in range(count)]


def random_walk(
    rng: SeededRandom,
    steps: int,
    step_size: float = 1.0,
    dimensions: int = 2,
) -> NDArray[np.float64]:
    """Random walk starting at the origin.

    Each step moves every axis by a uniform offset in [-step_size, step_size).

    Returns:
        Array of shape (steps + 1, dimensions); row 0 is the origin
    """
    offsets = np.zeros((steps + 1, dimensions), dtype=np.float64)
    for i in range(1, steps + 1):
        for d in range(dimensions):
            offsets[i, d] = (rng.next() - 0.5) * step_size * 2
    return np.cumsum(offsets, axis=0)

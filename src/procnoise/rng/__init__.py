"""Seeded random number generation."""

from .seeded import SeededRandom, EmptySequenceError, entropy_seed
from .sampling import (
    weighted_choice,
    shuffle,
    sample,
    sample_weighted,
    random_color,
    random_color_hsl,
    random_distribution,
    random_walk,
)

__all__ = [
    "SeededRandom",
    "EmptySequenceError",
    "entropy_seed",
    "weighted_choice",
    "shuffle",
    "sample",
    "sample_weighted",
    "random_color",
    "random_color_hsl",
    "random_distribution",
    "random_walk",
]

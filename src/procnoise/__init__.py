"""procnoise - seeded random numbers and coherent noise for procedural generation."""

from .rng import SeededRandom, EmptySequenceError
from .noise import NoiseGenerator, ValueNoise, PerlinNoise, FractalNoise, TurbulenceNoise, noise_field
from .images import field_to_image
from .presets import NoisePreset, PresetLoader

__all__ = [
    "SeededRandom",
    "EmptySequenceError",
    "NoiseGenerator",
    "ValueNoise",
    "PerlinNoise",
    "FractalNoise",
    "TurbulenceNoise",
    "noise_field",
    "field_to_image",
    "NoisePreset",
    "PresetLoader",
]

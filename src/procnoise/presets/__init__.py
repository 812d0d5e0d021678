"""Noise presets loaded from YAML."""

from .preset import NoisePreset, NOISE_GENERATORS, FRACTAL_MODES
from .loader import PresetLoader, default_presets_dir

__all__ = ["NoisePreset", "NOISE_GENERATORS", "FRACTAL_MODES", "PresetLoader", "default_presets_dir"]

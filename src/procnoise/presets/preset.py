"""Noise preset: a reproducible recipe for a noise field or image."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import numpy as np
from numpy.typing import NDArray
from PIL import Image

from ..core.color import RGB
from ..images import field_to_image
from ..noise import FractalNoise, NoiseGenerator, PerlinNoise, TurbulenceNoise, ValueNoise, noise_field

# Registry of base noise types
NOISE_GENERATORS = {
    "perlin": PerlinNoise,
    "value": ValueNoise,
}

# Registry of fractal modes; None means the base generator is used directly
FRACTAL_MODES = {
    "none": None,
    "fbm": FractalNoise,
    "turbulence": TurbulenceNoise,
}


@dataclass
class NoisePreset:
    """Noise recipe with output size and colouring.

    Attributes:
        name: Preset identifier
        noise_type: Base generator, a key of NOISE_GENERATORS
        seed: Seed for generators that take one (None = entropy)
        fractal: Fractal mode, a key of FRACTAL_MODES
        octaves: Number of fractal octaves
        persistence: Amplitude multiplier per octave
        lacunarity: Frequency multiplier per octave
        size: Output (width, height) in pixels
        scale: Noise scale (higher = more zoomed out)
        offset: (x, y) offset in noise space
        z: Optional 3D slice; None samples 2D noise
        colors: Optional (low, high) RGB gradient; grayscale if None
    """

    name: str
    noise_type: str = "perlin"
    seed: int | None = None
    fractal: str = "fbm"
    octaves: int = 4
    persistence: float = 0.5
    lacunarity: float = 2.0
    size: tuple[int, int] = (256, 256)
    scale: float = 4.0
    offset: tuple[float, float] = (0.0, 0.0)
    z: float | None = None
    colors: tuple[RGB, RGB] | None = None

    # Cached generator
    _generator: NoiseGenerator | None = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.noise_type not in NOISE_GENERATORS:
            raise ValueError(f"Unknown noise type: {self.noise_type}")
        if self.fractal not in FRACTAL_MODES:
            raise ValueError(f"Unknown fractal mode: {self.fractal}")
        if self.octaves < 1:
            raise ValueError(f"octaves must be at least 1, got {self.octaves}")
        if len(self.size) != 2 or min(self.size) <= 0:
            raise ValueError(f"Size must be two positive integers, got {self.size}")

    def build_generator(self) -> NoiseGenerator:
        """Create or return the cached generator for this preset."""
        if self._generator is None:
            if self.noise_type == "perlin":
                base: NoiseGenerator = PerlinNoise(self.seed)
            else:
                base = NOISE_GENERATORS[self.noise_type]()

            composer = FRACTAL_MODES[self.fractal]
            if composer is None:
                self._generator = base
            else:
                self._generator = composer(
                    base,
                    octaves=self.octaves,
                    persistence=self.persistence,
                    lacunarity=self.lacunarity,
                )
        return self._generator

    def generate(self) -> NDArray[np.float64]:
        """Sample the noise field.

        Returns:
            2D array of shape (height, width)
        """
        width, height = self.size
        return noise_field(
            self.build_generator(),
            width,
            height,
            scale=self.scale,
            offset=self.offset,
            z=self.z,
        )

    def render(self) -> Image.Image:
        """Render the noise field to an image.

        Returns:
            PIL Image in L mode, or RGB mode when colors are set
        """
        return field_to_image(self.generate(), colors=self.colors)

    def save(self, path: str | Path) -> None:
        """Render and save to file.

        Args:
            path: Output file path (e.g., 'clouds.png')
        """
        self.render().save(str(path))

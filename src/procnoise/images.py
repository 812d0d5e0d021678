"""Convert noise fields to images."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray
from PIL import Image

from .core.color import RGB
from .core.mathutils import clamp, inverse_lerp


def normalize_field(
    field: NDArray[np.float64],
    low: float | None = None,
    high: float | None = None,
) -> NDArray[np.float64]:
    """Map field values into [0, 1].

    Args:
        field: 2D array of noise values
        low: Value mapped to 0 (defaults to the field minimum)
        high: Value mapped to 1 (defaults to the field maximum)

    Returns:
        Array of the same shape, clipped to [0, 1]. A field with no range
        (low == high) maps to 0.5 everywhere.
    """
    field = np.asarray(field, dtype=np.float64)
    low = float(np.nanmin(field)) if low is None else low
    high = float(np.nanmax(field)) if high is None else high
    if high == low:
        return np.full_like(field, 0.5)
    return clamp(inverse_lerp(low, high, field), 0.0, 1.0)


def field_to_image(
    field: NDArray[np.float64],
    colors: tuple[RGB, RGB] | None = None,
    low: float | None = None,
    high: float | None = None,
) -> Image.Image:
    """Render a noise field as an image.

    Args:
        field: 2D array of noise values
        colors: Optional (low_color, high_color) gradient; grayscale if None
        low: Field value drawn as the low colour (default: field minimum)
        high: Field value drawn as the high colour (default: field maximum)

    Returns:
        PIL Image in L mode (grayscale) or RGB mode (gradient)
    """
    t = np.nan_to_num(normalize_field(field, low, high), nan=0.0)

    if colors is None:
        return Image.fromarray((t * 255).round().astype(np.uint8))

    start = np.array(colors[0], dtype=np.float64)
    end = np.array(colors[1], dtype=np.float64)
    rgb = start + t[..., np.newaxis] * (end - start)
    return Image.fromarray(np.clip(rgb.round(), 0, 255).astype(np.uint8))

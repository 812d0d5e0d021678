"""Core math and colour helpers."""

from .mathutils import lerp, inverse_lerp, clamp, map_range, smooth, smoothstep, fade
from . import color

__all__ = [
    "lerp",
    "inverse_lerp",
    "clamp",
    "map_range",
    "smooth",
    "smoothstep",
    "fade",
    "color",
]

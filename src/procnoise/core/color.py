"""Colour conversions used by presets and image rendering.

Colours are plain tuples: RGB as (r, g, b) ints in 0-255, HSL as
(h, s, l) with hue in degrees and saturation/lightness in percent.
"""

from __future__ import annotations

import string

RGB = tuple[int, int, int]
HSL = tuple[float, float, float]


def _channel(value: float) -> int:
    return int(min(max(round(value), 0), 255))


def rgb_to_hsl(color: RGB) -> HSL:
    """Convert an RGB colour to HSL."""
    r, g, b = (c / 255 for c in color)
    high = max(r, g, b)
    low = min(r, g, b)
    delta = high - low
    lightness = (high + low) / 2

    if delta == 0:
        return (0.0, 0.0, lightness * 100)

    if lightness > 0.5:
        saturation = delta / (2 - high - low)
    else:
        saturation = delta / (high + low)

    if high == r:
        hue = ((g - b) / delta + (6 if g < b else 0)) / 6
    elif high == g:
        hue = ((b - r) / delta + 2) / 6
    else:
        hue = ((r - g) / delta + 4) / 6

    return (hue * 360, saturation * 100, lightness * 100)


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(color: HSL) -> RGB:
    """Convert an HSL colour to RGB.

    Hue wraps around 360; saturation and lightness are clamped to 0-100.
    """
    h = (color[0] % 360) / 360
    s = min(max(color[1], 0.0), 100.0) / 100
    l = min(max(color[2], 0.0), 100.0) / 100

    if s == 0:
        gray = _channel(l * 255)
        return (gray, gray, gray)

    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q
    return (
        _channel(_hue_to_rgb(p, q, h + 1 / 3) * 255),
        _channel(_hue_to_rgb(p, q, h) * 255),
        _channel(_hue_to_rgb(p, q, h - 1 / 3) * 255),
    )


def hex_to_rgb(value: str) -> RGB:
    """Parse '#rrggbb' or '#rgb' (leading '#' optional).

    Raises:
        ValueError: If the string is not a 3 or 6 digit hex colour
    """
    digits = value.lstrip("#")
    if len(digits) not in (3, 6) or any(c not in string.hexdigits for c in digits):
        raise ValueError(f"Invalid hex colour: {value!r}")
    number = int(digits, 16)
    if len(digits) == 3:
        return ((number >> 8 & 15) * 17, (number >> 4 & 15) * 17, (number & 15) * 17)
    return (number >> 16 & 255, number >> 8 & 255, number & 255)


def rgb_to_hex(color: RGB) -> str:
    """Format an RGB colour as '#rrggbb'."""
    return "#" + "".join(f"{_channel(c):02x}" for c in color)


def color_lerp(a: RGB, b: RGB, t: float) -> RGB:
    """Interpolate between two RGB colours, rounding each channel."""
    return (
        _channel(a[0] + (b[0] - a[0]) * t),
        _channel(a[1] + (b[1] - a[1]) * t),
        _channel(a[2] + (b[2] - a[2]) * t),
    )

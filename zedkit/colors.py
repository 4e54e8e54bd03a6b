"""Colour helpers that return packed 0xRRGGBB integers."""

from __future__ import annotations

import math

_BAND_WIDTH = 60.0
# For each 60-degree band: which of (max, min, dying, growing) feeds R, G and B.
_BAND_MAP = ((0, 3, 1), (2, 0, 1), (1, 0, 3), (1, 2, 0), (3, 1, 0), (0, 1, 2))

_TEAL = (
    0x006400,
    0x228B22,
    0x32CD32,
    0x00FA9A,
    0x40E0D0,
    0x48D1CC,
    0x20B2AA,
)

_GRADIENT_STEPS = 1881.0
_TRIPPY = -3.52


def _pack(r: int, g: int, b: int) -> int:
    return ((r << 16) | (g << 8) | b) & 0xFFFFFFFF


def hsv_to_rgb(hue: float, sat: float, val: float) -> int:
    """Convert hue (degrees), saturation and value (0..1) to a 0xRRGGBB colour.

    The hue is reduced modulo 360; a hue that stays negative is rejected.
    """
    hue = math.fmod(hue, 360.0)
    band = int(hue / _BAND_WIDTH)
    if not 0 <= band < len(_BAND_MAP) or hue < 0:
        raise ValueError(f"hue out of range: {hue}")
    progress = hue / _BAND_WIDTH - band
    max_rgb = val
    rgb_range = sat * max_rgb
    min_rgb = max_rgb - rgb_range
    dying = min_rgb + rgb_range * (1 - progress)
    growing = min_rgb + rgb_range * progress
    values = (max_rgb, min_rgb, dying, growing)
    r, g, b = (int(values[idx] * 255) for idx in _BAND_MAP[band])
    return _pack(r, g, b)


def _sine_gradient(iteration: int, angle: float, phase: float) -> int:
    t = iteration / _GRADIENT_STEPS
    base = t * angle * 2
    r = int(math.sin(base) * 127 + 128)
    g = int(math.sin(base + 2 * phase / 3) * 127 + 128)
    b = int(math.sin(base + 4 * phase / 3) * 127 + 128)
    return _pack(r, g, b)


def rainbow_gradient(iteration: int) -> int:
    """Colour of a rainbow cycle of 1881 steps at the given step."""
    return _sine_gradient(iteration, math.pi, math.pi)


def teal_palette(iteration: int) -> int:
    """Colour from a seven-entry palette of greens and teals, cycling with the step."""
    return _TEAL[iteration % len(_TEAL)]


def trippy_gradient(iteration: int) -> int:
    """Colour of a sine gradient driven by a fixed negative frequency."""
    return _sine_gradient(iteration, _TRIPPY, _TRIPPY)
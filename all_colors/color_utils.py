"""Colour types, hue conversion and colour distances."""

from __future__ import annotations

from typing import NamedTuple

import numpy as np
from skimage.color import rgb2lab

COLOR_SPACES = ("rgb", "lab")


class Color(NamedTuple):
    """An 8-bit RGB colour."""

    r: int
    g: int
    b: int


# Marks a canvas cell that has not been painted yet.
UNSET = Color(0, 0, 0)


def rgb_to_hsv(color: Color | tuple[int, int, int]) -> tuple[float, float, float]:
    """Convert an 8-bit RGB colour to ``(hue, saturation, value)``.

    Hue is in degrees ``[0, 360)``, saturation and value in ``[0, 1]``.
    Greys (zero channel span) map to ``(0, 0, 0)``.
    """
    r, g, b = (c / 255.0 for c in color)
    v = max(r, g, b)
    span = v - min(r, g, b)
    if span == 0:
        return 0.0, 0.0, 0.0
    s = span / v
    if v == r:
        h = 60 * (g - b) / span
    elif v == g:
        h = 120 + 60 * (b - r) / span
    else:
        h = 240 + 60 * (r - g) / span
    if h < 0:
        h += 360
    return h, s, v


def hue_of(colors: np.ndarray) -> np.ndarray:
    """Vectorised hue in degrees for an (N, 3) uint8 RGB array.

    Uses the same branch order as :func:`rgb_to_hsv` so both agree exactly.
    """
    rgb = colors.astype(np.float64) / 255.0
    r, g, b = rgb[:, 0], rgb[:, 1], rgb[:, 2]
    v = rgb.max(axis=1)
    span = v - rgb.min(axis=1)
    safe = np.where(span == 0, 1.0, span)

    h = np.where(
        v == r,
        60 * (g - b) / safe,
        np.where(v == g, 120 + 60 * (b - r) / safe, 240 + 60 * (r - g) / safe),
    )
    h = np.where(h < 0, h + 360, h)
    return np.where(span == 0, 0.0, h)


def rgb_to_lab(rgb: np.ndarray) -> np.ndarray:
    """Convert (..., 3) uint8 RGB → (..., 3) float64 CIELAB."""
    shape = rgb.shape
    lab = rgb2lab(rgb.astype(np.float64).reshape(1, -1, 3) / 255.0)
    return lab.reshape(shape)


def to_working_space(rgb: np.ndarray, color_space: str = "rgb") -> np.ndarray:
    """Map RGB values into the space colour distances are measured in."""
    if color_space == "lab":
        return rgb_to_lab(rgb)
    if color_space == "rgb":
        return rgb.astype(np.float64)
    msg = f"Unknown colour space '{color_space}'. Available: {', '.join(COLOR_SPACES)}"
    raise ValueError(msg)


def color_distance(a: Color, b: Color, color_space: str = "rgb") -> float:
    """Euclidean distance between two colours."""
    pair = to_working_space(np.array([a, b], dtype=np.uint8), color_space)
    return float(np.sqrt(np.sum((pair[0] - pair[1]) ** 2)))

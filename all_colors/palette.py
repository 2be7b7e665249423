"""Palette generation: a coarse grid over the colour cube, ordered by hue."""

from __future__ import annotations

import logging

import numpy as np

from all_colors.color_utils import UNSET, Color, hue_of

logger = logging.getLogger(__name__)


def palette_size(levels: int = 64) -> int:
    """Number of colours :func:`generate_grid` produces for *levels*."""
    fine = 2 * levels - 1
    return fine * fine * (levels - 1)


def generate_grid(levels: int = 64) -> np.ndarray:
    """Enumerate the colour grid in generation order.

    Blue takes ``levels - 1`` values, red and green twice as many at half
    the step. Zero is skipped in every channel, so no colour equals
    :data:`UNSET`.

    Args:
        levels: Power of two in ``[2, 128]``.

    Returns:
        (N, 3) uint8 RGB array, blue-major.
    """
    if not 2 <= levels <= 128 or levels & (levels - 1):
        msg = f"levels must be a power of two in [2, 128], got {levels}"
        raise ValueError(msg)

    step = 256 // levels
    coarse = step * np.arange(1, levels)
    fine = (step * np.arange(1, 2 * levels)) // 2

    b, g, r = np.meshgrid(coarse, fine, fine, indexing="ij")
    return np.stack([r.ravel(), g.ravel(), b.ravel()], axis=1).astype(np.uint8)


def build_palette(levels: int, rng: np.random.Generator) -> Palette:
    """Build the ordered palette for a run.

    The grid is permuted with *rng*, then stably sorted by hue, so colours
    of equal hue keep a random but reproducible order. *rng* is the run's
    shared generator and is advanced here.
    """
    colors = generate_grid(levels)
    colors = colors[rng.permutation(len(colors))]
    order = np.argsort(hue_of(colors), kind="stable")
    logger.debug("Palette built: %d colours (levels=%d)", len(colors), levels)
    return Palette(colors[order])


class Palette:
    """Consumable colour sequence, drained from its end.

    The colour popped first is the last one of *colors*.
    """

    def __init__(self, colors: np.ndarray | list[tuple[int, int, int]]) -> None:
        arr = np.array(colors, dtype=np.uint8).reshape(-1, 3)
        if np.any(np.all(arr == UNSET, axis=1)):
            msg = "Palette must not contain the unset colour (0, 0, 0)"
            raise ValueError(msg)
        self._colors = arr
        self._size = len(arr)

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def peek(self) -> Color:
        """The colour the next :meth:`pop` returns."""
        if self._size == 0:
            msg = "peek from an empty palette"
            raise IndexError(msg)
        return Color(*(int(c) for c in self._colors[self._size - 1]))

    def pop(self) -> Color:
        color = self.peek()
        self._size -= 1
        return color

    def remaining(self) -> np.ndarray:
        """Read-only (N, 3) view of the colours not yet consumed."""
        view = self._colors[: self._size]
        view.flags.writeable = False
        return view

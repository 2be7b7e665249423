"""The growing image: a fixed-size grid of write-once pixels."""

from __future__ import annotations

from typing import NamedTuple

import numpy as np

from all_colors.color_utils import UNSET, Color


class Position(NamedTuple):
    """A grid cell, ordered by column then row."""

    column: int
    row: int


class Canvas:
    """W x H grid of colours, every cell starting as :data:`UNSET`.

    A painted cell is never repainted. ``pixels`` is stored row-major as
    (H, W, 3) uint8, the layout PIL and the snapshot sink expect.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            msg = f"Canvas size must be positive, got {width}x{height}"
            raise ValueError(msg)
        self.width = width
        self.height = height
        self._pixels = np.zeros((height, width, 3), dtype=np.uint8)
        # Mirrors ``pixels != UNSET``; kept separately for fast masking.
        self._filled = np.zeros((height, width), dtype=bool)
        self._painted = 0

    def __repr__(self) -> str:
        return f"Canvas({self.width}x{self.height}, painted={self._painted})"

    @property
    def painted(self) -> int:
        return self._painted

    @property
    def size(self) -> int:
        return self.width * self.height

    def in_bounds(self, pos: tuple[int, int]) -> bool:
        x, y = pos
        return 0 <= x < self.width and 0 <= y < self.height

    def _check(self, pos: tuple[int, int]) -> None:
        if not self.in_bounds(pos):
            msg = f"Position {tuple(pos)} outside {self.width}x{self.height} canvas"
            raise IndexError(msg)

    def get(self, pos: tuple[int, int]) -> Color:
        self._check(pos)
        x, y = pos
        return Color(*(int(c) for c in self._pixels[y, x]))

    def is_unset(self, pos: tuple[int, int]) -> bool:
        self._check(pos)
        x, y = pos
        return not self._filled[y, x]

    def set(self, pos: tuple[int, int], color: tuple[int, int, int]) -> None:
        """Paint an unset cell. Repainting or painting :data:`UNSET` is an error."""
        self._check(pos)
        if tuple(color) == UNSET:
            msg = f"Cannot paint the unset colour at {tuple(pos)}"
            raise ValueError(msg)
        x, y = pos
        if self._filled[y, x]:
            msg = f"Position {tuple(pos)} is already painted"
            raise ValueError(msg)
        self._pixels[y, x] = color
        self._filled[y, x] = True
        self._painted += 1

    def pixels(self) -> np.ndarray:
        """Read-only (H, W, 3) view; unset cells are (0, 0, 0)."""
        view = self._pixels.view()
        view.flags.writeable = False
        return view

    def filled_mask(self) -> np.ndarray:
        """Read-only (H, W) bool view, True where a colour was placed."""
        view = self._filled.view()
        view.flags.writeable = False
        return view

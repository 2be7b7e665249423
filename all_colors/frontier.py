"""Open border positions: unset cells next to the growing region."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

import numpy as np

from all_colors.canvas import Canvas, Position


class Frontier:
    """Deduplicating, insertion-ordered set of placeable positions.

    Every member is in-bounds and still unset on *canvas*. Batches are
    inserted in sorted order so iteration order depends only on the
    sequence of operations, never on hashing.
    """

    def __init__(self, canvas: Canvas, spread: int = 1) -> None:
        if spread < 1:
            msg = f"spread must be >= 1, got {spread}"
            raise ValueError(msg)
        self.canvas = canvas
        self.spread = spread
        self._positions: dict[Position, None] = {}

    def __len__(self) -> int:
        return len(self._positions)

    def __contains__(self, pos: object) -> bool:
        return pos in self._positions

    def __iter__(self) -> Iterator[Position]:
        return iter(self._positions)

    def is_empty(self) -> bool:
        return not self._positions

    def neighbors_of(self, pos: tuple[int, int]) -> set[Position]:
        """Unset in-bounds cells within Chebyshev distance ``spread`` of *pos*.

        The block includes *pos* itself; once painted it filters itself out.
        """
        x, y = pos
        s = self.spread
        canvas = self.canvas
        result = set()
        for nx in range(x - s, x + s + 1):
            for ny in range(y - s, y + s + 1):
                cell = Position(nx, ny)
                if canvas.in_bounds(cell) and canvas.is_unset(cell):
                    result.add(cell)
        return result

    def add_all(self, positions: Iterable[tuple[int, int]]) -> None:
        for pos in sorted(Position(*p) for p in positions):
            self._positions.setdefault(pos, None)

    def remove(self, pos: tuple[int, int]) -> None:
        """Drop *pos*; raises ``KeyError`` if it is not a member."""
        del self._positions[Position(*pos)]

    def seed(self, positions: Iterable[tuple[int, int]]) -> None:
        """Insert the neighbour expansion of every seed position."""
        expanded: set[Position] = set()
        for pos in positions:
            expanded |= self.neighbors_of(pos)
        self.add_all(expanded)

    def as_array(self) -> np.ndarray:
        """(N, 2) int array of ``(column, row)`` in iteration order."""
        if not self._positions:
            return np.empty((0, 2), dtype=np.intp)
        return np.array(list(self._positions), dtype=np.intp)

"""Local colour-compatibility cost of a colour at a canvas position."""

from __future__ import annotations

import numpy as np

from all_colors.canvas import Canvas
from all_colors.color_utils import COLOR_SPACES, Color, to_working_space


class Scorer:
    """Average distance to the painted neighbours, over the neighbour count.

    For a position with ``n`` painted cells within Chebyshev distance
    ``spread``::

        cost = sum(distance(color, neighbour)) / max(n, 1) ** 2

    Dividing by the count squared favours positions with broad support and
    keeps growth from running out in thin, coral-like tendrils. It also
    keeps the frontier smaller. Lower is better.

    The scorer only reads *canvas*.
    """

    def __init__(
        self, canvas: Canvas, spread: int = 1, color_space: str = "rgb",
    ) -> None:
        if color_space not in COLOR_SPACES:
            msg = f"Unknown colour space '{color_space}'. Available: {', '.join(COLOR_SPACES)}"
            raise ValueError(msg)
        self.canvas = canvas
        self.spread = spread
        self.color_space = color_space
        r = np.arange(-spread, spread + 1)
        dx, dy = np.meshgrid(r, r, indexing="ij")
        self._offsets = np.stack([dx.ravel(), dy.ravel()], axis=1)

    def cost(self, pos: tuple[int, int], color: Color) -> float:
        """Cost of placing *color* at *pos*."""
        canvas = self.canvas
        pixels = canvas.pixels()
        filled = canvas.filled_mask()
        x, y = pos
        neighbours = []
        for dx, dy in self._offsets:
            nx, ny = x + int(dx), y + int(dy)
            if not canvas.in_bounds((nx, ny)) or not filled[ny, nx]:
                continue
            neighbours.append(pixels[ny, nx])
        if not neighbours:
            return 0.0

        ws = to_working_space(np.array([color, *neighbours], dtype=np.uint8), self.color_space)
        diff = 0.0
        for n in ws[1:]:
            diff += float(np.sqrt(np.sum((ws[0] - n) ** 2)))
        divisor = max(len(neighbours), 1)
        return diff / (divisor * divisor)

    def costs(self, positions: np.ndarray, color: Color) -> np.ndarray:
        """Vectorised :meth:`cost` for an (N, 2) array of ``(column, row)``.

        Returns:
            (N,) float64 costs, aligned with *positions*.
        """
        n = len(positions)
        if n == 0:
            return np.empty(0, dtype=np.float64)
        canvas = self.canvas

        # (N, K, 2) neighbour coordinates
        nb = positions[:, np.newaxis, :] + self._offsets[np.newaxis, :, :]
        nx, ny = nb[..., 0], nb[..., 1]
        inside = (nx >= 0) & (nx < canvas.width) & (ny >= 0) & (ny < canvas.height)
        cx = np.clip(nx, 0, canvas.width - 1)
        cy = np.clip(ny, 0, canvas.height - 1)
        valid = inside & canvas.filled_mask()[cy, cx]

        target = to_working_space(np.array([color], dtype=np.uint8), self.color_space)[0]
        colors = canvas.pixels()[cy, cx]
        if self.color_space == "lab":
            # Only convert what is actually painted.
            work = np.zeros(colors.shape, dtype=np.float64)
            if valid.any():
                work[valid] = to_working_space(colors[valid], "lab")
        else:
            work = colors.astype(np.float64)

        dist = np.sqrt(np.sum((work - target) ** 2, axis=-1))
        diff = np.where(valid, dist, 0.0).sum(axis=1)
        divisor = np.maximum(valid.sum(axis=1), 1).astype(np.float64)
        return diff / (divisor * divisor)

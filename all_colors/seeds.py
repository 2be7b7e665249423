"""Seed providers: where growth starts."""

from __future__ import annotations

from pathlib import Path

import numpy as np
from PIL import Image

from all_colors.canvas import Position

# Anchor points as (x, y) fractions of the canvas, by seed count.
SEED_PRESETS: dict[int, list[tuple[float, float]]] = {
    2: [(0.33, 0.5), (0.67, 0.5)],
    3: [(0.33, 0.4), (0.67, 0.4), (0.50, 0.69)],
    4: [(0.33, 0.36), (0.67, 0.36), (0.36, 0.64), (0.64, 0.64)],
}


def preset_seeds(
    count: int, width: int, height: int, arm: int = 5,
) -> list[Position]:
    """Plus-shaped seeds around the anchor points of a preset.

    Each anchor grows arms of *arm* pixels in the four axis directions.
    Cells outside the canvas are dropped and overlaps merged.

    Returns:
        Sorted, distinct positions.
    """
    anchors = SEED_PRESETS.get(count)
    if anchors is None:
        available = ", ".join(str(k) for k in sorted(SEED_PRESETS))
        msg = f"Unknown seed preset {count}. Available: {available}"
        raise ValueError(msg)

    cells: set[Position] = set()
    for fx, fy in anchors:
        x, y = int(fx * width), int(fy * height)
        for d in range(-arm, arm + 1):
            cells.add(Position(x + d, y))
            cells.add(Position(x, y + d))
    return sorted(
        p for p in cells if 0 <= p.column < width and 0 <= p.row < height
    )


def centre_seed(width: int, height: int) -> list[Position]:
    return [Position(width // 2, height // 2)]


def seeds_from_image(path: str | Path) -> tuple[int, int, list[Position]]:
    """Use every non-black pixel of a greyscale seed image as a seed.

    Returns:
        ``(width, height, positions)``; the canvas takes the image size.
    """
    img = Image.open(path).convert("L")
    mask = np.array(img, dtype=np.uint8) > 0
    rows, cols = np.nonzero(mask)
    positions = sorted(Position(int(x), int(y)) for x, y in zip(cols, rows, strict=True))
    return img.width, img.height, positions

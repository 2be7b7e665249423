"""Snapshot saving and the cosmetic gap-filling filter."""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
from PIL import Image
from scipy import ndimage

from all_colors.engine import SnapshotInfo

logger = logging.getLogger(__name__)


def embellish(pixels: np.ndarray) -> np.ndarray:
    """Soften the unpainted gaps of a frame.

    The canvas is dilated and median-filtered (3 x 3, per channel); the
    result fills only unset cells, at half strength. Painted cells keep
    their exact colour.

    Args:
        pixels: (H, W, 3) uint8 canvas, unset cells are (0, 0, 0).

    Returns:
        (H, W, 3) uint8 frame.
    """
    filtered = ndimage.grey_dilation(pixels, size=(3, 3, 1))
    filtered = ndimage.median_filter(filtered, size=(3, 3, 1))

    unset = ~pixels.any(axis=2)
    gaps = filtered.astype(np.float64) * unset[..., np.newaxis]
    mixed = pixels.astype(np.float64) + 0.5 * gaps
    return np.clip(np.rint(mixed), 0, 255).astype(np.uint8)


def save_upscaled(
    array: np.ndarray,
    path: str | Path,
    pixel_upscale: int = 1,
) -> None:
    """Save an array as a nearest-neighbour-upscaled image."""
    img = Image.fromarray(array.astype(np.uint8))
    if pixel_upscale != 1:
        h, w = array.shape[:2]
        img = img.resize((w * pixel_upscale, h * pixel_upscale), Image.NEAREST)
    img.save(path)


class SnapshotWriter:
    """Snapshot sink writing numbered frames to *output_dir*.

    Frames are named ``image0001.png``, ``image0002.png``, ...
    """

    def __init__(
        self,
        output_dir: str | Path,
        embellished: bool = True,
        output_format: str = "png",
        pixel_upscale: int = 1,
        prefix: str = "image",
    ) -> None:
        self.output_dir = Path(output_dir)
        self.embellished = embellished
        self.output_format = output_format
        self.pixel_upscale = pixel_upscale
        self.prefix = prefix
        self.written: list[Path] = []
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def path_for(self, index: int) -> Path:
        return self.output_dir / f"{self.prefix}{index:04d}.{self.output_format}"

    def __call__(self, pixels: np.ndarray, info: SnapshotInfo) -> None:
        frame = embellish(pixels) if self.embellished else np.array(pixels)
        path = self.path_for(info.index)
        save_upscaled(frame, path, self.pixel_upscale)
        self.written.append(path)
        logger.debug("Snapshot saved: %s", path)

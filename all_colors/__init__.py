"""
All Colors
==========

Grow an image outward from seed pixels, placing every colour of a fixed,
hue-ordered palette exactly once at the open border position whose
painted neighbours match it best.

- **Palette**: a coarse grid over the colour cube, shuffled then sorted by hue
- **Growth engine**: greedy placement with seeded, randomised tie-breaks
"""

__version__ = "1.0.0"

from all_colors.canvas import Canvas, Position
from all_colors.color_utils import UNSET, Color, rgb_to_hsv
from all_colors.config import GrowthConfig
from all_colors.engine import (
    GrowthEngine,
    GrowthResult,
    GrowthState,
    Placement,
    SnapshotInfo,
)
from all_colors.frontier import Frontier
from all_colors.image_io import SnapshotWriter, embellish, save_upscaled
from all_colors.palette import Palette, build_palette, generate_grid
from all_colors.scorer import Scorer
from all_colors.seeds import centre_seed, preset_seeds, seeds_from_image

__all__ = [
    "UNSET",
    "Canvas",
    "Color",
    "Frontier",
    "GrowthConfig",
    "GrowthEngine",
    "GrowthResult",
    "GrowthState",
    "Palette",
    "Placement",
    "Position",
    "Scorer",
    "SnapshotInfo",
    "SnapshotWriter",
    "build_palette",
    "centre_seed",
    "embellish",
    "generate_grid",
    "preset_seeds",
    "rgb_to_hsv",
    "save_upscaled",
    "seeds_from_image",
]

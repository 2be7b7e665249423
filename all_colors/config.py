"""Centralised configuration via a frozen dataclass."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from all_colors.color_utils import COLOR_SPACES


@dataclass(frozen=True)
class GrowthConfig:
    """All tuneable parameters for a growth run.

    Attributes:
        width:          Canvas width for preset seed layouts.
        height:         Canvas height for preset seed layouts.
        seed:           Seed of the run's single random generator.
        colour_levels:  Palette resolution (power of two, 2-128).
        spread:         Chebyshev radius of the neighbourhood.
        color_space:    Distance metric - "rgb" or "lab" (perceptual).
        snapshot_every: Placements between two snapshots.
        embellish:      Fill unpainted gaps in snapshots with the median filter.
        pixel_upscale:  Each canvas pixel becomes n x n in saved snapshots.
        output_format:  Image format for saved files.
        output_dir:     Folder for snapshots.
        preset_arm:     Arm length of the plus-shaped preset seeds.
    """

    # Canvas
    width: int = 1920
    height: int = 1080

    # Palette
    seed: int = 1
    colour_levels: int = 64

    # Growth
    spread: int = 1
    color_space: str = "rgb"

    # Output
    snapshot_every: int = 512
    embellish: bool = True
    pixel_upscale: int = 1
    output_format: str = "png"
    output_dir: Path = field(default_factory=lambda: Path("output"))

    # Seeds
    preset_arm: int = 5

    SUPPORTED_EXTENSIONS: frozenset[str] = frozenset(
        {".jpg", ".jpeg", ".png", ".bmp", ".tiff", ".tif", ".webp"}
    )

    def validate(self) -> GrowthConfig:
        """Raise ``ValueError`` on an inconsistent configuration."""
        if self.width <= 0 or self.height <= 0:
            msg = f"Canvas size must be positive, got {self.width}x{self.height}"
            raise ValueError(msg)
        if self.spread < 1:
            msg = f"spread must be >= 1, got {self.spread}"
            raise ValueError(msg)
        if self.snapshot_every < 1:
            msg = f"snapshot_every must be >= 1, got {self.snapshot_every}"
            raise ValueError(msg)
        if self.pixel_upscale < 1:
            msg = f"pixel_upscale must be >= 1, got {self.pixel_upscale}"
            raise ValueError(msg)
        if self.color_space not in COLOR_SPACES:
            msg = f"Unknown colour space '{self.color_space}'"
            raise ValueError(msg)
        levels = self.colour_levels
        if not 2 <= levels <= 128 or levels & (levels - 1):
            msg = f"colour_levels must be a power of two in [2, 128], got {levels}"
            raise ValueError(msg)
        return self

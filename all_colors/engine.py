"""Greedy growth: place each palette colour at its best frontier position."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from enum import Enum

import numpy as np

from all_colors.canvas import Canvas, Position
from all_colors.color_utils import Color
from all_colors.config import GrowthConfig
from all_colors.frontier import Frontier
from all_colors.palette import Palette, build_palette
from all_colors.scorer import Scorer

logger = logging.getLogger(__name__)


class GrowthState(Enum):
    RUNNING = "running"
    DONE = "done"


@dataclass(frozen=True)
class Placement:
    position: Position
    color: Color


@dataclass(frozen=True)
class SnapshotInfo:
    """Progress counters handed to the snapshot sink."""

    index: int
    expected: int
    placed: int
    colours_remaining: int
    frontier_size: int


@dataclass(frozen=True)
class GrowthResult:
    placed: int
    colours_remaining: int
    frontier_size: int
    snapshots: int
    exhausted: str  # "palette" | "frontier"
    elapsed: float


SnapshotSink = Callable[[np.ndarray, SnapshotInfo], None]


class GrowthEngine:
    """Sequential greedy placement of an ordered palette onto a canvas.

    Each step pops the next colour, scores every frontier position against
    it, and paints the cheapest one. Ties are broken by permuting the
    candidates with *rng* and taking the first minimum, so the same seed
    always yields the same image.

    Args:
        canvas:      Fresh canvas; the engine is its only writer.
        palette:     Colours in consumption order (see :class:`Palette`).
        rng:         The run's shared generator. It must already have been
                     used to order *palette* and is advanced once per step.
        seeds:       In-bounds, distinct seed positions. The frontier starts
                     as their neighbour expansion.
        spread:      Chebyshev radius for both frontier growth and scoring.
        color_space: ``"rgb"`` or ``"lab"`` distance for the scorer.
    """

    def __init__(
        self,
        canvas: Canvas,
        palette: Palette,
        rng: np.random.Generator,
        seeds: Iterable[tuple[int, int]] = (),
        spread: int = 1,
        color_space: str = "rgb",
    ) -> None:
        self.canvas = canvas
        self.palette = palette
        self.rng = rng
        self.frontier = Frontier(canvas, spread)
        self.scorer = Scorer(canvas, spread, color_space)
        self.placed = 0

        seed_list = [Position(*s) for s in seeds]
        if len(set(seed_list)) != len(seed_list):
            msg = "Seed positions must not overlap"
            raise ValueError(msg)
        outside = [s for s in seed_list if not canvas.in_bounds(s)]
        if outside:
            msg = f"{len(outside)} seed position(s) outside the canvas, e.g. {tuple(outside[0])}"
            raise ValueError(msg)
        self.frontier.seed(seed_list)

    @classmethod
    def from_config(
        cls,
        cfg: GrowthConfig,
        seeds: Iterable[tuple[int, int]],
        width: int | None = None,
        height: int | None = None,
    ) -> GrowthEngine:
        """Build canvas, generator and palette for a run described by *cfg*.

        *width* / *height* override the configured canvas size, e.g. when
        it comes from a seed image.
        """
        cfg.validate()
        canvas = Canvas(width or cfg.width, height or cfg.height)
        rng = np.random.default_rng(cfg.seed)
        palette = build_palette(cfg.colour_levels, rng)
        return cls(
            canvas, palette, rng, seeds,
            spread=cfg.spread, color_space=cfg.color_space,
        )

    @property
    def state(self) -> GrowthState:
        if self.palette.is_empty() or self.frontier.is_empty():
            return GrowthState.DONE
        return GrowthState.RUNNING

    def _best_position(self, color: Color) -> Position:
        positions = self.frontier.as_array()
        costs = self.scorer.costs(positions, color)
        order = self.rng.permutation(len(positions))
        # argmin returns the first minimum in permuted order
        best = order[int(np.argmin(costs[order]))]
        return Position(*(int(c) for c in positions[best]))

    def step(self) -> Placement:
        """Place one colour. Only valid while :attr:`state` is RUNNING."""
        if self.state is GrowthState.DONE:
            msg = "Growth is finished; no colour or position left to place"
            raise RuntimeError(msg)
        color = self.palette.pop()
        pos = self._best_position(color)
        self.frontier.remove(pos)
        self.canvas.set(pos, color)
        self.frontier.add_all(self.frontier.neighbors_of(pos))
        self.placed += 1
        return Placement(pos, color)

    def iter_placements(self) -> Iterator[Placement]:
        while self.state is GrowthState.RUNNING:
            yield self.step()

    def _snapshot(self, sink: SnapshotSink | None, index: int, expected: int) -> None:
        info = SnapshotInfo(
            index=index,
            expected=expected,
            placed=self.placed,
            colours_remaining=len(self.palette),
            frontier_size=len(self.frontier),
        )
        logger.info(
            "  %d/%d  placed=%s  colours left=%s  frontier=%s",
            index, expected, f"{info.placed:,}",
            f"{info.colours_remaining:,}", f"{info.frontier_size:,}",
        )
        if sink is not None:
            sink(self.canvas.pixels(), info)

    def run(
        self, sink: SnapshotSink | None = None, snapshot_every: int = 512,
    ) -> GrowthResult:
        """Grow until the palette or the frontier runs out.

        *sink* is called with a read-only view of the canvas after every
        *snapshot_every* placements and once more at the end.
        """
        if snapshot_every < 1:
            msg = f"snapshot_every must be >= 1, got {snapshot_every}"
            raise ValueError(msg)

        expected = max(1, min(len(self.palette), self.canvas.size) // snapshot_every)
        logger.info(
            "Growth start | canvas=%dx%d  colours=%s  frontier=%s",
            self.canvas.width, self.canvas.height,
            f"{len(self.palette):,}", f"{len(self.frontier):,}",
        )

        t0 = time.perf_counter()
        snapshots = 0
        last_snapshot = -1
        for _ in self.iter_placements():
            if self.placed % snapshot_every == 0:
                snapshots += 1
                self._snapshot(sink, snapshots, expected)
                last_snapshot = self.placed
        if last_snapshot != self.placed:
            snapshots += 1
            self._snapshot(sink, snapshots, expected)
        elapsed = time.perf_counter() - t0

        exhausted = "palette" if self.palette.is_empty() else "frontier"
        logger.info(
            "Growth done  | placed=%s  colours left=%s  exhausted=%s  (%.1f s)",
            f"{self.placed:,}", f"{len(self.palette):,}", exhausted, elapsed,
        )
        return GrowthResult(
            placed=self.placed,
            colours_remaining=len(self.palette),
            frontier_size=len(self.frontier),
            snapshots=snapshots,
            exhausted=exhausted,
            elapsed=elapsed,
        )

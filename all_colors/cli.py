"""Rich command-line interface powered by Typer."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel

from all_colors.canvas import Position
from all_colors.config import GrowthConfig
from all_colors.engine import GrowthEngine, GrowthResult
from all_colors.image_io import SnapshotWriter
from all_colors.palette import palette_size
from all_colors.seeds import preset_seeds, seeds_from_image

app = typer.Typer(
    name="all-colors",
    help="Grow an image that uses every colour of a palette exactly once.",
    add_completion=False,
    rich_markup_mode="rich",
)
console = Console()


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False, markup=True)],
    )


# Defaults come from GrowthConfig - single source of truth
_DEFAULTS = GrowthConfig()


def _make_config(**overrides: object) -> GrowthConfig:
    try:
        return GrowthConfig(**overrides).validate()  # type: ignore[arg-type]
    except ValueError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(2) from exc


def _grow(
    cfg: GrowthConfig,
    seeds: list[Position],
    width: int,
    height: int,
    title: str,
) -> GrowthResult:
    console.print(Panel.fit(
        f"[bold]ALL COLORS[/bold]  {title}\n"
        f"Canvas: {width}x{height}  |  Seeds: {len(seeds):,}\n"
        f"Colours: {palette_size(cfg.colour_levels):,} (levels={cfg.colour_levels})"
        f"  |  Seed: {cfg.seed}\n"
        f"Spread: {cfg.spread}  |  Colour space: {cfg.color_space}"
        f"  |  Snapshot every: {cfg.snapshot_every}",
        border_style="cyan",
    ))

    engine = GrowthEngine.from_config(cfg, seeds, width=width, height=height)
    writer = SnapshotWriter(
        cfg.output_dir,
        embellished=cfg.embellish,
        output_format=cfg.output_format,
        pixel_upscale=cfg.pixel_upscale,
    )
    result = engine.run(writer, snapshot_every=cfg.snapshot_every)

    reason = (
        "every colour placed"
        if result.exhausted == "palette"
        else f"canvas full, {result.colours_remaining:,} colours unused"
    )
    console.print(Panel.fit(
        f"[bold green]DONE[/bold green] - {result.placed:,} pixels, {reason}\n"
        f"{result.snapshots} frames in [bold]{cfg.output_dir}/[/bold]"
        f"  [dim]time={result.elapsed:.1f}s[/dim]",
        border_style="green",
    ))
    return result


# -- preset command ----------------------------------------------------

@app.command()
def preset(
    count: int = typer.Argument(..., help="Number of seeds: 2, 3 or 4"),
    width: int = typer.Option(_DEFAULTS.width, "--width", "-W", help="Canvas width"),
    height: int = typer.Option(_DEFAULTS.height, "--height", "-H", help="Canvas height"),
    output_dir: Path = typer.Option(
        _DEFAULTS.output_dir, "--output", "-o", help="Snapshot folder",
    ),
    seed: int = typer.Option(_DEFAULTS.seed, "--seed", "-s", help="Random seed"),
    levels: int = typer.Option(
        _DEFAULTS.colour_levels, "--levels", "-l",
        help="Palette resolution, power of two (64 = ~1M colours)",
    ),
    spread: int = typer.Option(_DEFAULTS.spread, "--spread", help="Neighbourhood radius"),
    every: int = typer.Option(
        _DEFAULTS.snapshot_every, "--every", "-e", help="Placements per snapshot",
    ),
    color_space: str = typer.Option(
        _DEFAULTS.color_space, "--color-space", help="'rgb' or 'lab'",
    ),
    embellish: bool = typer.Option(
        _DEFAULTS.embellish, "--embellish/--no-embellish", help="Soften gaps in frames",
    ),
    upscale: int = typer.Option(
        _DEFAULTS.pixel_upscale, "--upscale", "-u", help="Pixel upscale factor",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Grow from 2, 3 or 4 plus-shaped seeds on a blank canvas."""
    _setup_logging(verbose)

    cfg = _make_config(
        width=width,
        height=height,
        seed=seed,
        colour_levels=levels,
        spread=spread,
        color_space=color_space,
        snapshot_every=every,
        embellish=embellish,
        pixel_upscale=upscale,
        output_dir=output_dir,
    )
    try:
        seeds = preset_seeds(count, width, height, arm=cfg.preset_arm)
    except ValueError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(2) from exc

    _grow(cfg, seeds, width, height, f"preset {count}")


# -- seed-image command ------------------------------------------------

@app.command()
def image(
    path: Path = typer.Argument(..., help="Seed image; non-black pixels are seeds"),
    output_dir: Path = typer.Option(_DEFAULTS.output_dir, "--output", "-o"),
    seed: int = typer.Option(_DEFAULTS.seed, "--seed", "-s"),
    levels: int = typer.Option(_DEFAULTS.colour_levels, "--levels", "-l"),
    spread: int = typer.Option(_DEFAULTS.spread, "--spread"),
    every: int = typer.Option(_DEFAULTS.snapshot_every, "--every", "-e"),
    color_space: str = typer.Option(_DEFAULTS.color_space, "--color-space"),
    embellish: bool = typer.Option(_DEFAULTS.embellish, "--embellish/--no-embellish"),
    upscale: int = typer.Option(_DEFAULTS.pixel_upscale, "--upscale", "-u"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Grow from the non-black pixels of a seed image, at its size."""
    _setup_logging(verbose)

    if not path.is_file() or path.suffix.lower() not in _DEFAULTS.SUPPORTED_EXTENSIONS:
        console.print(f"[red]Not a readable seed image: {path}[/red]")
        raise typer.Exit(1)

    width, height, seeds = seeds_from_image(path)
    if not seeds:
        console.print(f"[yellow]{path.name} has no non-black pixels to grow from.[/yellow]")
        raise typer.Exit(1)

    cfg = _make_config(
        width=width,
        height=height,
        seed=seed,
        colour_levels=levels,
        spread=spread,
        color_space=color_space,
        snapshot_every=every,
        embellish=embellish,
        pixel_upscale=upscale,
        output_dir=output_dir,
    )
    _grow(cfg, seeds, width, height, path.name)


if __name__ == "__main__":
    app()

"""Command line interface for shimmer."""

from __future__ import annotations

import sys
import time
from pathlib import Path

import click

from shimmer import __version__
from shimmer.config import ConfigError, ShimmerConfig
from shimmer.enums import Direction
from shimmer.paths import get_config_path


def _load_config(config_path: Path | None) -> ShimmerConfig:
    try:
        return ShimmerConfig.load(config_path)
    except ConfigError as exc:
        click.secho(f"Invalid config: {exc}", fg="red", err=True)
        sys.exit(1)


@click.group(invoke_without_command=True)
@click.option("--version", is_flag=True, help="Show version and exit")
@click.pass_context
def cli(ctx: click.Context, version: bool) -> None:
    """Animated shimmer text for the terminal."""
    if version:
        click.echo(f"shimmer {__version__}")
        ctx.exit(0)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command()
@click.argument("text")
@click.option("--color", default=None, help="Base color as #RRGGBB")
@click.option("--interval-ms", type=int, default=None, help="Milliseconds between frames")
@click.option("--peak-light", type=int, default=None, help="Peak lightness 0-100")
@click.option("--wave-width", type=int, default=None, help="Wave width in characters")
@click.option("--wave-pause", type=int, default=None, help="Pause between sweeps")
@click.option("--reverse", is_flag=True, help="Sweep right to left")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    envvar="SHIMMER_CONFIG",
    help="Path to config.toml",
)
def run(
    text: str,
    color: str | None,
    interval_ms: int | None,
    peak_light: int | None,
    wave_width: int | None,
    wave_pause: int | None,
    reverse: bool,
    config_path: Path | None,
) -> None:
    """Shimmer TEXT until ctrl+c, q or escape."""
    from shimmer.runner import run as run_shimmer

    loaded = _load_config(config_path)
    overrides: dict[str, object] = {}
    if interval_ms is not None:
        overrides["interval"] = interval_ms / 1000
    if peak_light is not None:
        overrides["peak_light"] = peak_light
    if wave_width is not None:
        overrides["wave_width"] = wave_width
    if wave_pause is not None:
        overrides["wave_pause"] = wave_pause
    if reverse:
        overrides["direction"] = Direction.REVERSE

    run_shimmer(text, color or loaded.color, loaded.options, **overrides)


@cli.command()
@click.option("--seconds", type=float, default=5.0, show_default=True, help="Demo length")
@click.option("--text", default="Shimmering", show_default=True)
def demo(seconds: float, text: str) -> None:
    """Shimmer while a placeholder task sleeps."""
    from shimmer.runner import Spinner

    loaded = _load_config(None)
    click.echo()
    Spinner(text, loaded.color, loaded.options).action(lambda: time.sleep(seconds)).run()
    click.echo()


@cli.command()
@click.option("--init", "init_", is_flag=True, help="Write a config file with defaults")
@click.option("--force", is_flag=True, help="Overwrite an existing config file")
def config(init_: bool, force: bool) -> None:
    """Show the config path, or create it with --init."""
    path = get_config_path()
    if not init_:
        click.echo(str(path))
        return

    if path.exists() and not force:
        click.secho(f"Config already exists: {path}", fg="yellow")
        click.echo("Use --force to overwrite.")
        sys.exit(1)

    ShimmerConfig().save(path)
    click.secho(f"Wrote {path}", fg="green")

"""Pokedex CLI entry point."""

from __future__ import annotations

import asyncio
from typing import Optional

import click

from . import __version__


@click.command()
@click.version_option(version=__version__)
@click.option(
    "--reap-interval",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help="Seconds between cache sweeps (default: cache.reap_interval_seconds)",
)
@click.option(
    "--max-age",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help="Oldest cached response ever served, in seconds (default: cache.max_age_seconds)",
)
@click.option("--base-url", default=None, help="PokeAPI base URL (default: api.base_url)")
@click.pass_context
def main(ctx: click.Context, reap_interval: Optional[float], max_age: Optional[float], base_url: Optional[str]) -> None:
    """Pokedex - explore PokeAPI location areas and catch Pokemon."""
    from .repl.console import run_console

    try:
        asyncio.run(run_console(reap_interval=reap_interval, max_age=max_age, base_url=base_url))
    except (ValueError, OSError) as exc:
        click.echo(f"Unable to start the Pokedex: {exc}")
        ctx.exit(1)


if __name__ == "__main__":
    main()

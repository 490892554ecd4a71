from __future__ import annotations

import logging

import click

from foodorder.infrastructure.cli.food_commands import food_order, food_show
from foodorder.infrastructure.config import (
    API_URL_ENV,
    ConfigurationError,
    load_settings,
)


@click.group()
@click.option(
    "--api-url", default=None, envvar=API_URL_ENV,
    help=f"Base URL of the food API (env: {API_URL_ENV}).",
)
@click.option("--timeout", default=None, type=float, help="Request timeout in seconds.")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, api_url: str | None, timeout: float | None, verbose: bool) -> None:
    """Food Order — customize a food and place the order"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    try:
        ctx.obj = load_settings(api_url=api_url, timeout=timeout)
    except ConfigurationError as exc:
        raise click.ClickException(str(exc))


@cli.group()
def food() -> None:
    """Browse and order foods."""


# Register subcommands
food.add_command(food_show)
food.add_command(food_order)

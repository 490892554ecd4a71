"""CLI commands for the food details screen."""

from __future__ import annotations

import asyncio

import click

from foodorder.application.dto import FoodDetailsDTO, LoadState
from foodorder.application.session import FoodDetailsSession
from foodorder.infrastructure import bootstrap
from foodorder.infrastructure.cli.console import ConsoleNavigator, ConsoleNotifier
from foodorder.infrastructure.config import Settings

MAX_CLI_QUANTITY = 99


def _parse_extras(raw_items: tuple[str, ...]) -> list[tuple[int, int]]:
    """Parse ('3:2', '5:1') into [(3, 2), (5, 1)]."""
    specs: list[tuple[int, int]] = []
    for raw in raw_items:
        raw = raw.strip()
        if ":" not in raw:
            raise click.BadParameter(
                f"Invalid extra format '{raw}'. Expected 'ExtraId:Quantity'."
            )
        id_str, qty_str = raw.split(":", 1)
        try:
            extra_id = int(id_str)
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(f"Invalid extra '{raw}'. Both parts must be integers.")
        if not 0 <= qty <= MAX_CLI_QUANTITY:
            raise click.BadParameter(
                f"Quantity for extra {extra_id} must be between 0 and {MAX_CLI_QUANTITY}."
            )
        specs.append((extra_id, qty))
    return specs


def _display_food(dto: FoodDetailsDTO) -> None:
    click.echo(f"Food #{dto.food_id}  {dto.name}  ({dto.formatted_price})")
    if dto.description:
        click.echo(dto.description)
    click.echo()

    if dto.extras:
        click.echo(f"  {'Id':>4} {'Extra':<24} {'Value':>10} {'Qty':>5}")
        click.echo(f"  {'-'*46}")
        for extra in dto.extras:
            click.echo(
                f"  {extra.id:>4} {extra.name:<24} {extra.value:>10} {extra.quantity:>5}"
            )
        click.echo(f"  {'-'*46}")
    else:
        click.echo("  No extras available.")

    click.echo(f"  {'Quantity':<29} {dto.food_quantity:>17}")
    click.echo(f"  {'Order Total':<29} {dto.total:>17}")


async def _load(session: FoodDetailsSession, food_id: int) -> None:
    await session.load()
    if session.state is not LoadState.LOADED:
        raise click.ClickException(
            f"Could not load food #{food_id}: {session.failure_reason}"
        )


@click.command("show")
@click.option("--id", "food_id", required=True, type=int, help="Food ID to display.")
@click.pass_obj
def food_show(settings: Settings, food_id: int) -> None:
    """Show a food with its extras and the starting total."""

    async def run() -> FoodDetailsDTO:
        async with bootstrap.http_client(settings) as client:
            session = bootstrap.food_details_session(
                food_id, client, ConsoleNavigator(), ConsoleNotifier()
            )
            try:
                await _load(session, food_id)
                return session.snapshot()
            finally:
                session.close()

    _display_food(asyncio.run(run()))


@click.command("order")
@click.option("--id", "food_id", required=True, type=int, help="Food ID to order.")
@click.option(
    "--extra", "extras", multiple=True, metavar="ID:QTY",
    help="Extra quantity as 'ExtraId:Quantity'. Repeatable.",
)
@click.option(
    "--quantity", default=1, show_default=True,
    type=click.IntRange(min=1, max=MAX_CLI_QUANTITY),
    help="How many units of the food.",
)
@click.option("--favorite", is_flag=True, default=False, help="Mark the food as a favorite.")
@click.pass_context
def food_order(
    ctx: click.Context,
    food_id: int,
    extras: tuple[str, ...],
    quantity: int,
    favorite: bool,
) -> None:
    """Customize a food and place the order."""
    adjustments = _parse_extras(extras)
    settings: Settings = ctx.obj

    async def run() -> bool:
        async with bootstrap.http_client(settings) as client:
            session = bootstrap.food_details_session(
                food_id, client, ConsoleNavigator(), ConsoleNotifier()
            )
            try:
                await _load(session, food_id)

                known_ids = {extra.id for extra in session.extras}
                for extra_id, qty in adjustments:
                    if extra_id not in known_ids:
                        click.echo(f"Warning: food #{food_id} has no extra {extra_id}, skipped.", err=True)
                        continue
                    for _ in range(qty):
                        session.increment_extra(extra_id)
                for _ in range(quantity - 1):
                    session.increment_food()
                if favorite:
                    session.toggle_favorite()

                _display_food(session.snapshot())
                click.echo()
                result = await session.finish_order()
                return result.ok
            finally:
                session.close()

    if not asyncio.run(run()):
        ctx.exit(1)

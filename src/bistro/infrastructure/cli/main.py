"""Entry point: walks one order through the menu, its extras and the kitchen."""

from __future__ import annotations

import logging

import click

from bistro.domain.exceptions import DomainException
from bistro.domain.model.extras import BaconExtra, CheeseExtra
from bistro.domain.model.order import Order, OrderStatus
from bistro.infrastructure.bootstrap import (
    dish_factory,
    drink_factory,
    order_listeners,
)
from bistro.infrastructure.logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def run_demo() -> Order:
    """Print the full transcript and return the finished order."""
    click.echo("=== RESTAURANT SYSTEM ===")
    click.echo()

    # --- Factory Method -------------------------------------------------------
    click.echo("1. FACTORY METHOD - Creating products:")
    drinks = drink_factory()
    dishes = dish_factory()

    coke = drinks.create_item("COCA")
    burger = dishes.create_item("HAMBURGUESA")

    click.echo(f"   Created: {coke.name} - {coke.price}")
    click.echo(f"   Created: {burger.name} - {burger.price}")

    # --- Decorator ------------------------------------------------------------
    click.echo()
    click.echo("2. DECORATOR - Adding extras:")
    loaded_burger = BaconExtra(CheeseExtra(burger))

    click.echo(f"   Original:  {burger.name} - {burger.price}")
    click.echo(f"   Decorated: {loaded_burger.name} - {loaded_burger.price}")

    # --- Observer -------------------------------------------------------------
    click.echo()
    click.echo("3. OBSERVER - Notifying changes:")
    order = Order()
    for listener in order_listeners():
        order.add_listener(listener)

    order.add_item(loaded_burger)
    order.add_item(coke)

    order.set_status(OrderStatus.IN_PREPARATION)
    order.set_status(OrderStatus.READY)
    order.set_status(OrderStatus.DELIVERED)

    click.echo()
    click.echo(order.render())
    return order


@click.command()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log domain events to stderr.")
def cli(verbose: bool) -> None:
    """Restaurant ordering demo: Factory Method, Decorator and Observer."""
    setup_logging(logging.DEBUG if verbose else logging.WARNING)

    try:
        order = run_demo()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    logger.info("Demo finished: %d item(s), total %s", len(order.items), order.total)

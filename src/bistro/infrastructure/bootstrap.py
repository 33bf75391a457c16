"""Composition root: wires concrete implementations to domain interfaces.

This is the only place that knows which factories build the menu and
which listeners watch an order.  Everything else depends on the
abstractions.
"""

from __future__ import annotations

from bistro.domain.factory.menu_factory import DishFactory, DrinkFactory
from bistro.domain.model.order import OrderListener
from bistro.infrastructure.listeners import CashierListener, KitchenListener


def drink_factory() -> DrinkFactory:
    return DrinkFactory()


def dish_factory() -> DishFactory:
    return DishFactory()


def order_listeners() -> list[OrderListener]:
    """Listeners in notification order: the kitchen hears first."""
    return [KitchenListener(), CashierListener()]

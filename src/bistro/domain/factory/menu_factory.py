"""Menu factories: the Factory Method side of the menu.

Callers ask a factory for an item by code and get back a ``MenuItem``
without knowing which concrete class was built.  Every factory owns a
fixed price table and a house default: an unrecognised code is served
the default item instead of raising.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from bistro.domain.model.menu_item import Dish, Drink, MenuItem
from bistro.domain.model.value_objects import Money

logger = logging.getLogger(__name__)


class MenuItemFactory(ABC):

    # code -> (name, price); overridden by each concrete factory
    table: dict[str, tuple[str, Money]] = {}
    default: tuple[str, Money]

    @abstractmethod
    def _build(self, name: str, price: Money) -> MenuItem:
        """Instantiate the concrete item class this factory produces."""

    def create_item(self, code: str) -> MenuItem:
        """Return the item listed under *code*, or the house default."""
        entry = self.table.get(code)
        if entry is None:
            logger.debug(
                "%s: unknown code %r, serving default %s",
                type(self).__name__, code, self.default[0],
            )
            entry = self.default
        name, price = entry
        item = self._build(name, price)
        logger.debug("%s created %s", type(self).__name__, item)
        return item

    def available_codes(self) -> list[str]:
        return list(self.table)


class DrinkFactory(MenuItemFactory):

    table = {
        "COCA": ("Coca-Cola", Money.of("3.00")),
        "JUGO": ("Jugo Natural", Money.of("4.00")),
    }
    default = ("Water", Money.of("2.00"))

    def _build(self, name: str, price: Money) -> MenuItem:
        return Drink(name, price)


class DishFactory(MenuItemFactory):

    table = {
        "HAMBURGUESA": ("Hamburguesa", Money.of("12.00")),
        "PIZZA": ("Pizza", Money.of("15.00")),
    }
    default = ("Salad", Money.of("8.00"))

    def _build(self, name: str, price: Money) -> MenuItem:
        return Dish(name, price)

"""Extras: decorators that dress up a menu item.

Each extra wraps exactly one ``MenuItem`` and is itself a ``MenuItem``,
so extras stack in any order and any number of times.  The wrapped item
is never touched: its name and price are read, combined, and returned.
"""

from __future__ import annotations

from collections.abc import Iterable

from bistro.domain.exceptions import ValidationError
from bistro.domain.model.menu_item import MenuItem
from bistro.domain.model.value_objects import Money


class ExtraDecorator(MenuItem):
    """Base decorator.  Subclasses only declare ``label`` and ``surcharge``."""

    label: str
    surcharge: Money

    def __init__(self, item: MenuItem) -> None:
        self._item = item

    @property
    def wrapped(self) -> MenuItem:
        return self._item

    @property
    def name(self) -> str:
        return f"{self._item.name} + {self.label}"

    @property
    def price(self) -> Money:
        return self._item.price + self.surcharge

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._item!r})"


class CheeseExtra(ExtraDecorator):
    label = "Queso"
    surcharge = Money.of("2.00")


class BaconExtra(ExtraDecorator):
    label = "Tocino"
    surcharge = Money.of("3.00")


EXTRAS: dict[str, type[ExtraDecorator]] = {
    "QUESO": CheeseExtra,
    "TOCINO": BaconExtra,
}


def apply_extras(item: MenuItem, codes: Iterable[str]) -> MenuItem:
    """Wrap *item* in the extras named by *codes*, innermost first.

    ``apply_extras(burger, ["QUESO", "TOCINO"])`` is the same as
    ``BaconExtra(CheeseExtra(burger))``.
    """
    for code in codes:
        extra = EXTRAS.get(code)
        if extra is None:
            raise ValidationError(
                f"Unknown extra '{code}' (available: {', '.join(EXTRAS)})"
            )
        item = extra(item)
    return item

"""Menu items: anything the restaurant can put a price on.

``MenuItem`` is the single capability shared by plain items and the
extras that wrap them: a display name and a price.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from bistro.domain.model.value_objects import Money


class MenuItem(ABC):

    @property
    @abstractmethod
    def name(self) -> str:
        """Name shown on the order."""

    @property
    @abstractmethod
    def price(self) -> Money:
        """Price charged for this item."""

    def __str__(self) -> str:
        return f"{self.name} - {self.price}"


class _ListedItem(MenuItem):
    """An item served exactly as printed on the menu.

    Name and price are fixed at construction; there are no setters.
    """

    def __init__(self, name: str, price: Money) -> None:
        self._name = name
        self._price = price

    @property
    def name(self) -> str:
        return self._name

    @property
    def price(self) -> Money:
        return self._price

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return (self._name, self._price) == (other._name, other._price)

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._name, self._price))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, price={self._price})"


class Drink(_ListedItem):
    pass


class Dish(_ListedItem):
    pass

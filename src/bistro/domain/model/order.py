"""Order aggregate: items, a status, and the listeners watching it.

The Order is the subject of the Observer pattern: every status change is
pushed synchronously to the registered listeners, in the order they
registered.  A listener that raises stops the round; later listeners are
not called and the exception reaches the caller of ``set_status``.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum

from bistro.domain.exceptions import ValidationError
from bistro.domain.model.menu_item import MenuItem
from bistro.domain.model.value_objects import Money

logger = logging.getLogger(__name__)


class OrderStatus(str, Enum):
    NEW = "NUEVO"
    IN_PREPARATION = "EN PREPARACIÓN"
    READY = "LISTO"
    DELIVERED = "ENTREGADO"


class OrderListener(ABC):

    @abstractmethod
    def notify(self, message: str) -> None:
        """Receive a status-change message."""


@dataclass
class Order:
    """Aggregate root for one customer's order.

    ``status`` is a plain string: the ``OrderStatus`` values are the ones
    the restaurant uses, but transitions are not checked and any label
    may be set.
    """

    items: list[MenuItem] = field(default_factory=list)
    status: str = OrderStatus.NEW.value
    _listeners: list[OrderListener] = field(
        default_factory=list, init=False, repr=False, compare=False
    )

    # --- Listeners ------------------------------------------------------------

    def add_listener(self, listener: OrderListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: OrderListener) -> None:
        """Drop the first registration of *listener*."""
        try:
            self._listeners.remove(listener)
        except ValueError:
            raise ValidationError(
                f"{type(listener).__name__} is not listening to this order"
            ) from None

    @property
    def listeners(self) -> tuple[OrderListener, ...]:
        return tuple(self._listeners)

    # --- Items ----------------------------------------------------------------

    def add_item(self, item: MenuItem) -> None:
        self.items.append(item)

    # --- State transitions ----------------------------------------------------

    def set_status(self, status: OrderStatus | str) -> None:
        """Overwrite the status, then tell every listener about it."""
        if isinstance(status, OrderStatus):
            status = status.value
        previous, self.status = self.status, status
        logger.debug(
            "Order status %s -> %s, notifying %d listener(s)",
            previous, status, len(self._listeners),
        )
        self._notify_all(f"Order changed to: {status}")

    def _notify_all(self, message: str) -> None:
        for listener in self._listeners:
            listener.notify(message)

    # --- Computed properties --------------------------------------------------

    @property
    def total(self) -> Money:
        return sum((item.price for item in self.items), Money.zero())

    # --- Display --------------------------------------------------------------

    def render(self) -> str:
        lines = [f"--- ORDER ({self.status}) ---"]
        for item in self.items:
            lines.append(f"  {item.name:<30} {str(item.price):>10}")
        lines.append(f"  {'TOTAL':<30} {str(self.total):>10}")
        return "\n".join(lines)

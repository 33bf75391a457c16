"""Console listeners for order status changes."""

from __future__ import annotations

import click

from bistro.domain.model.order import OrderListener


class _TaggedConsoleListener(OrderListener):
    """Echoes every message to stdout behind a fixed tag."""

    tag: str

    def notify(self, message: str) -> None:
        click.echo(f"  {self.tag} {message}")


class KitchenListener(_TaggedConsoleListener):
    tag = "[KITCHEN]"


class CashierListener(_TaggedConsoleListener):
    tag = "[CASHIER]"

"""Tests for the console listeners and the composition root."""

from bistro.domain.model.order import Order, OrderListener, OrderStatus
from bistro.infrastructure.bootstrap import dish_factory, drink_factory, order_listeners
from bistro.infrastructure.listeners import CashierListener, KitchenListener


class TestConsoleListeners:

    def test_kitchen_prefixes_tag(self, capsys):
        KitchenListener().notify("Order changed to: LISTO")
        assert capsys.readouterr().out == "  [KITCHEN] Order changed to: LISTO\n"

    def test_cashier_prefixes_tag(self, capsys):
        CashierListener().notify("hello")
        assert capsys.readouterr().out == "  [CASHIER] hello\n"

    def test_listeners_hold_no_state(self, capsys):
        kitchen = KitchenListener()
        kitchen.notify("one")
        kitchen.notify("two")
        assert vars(kitchen) == {}
        assert capsys.readouterr().out.splitlines() == ["  [KITCHEN] one", "  [KITCHEN] two"]


class TestBootstrap:

    def test_listeners_kitchen_first(self):
        listeners = order_listeners()
        assert [type(l) for l in listeners] == [KitchenListener, CashierListener]
        assert all(isinstance(l, OrderListener) for l in listeners)

    def test_factories(self):
        assert drink_factory().create_item("COCA").name == "Coca-Cola"
        assert dish_factory().create_item("PIZZA").name == "Pizza"

    def test_wired_order_prints_in_registration_order(self, capsys):
        order = Order()
        for listener in order_listeners():
            order.add_listener(listener)
        order.set_status(OrderStatus.READY)
        assert capsys.readouterr().out.splitlines() == [
            "  [KITCHEN] Order changed to: LISTO",
            "  [CASHIER] Order changed to: LISTO",
        ]

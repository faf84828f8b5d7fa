"""Tests for Order placement snapshots and status transitions."""

from types import SimpleNamespace

import pytest
from protean.exceptions import ValidationError

from shopsmart.errors import IllegalTransitionFromCancelled, InvalidStatus
from shopsmart.ordering.order.events import OrderCancelled, OrderPlaced, OrderStatusChanged
from shopsmart.ordering.order.order import Order, OrderStatus


def _product(product_id, price):
    return SimpleNamespace(id=product_id, price=price)


def _order(lines=None):
    return Order.place(
        account_id="acct-001",
        lines=lines or [(_product("prod-001", 10.0), 3)],
        payment_method="Cash on Delivery",
        shipping_address="12 Market Street",
    )


class TestPlace:
    def test_starts_pending(self):
        assert _order().status == OrderStatus.PENDING.value

    def test_snapshots_unit_prices(self):
        order = _order([(_product("prod-001", 10.0), 3), (_product("prod-002", 2.25), 2)])
        prices = {str(item.product_id): item.price for item in order.items}
        assert prices == {"prod-001": 10.0, "prod-002": 2.25}

    def test_total_is_rounded_to_cents(self):
        order = _order([(_product("prod-001", 0.1), 3), (_product("prod-002", 0.2), 1)])
        assert order.total == 0.5

    def test_copies_shipping_and_payment(self):
        order = _order()
        assert order.shipping_address == "12 Market Street"
        assert order.payment_method == "Cash on Delivery"

    def test_raises_order_placed(self):
        order = _order()
        assert isinstance(order._events[0], OrderPlaced)
        assert order._events[0].total == 30.0

    def test_needs_lines(self):
        with pytest.raises(ValidationError):
            Order.place(
                account_id="acct-001",
                lines=[],
                payment_method="Card",
                shipping_address="12 Market Street",
            )


class TestTransitions:
    @pytest.mark.parametrize("status", ["Confirmed", "Processing", "Shipped", "Delivered", "Pending"])
    def test_free_movement_between_active_statuses(self, status):
        order = _order()
        assert order.transition_to(status) is False
        assert order.status == status

    def test_records_status_change(self):
        order = _order()
        order._events.clear()
        order.transition_to("Shipped")
        event = order._events[0]
        assert isinstance(event, OrderStatusChanged)
        assert event.previous_status == "Pending"
        assert event.new_status == "Shipped"

    def test_unknown_status(self):
        with pytest.raises(InvalidStatus):
            _order().transition_to("Lost")

    def test_cancel_reports_cancellation(self):
        order = _order()
        order._events.clear()
        assert order.transition_to("Cancelled") is True
        assert order.is_cancelled
        assert isinstance(order._events[-1], OrderCancelled)

    @pytest.mark.parametrize("status", ["Pending", "Shipped", "Cancelled"])
    def test_cancelled_is_terminal(self, status):
        order = _order()
        order.transition_to("Cancelled")
        with pytest.raises(IllegalTransitionFromCancelled):
            order.transition_to(status)
        assert order.is_cancelled

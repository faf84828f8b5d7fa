"""Tests for Cart aggregate item management."""

import pytest
from protean.exceptions import ValidationError

from shopsmart.errors import NotFound
from shopsmart.ordering.cart.cart import Cart
from shopsmart.ordering.cart.events import CartCleared, CartItemAdded, CartItemRemoved, CartQuantityUpdated


def _cart():
    return Cart.create(account_id="acct-001")


class TestCartCreation:
    def test_starts_empty(self):
        cart = _cart()
        assert str(cart.account_id) == "acct-001"
        assert len(cart.items) == 0

    def test_sets_timestamps(self):
        cart = _cart()
        assert cart.created_at is not None
        assert cart.updated_at is not None


class TestAddItem:
    def test_adds_new_entry(self):
        cart = _cart()
        cart.add_item("prod-001", 2)
        assert cart.quantity_of("prod-001") == 2

    def test_merges_repeated_product(self):
        cart = _cart()
        cart.add_item("prod-001", 2)
        cart.add_item("prod-001", 3)
        assert len(cart.items) == 1
        assert cart.quantity_of("prod-001") == 5

    def test_entries_keep_insertion_order(self):
        cart = _cart()
        cart.add_item("prod-b", 1)
        cart.add_item("prod-a", 1)
        assert [str(item.product_id) for item in cart.entries()] == ["prod-b", "prod-a"]

    def test_rejects_zero_quantity(self):
        with pytest.raises(ValidationError):
            _cart().add_item("prod-001", 0)

    def test_raises_item_added(self):
        cart = _cart()
        cart.add_item("prod-001", 1)
        cart.add_item("prod-001", 2)
        event = cart._events[-1]
        assert isinstance(event, CartItemAdded)
        assert event.quantity == 2
        assert event.new_quantity == 3


class TestUpdateQuantity:
    def test_sets_quantity(self):
        cart = _cart()
        cart.add_item("prod-001", 2)
        cart.update_quantity("prod-001", 7)
        assert cart.quantity_of("prod-001") == 7
        assert isinstance(cart._events[-1], CartQuantityUpdated)

    def test_zero_removes_entry(self):
        cart = _cart()
        cart.add_item("prod-001", 2)
        cart.update_quantity("prod-001", 0)
        assert cart.find_item("prod-001") is None
        assert isinstance(cart._events[-1], CartItemRemoved)

    def test_unknown_item(self):
        with pytest.raises(NotFound):
            _cart().update_quantity("prod-404", 1)


class TestRemoveAndClear:
    def test_remove_item(self):
        cart = _cart()
        cart.add_item("prod-001", 1)
        cart.remove_item("prod-001")
        assert len(cart.items) == 0

    def test_remove_unknown_item(self):
        with pytest.raises(NotFound):
            _cart().remove_item("prod-404")

    def test_clear(self):
        cart = _cart()
        cart.add_item("prod-001", 1)
        cart.add_item("prod-002", 4)
        cart.clear()
        assert len(cart.items) == 0
        event = cart._events[-1]
        assert isinstance(event, CartCleared)
        assert event.items_removed == 2

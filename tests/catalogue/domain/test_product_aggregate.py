"""Tests for Product aggregate creation and detail updates."""

import pytest
from protean.exceptions import ValidationError

from shopsmart.catalogue.product.events import ProductAdded, ProductDetailsUpdated, ProductPriceChanged
from shopsmart.catalogue.product.product import DEFAULT_IMAGE, Product


def _make_product(**overrides):
    defaults = {
        "name": "Trail Shoe",
        "description": "Lightweight trail runner",
        "price": 49.5,
        "category": "Footwear",
        "stock": 10,
    }
    defaults.update(overrides)
    return Product.create(**defaults)


class TestProductCreation:
    def test_create_sets_fields(self):
        product = _make_product()
        assert product.name == "Trail Shoe"
        assert product.price == 49.5
        assert product.stock == 10
        assert product.category == "Footwear"

    def test_create_applies_defaults(self):
        product = _make_product(stock=None)
        assert product.stock == 0
        assert product.image == DEFAULT_IMAGE
        assert product.weight == 0.0
        assert product.dimensions == ""

    def test_create_strips_name_and_category(self):
        product = _make_product(name="  Trail Shoe  ", category=" Footwear ")
        assert product.name == "Trail Shoe"
        assert product.category == "Footwear"

    def test_create_sets_timestamps(self):
        product = _make_product()
        assert product.created_at is not None
        assert product.updated_at is not None

    def test_create_raises_product_added(self):
        product = _make_product()
        assert len(product._events) == 1
        assert isinstance(product._events[0], ProductAdded)
        assert product._events[0].stock == 10

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError):
            _make_product(price=-1.0)

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError):
            _make_product(stock=-3)


class TestProductDetailsUpdate:
    def test_partial_update_leaves_other_fields(self):
        product = _make_product()
        product.update_details(name="Road Shoe")
        assert product.name == "Road Shoe"
        assert product.price == 49.5
        assert product.stock == 10

    def test_update_raises_details_updated(self):
        product = _make_product()
        product._events.clear()
        product.update_details(stock=20)
        assert [type(e) for e in product._events] == [ProductDetailsUpdated]

    def test_price_change_raises_price_changed(self):
        product = _make_product()
        product._events.clear()
        product.update_details(price=59.0)
        price_events = [e for e in product._events if isinstance(e, ProductPriceChanged)]
        assert len(price_events) == 1
        assert price_events[0].previous_price == 49.5
        assert price_events[0].new_price == 59.0

    def test_same_price_does_not_raise_price_changed(self):
        product = _make_product()
        product._events.clear()
        product.update_details(price=49.5)
        assert not any(isinstance(e, ProductPriceChanged) for e in product._events)

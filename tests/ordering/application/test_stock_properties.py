"""Stock-level guarantees across placements and cancellations."""

import json
import threading
from concurrent.futures import ThreadPoolExecutor

from protean import current_domain
from protean.exceptions import ExpectedVersionError

from shopsmart.catalogue.product.product import Product
from shopsmart.domain import shopsmart
from shopsmart.errors import InsufficientStock
from shopsmart.ordering.order.inventory import place_order, update_order_status
from shopsmart.ordering.order.order import Order
from shopsmart.ordering.order.placement import PlaceOrder


def _stock(product_id):
    return current_domain.repository_for(Product).get(product_id).stock


def _active_quantity(product_id):
    orders = current_domain.repository_for(Order)._dao.query.all().items
    return sum(
        item.quantity
        for order in orders
        if not order.is_cancelled
        for item in order.items
        if str(item.product_id) == str(product_id)
    )


class TestStockConservation:
    def test_stock_plus_active_orders_is_constant(self, make_account, make_product):
        product = make_product(stock=20)
        buyers = [make_account() for _ in range(3)]

        orders = [place_order(buyer.id, [{"product_id": product.id, "quantity": 4}], "Card") for buyer in buyers]
        assert _stock(product.id) + _active_quantity(product.id) == 20

        update_order_status(orders[1]["id"], "Cancelled")
        assert _stock(product.id) + _active_quantity(product.id) == 20

        update_order_status(orders[0]["id"], "Shipped")
        assert _stock(product.id) + _active_quantity(product.id) == 20
        assert _stock(product.id) == 12


class TestNoOversell:
    def test_sequential_requests_for_remaining_stock(self, make_account, make_product):
        product = make_product(stock=3)
        buyers = [make_account() for _ in range(4)]

        outcomes = []
        for buyer in buyers:
            try:
                place_order(buyer.id, [{"product_id": product.id, "quantity": 3}], "Card")
                outcomes.append("ok")
            except InsufficientStock:
                outcomes.append("short")

        assert outcomes.count("ok") == 1
        assert outcomes.count("short") == 3
        assert _stock(product.id) == 0

    def test_concurrent_requests_for_remaining_stock(self, make_account, make_product):
        product = make_product(stock=3)
        buyer_ids = [make_account().id for _ in range(6)]
        product_id = product.id

        def attempt(buyer_id):
            with shopsmart.domain_context():
                try:
                    place_order(buyer_id, [{"product_id": product_id, "quantity": 3}], "Card")
                    return "ok"
                except InsufficientStock:
                    return "short"

        with ThreadPoolExecutor(max_workers=6) as pool:
            outcomes = list(pool.map(attempt, buyer_ids))

        assert outcomes.count("ok") == 1
        assert outcomes.count("short") == 5
        assert _stock(product_id) == 0


class TestVersionCheck:
    def test_interleaved_placements_without_guard_never_oversell(self, monkeypatch, make_account, make_product):
        product = make_product(stock=3)
        buyer_ids = [make_account().id for _ in range(4)]
        product_id = product.id

        # Every buyer passes the stock check before anyone writes
        barrier = threading.Barrier(len(buyer_ids), timeout=2)
        seen = threading.local()
        original_remove = Product.remove_stock

        def remove_after_everyone_checked(self, quantity):
            if not getattr(seen, "waited", False):
                seen.waited = True
                try:
                    barrier.wait()
                except threading.BrokenBarrierError:
                    pass
            return original_remove(self, quantity)

        monkeypatch.setattr(Product, "remove_stock", remove_after_everyone_checked)

        def attempt(buyer_id):
            command = PlaceOrder(
                account_id=buyer_id,
                payment_method="Card",
                items=json.dumps([{"product_id": str(product_id), "quantity": 3}]),
            )
            with shopsmart.domain_context():
                try:
                    current_domain.process(command, asynchronous=False)
                    return "ok"
                except (InsufficientStock, ExpectedVersionError):
                    return "short"

        with ThreadPoolExecutor(max_workers=len(buyer_ids)) as pool:
            outcomes = list(pool.map(attempt, buyer_ids))

        assert outcomes.count("ok") == 1
        assert _stock(product_id) == 0
        assert current_domain.repository_for(Order)._dao.query.all().total == 1

"""Contended checkout: many shoppers racing for the last units of one product.

An administrator (see ``src/manage.py create-admin``) stocks a product with
a handful of units; every simulated shopper then tries to buy it. The server
must accept exactly as many orders as there were units and refuse the rest
with ``InsufficientStock``.

Environment:
    LOADTEST_ADMIN_EMAIL, LOADTEST_ADMIN_PASSWORD: administrator credentials
    LOADTEST_SCARCE_STOCK: units to put on the shelf (default 10)
"""

import os
import threading

from locust import HttpUser, between, events, task

from loadtests.data_generators import product_data, registration_data
from loadtests.helpers.response import error_kind, extract_error_detail
from loadtests.helpers.state import ShopperState

_scarce = {"product_id": None, "accepted": 0, "refused": 0}
_scarce_lock = threading.Lock()


@events.test_start.add_listener
def stock_scarce_product(environment, **_kwargs):
    """Create the contended product once per test run."""
    email = os.getenv("LOADTEST_ADMIN_EMAIL")
    password = os.getenv("LOADTEST_ADMIN_PASSWORD")
    if not email or not password or environment.host is None:
        return

    import requests

    login = requests.post(f"{environment.host}/api/auth/login", json={"email": email, "password": password}, timeout=10)
    login.raise_for_status()
    token = login.json()["token"]

    stock = int(os.getenv("LOADTEST_SCARCE_STOCK", "10"))
    created = requests.post(
        f"{environment.host}/api/products",
        json=product_data(stock=stock),
        headers={"Authorization": f"Bearer {token}"},
        timeout=10,
    )
    created.raise_for_status()
    _scarce["product_id"] = created.json()["id"]
    print(f"[LOADTEST] Contended product {_scarce['product_id']} stocked with {stock} units")


@events.test_stop.add_listener
def report_contention(**_kwargs):
    if _scarce["product_id"]:
        print(f"[LOADTEST] Contended checkout: {_scarce['accepted']} accepted, {_scarce['refused']} refused")


class ContendedCheckoutUser(HttpUser):
    wait_time = between(0.1, 0.5)

    def on_start(self):
        self.state = ShopperState()
        resp = self.client.post("/api/auth/register", json=registration_data(), name="POST /api/auth/register")
        if resp.status_code == 201:
            self.state.token = resp.json()["token"]

    @task
    def buy_last_units(self):
        if not _scarce["product_id"] or not self.state.token:
            return
        with self.client.post(
            "/api/orders",
            json={"items": [{"product_id": _scarce["product_id"], "quantity": 1}], "payment_method": "Card"},
            headers=self.state.headers,
            catch_response=True,
            name="POST /api/orders [contended]",
        ) as resp:
            if resp.status_code == 201:
                with _scarce_lock:
                    _scarce["accepted"] += 1
            elif error_kind(resp) == "InsufficientStock":
                with _scarce_lock:
                    _scarce["refused"] += 1
                resp.success()
            else:
                resp.failure(f"Contended checkout failed: {resp.status_code} — {extract_error_detail(resp)}")

"""Shopper journey: register, browse, fill the cart, check out, review history."""

import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import registration_data, search_params
from loadtests.helpers.response import extract_error_detail
from loadtests.helpers.state import ShopperState


class ShopperJourney(SequentialTaskSet):
    """Register -> Browse -> Add to cart -> Place order -> List orders.

    A checkout refused for insufficient stock is an expected outcome under
    load and is not reported as a failure.
    """

    def on_start(self):
        self.state = ShopperState()

    @task
    def register(self):
        with self.client.post(
            "/api/auth/register",
            json=registration_data(),
            catch_response=True,
            name="POST /api/auth/register",
        ) as resp:
            if resp.status_code == 201:
                body = resp.json()
                self.state.token = body["token"]
                self.state.account_id = body["id"]
            else:
                resp.failure(f"Register failed: {resp.status_code} — {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def browse(self):
        with self.client.get(
            "/api/products",
            params=search_params(),
            catch_response=True,
            name="GET /api/products",
        ) as resp:
            if resp.status_code == 200:
                self.state.product_ids = [p["id"] for p in resp.json()["products"] if p["stock"] > 0]
            else:
                resp.failure(f"Browse failed: {resp.status_code} — {extract_error_detail(resp)}")

    @task
    def add_to_cart(self):
        if not self.state.product_ids:
            self.interrupt()
        with self.client.post(
            "/api/cart",
            json={"product_id": random.choice(self.state.product_ids), "quantity": 1},
            headers=self.state.headers,
            catch_response=True,
            name="POST /api/cart",
        ) as resp:
            if resp.status_code != 201 and resp.status_code != 400:
                resp.failure(f"Add to cart failed: {resp.status_code} — {extract_error_detail(resp)}")

    @task
    def checkout(self):
        with self.client.get("/api/cart", headers=self.state.headers, name="GET /api/cart") as cart_resp:
            entries = cart_resp.json() if cart_resp.status_code == 200 else []
        if not entries:
            return

        with self.client.post(
            "/api/orders",
            json={
                "items": [{"product_id": e["product_id"], "quantity": e["quantity"]} for e in entries],
                "payment_method": "Cash on Delivery",
            },
            headers=self.state.headers,
            catch_response=True,
            name="POST /api/orders",
        ) as resp:
            if resp.status_code == 201:
                self.state.order_ids.append(resp.json()["id"])
            elif resp.status_code == 400:
                resp.success()
            else:
                resp.failure(f"Checkout failed: {resp.status_code} — {extract_error_detail(resp)}")

    @task
    def order_history(self):
        self.client.get("/api/orders", headers=self.state.headers, name="GET /api/orders")

    @task
    def done(self):
        self.interrupt()


class ShopperUser(HttpUser):
    tasks = [ShopperJourney]
    wait_time = between(0.5, 2)

"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance maintains its own state with no cross-user
sharing. State tracks the bearer token and the ids returned by earlier
calls so follow-up operations can reference them.
"""

from dataclasses import dataclass, field


@dataclass
class ShopperState:
    """Tracks state for a single simulated shopper."""

    token: str | None = None
    account_id: str | None = None
    product_ids: list[str] = field(default_factory=list)
    order_ids: list[str] = field(default_factory=list)

    @property
    def headers(self) -> dict:
        return {"Authorization": f"Bearer {self.token}"} if self.token else {}

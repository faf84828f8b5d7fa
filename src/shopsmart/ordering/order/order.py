"""Order aggregate — an immutable purchase record whose status moves over time.

Line items, total, payment method and shipping address are fixed when the
order is placed. Afterwards only ``status`` (and ``updated_at``) change.

Status model:
    Pending, Confirmed, Processing, Shipped, Delivered move freely among
    each other. Cancelled is terminal: nothing leaves it, and cancelling a
    cancelled order is rejected so stock is restored at most once.
"""

import json
from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String

from shopsmart.domain import shopsmart
from shopsmart.errors import IllegalTransitionFromCancelled, InvalidStatus
from shopsmart.ordering.order.events import OrderCancelled, OrderPlaced, OrderStatusChanged


class OrderStatus(Enum):
    PENDING = "Pending"
    CONFIRMED = "Confirmed"
    PROCESSING = "Processing"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"

    @classmethod
    def parse(cls, value):
        try:
            return cls(value)
        except ValueError:
            raise InvalidStatus(value) from None


@shopsmart.entity(part_of="Order")
class OrderItem:
    """A purchased line; ``price`` is the unit price at placement time."""

    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    price = Float(required=True, min_value=0.0)


@shopsmart.aggregate
class Order:
    account_id = Identifier(required=True)
    items = HasMany(OrderItem)
    total = Float(required=True, min_value=0.0)
    payment_method = String(required=True, max_length=100)
    shipping_address = String(required=True, max_length=500)
    status = String(
        choices=OrderStatus,
        default=OrderStatus.PENDING.value,
    )
    created_at = DateTime()
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def place(cls, account_id, lines, payment_method, shipping_address):
        """Create a Pending order from ``(product, quantity)`` pairs.

        Prices are read from the products now and never again.
        """
        if not lines:
            raise ValidationError({"items": ["An order needs at least one line"]})

        now = datetime.now(UTC)
        items = [
            OrderItem(product_id=product.id, quantity=quantity, price=product.price)
            for product, quantity in lines
        ]
        total = round(sum(item.price * item.quantity for item in items), 2)

        order = cls(
            account_id=account_id,
            items=items,
            total=total,
            payment_method=payment_method,
            shipping_address=shipping_address,
            status=OrderStatus.PENDING.value,
            created_at=now,
            updated_at=now,
        )
        order.raise_(
            OrderPlaced(
                order_id=order.id,
                account_id=str(account_id),
                items=json.dumps(
                    [
                        {"product_id": str(i.product_id), "quantity": i.quantity, "price": i.price}
                        for i in items
                    ]
                ),
                total=total,
                payment_method=payment_method,
                shipping_address=shipping_address,
                placed_at=now,
            )
        )
        return order

    # -------------------------------------------------------------------
    # Status
    # -------------------------------------------------------------------
    @property
    def is_cancelled(self):
        return self.status == OrderStatus.CANCELLED.value

    def transition_to(self, new_status):
        """Move to ``new_status``. Returns ``True`` when this cancelled the order."""
        target = OrderStatus.parse(new_status)
        if self.is_cancelled:
            raise IllegalTransitionFromCancelled(self.id, target.value)

        previous = self.status
        now = datetime.now(UTC)
        self.status = target.value
        self.updated_at = now

        self.raise_(
            OrderStatusChanged(
                order_id=self.id,
                previous_status=previous,
                new_status=target.value,
                changed_at=now,
            )
        )

        if target is OrderStatus.CANCELLED:
            self.raise_(
                OrderCancelled(
                    order_id=self.id,
                    account_id=str(self.account_id),
                    previous_status=previous,
                    cancelled_at=now,
                )
            )
            return True
        return False

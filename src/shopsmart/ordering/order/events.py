"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Identifier, String, Text

from shopsmart.domain import shopsmart


@shopsmart.event(part_of="Order")
class OrderPlaced:
    """An order was placed and its stock deducted."""

    __version__ = 1

    order_id = Identifier(required=True)
    account_id = Identifier(required=True)
    items = Text(required=True)  # JSON: list of {product_id, quantity, price}
    total = Float(required=True)
    payment_method = String(required=True)
    shipping_address = String(required=True)
    placed_at = DateTime(required=True)


@shopsmart.event(part_of="Order")
class OrderStatusChanged:
    __version__ = 1

    order_id = Identifier(required=True)
    previous_status = String(required=True)
    new_status = String(required=True)
    changed_at = DateTime(required=True)


@shopsmart.event(part_of="Order")
class OrderCancelled:
    """An order entered Cancelled; its stock goes back on the shelf."""

    __version__ = 1

    order_id = Identifier(required=True)
    account_id = Identifier(required=True)
    previous_status = String(required=True)
    cancelled_at = DateTime(required=True)

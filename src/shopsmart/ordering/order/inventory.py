"""Inventory guard for the workflows that move stock.

Placement and cancellation read stock, check it and write it back. Oversell
is prevented by the Product aggregate's version check: when two commands
save from the same stock level, the later commit fails with
``ExpectedVersionError`` and Protean re-runs its handler against fresh state.
The process-wide lock only keeps threads in one worker from colliding and
retrying; it does nothing across workers.
"""

import json
import threading

from protean.utils.globals import current_domain

from shopsmart.ordering.order.placement import PlaceOrder
from shopsmart.ordering.order.queries import get_order, order_to_dict
from shopsmart.ordering.order.status import UpdateOrderStatus

_stock_lock = threading.RLock()


def place_order(account_id, items, payment_method):
    """Place an order for ``items`` (``[{"product_id", "quantity"}]``) and return it."""
    command = PlaceOrder(
        account_id=account_id,
        payment_method=payment_method,
        items=json.dumps(
            [{"product_id": str(item.get("product_id") or ""), "quantity": item.get("quantity")} for item in items]
        ),
    )
    with _stock_lock:
        order_id = current_domain.process(command, asynchronous=False)
        return order_to_dict(get_order(order_id))


def update_order_status(order_id, status):
    """Apply a status change and return the order with its owner's details."""
    command = UpdateOrderStatus(order_id=order_id, status=status)
    with _stock_lock:
        current_domain.process(command, asynchronous=False)
        return order_to_dict(get_order(order_id), with_account=True)

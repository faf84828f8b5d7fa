"""Read-side helpers for orders."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from shopsmart.catalogue.product.listing import find_product
from shopsmart.errors import NotFound
from shopsmart.identity.account.account import Account
from shopsmart.ordering.order.order import Order


def get_order(order_id):
    try:
        return current_domain.repository_for(Order).get(order_id)
    except ObjectNotFoundError:
        raise NotFound("Order not found", order_id=str(order_id)) from None


def _line_to_dict(item, with_product=False):
    line = {
        "product_id": str(item.product_id),
        "quantity": item.quantity,
        "price": item.price,
    }
    if with_product:
        product = find_product(item.product_id)
        line["product"] = {"name": product.name, "image": product.image} if product else None
    return line


def _account_summary(account_id):
    try:
        account = current_domain.repository_for(Account).get(account_id)
    except ObjectNotFoundError:
        return None
    return {
        "id": str(account.id),
        "name": account.name,
        "email": account.email,
        "address": account.address,
        "phone": account.phone,
    }


def order_to_dict(order, with_products=False, with_account=False):
    data = {
        "id": str(order.id),
        "account_id": str(order.account_id),
        "items": [_line_to_dict(item, with_products) for item in order.items],
        "total": order.total,
        "payment_method": order.payment_method,
        "shipping_address": order.shipping_address,
        "status": order.status,
        "created_at": order.created_at.isoformat() if order.created_at else None,
        "updated_at": order.updated_at.isoformat() if order.updated_at else None,
    }
    if with_account:
        data["account"] = _account_summary(order.account_id)
    return data


def orders_for_account(account_id):
    """The account's own orders, newest first, with product details."""
    orders = (
        current_domain.repository_for(Order)
        ._dao.query.filter(account_id=str(account_id))
        .order_by("-created_at")
        .all()
        .items
    )
    return [order_to_dict(order, with_products=True) for order in orders]


def all_orders():
    orders = current_domain.repository_for(Order)._dao.query.order_by("-created_at").all().items
    return [order_to_dict(order, with_account=True) for order in orders]

"""Order placement — command and handler.

Everything is validated before anything is touched: the shipping address,
the line list, every product and every stock level. Only then is stock
deducted, the order created and the cart emptied, all inside the command's
Unit of Work.
"""

import json

from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from shopsmart.catalogue.product.listing import find_product
from shopsmart.catalogue.product.product import Product
from shopsmart.domain import logger, shopsmart
from shopsmart.errors import EmptyOrder, InsufficientStock, MissingShippingAddress, NotFound, ProductNotFound
from shopsmart.identity.account.account import Account
from shopsmart.ordering.cart.cart import Cart, find_cart
from shopsmart.ordering.order.order import Order


@shopsmart.command(part_of="Order")
class PlaceOrder:
    account_id = Identifier(required=True)
    payment_method = String(required=True, max_length=100)
    items = Text(required=True)  # JSON: list of {product_id, quantity}


def merge_lines(items):
    """Collapse repeated products into one line, keeping first-seen order."""
    merged = {}
    for line in items:
        product_id = str(line.get("product_id") or "").strip()
        quantity = line.get("quantity")
        if not product_id:
            raise ValidationError({"items": ["Each line needs a product_id"]})
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
            raise ValidationError({"items": [f"Quantity for product {product_id} must be a positive integer"]})
        merged[product_id] = merged.get(product_id, 0) + quantity
    return list(merged.items())


@shopsmart.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        try:
            account = current_domain.repository_for(Account).get(command.account_id)
        except ObjectNotFoundError:
            raise NotFound("Account not found", account_id=str(command.account_id)) from None

        if not account.has_shipping_address():
            raise MissingShippingAddress(account.id)

        items = json.loads(command.items) if isinstance(command.items, str) else command.items
        if not items:
            raise EmptyOrder()

        lines = merge_lines(items)

        products = {}
        for product_id, _ in lines:
            product = find_product(product_id)
            if product is None:
                raise ProductNotFound(product_id)
            products[product_id] = product

        for product_id, quantity in lines:
            product = products[product_id]
            if not product.has_stock_for(quantity):
                raise InsufficientStock(
                    product_id=product.id,
                    product_name=product.name,
                    available=product.stock,
                    requested=quantity,
                )

        product_repo = current_domain.repository_for(Product)
        for product_id, quantity in lines:
            product = products[product_id]
            product.remove_stock(quantity)
            product_repo.add(product)

        order = Order.place(
            account_id=account.id,
            lines=[(products[product_id], quantity) for product_id, quantity in lines],
            payment_method=command.payment_method,
            shipping_address=account.address,
        )
        current_domain.repository_for(Order).add(order)

        cart = find_cart(account.id)
        if cart is not None and cart.items:
            cart.clear()
            current_domain.repository_for(Cart).add(cart)

        logger.info(
            "order_placed",
            order_id=str(order.id),
            account_id=str(account.id),
            lines=len(lines),
            total=order.total,
        )
        return str(order.id)

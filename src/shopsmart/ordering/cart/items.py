"""Cart item management — commands and handler."""

from protean import handle
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from shopsmart.catalogue.product.listing import find_product
from shopsmart.domain import shopsmart
from shopsmart.errors import InsufficientStock, NotFound, ProductNotFound
from shopsmart.ordering.cart.cart import Cart, cart_for, find_cart


@shopsmart.command(part_of="Cart")
class AddToCart:
    account_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@shopsmart.command(part_of="Cart")
class UpdateCartItem:
    account_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=0)


@shopsmart.command(part_of="Cart")
class RemoveFromCart:
    account_id = Identifier(required=True)
    product_id = Identifier(required=True)


@shopsmart.command(part_of="Cart")
class ClearCart:
    account_id = Identifier(required=True)


def _product_with_stock_for(product_id, quantity):
    product = find_product(product_id)
    if product is None:
        raise ProductNotFound(product_id)
    if not product.has_stock_for(quantity):
        raise InsufficientStock(
            product_id=product.id,
            product_name=product.name,
            available=product.stock,
            requested=quantity,
        )
    return product


def _existing_cart(account_id):
    cart = find_cart(account_id)
    if cart is None:
        raise NotFound("Cart not found", account_id=str(account_id))
    return cart


@shopsmart.command_handler(part_of=Cart)
class ManageCartItemsHandler:
    @handle(AddToCart)
    def add_to_cart(self, command):
        cart = cart_for(command.account_id)
        _product_with_stock_for(
            command.product_id,
            cart.quantity_of(command.product_id) + command.quantity,
        )

        cart.add_item(product_id=command.product_id, quantity=command.quantity)
        current_domain.repository_for(Cart).add(cart)

    @handle(UpdateCartItem)
    def update_cart_item(self, command):
        cart = _existing_cart(command.account_id)
        if command.quantity > 0 and cart.find_item(command.product_id) is not None:
            _product_with_stock_for(command.product_id, command.quantity)

        cart.update_quantity(product_id=command.product_id, quantity=command.quantity)
        current_domain.repository_for(Cart).add(cart)

    @handle(RemoveFromCart)
    def remove_from_cart(self, command):
        cart = _existing_cart(command.account_id)
        cart.remove_item(product_id=command.product_id)
        current_domain.repository_for(Cart).add(cart)

    @handle(ClearCart)
    def clear_cart(self, command):
        cart = cart_for(command.account_id)
        cart.clear()
        current_domain.repository_for(Cart).add(cart)

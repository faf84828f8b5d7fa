"""Domain events for the Cart aggregate."""

from protean.fields import Identifier, Integer

from shopsmart.domain import shopsmart


@shopsmart.event(part_of="Cart")
class CartItemAdded:
    """A product was added to the cart, or its quantity topped up."""

    __version__ = 1

    cart_id = Identifier(required=True)
    account_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True)
    new_quantity = Integer(required=True)


@shopsmart.event(part_of="Cart")
class CartQuantityUpdated:
    """The quantity of a cart entry was set explicitly."""

    __version__ = 1

    cart_id = Identifier(required=True)
    product_id = Identifier(required=True)
    previous_quantity = Integer(required=True)
    new_quantity = Integer(required=True)


@shopsmart.event(part_of="Cart")
class CartItemRemoved:
    __version__ = 1

    cart_id = Identifier(required=True)
    product_id = Identifier(required=True)


@shopsmart.event(part_of="Cart")
class CartCleared:
    """Every entry was removed, either by the shopper or by a placed order."""

    __version__ = 1

    cart_id = Identifier(required=True)
    account_id = Identifier(required=True)
    items_removed = Integer(required=True)

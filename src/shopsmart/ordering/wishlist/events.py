"""Domain events for the Wishlist aggregate."""

from protean.fields import Identifier

from shopsmart.domain import shopsmart


@shopsmart.event(part_of="Wishlist")
class ProductWishlisted:
    __version__ = 1

    wishlist_id = Identifier(required=True)
    account_id = Identifier(required=True)
    product_id = Identifier(required=True)


@shopsmart.event(part_of="Wishlist")
class ProductUnwishlisted:
    __version__ = 1

    wishlist_id = Identifier(required=True)
    account_id = Identifier(required=True)
    product_id = Identifier(required=True)

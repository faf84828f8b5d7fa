"""Wishlist management — commands and handler."""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from shopsmart.catalogue.product.listing import find_product
from shopsmart.domain import shopsmart
from shopsmart.errors import NotFound, ProductNotFound
from shopsmart.ordering.wishlist.wishlist import Wishlist, find_wishlist


@shopsmart.command(part_of="Wishlist")
class AddToWishlist:
    account_id = Identifier(required=True)
    product_id = Identifier(required=True)


@shopsmart.command(part_of="Wishlist")
class RemoveFromWishlist:
    account_id = Identifier(required=True)
    product_id = Identifier(required=True)


@shopsmart.command_handler(part_of=Wishlist)
class ManageWishlistHandler:
    @handle(AddToWishlist)
    def add_to_wishlist(self, command):
        if find_product(command.product_id) is None:
            raise ProductNotFound(command.product_id)

        wishlist = find_wishlist(command.account_id) or Wishlist.create(account_id=command.account_id)
        wishlist.add(command.product_id)
        current_domain.repository_for(Wishlist).add(wishlist)

    @handle(RemoveFromWishlist)
    def remove_from_wishlist(self, command):
        wishlist = find_wishlist(command.account_id)
        if wishlist is None:
            raise NotFound("Wishlist not found.", account_id=str(command.account_id))

        wishlist.remove(command.product_id)
        current_domain.repository_for(Wishlist).add(wishlist)

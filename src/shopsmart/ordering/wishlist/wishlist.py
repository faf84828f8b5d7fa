"""Wishlist aggregate — a per-account set of products saved for later."""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, HasMany, Identifier
from protean.utils.globals import current_domain

from shopsmart.domain import shopsmart
from shopsmart.errors import NotFound
from shopsmart.ordering.wishlist.events import ProductUnwishlisted, ProductWishlisted


@shopsmart.entity(part_of="Wishlist")
class WishlistItem:
    product_id = Identifier(required=True)
    added_at = DateTime()


@shopsmart.aggregate
class Wishlist:
    account_id = Identifier(required=True, unique=True)
    items = HasMany(WishlistItem)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def create(cls, account_id):
        now = datetime.now(UTC)
        return cls(account_id=account_id, created_at=now, updated_at=now)

    def entries(self):
        return sorted(self.items, key=lambda item: item.added_at.timestamp() if item.added_at else 0.0)

    def find_item(self, product_id):
        return next((i for i in self.items if str(i.product_id) == str(product_id)), None)

    def add(self, product_id):
        if self.find_item(product_id) is not None:
            raise ValidationError({"product_id": ["Product already in wishlist."]})

        now = datetime.now(UTC)
        self.add_items(WishlistItem(product_id=product_id, added_at=now))
        self.updated_at = now

        self.raise_(
            ProductWishlisted(
                wishlist_id=str(self.id),
                account_id=str(self.account_id),
                product_id=str(product_id),
            )
        )

    def remove(self, product_id):
        item = self.find_item(product_id)
        if item is None:
            raise NotFound("Product not found in wishlist.", product_id=str(product_id))

        self.remove_items(item)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            ProductUnwishlisted(
                wishlist_id=str(self.id),
                account_id=str(self.account_id),
                product_id=str(product_id),
            )
        )


def find_wishlist(account_id):
    """Return the account's wishlist, or ``None`` before the first save."""
    wishlists = current_domain.repository_for(Wishlist)._dao.query.filter(account_id=str(account_id)).all().items
    return wishlists[0] if wishlists else None

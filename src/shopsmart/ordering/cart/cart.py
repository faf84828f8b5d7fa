"""Cart aggregate (CQRS) — one per account, holding product and quantity pairs.

The cart used to be embedded in the account record. It is now its own
aggregate keyed by ``account_id`` so that order placement can clear it inside
the same Unit of Work that deducts stock and creates the order.
"""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, HasMany, Identifier, Integer
from protean.utils.globals import current_domain

from shopsmart.domain import shopsmart
from shopsmart.errors import NotFound
from shopsmart.ordering.cart.events import (
    CartCleared,
    CartItemAdded,
    CartItemRemoved,
    CartQuantityUpdated,
)


@shopsmart.entity(part_of="Cart")
class CartItem:
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    added_at = DateTime()


@shopsmart.aggregate
class Cart:
    account_id = Identifier(required=True, unique=True)
    items = HasMany(CartItem)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def one_entry_per_product(self):
        product_ids = [str(item.product_id) for item in self.items]
        if len(product_ids) != len(set(product_ids)):
            raise ValidationError({"items": ["A product can appear only once in a cart"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, account_id):
        now = datetime.now(UTC)
        return cls(account_id=account_id, created_at=now, updated_at=now)

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------
    def entries(self):
        """Cart items in the order they were first added."""
        return sorted(self.items, key=lambda item: item.added_at.timestamp() if item.added_at else 0.0)

    def find_item(self, product_id):
        return next((i for i in self.items if str(i.product_id) == str(product_id)), None)

    def quantity_of(self, product_id):
        item = self.find_item(product_id)
        return item.quantity if item else 0

    # -------------------------------------------------------------------
    # Item management
    # -------------------------------------------------------------------
    def add_item(self, product_id, quantity):
        """Add a product, or increase its quantity if already present."""
        if quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be at least 1"]})

        now = datetime.now(UTC)
        existing = self.find_item(product_id)
        if existing:
            existing.quantity += quantity
            new_quantity = existing.quantity
        else:
            self.add_items(CartItem(product_id=product_id, quantity=quantity, added_at=now))
            new_quantity = quantity

        self.updated_at = now

        self.raise_(
            CartItemAdded(
                cart_id=str(self.id),
                account_id=str(self.account_id),
                product_id=str(product_id),
                quantity=quantity,
                new_quantity=new_quantity,
            )
        )

    def update_quantity(self, product_id, quantity):
        """Set an entry's quantity. Zero removes the entry."""
        if quantity < 0:
            raise ValidationError({"quantity": ["A non-negative quantity is required"]})

        item = self.find_item(product_id)
        if item is None:
            raise NotFound("Item not found in cart.", product_id=str(product_id))

        if quantity == 0:
            self.remove_item(product_id)
            return

        previous = item.quantity
        item.quantity = quantity
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartQuantityUpdated(
                cart_id=str(self.id),
                product_id=str(product_id),
                previous_quantity=previous,
                new_quantity=quantity,
            )
        )

    def remove_item(self, product_id):
        item = self.find_item(product_id)
        if item is None:
            raise NotFound("Item not found in cart.", product_id=str(product_id))

        self.remove_items(item)
        self.updated_at = datetime.now(UTC)

        self.raise_(CartItemRemoved(cart_id=str(self.id), product_id=str(product_id)))

    def clear(self):
        removed = len(self.items)
        for item in list(self.items):
            self.remove_items(item)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CartCleared(
                cart_id=str(self.id),
                account_id=str(self.account_id),
                items_removed=removed,
            )
        )


def find_cart(account_id):
    """Return the account's cart, or ``None`` if it was never created."""
    carts = current_domain.repository_for(Cart)._dao.query.filter(account_id=str(account_id)).all().items
    return carts[0] if carts else None


def cart_for(account_id):
    """Return the account's cart, creating an empty one on first use."""
    return find_cart(account_id) or Cart.create(account_id=account_id)

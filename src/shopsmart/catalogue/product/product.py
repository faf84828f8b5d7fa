"""Product aggregate root — the catalogue record that order workflows draw stock from."""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Integer, String, Text

from shopsmart.catalogue.product.events import (
    ProductAdded,
    ProductDetailsUpdated,
    ProductPriceChanged,
    StockDeducted,
    StockRestored,
)
from shopsmart.domain import shopsmart
from shopsmart.errors import InsufficientStock

DEFAULT_IMAGE = "https://placehold.co/300x200/cccccc/333333?text=No+Image"


@shopsmart.aggregate
class Product:
    """A product for sale.

    ``stock`` is the only field the order workflows touch. It is decremented
    through ``remove_stock`` (which refuses to go below zero) and incremented
    through ``restock`` when an order is cancelled.
    """

    name: String(required=True, max_length=255)
    description: Text(required=True)
    price: Float(required=True, min_value=0.0)
    image: String(max_length=500, default=DEFAULT_IMAGE)
    category: String(required=True, max_length=100)
    stock: Integer(min_value=0, default=0)
    weight: Float(min_value=0.0, default=0.0)
    dimensions: String(max_length=100, default="")
    created_at: DateTime()
    updated_at: DateTime()

    @invariant.post
    def stock_cannot_be_negative(self):
        if self.stock is not None and self.stock < 0:
            raise ValidationError({"stock": ["Stock cannot be negative"]})

    @classmethod
    def create(
        cls,
        name,
        description,
        price,
        category,
        stock=0,
        image=None,
        weight=None,
        dimensions=None,
    ):
        now = datetime.now(UTC)
        product = cls(
            name=name.strip(),
            description=description,
            price=price,
            category=category.strip(),
            stock=stock or 0,
            image=image or DEFAULT_IMAGE,
            weight=weight or 0.0,
            dimensions=(dimensions or "").strip(),
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductAdded(
                product_id=product.id,
                name=product.name,
                category=product.category,
                price=product.price,
                stock=product.stock,
                created_at=now,
            )
        )
        return product

    def update_details(
        self,
        name=None,
        description=None,
        price=None,
        image=None,
        category=None,
        stock=None,
        weight=None,
        dimensions=None,
    ):
        """Apply a partial update; ``None`` leaves a field unchanged."""
        previous_price = self.price

        if name is not None:
            self.name = name.strip()
        if description is not None:
            self.description = description
        if price is not None:
            self.price = price
        if image is not None:
            self.image = image
        if category is not None:
            self.category = category.strip()
        if stock is not None:
            self.stock = stock
        if weight is not None:
            self.weight = weight
        if dimensions is not None:
            self.dimensions = dimensions.strip()

        now = datetime.now(UTC)
        self.updated_at = now

        self.raise_(
            ProductDetailsUpdated(
                product_id=self.id,
                name=self.name,
                category=self.category,
                price=self.price,
                stock=self.stock,
                updated_at=now,
            )
        )
        if price is not None and price != previous_price:
            self.raise_(
                ProductPriceChanged(
                    product_id=self.id,
                    previous_price=previous_price,
                    new_price=price,
                )
            )

    def has_stock_for(self, quantity):
        return self.stock >= quantity

    def remove_stock(self, quantity):
        """Deduct ``quantity`` units, failing instead of overselling."""
        if quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be at least 1"]})
        if not self.has_stock_for(quantity):
            raise InsufficientStock(
                product_id=self.id,
                product_name=self.name,
                available=self.stock,
                requested=quantity,
            )

        previous = self.stock
        self.stock = previous - quantity
        self.updated_at = datetime.now(UTC)

        self.raise_(
            StockDeducted(
                product_id=self.id,
                quantity=quantity,
                previous_stock=previous,
                new_stock=self.stock,
            )
        )

    def restock(self, quantity):
        """Return ``quantity`` units to the shelf."""
        if quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be at least 1"]})

        previous = self.stock
        self.stock = previous + quantity
        self.updated_at = datetime.now(UTC)

        self.raise_(
            StockRestored(
                product_id=self.id,
                quantity=quantity,
                previous_stock=previous,
                new_stock=self.stock,
            )
        )

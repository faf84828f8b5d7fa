"""Catalogue management — commands and handler for adding, editing and removing products."""

from protean import handle
from protean.fields import Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from shopsmart.catalogue.product.product import Product
from shopsmart.domain import logger, shopsmart


@shopsmart.command(part_of="Product")
class AddProduct:
    name: String(required=True, max_length=255)
    description: Text(required=True)
    price: Float(required=True, min_value=0.0)
    category: String(required=True, max_length=100)
    stock: Integer(min_value=0, default=0)
    image: String(max_length=500)
    weight: Float(min_value=0.0)
    dimensions: String(max_length=100)


@shopsmart.command(part_of="Product")
class UpdateProduct:
    product_id: Identifier(required=True)
    name: String(max_length=255)
    description: Text()
    price: Float(min_value=0.0)
    category: String(max_length=100)
    stock: Integer(min_value=0)
    image: String(max_length=500)
    weight: Float(min_value=0.0)
    dimensions: String(max_length=100)


@shopsmart.command(part_of="Product")
class RemoveProduct:
    product_id: Identifier(required=True)


@shopsmart.command_handler(part_of=Product)
class ManageProductHandler:
    @handle(AddProduct)
    def add_product(self, command):
        product = Product.create(
            name=command.name,
            description=command.description,
            price=command.price,
            category=command.category,
            stock=command.stock,
            image=command.image,
            weight=command.weight,
            dimensions=command.dimensions,
        )
        current_domain.repository_for(Product).add(product)
        logger.info("product_added", product_id=str(product.id), name=product.name)
        return str(product.id)

    @handle(UpdateProduct)
    def update_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.update_details(
            name=command.name,
            description=command.description,
            price=command.price,
            image=command.image,
            category=command.category,
            stock=command.stock,
            weight=command.weight,
            dimensions=command.dimensions,
        )
        repo.add(product)

    @handle(RemoveProduct)
    def remove_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        repo._dao.delete(product)
        logger.info("product_removed", product_id=str(command.product_id))

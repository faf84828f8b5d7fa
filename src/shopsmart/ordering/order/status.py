"""Order status updates — command and handler.

Entering Cancelled puts every line's quantity back on its product's shelf.
A product deleted since the order was placed is skipped with a warning.
"""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from shopsmart.catalogue.product.listing import find_product
from shopsmart.catalogue.product.product import Product
from shopsmart.domain import logger, shopsmart
from shopsmart.ordering.order.order import Order
from shopsmart.ordering.order.queries import get_order


@shopsmart.command(part_of="Order")
class UpdateOrderStatus:
    order_id = Identifier(required=True)
    status = String(required=True, max_length=50)


@shopsmart.command_handler(part_of=Order)
class UpdateOrderStatusHandler:
    @handle(UpdateOrderStatus)
    def update_order_status(self, command):
        order = get_order(command.order_id)
        previous = order.status

        cancelled = order.transition_to(command.status)
        if cancelled:
            self._restore_stock(order)

        current_domain.repository_for(Order).add(order)

        logger.info(
            "order_status_changed",
            order_id=str(order.id),
            previous_status=previous,
            new_status=order.status,
        )

    def _restore_stock(self, order):
        product_repo = current_domain.repository_for(Product)
        for item in order.items:
            product = find_product(item.product_id)
            if product is None:
                logger.warning(
                    "stock_restore_skipped_missing_product",
                    order_id=str(order.id),
                    product_id=str(item.product_id),
                    quantity=item.quantity,
                )
                continue

            product.restock(item.quantity)
            product_repo.add(product)
            logger.info(
                "stock_restored",
                order_id=str(order.id),
                product_id=str(product.id),
                quantity=item.quantity,
                new_stock=product.stock,
            )

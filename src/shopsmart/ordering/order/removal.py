"""Administrative order removal. Stock is left untouched."""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from shopsmart.domain import logger, shopsmart
from shopsmart.ordering.order.order import Order
from shopsmart.ordering.order.queries import get_order


@shopsmart.command(part_of="Order")
class DeleteOrder:
    order_id = Identifier(required=True)


@shopsmart.command_handler(part_of=Order)
class DeleteOrderHandler:
    @handle(DeleteOrder)
    def delete_order(self, command):
        order = get_order(command.order_id)
        current_domain.repository_for(Order)._dao.delete(order)
        logger.info("order_deleted", order_id=str(command.order_id))

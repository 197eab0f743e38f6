"""Order lifecycle management: commands and handler."""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.ordering.order.order import Order
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="Order")
class RecordPayment:
    order_id: Identifier(required=True)


@storefront.command(part_of="Order")
class ShipOrder:
    order_id: Identifier(required=True)


@storefront.command(part_of="Order")
class DeliverOrder:
    order_id: Identifier(required=True)


@storefront.command(part_of="Order")
class CancelOrder:
    order_id: Identifier(required=True)


@storefront.command(part_of="Order")
class RemoveOrder:
    order_id: Identifier(required=True)


@storefront.command_handler(part_of=Order)
class ManageOrderLifecycleHandler:
    @handle(RecordPayment)
    def record_payment(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        order.pay()
        repo.add(order)
        logger.info("order.paid", order_id=str(order.id), total=order.total)

    @handle(ShipOrder)
    def ship_order(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        order.ship()
        repo.add(order)

    @handle(DeliverOrder)
    def deliver_order(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        order.deliver()
        repo.add(order)

    @handle(CancelOrder)
    def cancel_order(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        order.cancel()
        repo.add(order)
        logger.info("order.canceled", order_id=str(order.id))

    @handle(RemoveOrder)
    def remove_order(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        repo.remove(order)
        logger.info("order.removed", order_id=str(order.id))

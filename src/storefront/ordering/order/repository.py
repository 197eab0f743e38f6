"""Order repository: owned-entity cleanup and product reference checks."""

from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.ordering.order.order import Order, OrderItem, Payment


@storefront.repository(part_of=Order)
class OrderRepository:
    def product_is_referenced(self, product_id) -> bool:
        """True when any order item, in any order, points at ``product_id``."""
        items = current_domain.repository_for(OrderItem)._dao.query.filter(product_id=str(product_id)).all()
        return items.total > 0

    def remove(self, order):
        """Delete the order together with its items and payment."""
        if order.payment is not None:
            current_domain.repository_for(Payment)._dao.delete(order.payment)

        item_dao = current_domain.repository_for(OrderItem)._dao
        for item in list(order.items or []):
            item_dao.delete(item)

        self._dao.delete(order)

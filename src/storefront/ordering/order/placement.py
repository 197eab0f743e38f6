"""Order placement: command and handler.

The handler resolves every product before anything is written, so an
unknown product id leaves no partial order behind. The order, its items and
the OrderPlaced event are committed together by the handler's unit of work.
"""

import json

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, Text
from protean.utils.globals import current_domain

from storefront.catalogue.product.product import Product
from storefront.domain import storefront
from storefront.ordering.order.order import Order
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="Order")
class PlaceOrder:
    client_id: Identifier(required=True)
    items: Text(required=True)  # JSON: list of {product_id, quantity}


def _parse_lines(raw):
    try:
        lines = json.loads(raw) if isinstance(raw, str) else raw
    except json.JSONDecodeError:
        raise ValidationError({"items": ["Items must be a JSON list"]}) from None

    if not isinstance(lines, list):
        raise ValidationError({"items": ["Items must be a JSON list"]})

    for line in lines:
        if not isinstance(line, dict) or not line.get("product_id"):
            raise ValidationError({"items": ["Each item must name a product_id"]})
    return lines


@storefront.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        lines = _parse_lines(command.items)
        if not lines:
            raise ValidationError({"items": ["Order must contain at least one item"]})

        products = current_domain.repository_for(Product)
        resolved = [(products.get(line["product_id"]), line.get("quantity")) for line in lines]

        order = Order.place(client_id=command.client_id, lines=resolved)
        current_domain.repository_for(Order).add(order)

        logger.info(
            "order.placed",
            order_id=str(order.id),
            client_id=str(command.client_id),
            total=order.total,
        )
        return str(order.id)

"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Order")
class OrderPlaced:
    """A client placed an order; item prices are captured from the catalogue."""

    __version__ = 1

    order_id: Identifier(required=True)
    client_id: Identifier(required=True)
    item_count: Integer(required=True)
    total: Float(required=True)
    placed_at: DateTime(required=True)


@storefront.event(part_of="Order")
class OrderPaid:
    """Payment was recorded and the order moved to PAID."""

    __version__ = 1

    order_id: Identifier(required=True)
    payment_id: Identifier(required=True)
    total: Float(required=True)
    paid_at: DateTime(required=True)


@storefront.event(part_of="Order")
class OrderCanceled:
    """The order was canceled before shipping."""

    __version__ = 1

    order_id: Identifier(required=True)
    previous_status: String(required=True)
    canceled_at: DateTime(required=True)

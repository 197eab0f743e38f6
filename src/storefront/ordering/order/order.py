"""Order aggregate with OrderItem and Payment entities.

State Machine:
    WAITING_PAYMENT → PAID → SHIPPED → DELIVERED
    WAITING_PAYMENT / PAID → CANCELED

Each OrderItem captures the product's price, name and image at placement
time and never refreshes them. The order total is derived from the items on
every read and is not stored.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, HasOne, Identifier, Integer, String

from storefront.domain import storefront
from storefront.ordering.order.events import OrderCanceled, OrderPaid, OrderPlaced


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class OrderStatus(Enum):
    WAITING_PAYMENT = "WAITING_PAYMENT"
    PAID = "PAID"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELED = "CANCELED"


# State machine transition map
_VALID_TRANSITIONS = {
    OrderStatus.WAITING_PAYMENT: {OrderStatus.PAID, OrderStatus.CANCELED},
    OrderStatus.PAID: {OrderStatus.SHIPPED, OrderStatus.CANCELED},
    OrderStatus.SHIPPED: {OrderStatus.DELIVERED},
    OrderStatus.DELIVERED: set(),  # Terminal
    OrderStatus.CANCELED: set(),  # Terminal
}


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@storefront.entity(part_of="Order")
class OrderItem:
    """A product line in an order with the unit price captured when the order was placed."""

    product_id: Identifier(required=True)
    name: String(required=True, max_length=255)
    img_url: String(max_length=500)
    quantity: Integer(required=True, min_value=1)
    price: Float(required=True, min_value=0.0)

    @property
    def sub_total(self):
        return self.price * self.quantity


@storefront.entity(part_of="Order")
class Payment:
    """Proof that an order was paid. Exists only once the order is PAID."""

    moment: DateTime(required=True)


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@storefront.aggregate
class Order:
    moment: DateTime(required=True)
    status: String(
        choices=OrderStatus,
        default=OrderStatus.WAITING_PAYMENT.value,
    )
    client_id: Identifier(required=True)
    items: HasMany(OrderItem)
    payment: HasOne(Payment)

    @property
    def total(self):
        return sum(item.sub_total for item in self.items or [])

    # -------------------------------------------------------------------
    # Factory method
    # -------------------------------------------------------------------
    @classmethod
    def place(cls, client_id, lines):
        """Assemble a new order for ``client_id``.

        Args:
            client_id: The user placing the order.
            lines: Sequence of ``(product, quantity)`` pairs, with each product
                already resolved from the catalogue.
        """
        if not lines:
            raise ValidationError({"items": ["Order must contain at least one item"]})

        items = [
            OrderItem(
                product_id=product.id,
                name=product.name,
                img_url=product.img_url,
                quantity=quantity,
                price=product.price,
            )
            for product, quantity in lines
        ]

        now = datetime.now(UTC)
        order = cls(
            moment=now,
            status=OrderStatus.WAITING_PAYMENT.value,
            client_id=client_id,
            items=items,
        )
        order.raise_(
            OrderPlaced(
                order_id=order.id,
                client_id=str(client_id),
                item_count=len(items),
                total=order.total,
                placed_at=now,
            )
        )
        return order

    # -------------------------------------------------------------------
    # State transition helper
    # -------------------------------------------------------------------
    def _transition_to(self, target_status):
        """Move to ``target_status`` if the current state allows it."""
        current = OrderStatus(self.status)
        if target_status not in _VALID_TRANSITIONS.get(current, set()):
            raise ValidationError({"status": [f"Cannot transition from {current.value} to {target_status.value}"]})
        self.status = target_status.value

    # -------------------------------------------------------------------
    # Order lifecycle transitions
    # -------------------------------------------------------------------
    def pay(self):
        """Record payment: attach a Payment stamped now and move to PAID."""
        self._transition_to(OrderStatus.PAID)
        now = datetime.now(UTC)
        self.payment = Payment(moment=now)

        self.raise_(
            OrderPaid(
                order_id=self.id,
                payment_id=self.payment.id,
                total=self.total,
                paid_at=now,
            )
        )

    def ship(self):
        self._transition_to(OrderStatus.SHIPPED)

    def deliver(self):
        self._transition_to(OrderStatus.DELIVERED)

    def cancel(self):
        previous = self.status
        self._transition_to(OrderStatus.CANCELED)
        self.raise_(
            OrderCanceled(
                order_id=self.id,
                previous_status=previous,
                canceled_at=datetime.now(UTC),
            )
        )

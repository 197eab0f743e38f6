"""Application tests for PlaceOrder through the domain."""

import json

import pytest
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError

from storefront.catalogue.category.management import CreateCategory
from storefront.catalogue.product.management import CreateProduct, UpdateProduct
from storefront.ordering.order.order import Order, OrderItem, OrderStatus
from storefront.ordering.order.placement import PlaceOrder

DESCRIPTION = "Lorem ipsum dolor sit amet, consectetur adipiscing elit"


@pytest.fixture()
def catalogue():
    category_id = current_domain.process(CreateCategory(name="Books"), asynchronous=False)

    def add(name, price):
        return current_domain.process(
            CreateProduct(name=name, description=DESCRIPTION, price=price, category_ids=[category_id]),
            asynchronous=False,
        )

    return {
        "category_id": category_id,
        "lotr": add("The Lord of the Rings", 90.5),
        "rails": add("Rails for Dummies", 100.99),
    }


def _place(client_id, lines):
    return current_domain.process(PlaceOrder(client_id=client_id, items=json.dumps(lines)), asynchronous=False)


class TestPlaceOrder:
    def test_persists_order_with_items(self, catalogue):
        order_id = _place(
            "client-1",
            [{"product_id": catalogue["lotr"], "quantity": 2}, {"product_id": catalogue["rails"], "quantity": 1}],
        )

        order = current_domain.repository_for(Order).get(order_id)
        assert order.status == OrderStatus.WAITING_PAYMENT.value
        assert order.client_id == "client-1"
        assert len(order.items) == 2
        assert order.total == pytest.approx(90.5 * 2 + 100.99)

    def test_empty_items_are_rejected(self):
        with pytest.raises(ValidationError) as exc:
            _place("client-1", [])
        assert "items" in exc.value.messages

    def test_malformed_items_are_rejected(self):
        with pytest.raises(ValidationError):
            current_domain.process(PlaceOrder(client_id="client-1", items="not json"), asynchronous=False)

        with pytest.raises(ValidationError):
            _place("client-1", [{"quantity": 1}])

    def test_unknown_product_leaves_nothing_behind(self, catalogue):
        with pytest.raises(ObjectNotFoundError):
            _place(
                "client-1",
                [{"product_id": catalogue["lotr"], "quantity": 1}, {"product_id": "missing", "quantity": 1}],
            )

        assert current_domain.repository_for(Order)._dao.query.all().total == 0
        assert current_domain.repository_for(OrderItem)._dao.query.all().total == 0

    def test_price_is_snapshotted_at_placement(self, catalogue):
        order_id = _place("client-1", [{"product_id": catalogue["lotr"], "quantity": 1}])

        current_domain.process(
            UpdateProduct(
                product_id=catalogue["lotr"],
                name="The Lord of the Rings",
                description=DESCRIPTION,
                price=120.0,
                category_ids=[catalogue["category_id"]],
            ),
            asynchronous=False,
        )

        order = current_domain.repository_for(Order).get(order_id)
        assert order.items[0].price == 90.5
        assert order.total == 90.5

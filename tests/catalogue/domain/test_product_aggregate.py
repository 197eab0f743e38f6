"""Tests for Product creation and detail updates."""

from storefront.catalogue.product.events import ProductAdded, ProductDetailsUpdated
from storefront.catalogue.product.product import Product


def _product(**overrides):
    fields = {
        "name": "Macbook Pro",
        "description": "Lorem ipsum dolor sit amet, consectetur adipiscing elit",
        "price": 1250.0,
        "img_url": "https://example.com/3-big.jpg",
        "category_ids": ["cat-computers"],
    }
    fields.update(overrides)
    return Product.create(**fields)


class TestProductCreate:
    def test_fields_are_set(self):
        product = _product()
        assert product.name == "Macbook Pro"
        assert product.price == 1250.0
        assert product.category_ids == ["cat-computers"]
        assert product.created_at is not None
        assert product.updated_at == product.created_at

    def test_name_and_description_are_trimmed(self):
        product = _product(name="  Macbook Pro  ", description="  A laptop with a long description  ")
        assert product.name == "Macbook Pro"
        assert product.description == "A laptop with a long description"
        assert product.sort_name == "macbook pro"

    def test_raises_product_added(self):
        product = _product()
        assert len(product._events) == 1

        event = product._events[0]
        assert isinstance(event, ProductAdded)
        assert event.product_id == product.id
        assert event.price == 1250.0


class TestProductUpdate:
    def test_replaces_fields_and_records_previous_price(self):
        product = _product()
        product._events.clear()

        product.update_details(
            name="Macbook Air",
            description="A thinner laptop, still with a long description",
            price=999.0,
            img_url=None,
            category_ids=["cat-a", "cat-b"],
        )

        assert product.name == "Macbook Air"
        assert product.sort_name == "macbook air"
        assert product.price == 999.0
        assert product.img_url is None
        assert product.category_ids == ["cat-a", "cat-b"]

        event = product._events[0]
        assert isinstance(event, ProductDetailsUpdated)
        assert event.previous_price == 1250.0
        assert event.price == 999.0

"""Domain events for the Product aggregate."""

from protean.fields import DateTime, Float, Identifier, String

from storefront.domain import storefront


@storefront.event(part_of="Product")
class ProductAdded:
    """A new product was added to the catalogue."""

    __version__ = 1

    product_id: Identifier(required=True)
    name: String(required=True)
    price: Float(required=True)
    created_at: DateTime(required=True)


@storefront.event(part_of="Product")
class ProductDetailsUpdated:
    """A product's details were replaced. Existing order items keep their captured price."""

    __version__ = 1

    product_id: Identifier(required=True)
    name: String(required=True)
    previous_price: Float(required=True)
    price: Float(required=True)

"""Product aggregate root.

Field rules are checked together by ``validation_errors`` so a caller sees
every violation of a submitted product at once, keyed by field name.
"""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, List, String, Text

from storefront.catalogue.product.events import ProductAdded, ProductDetailsUpdated
from storefront.domain import storefront

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 80
DESCRIPTION_MIN_LENGTH = 10


def _clean(value):
    return value.strip() if isinstance(value, str) else value


@storefront.aggregate
class Product:
    """A purchasable item in the catalogue, filed under one or more categories."""

    name: String(required=True, max_length=NAME_MAX_LENGTH)
    sort_name: String(max_length=NAME_MAX_LENGTH)
    description: Text(required=True)
    price: Float(required=True)
    img_url: String(max_length=500)
    category_ids: List(content_type=String)
    created_at: DateTime()
    updated_at: DateTime()

    @staticmethod
    def validation_errors(name, description, price, category_ids):
        """Collect every rule a product payload breaks, keyed by field name."""
        errors = {}

        name = _clean(name)
        if not name:
            errors.setdefault("name", []).append("Name is required")
        elif not NAME_MIN_LENGTH <= len(name) <= NAME_MAX_LENGTH:
            errors.setdefault("name", []).append(
                f"Name must be between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH} characters"
            )

        description = _clean(description)
        if not description or len(description) < DESCRIPTION_MIN_LENGTH:
            errors.setdefault("description", []).append(
                f"Description must be at least {DESCRIPTION_MIN_LENGTH} characters"
            )

        if price is None:
            errors.setdefault("price", []).append("Price is required")
        elif price <= 0:
            errors.setdefault("price", []).append("Price must be positive")

        if not category_ids:
            errors.setdefault("categories", []).append("Product must have at least one category")

        return errors

    @classmethod
    def create(cls, name, description, price, img_url=None, category_ids=None):
        errors = cls.validation_errors(name, description, price, category_ids)
        if errors:
            raise ValidationError(errors)

        now = datetime.now(UTC)
        product = cls(
            name=_clean(name),
            sort_name=_clean(name).casefold(),
            description=_clean(description),
            price=price,
            img_url=img_url,
            category_ids=[str(category_id) for category_id in category_ids],
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductAdded(
                product_id=product.id,
                name=product.name,
                price=product.price,
                created_at=now,
            )
        )
        return product

    def update_details(self, name, description, price, img_url=None, category_ids=None):
        """Replace every editable field, as a full update does."""
        errors = self.validation_errors(name, description, price, category_ids)
        if errors:
            raise ValidationError(errors)

        previous_price = self.price

        self.name = _clean(name)
        self.sort_name = self.name.casefold()
        self.description = _clean(description)
        self.price = price
        self.img_url = img_url
        self.category_ids = [str(category_id) for category_id in category_ids]
        self.updated_at = datetime.now(UTC)

        self.raise_(
            ProductDetailsUpdated(
                product_id=self.id,
                name=self.name,
                previous_price=previous_price,
                price=self.price,
            )
        )

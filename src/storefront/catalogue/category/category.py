"""Category aggregate root and repository for product tagging."""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, String

from storefront.domain import storefront


@storefront.aggregate
class Category:
    """A label products are filed under. A product carries at least one."""

    name: String(required=True, max_length=100)
    created_at: DateTime()

    @classmethod
    def create(cls, name):
        name = (name or "").strip()
        if not name:
            raise ValidationError({"name": ["Category name is required"]})

        return cls(name=name, created_at=datetime.now(UTC))


@storefront.repository(part_of=Category)
class CategoryRepository:
    def list_all(self):
        """All categories ordered by name."""
        return self._dao.query.order_by("name").all().items

    def by_ids(self, category_ids):
        """Categories matching ``category_ids``, ordered by name. Unknown ids are skipped."""
        if not category_ids:
            return []

        return self._dao.query.filter(id__in=[str(i) for i in category_ids]).order_by("name").all().items

    def missing_ids(self, category_ids):
        """Return the ids among ``category_ids`` that match no category."""
        known = {str(category.id) for category in self.by_ids(category_ids)}
        return [category_id for category_id in category_ids if str(category_id) not in known]

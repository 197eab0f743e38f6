"""Read-side queries over the Product aggregate."""

from storefront.catalogue.product.product import Product
from storefront.domain import storefront


@storefront.repository(part_of=Product)
class ProductRepository:
    """Product repository with catalogue search.

    ``search`` pages are zero-based and always ordered by name, ignoring case,
    so asking for the same page twice yields the same products.
    """

    def find_by_id(self, product_id) -> Product:
        return self.get(product_id)

    def search(self, name: str = "", page: int = 0, size: int = 20):
        """Products whose name contains ``name`` (case-insensitive), one page at a time."""
        query = self._dao.query
        name = (name or "").strip()
        if name:
            query = query.filter(name__icontains=name)

        return query.order_by("sort_name").offset(page * size).limit(size).all()

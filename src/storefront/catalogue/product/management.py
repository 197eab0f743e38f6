"""Product write path: commands and handler.

Every command here is admin-only; the HTTP layer checks the role before
dispatching.
"""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Float, Identifier, List, String, Text
from protean.utils.globals import current_domain

from storefront.catalogue.category.category import Category
from storefront.catalogue.product.product import Product
from storefront.domain import storefront
from storefront.ordering.order.order import Order
from storefront.shared.exceptions import ConflictError
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="Product")
class CreateProduct:
    name: String()
    description: Text()
    price: Float()
    img_url: String(max_length=500)
    category_ids: List(content_type=String)


@storefront.command(part_of="Product")
class UpdateProduct:
    product_id: Identifier(required=True)
    name: String()
    description: Text()
    price: Float()
    img_url: String(max_length=500)
    category_ids: List(content_type=String)


@storefront.command(part_of="Product")
class DeleteProduct:
    product_id: Identifier(required=True)


def _check_payload(command):
    """Raise one ValidationError listing every problem with the submitted product."""
    errors = Product.validation_errors(
        command.name,
        command.description,
        command.price,
        command.category_ids,
    )

    missing = current_domain.repository_for(Category).missing_ids(command.category_ids or [])
    if missing:
        errors.setdefault("categories", []).append(f"Unknown categories: {', '.join(missing)}")

    if errors:
        raise ValidationError(errors)


@storefront.command_handler(part_of=Product)
class ManageProductHandler:
    @handle(CreateProduct)
    def create_product(self, command):
        _check_payload(command)

        product = Product.create(
            name=command.name,
            description=command.description,
            price=command.price,
            img_url=command.img_url,
            category_ids=command.category_ids,
        )
        current_domain.repository_for(Product).add(product)

        logger.info("product.added", product_id=str(product.id), name=product.name)
        return str(product.id)

    @handle(UpdateProduct)
    def update_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)

        _check_payload(command)

        product.update_details(
            name=command.name,
            description=command.description,
            price=command.price,
            img_url=command.img_url,
            category_ids=command.category_ids,
        )
        repo.add(product)

        logger.info("product.updated", product_id=str(product.id))
        return str(product.id)

    @handle(DeleteProduct)
    def delete_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)

        if current_domain.repository_for(Order).product_is_referenced(product.id):
            logger.warning("product.delete_blocked", product_id=str(product.id))
            raise ConflictError("Cannot delete: referenced by existing order items")

        repo._dao.delete(product)
        logger.info("product.removed", product_id=str(product.id))

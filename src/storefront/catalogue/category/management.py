"""Category management: commands and handler."""

from protean import handle
from protean.fields import String
from protean.utils.globals import current_domain

from storefront.catalogue.category.category import Category
from storefront.domain import storefront


@storefront.command(part_of="Category")
class CreateCategory:
    name: String(required=True, max_length=100)


@storefront.command_handler(part_of=Category)
class ManageCategoryHandler:
    @handle(CreateCategory)
    def create_category(self, command):
        category = Category.create(name=command.name)
        current_domain.repository_for(Category).add(category)
        return str(category.id)

"""Catalogue area: categories and products.

Protean only discovers element modules one directory below the domain, so
every module that registers an element is imported here.
"""

from storefront.catalogue.category import category, management  # noqa: F401
from storefront.catalogue.product import events, product, repository  # noqa: F401
from storefront.catalogue.product import management as product_management  # noqa: F401

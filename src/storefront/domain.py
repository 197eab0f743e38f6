"""Storefront domain: catalogue, identity and ordering.

A single Protean domain keeps products, accounts and orders in one unit of
work, so order placement can resolve products and product removal can check
existing order items synchronously.
"""

from protean.domain import Domain

from storefront.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

# Get logger for this module
logger = get_logger(__name__)

# Domain Composition Root
storefront = Domain(name="storefront")

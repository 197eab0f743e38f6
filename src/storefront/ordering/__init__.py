"""Ordering area: order placement and the order lifecycle."""

from storefront.ordering.order import events, lifecycle, order, placement, repository  # noqa: F401

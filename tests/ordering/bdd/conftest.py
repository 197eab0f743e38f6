"""Shared BDD fixtures for the ordering scenarios."""

import pytest


@pytest.fixture()
def catalogue():
    """Product ids keyed by product name."""
    return {}


@pytest.fixture()
def wanted():
    """Order lines collected by Given steps: (client_id, product_id, quantity)."""
    return []


@pytest.fixture()
def outcome():
    """Container for the placed order id or the captured exception."""
    return {"order_id": None, "exc": None}

"""Storefront: catalogue browsing, token authentication and order placement."""

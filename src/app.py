"""Storefront FastAPI application.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV selects the config overlay from domain.toml:
#   - unset        -> in-memory providers
#   - "production" -> PostgreSQL at DATABASE_URL
from storefront.api.app import create_app
from storefront.domain import storefront

storefront.init()

app = create_app()

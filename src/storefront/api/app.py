"""Storefront FastAPI application factory.

Every request runs inside the storefront domain context and carries a
``request_id`` in its structured log context.
"""

import uuid

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from storefront.api.errors import register_exception_handlers
from storefront.catalogue.api import category_router, product_router
from storefront.config import get_settings
from storefront.domain import storefront
from storefront.identity.api import auth_router, user_router
from storefront.ordering.api import router as order_router
from storefront.utils.logging import add_context, clear_context, get_logger

logger = get_logger(__name__)


def create_app() -> FastAPI:
    """Build the HTTP application. The domain must already be initialized."""
    settings = get_settings()

    app = FastAPI(
        title="Storefront API",
        description="Catalogue, identity and ordering for the storefront",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        """Push the storefront domain context for each request."""
        with storefront.domain_context():
            return await call_next(request)

    @app.middleware("http")
    async def request_context_middleware(request: Request, call_next):
        """Bind request metadata into the log context for the request's lifetime."""
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        clear_context()
        add_context(request_id=request_id, method=request.method, path=request.url.path)
        try:
            response = await call_next(request)
        finally:
            clear_context()
        response.headers["X-Request-ID"] = request_id
        return response

    register_exception_handlers(app)

    app.include_router(auth_router)
    app.include_router(user_router)
    app.include_router(product_router)
    app.include_router(category_router)
    app.include_router(order_router)

    @app.get("/health")
    async def health():
        return JSONResponse(content={"status": "ok", "domain": storefront.name})

    return app

"""FastAPI endpoints for the Catalogue: products and categories."""

import math

from fastapi import APIRouter, Depends, Query, Response
from protean.utils.globals import current_domain

from storefront.api.security import require_any_role
from storefront.catalogue.api.schemas import (
    CategoryResponse,
    ProductMinResponse,
    ProductPage,
    ProductRequest,
    ProductResponse,
)
from storefront.catalogue.category.category import Category
from storefront.catalogue.product.management import CreateProduct, DeleteProduct, UpdateProduct
from storefront.catalogue.product.product import Product
from storefront.config import get_settings
from storefront.identity.role.role import Authority

product_router = APIRouter(prefix="/products", tags=["products"])
category_router = APIRouter(prefix="/categories", tags=["categories"])

admin_only = require_any_role(Authority.ADMIN)


def _min_view(product) -> ProductMinResponse:
    return ProductMinResponse(
        id=str(product.id),
        name=product.name,
        price=product.price,
        img_url=product.img_url,
    )


def _detail_view(product) -> ProductResponse:
    categories = current_domain.repository_for(Category).by_ids(product.category_ids)
    return ProductResponse(
        id=str(product.id),
        name=product.name,
        description=product.description,
        price=product.price,
        img_url=product.img_url,
        categories=[CategoryResponse(id=str(c.id), name=c.name) for c in categories],
    )


# --- Product endpoints ---


@product_router.get("", response_model=ProductPage)
async def search_products(
    name: str = Query(default=""),
    page: int = Query(default=0, ge=0),
    size: int | None = Query(default=None, ge=1),
) -> ProductPage:
    settings = get_settings()
    size = min(size or settings.default_page_size, settings.max_page_size)

    result = current_domain.repository_for(Product).search(name=name, page=page, size=size)
    return ProductPage(
        content=[_min_view(product) for product in result.items],
        page=page,
        size=size,
        total_elements=result.total,
        total_pages=math.ceil(result.total / size),
    )


@product_router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str) -> ProductResponse:
    product = current_domain.repository_for(Product).find_by_id(product_id)
    return _detail_view(product)


@product_router.post("", status_code=201, response_model=ProductResponse, dependencies=[Depends(admin_only)])
async def create_product(body: ProductRequest) -> ProductResponse:
    command = CreateProduct(
        name=body.name,
        description=body.description,
        price=body.price,
        img_url=body.img_url,
        category_ids=body.category_ids,
    )
    product_id = current_domain.process(command, asynchronous=False)
    return _detail_view(current_domain.repository_for(Product).get(product_id))


@product_router.put("/{product_id}", response_model=ProductResponse, dependencies=[Depends(admin_only)])
async def update_product(product_id: str, body: ProductRequest) -> ProductResponse:
    command = UpdateProduct(
        product_id=product_id,
        name=body.name,
        description=body.description,
        price=body.price,
        img_url=body.img_url,
        category_ids=body.category_ids,
    )
    current_domain.process(command, asynchronous=False)
    return _detail_view(current_domain.repository_for(Product).get(product_id))


@product_router.delete("/{product_id}", status_code=204, dependencies=[Depends(admin_only)])
async def delete_product(product_id: str) -> Response:
    current_domain.process(DeleteProduct(product_id=product_id), asynchronous=False)
    return Response(status_code=204)


# --- Category endpoints ---


@category_router.get("", response_model=list[CategoryResponse])
async def list_categories() -> list[CategoryResponse]:
    categories = current_domain.repository_for(Category).list_all()
    return [CategoryResponse(id=str(c.id), name=c.name) for c in categories]

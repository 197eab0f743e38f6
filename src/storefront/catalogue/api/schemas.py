"""Pydantic request/response schemas for the Catalogue API."""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- Product Request Schemas ---


class CategoryRef(BaseModel):
    id: str
    name: str | None = None


class ProductRequest(BaseModel):
    """Body for both create and update.

    Fields are optional at this layer so that every rule violation is reported
    together by the domain instead of one schema error at a time.
    """

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Smart TV",
                    "description": "Large screen smart TV with streaming apps built in.",
                    "price": 2190.0,
                    "img_url": "https://example.com/img/smart-tv.jpg",
                    "categories": [{"id": "cat-electronics"}],
                }
            ]
        }
    }

    name: str | None = None
    description: str | None = None
    price: float | None = None
    img_url: str | None = Field(None, max_length=500)
    categories: list[CategoryRef] = Field(default_factory=list)

    @property
    def category_ids(self) -> list[str]:
        return [category.id for category in self.categories]


# --- Response Schemas ---


class CategoryResponse(BaseModel):
    id: str
    name: str


class ProductMinResponse(BaseModel):
    id: str
    name: str
    price: float
    img_url: str | None = None


class ProductResponse(ProductMinResponse):
    description: str | None = None
    categories: list[CategoryResponse] = Field(default_factory=list)


class ProductPage(BaseModel):
    content: list[ProductMinResponse]
    page: int
    size: int
    total_elements: int
    total_pages: int

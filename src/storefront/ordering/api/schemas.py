"""Pydantic request/response schemas for the Ordering API."""

from __future__ import annotations

import datetime

from pydantic import BaseModel, Field

# --- Request Schemas ---


class OrderLineRequest(BaseModel):
    product_id: str
    quantity: int = Field(1, ge=1)


class PlaceOrderRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "items": [
                        {"product_id": "prod-001", "quantity": 2},
                        {"product_id": "prod-002", "quantity": 1},
                    ]
                }
            ]
        }
    }

    items: list[OrderLineRequest] = Field(default_factory=list)


# --- Response Schemas ---


class ClientResponse(BaseModel):
    id: str
    name: str | None = None


class PaymentResponse(BaseModel):
    id: str
    moment: datetime.datetime


class OrderItemResponse(BaseModel):
    product_id: str
    name: str
    price: float
    quantity: int
    img_url: str | None = None
    sub_total: float


class OrderResponse(BaseModel):
    id: str
    moment: datetime.datetime
    status: str
    client: ClientResponse
    payment: PaymentResponse | None = None
    items: list[OrderItemResponse]
    total: float

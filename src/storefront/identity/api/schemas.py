"""Pydantic response schemas for the Identity API."""

from __future__ import annotations

import datetime

from pydantic import BaseModel


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int


class UserResponse(BaseModel):
    id: str
    name: str
    email: str
    phone: str | None = None
    birth_date: datetime.date | None = None
    roles: list[str]

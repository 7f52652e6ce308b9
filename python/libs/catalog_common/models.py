"""Shared Pydantic models used across catalog services."""

from __future__ import annotations

from typing import Any, Union

from pydantic import BaseModel


class ProductCreate(BaseModel):
    # Loosely typed: the handler parses the id and builds the Product itself.
    id: Any = None
    type: Any = None
    name: Any = None
    version: Any = None
    price: Any = None


class Product(BaseModel):
    id: int
    type: str | None = None
    name: str | None = None
    version: Union[str, int, float, None] = None
    price: Union[int, float, None] = None


class ErrorResponse(BaseModel):
    message: str


class HealthResponse(BaseModel):
    status: str
    service: str

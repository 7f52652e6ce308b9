"""Product Service: FastAPI application for managing a product catalog."""

from __future__ import annotations

import logging
import re
from typing import Any

from fastapi import APIRouter, Depends, FastAPI, Request
from pydantic import ValidationError

from catalog_common.models import ErrorResponse, HealthResponse, Product, ProductCreate
from product_service.errors import (
    InvalidProduct,
    InvalidProductId,
    ProductNotFound,
    ProductServiceError,
    product_error_handler,
)
from product_service.repository import InMemoryProductRepository, ProductRepository
from product_service.settings import Settings, load_settings

logger = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?[0-9]+")

router = APIRouter()


def parse_product_id(value: Any, message: str) -> int:
    """Parse a base-10 integer id from a path segment or body field."""
    if isinstance(value, bool):
        raise InvalidProductId(message)
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        if _INTEGER.fullmatch(text):
            try:
                return int(text, 10)
            except ValueError:
                # beyond the interpreter's integer string conversion limit
                raise InvalidProductId(message) from None
    raise InvalidProductId(message)


def get_repository(request: Request) -> ProductRepository:
    return request.app.state.repository


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


@router.get("/health", response_model=HealthResponse)
def health(settings: Settings = Depends(get_settings)):
    return HealthResponse(status="ok", service=settings.service_name)


@router.post(
    "/products",
    response_model=Product,
    responses={400: {"model": ErrorResponse}},
)
async def create_product(
    payload: ProductCreate,
    repository: ProductRepository = Depends(get_repository),
    settings: Settings = Depends(get_settings),
):
    product_id = parse_product_id(payload.id, settings.invalid_id_message)
    try:
        product = Product(
            id=product_id,
            type=payload.type,
            name=payload.name,
            version=payload.version,
            price=payload.price,
        )
    except ValidationError as exc:
        raise InvalidProduct(settings.invalid_product_message) from exc

    if settings.persist_on_create:
        await repository.save(product)
        logger.info("Saved product %d", product.id)
    else:
        logger.debug("Created product %d (not persisted)", product.id)
    return product


@router.get("/products", response_model=list[Product])
async def list_products(repository: ProductRepository = Depends(get_repository)):
    return await repository.fetch_all()


@router.get(
    "/product/{product_id}",
    response_model=Product,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def get_product(
    product_id: str,
    repository: ProductRepository = Depends(get_repository),
    settings: Settings = Depends(get_settings),
):
    parsed_id = parse_product_id(product_id, settings.invalid_id_message)
    product = await repository.get_by_id(parsed_id)
    if product is None:
        raise ProductNotFound(settings.not_found_message)
    return product


def create_app(
    repository: ProductRepository | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """Build the service with its own repository and settings."""
    if settings is None:
        settings = load_settings()
    if repository is None:
        if settings.seed_file:
            repository = InMemoryProductRepository.from_seed_file(settings.seed_file)
        else:
            repository = InMemoryProductRepository()

    app = FastAPI(title="Product Service", version="0.3.0")
    app.state.repository = repository
    app.state.settings = settings
    app.add_exception_handler(ProductServiceError, product_error_handler)
    app.include_router(router)
    return app

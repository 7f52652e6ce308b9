"""Recognized product service errors and their JSON rendering."""

from __future__ import annotations

import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from catalog_common.models import ErrorResponse

logger = logging.getLogger(__name__)


class ProductServiceError(Exception):
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidProductId(ProductServiceError):
    status_code = 400


class InvalidProduct(ProductServiceError):
    status_code = 400


class ProductNotFound(ProductServiceError):
    status_code = 404


async def product_error_handler(request: Request, exc: ProductServiceError) -> JSONResponse:
    logger.debug("%s %s -> %d: %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(message=exc.message).model_dump(),
    )

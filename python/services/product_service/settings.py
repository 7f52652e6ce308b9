"""Environment-driven settings for the product service."""

from __future__ import annotations

import os

from pydantic import BaseModel

_ENV_FIELDS = {
    "PRODUCT_PERSIST_ON_CREATE": "persist_on_create",
    "PRODUCT_SEED_FILE": "seed_file",
    "PRODUCT_INVALID_ID_MESSAGE": "invalid_id_message",
    "PRODUCT_INVALID_PRODUCT_MESSAGE": "invalid_product_message",
    "PRODUCT_NOT_FOUND_MESSAGE": "not_found_message",
    "LOG_LEVEL": "log_level",
    "HOST": "host",
    "PORT": "port",
}


class Settings(BaseModel):
    service_name: str = "product-service"
    # Echo-only by default; set to save created products to the repository.
    persist_on_create: bool = False
    seed_file: str | None = None
    invalid_id_message: str = "invalid product id: must be a valid integer"
    invalid_product_message: str = "invalid product"
    not_found_message: str = "Product not found"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000


def load_settings() -> Settings:
    """Build settings from the current environment; empty variables count as unset."""
    values = {
        field: os.environ[key]
        for key, field in _ENV_FIELDS.items()
        if os.environ.get(key)
    }
    settings = Settings.model_validate(values)
    return settings.model_copy(update={"log_level": settings.log_level.upper()})

"""Product storage: the repository interface and an in-memory store."""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable

from catalog_common.models import Product

logger = logging.getLogger(__name__)


class ProductRepository(ABC):

    @abstractmethod
    async def fetch_all(self) -> list[Product]:
        """Return every known product."""

    @abstractmethod
    async def get_by_id(self, product_id: int) -> Product | None:
        """Return the product with this id, or None if there is none."""

    @abstractmethod
    async def save(self, product: Product) -> Product:
        """Insert the product, replacing any stored product with the same id."""


class InMemoryProductRepository(ProductRepository):
    """Dict-backed repository; iteration follows insertion order."""

    def __init__(self, products: Iterable[Product] = ()):
        self._products: dict[int, Product] = {}
        for product in products:
            self._products[product.id] = product

    @classmethod
    def from_seed_file(cls, path: str | Path) -> InMemoryProductRepository:
        """Load products from a JSON file holding an array of product objects."""
        with open(path, "r", encoding="utf-8") as f:
            records = json.load(f)
        if not isinstance(records, list):
            raise ValueError(f"Seed file {path} must contain a JSON array of products")
        products = [Product.model_validate(record) for record in records]
        logger.info("Loaded %d product(s) from %s", len(products), path)
        return cls(products)

    async def fetch_all(self) -> list[Product]:
        return list(self._products.values())

    async def get_by_id(self, product_id: int) -> Product | None:
        return self._products.get(product_id)

    async def save(self, product: Product) -> Product:
        self._products[product.id] = product
        return product

    def __len__(self) -> int:
        return len(self._products)

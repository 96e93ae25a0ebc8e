"""Data-access layer."""

from product_catalog.repositories.product_repository import (
    InMemoryProductRepository,
    ProductRepository,
    SqliteProductRepository,
)

__all__ = [
    "InMemoryProductRepository",
    "ProductRepository",
    "SqliteProductRepository",
]

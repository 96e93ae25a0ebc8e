"""Service layer."""

from product_catalog.services.product_service import ProductService

__all__ = ["ProductService"]

"""Data models module."""

from product_catalog.models.product import PRICE_QUANTUM, Product, quantize_price

__all__ = ["PRICE_QUANTUM", "Product", "quantize_price"]

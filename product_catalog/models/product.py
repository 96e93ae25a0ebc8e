"""Product model for database representation."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

# Currency precision: two decimal places
PRICE_QUANTUM = Decimal("0.01")


def quantize_price(price: Decimal) -> Decimal:
    """Round a price to currency precision (half up)."""
    return Decimal(price).quantize(PRICE_QUANTUM, rounding=ROUND_HALF_UP)


@dataclass
class Product:
    """Product data model representing a row of the Products table.

    ``id`` is 0 until the storage layer assigns one on insert.
    """

    name: str
    price: Decimal
    stock: int
    id: int = 0

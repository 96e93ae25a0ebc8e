"""Product data access.

``ProductRepository`` is the data-access boundary. Two implementations are
provided and chosen when the application is wired:

- ``SqliteProductRepository`` issues parameterized SQL through ``SqliteClient``;
  prices are stored as exact two-place text
- ``InMemoryProductRepository`` keeps records in a dict, for tests

Lookups by an identifier that matches nothing report absence (``None`` or
``False``); they never raise.
"""

import logging
import sqlite3
from abc import ABC, abstractmethod
from dataclasses import replace
from decimal import Decimal
from typing import Dict, List, Optional

from ..clients import SqliteClient
from ..models import Product, quantize_price

logger = logging.getLogger(__name__)

# SQL statements
CREATE_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS Products (
    Id INTEGER PRIMARY KEY AUTOINCREMENT,
    Name TEXT NOT NULL,
    Price TEXT NOT NULL,
    Stock INTEGER NOT NULL
)
"""

SELECT_ALL_SQL = "SELECT Id, Name, Price, Stock FROM Products"
SELECT_BY_ID_SQL = "SELECT Id, Name, Price, Stock FROM Products WHERE Id = ?"
INSERT_SQL = "INSERT INTO Products (Name, Price, Stock) VALUES (?, ?, ?)"
UPDATE_SQL = "UPDATE Products SET Name = ?, Price = ?, Stock = ? WHERE Id = ?"
DELETE_SQL = "DELETE FROM Products WHERE Id = ?"

# SQLite INTEGER PRIMARY KEY range
MIN_ROW_ID = -(2**63)
MAX_ROW_ID = 2**63 - 1


def _is_storable_id(product_id: int) -> bool:
    return MIN_ROW_ID <= product_id <= MAX_ROW_ID


def _row_to_product(row: sqlite3.Row) -> Product:
    return Product(
        id=row["Id"],
        name=row["Name"],
        price=Decimal(row["Price"]),
        stock=row["Stock"],
    )


class ProductRepository(ABC):
    """Data-access boundary for Product records."""

    @abstractmethod
    def get_all(self) -> List[Product]:
        """Return every stored product; an empty list when there are none."""

    @abstractmethod
    def get_by_id(self, product_id: int) -> Optional[Product]:
        """Return the product with ``product_id``, or None if absent."""

    @abstractmethod
    def insert(self, product: Product) -> int:
        """Persist name, price and stock; return the generated identifier.

        ``product.id`` is ignored.
        """

    @abstractmethod
    def update(self, product: Product) -> bool:
        """Replace the stored fields of ``product.id``.

        Returns True if a row was updated, False if the id matched nothing.
        """

    @abstractmethod
    def delete(self, product_id: int) -> bool:
        """Remove the product; True if a row was removed."""

    def close(self) -> None:
        """Release any resources held by the repository."""


class SqliteProductRepository(ProductRepository):
    """Product repository backed by a SQLite database."""

    _sqlite_client: SqliteClient

    def __init__(self, sqlite_client: SqliteClient):
        self._sqlite_client = sqlite_client

    def ensure_schema(self) -> None:
        """Create the Products table if it doesn't exist."""
        self._sqlite_client.execute_script(CREATE_TABLE_SQL)
        logger.debug("Products table initialized")

    def get_all(self) -> List[Product]:
        rows = self._sqlite_client.execute_query(SELECT_ALL_SQL)
        return [_row_to_product(row) for row in rows]

    def get_by_id(self, product_id: int) -> Optional[Product]:
        if not _is_storable_id(product_id):
            return None

        row = self._sqlite_client.execute_query_single(SELECT_BY_ID_SQL, (product_id,))
        if row is None:
            return None
        return _row_to_product(row)

    def insert(self, product: Product) -> int:
        product_id = self._sqlite_client.execute_insert(
            INSERT_SQL,
            (product.name, quantize_price(product.price), product.stock),
        )
        logger.info(f"Inserted product {product_id}: {product.name}")
        return product_id

    def update(self, product: Product) -> bool:
        if not _is_storable_id(product.id):
            return False

        affected = self._sqlite_client.execute_non_query(
            UPDATE_SQL,
            (product.name, quantize_price(product.price), product.stock, product.id),
        )
        if affected == 1:
            logger.info(f"Updated product {product.id}")
        return affected == 1

    def delete(self, product_id: int) -> bool:
        if not _is_storable_id(product_id):
            return False

        affected = self._sqlite_client.execute_non_query(DELETE_SQL, (product_id,))
        if affected > 0:
            logger.info(f"Deleted product {product_id}")
        return affected > 0

    def close(self) -> None:
        self._sqlite_client.close()


class InMemoryProductRepository(ProductRepository):
    """Product repository holding records in process memory.

    Identifiers start at 1 and are never reused, like SQLite AUTOINCREMENT.
    Prices are rounded to currency precision, as the SQLite backend does.
    Records are copied on the way in and out so callers cannot mutate the
    stored state.
    """

    def __init__(self):
        self._products: Dict[int, Product] = {}
        self._last_id = 0

    def get_all(self) -> List[Product]:
        return [replace(self._products[key]) for key in sorted(self._products)]

    def get_by_id(self, product_id: int) -> Optional[Product]:
        product = self._products.get(product_id)
        return replace(product) if product is not None else None

    def insert(self, product: Product) -> int:
        self._last_id += 1
        self._products[self._last_id] = replace(
            product, id=self._last_id, price=quantize_price(product.price)
        )
        return self._last_id

    def update(self, product: Product) -> bool:
        if product.id not in self._products:
            return False
        self._products[product.id] = replace(product, price=quantize_price(product.price))
        return True

    def delete(self, product_id: int) -> bool:
        return self._products.pop(product_id, None) is not None

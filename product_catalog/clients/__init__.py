"""Client modules for external services."""

from product_catalog.clients.sqlite_client import SqliteClient, is_memory_database

__all__ = [
    "SqliteClient",
    "is_memory_database",
]

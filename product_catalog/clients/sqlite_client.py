"""SQLite database client with scoped connection management."""

import logging
import sqlite3
from contextlib import contextmanager
from decimal import Decimal
from typing import Any, Iterator, List, Optional, Sequence

logger = logging.getLogger(__name__)

# Decimals bind as their exact text form
sqlite3.register_adapter(Decimal, str)


def is_memory_database(connection_string: str) -> bool:
    """Return True if the connection string names an in-memory database."""
    return connection_string == ":memory:" or "mode=memory" in connection_string


class SqliteClient:
    """SQLite database client with connection management.

    Each call opens its own connection and releases it when the statement
    is done. An in-memory database only lives as long as its connection, so
    for those a single anchored connection is kept open until ``close()``.

    The anchored connection is shared by every caller and runs in autocommit
    mode: each statement commits on its own, so a block that fails cannot
    roll back writes made through the anchor by another caller. Blocks on
    the anchor are therefore not atomic across statements.
    """

    def __init__(self, connection_string: str):
        self.connection_string = connection_string
        self._anchor: Optional[sqlite3.Connection] = None
        if is_memory_database(connection_string):
            self._anchor = self._open(autocommit=True)
            logger.debug(f"Anchored in-memory database: {connection_string}")

    @property
    def is_memory(self) -> bool:
        """Whether the client is backed by an in-memory database."""
        return self._anchor is not None

    def _open(self, autocommit: bool = False) -> sqlite3.Connection:
        connection = sqlite3.connect(
            self.connection_string,
            uri=self.connection_string.startswith("file:"),
            check_same_thread=False,
        )
        if autocommit:
            connection.isolation_level = None
        connection.row_factory = sqlite3.Row
        return connection

    @contextmanager
    def connect(self) -> Iterator[sqlite3.Connection]:
        """Acquire a connection for the duration of the block.

        Commits when the block completes, rolls back if it raises (a no-op on
        the autocommit anchor), and always releases the connection (the
        anchored in-memory connection is left open).
        """
        connection = self._anchor if self._anchor is not None else self._open()
        try:
            yield connection
            connection.commit()
        except Exception:
            connection.rollback()
            raise
        finally:
            if connection is not self._anchor:
                connection.close()

    def execute_query(self, query: str, params: Sequence[Any] = ()) -> List[sqlite3.Row]:
        """Execute a query and return all results."""
        with self.connect() as connection:
            return connection.execute(query, params).fetchall()

    def execute_query_single(self, query: str, params: Sequence[Any] = ()) -> Optional[sqlite3.Row]:
        """Execute a query and return the first row, or None."""
        with self.connect() as connection:
            return connection.execute(query, params).fetchone()

    def execute_non_query(self, query: str, params: Sequence[Any] = ()) -> int:
        """Execute an UPDATE/DELETE statement and return the affected row count."""
        with self.connect() as connection:
            return connection.execute(query, params).rowcount

    def execute_insert(self, query: str, params: Sequence[Any] = ()) -> int:
        """Execute an INSERT statement and return the generated row id."""
        with self.connect() as connection:
            return connection.execute(query, params).lastrowid

    def execute_script(self, script: str) -> None:
        """Execute a multi-statement SQL script (DDL)."""
        with self.connect() as connection:
            connection.executescript(script)

    def close(self):
        """Close the anchored connection, if any."""
        if self._anchor is not None:
            self._anchor.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit with cleanup."""
        self.close()
        return False

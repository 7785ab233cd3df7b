"""
db/connection.py
----------------
Owns the single PostgreSQL connection shared by the whole process.
The Database object is created once at startup and passed to whoever needs it.
"""

from contextlib import contextmanager
from typing import Iterator

import psycopg2
from psycopg2 import extras

from db.errors import DatabaseConnectionError, decode_error
from utils.logger import get_logger

logger = get_logger(__name__)


class Database:
    """
    One long-lived psycopg2 connection.

    There is no pool and no reconnection: if the connection drops, every
    later query fails with DatabaseConnectionError until the process restarts.
    psycopg2 connections are thread-safe, so concurrent callers are
    serialized by the driver.

    Usage:
        with Database(DATABASE_URL) as db:
            with db.cursor() as cur:
                cur.execute("SELECT 1")
    """

    def __init__(self, dsn: str):
        self._dsn = dsn
        self._conn = None

    def connect(self) -> "Database":
        """
        Open the connection.

        Raises:
            DatabaseConnectionError: If the database is unreachable.
        """
        if self._conn is not None:
            return self
        try:
            self._conn = psycopg2.connect(self._dsn)
        except psycopg2.Error as e:
            logger.error(f"Failed to connect to the database: {e}")
            raise DatabaseConnectionError(str(e).strip()) from e
        logger.info("Database connection established.")
        return self

    def close(self) -> None:
        """Close the connection. Safe to call more than once."""
        if self._conn is None:
            return
        self._conn.close()
        self._conn = None
        logger.info("Database connection closed.")

    @property
    def connected(self) -> bool:
        return self._conn is not None and not self._conn.closed

    def __enter__(self) -> "Database":
        return self.connect()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @contextmanager
    def cursor(self) -> Iterator[extras.RealDictCursor]:
        """
        Yield a cursor whose rows are dicts, inside a transaction.

        Commits when the block finishes and rolls back if it raises.
        Driver errors are re-raised as StorageError subclasses.

        Raises:
            DatabaseConnectionError: If connect() has not been called.
        """
        if self._conn is None:
            raise DatabaseConnectionError("Database not connected. Call connect() first.")
        conn = self._conn
        try:
            with conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
                yield cur
            conn.commit()
        except psycopg2.Error as e:
            self._rollback(conn)
            raise decode_error(e) from e
        except Exception:
            self._rollback(conn)
            raise

    @staticmethod
    def _rollback(conn) -> None:
        if conn.closed:
            return
        try:
            conn.rollback()
        except psycopg2.Error as e:
            logger.error(f"Rollback failed: {e}")

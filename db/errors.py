"""
db/errors.py
------------
Typed storage errors. psycopg2 exceptions are translated here exactly once,
so the layers above never inspect SQLSTATE codes themselves.
"""

import psycopg2
from psycopg2 import errors as pg_errors


class StorageError(Exception):
    """Base class for every database failure surfaced by the db layer."""


class UniqueViolation(StorageError):
    """A value collided with a UNIQUE constraint (e.g. a duplicate partner name)."""


class ForeignKeyViolation(StorageError):
    """A row referenced a parent that does not exist."""


class DatabaseConnectionError(StorageError):
    """The database is unreachable or the connection was lost."""


def decode_error(exc: psycopg2.Error) -> StorageError:
    """
    Map a psycopg2 exception onto the storage error taxonomy.

    Args:
        exc: The exception raised by the driver.

    Returns:
        A StorageError subclass instance. The caller should raise it
        ``from exc`` to keep the driver detail for the logs.
    """
    message = str(exc).strip() or exc.__class__.__name__
    if isinstance(exc, pg_errors.UniqueViolation):
        return UniqueViolation(message)
    if isinstance(exc, pg_errors.ForeignKeyViolation):
        return ForeignKeyViolation(message)
    if isinstance(exc, (psycopg2.OperationalError, psycopg2.InterfaceError)):
        return DatabaseConnectionError(message)
    return StorageError(message)

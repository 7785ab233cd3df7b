import sys
from pathlib import Path

import pytest

# Ensure project root on sys.path
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


class FakeCursor:
    """Stands in for a psycopg2 RealDictCursor."""

    def __init__(self, conn):
        self.conn = conn
        self.rowcount = -1

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def execute(self, sql, params=None):
        self.conn.executed.append((sql, params))
        if self.conn.fail_with is not None:
            raise self.conn.fail_with
        self.rowcount = self.conn.rowcount

    def fetchall(self):
        return list(self.conn.rows)

    def fetchone(self):
        return self.conn.rows[0] if self.conn.rows else None


class FakeConnection:
    """Records statements and transaction calls; scripted via attributes."""

    def __init__(self):
        self.executed = []
        self.rows = []
        self.rowcount = 0
        self.fail_with = None
        self.commits = 0
        self.rollbacks = 0
        self.closed = 0

    def cursor(self, cursor_factory=None):
        return FakeCursor(self)

    def commit(self):
        self.commits += 1

    def rollback(self):
        self.rollbacks += 1

    def close(self):
        self.closed = 1


@pytest.fixture()
def fake_conn():
    return FakeConnection()


@pytest.fixture()
def db(monkeypatch, fake_conn):
    from db import connection

    monkeypatch.setattr(connection.psycopg2, "connect", lambda dsn: fake_conn)
    database = connection.Database("postgresql://test@localhost/test")
    database.connect()
    yield database
    database.close()

"""
Shared fixtures: an in-memory stand-in for the PostgreSQL connection pool.

FakeStore understands the handful of statements the waitlist code issues and
enforces the same named unique constraints as db/init_db.py, raising real
psycopg2 UniqueViolation errors that carry a constraint name.
"""

from datetime import datetime
from types import SimpleNamespace

import pytest
from psycopg2 import errors

import db.init_db
import repositories.waitlist_repo


def make_unique_violation(constraint: str, column: str) -> errors.UniqueViolation:
    """Build a UniqueViolation whose diag reports `constraint`, like the server does."""
    cls = type(
        "UniqueViolation",
        (errors.UniqueViolation,),
        {"diag": SimpleNamespace(constraint_name=constraint)},
    )
    return cls(
        f'duplicate key value violates unique constraint "{constraint}"\n'
        f"DETAIL:  Key ({column})=(...) already exists."
    )


class FakeStore:
    def __init__(self):
        self.rows: list[tuple] = []
        self.next_id = 1
        self.schema_objects: set[str] = set()
        self.schema_runs = 0
        self.commits = 0
        self.rollbacks = 0
        self.released = 0
        # Set to an exception instance to make the next execute() raise it.
        self.fail_with: Exception | None = None
        # Set to True to make INSERT ... RETURNING come back empty.
        self.return_nothing = False

    def execute(self, sql: str, params=None):
        if self.fail_with is not None:
            exc, self.fail_with = self.fail_with, None
            raise exc

        statement = " ".join(sql.split()).upper()
        if "CREATE TABLE IF NOT EXISTS WAITLIST_ENTRIES" in statement:
            self.schema_runs += 1
            self.schema_objects.add("waitlist_entries")
            if "CREATE INDEX IF NOT EXISTS IDX_CREATED_AT" in statement:
                self.schema_objects.add("idx_created_at")
            return None
        if statement.startswith("INSERT INTO WAITLIST_ENTRIES"):
            username, wallet = params
            if any(row[1] == username for row in self.rows):
                raise make_unique_violation("unique_twitter", "twitter_username")
            if any(row[2] == wallet for row in self.rows):
                raise make_unique_violation("unique_wallet", "wallet_address")
            if self.return_nothing:
                return None
            row = (self.next_id, username, wallet, datetime.now())
            self.next_id += 1
            self.rows.append(row)
            return row
        if statement.startswith("SELECT COUNT(*) FROM WAITLIST_ENTRIES"):
            return (len(self.rows),)
        raise AssertionError(f"unexpected SQL: {sql}")


class FakeCursor:
    def __init__(self, store: FakeStore):
        self.store = store
        self._result = None

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def execute(self, sql, params=None):
        self._result = self.store.execute(sql, params)

    def fetchone(self):
        return self._result


class FakeConnection:
    def __init__(self, store: FakeStore):
        self.store = store

    def cursor(self):
        return FakeCursor(self.store)

    def commit(self):
        self.store.commits += 1

    def rollback(self):
        self.store.rollbacks += 1


@pytest.fixture()
def fake_db(monkeypatch) -> FakeStore:
    """Route every get_connection()/release_connection() call to a FakeStore."""
    store = FakeStore()

    def get_connection():
        return FakeConnection(store)

    def release_connection(conn):
        store.released += 1

    for module in (repositories.waitlist_repo, db.init_db):
        monkeypatch.setattr(module, "get_connection", get_connection)
        monkeypatch.setattr(module, "release_connection", release_connection)
    return store

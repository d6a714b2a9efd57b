"""
repositories/waitlist_repo.py
------------------------------
Data access layer for waitlist signups.
All SQL queries related to the `waitlist_entries` table live here.

The public methods are coroutines: each one runs a single blocking
psycopg2 round trip on the db thread pool (db.connection.run_db) so the
event loop keeps serving other updates while the database answers.
"""

import psycopg2
from psycopg2 import errors

from db.connection import get_connection, release_connection, run_db
from db.init_db import create_tables
from models.waitlist import WaitlistEntry
from repositories.exceptions import (
    DuplicateEntryError,
    DuplicateUsernameError,
    DuplicateWalletError,
    StorageError,
)
from utils.logger import get_logger

logger = get_logger(__name__)

# Constraint name -> domain error. Covers the named constraints created by
# db/init_db.py and PostgreSQL's default names for column-level UNIQUE.
CONSTRAINT_ERRORS: dict[str, type[DuplicateEntryError]] = {
    "unique_twitter": DuplicateUsernameError,
    "waitlist_entries_twitter_username_key": DuplicateUsernameError,
    "unique_wallet": DuplicateWalletError,
    "waitlist_entries_wallet_address_key": DuplicateWalletError,
}


def _constraint_name(exc: psycopg2.Error) -> str | None:
    diag = getattr(exc, "diag", None)
    return getattr(diag, "constraint_name", None)


class WaitlistRepository:
    """Repository for the waitlist_entries table: insert, count, initialize."""

    # ── CREATE ────────────────────────────────────────────

    async def insert(self, twitter_username: str, wallet_address: str) -> WaitlistEntry:
        """
        Insert a new waitlist entry.

        Args:
            twitter_username: Twitter handle to register.
            wallet_address: Wallet address to register.

        Returns:
            The persisted WaitlistEntry with `id` and `created_at` populated.

        Raises:
            DuplicateUsernameError: The Twitter username is already on the waitlist.
            DuplicateWalletError: The wallet address is already on the waitlist.
            StorageError: Any other database failure, unchanged.
        """
        return await run_db(self._insert, twitter_username, wallet_address)

    def _insert(self, twitter_username: str, wallet_address: str) -> WaitlistEntry:
        sql = """
            INSERT INTO waitlist_entries (twitter_username, wallet_address)
            VALUES (%s, %s)
            RETURNING id, twitter_username, wallet_address, created_at;
        """
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, (twitter_username, wallet_address))
                row = cur.fetchone()
            if row is None:
                raise StorageError("Failed to insert waitlist entry")
            conn.commit()
        except errors.UniqueViolation as e:
            conn.rollback()
            error_cls = CONSTRAINT_ERRORS.get(_constraint_name(e))
            if error_cls is None:
                logger.error(f"Unexpected unique violation for @{twitter_username}: {e}")
                raise
            logger.info(f"Rejected duplicate {error_cls.field} for @{twitter_username}")
            raise error_cls() from e
        except Exception as e:
            conn.rollback()
            logger.error(f"Failed to insert waitlist entry for @{twitter_username}: {e}")
            raise
        finally:
            release_connection(conn)

        entry = WaitlistEntry.from_row(row)
        logger.info(f"Added waitlist entry {entry}")
        return entry

    # ── READ ──────────────────────────────────────────────

    async def count(self) -> int:
        """
        Return the total number of waitlist entries.

        Best effort: any failure is logged and reported as 0, so an empty
        waitlist and a failed query look the same to the caller.
        """
        try:
            return await run_db(self._count)
        except Exception:
            logger.exception("Error getting waitlist count")
            return 0

    def _count(self) -> int:
        sql = "SELECT COUNT(*) FROM waitlist_entries;"
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql)
                row = cur.fetchone()
            return int(row[0])
        finally:
            release_connection(conn)

    # ── SCHEMA ────────────────────────────────────────────

    async def initialize(self) -> None:
        """Create the waitlist table and index if absent. Errors propagate."""
        await run_db(create_tables)

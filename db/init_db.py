"""
db/init_db.py
-------------
Creates the waitlist schema if it does not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

from db.connection import get_connection, release_connection
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Waitlist signups: one row per Twitter handle / wallet pair
CREATE TABLE IF NOT EXISTS waitlist_entries (
    id                  SERIAL PRIMARY KEY,
    twitter_username    VARCHAR(255) NOT NULL,
    wallet_address      VARCHAR(42) NOT NULL,
    created_at          TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    CONSTRAINT unique_twitter UNIQUE (twitter_username),
    CONSTRAINT unique_wallet UNIQUE (wallet_address)
);

-- Newest signups first
CREATE INDEX IF NOT EXISTS idx_created_at ON waitlist_entries (created_at DESC);
"""


def create_tables() -> None:
    """
    Execute the schema SQL to create the waitlist table and its index.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    conn = get_connection()
    try:
        with conn.cursor() as cur:
            cur.execute(SCHEMA_SQL)
        conn.commit()
        logger.info("Database schema initialized successfully.")
    except Exception as e:
        conn.rollback()
        logger.error(f"Failed to initialize schema: {e}")
        raise
    finally:
        release_connection(conn)


if __name__ == "__main__":
    from db.connection import init_pool, close_pool
    init_pool()
    try:
        create_tables()
    finally:
        close_pool()
    print("Database schema created successfully.")

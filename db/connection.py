"""
db/connection.py
----------------
Owns the waitlist's PostgreSQL connections.

Repository coroutines hand their blocking psycopg2 work to `run_db()`, which
runs it on a dedicated thread pool no larger than the connection pool. Every
worker can therefore always borrow a connection, and callers beyond that
limit queue up instead of being turned away.
"""

import asyncio
import functools
from concurrent.futures import ThreadPoolExecutor

import psycopg2
from psycopg2 import pool

from config import DATABASE_URL, DB_POOL_MIN, DB_POOL_MAX
from utils.logger import get_logger

logger = get_logger(__name__)

_pool: pool.ThreadedConnectionPool | None = None
_executor = ThreadPoolExecutor(max_workers=DB_POOL_MAX, thread_name_prefix="waitlist-db")


def init_pool(min_conn: int = DB_POOL_MIN, max_conn: int = DB_POOL_MAX) -> None:
    """
    Open the shared connection pool against DATABASE_URL.
    Calling it again while a pool is open does nothing.

    Raises:
        psycopg2.OperationalError: If PostgreSQL cannot be reached.
    """
    global _pool
    if _pool is not None:
        return
    try:
        _pool = pool.ThreadedConnectionPool(min_conn, max_conn, DATABASE_URL)
        logger.info(f"Waitlist database pool ready ({min_conn}-{max_conn} connections).")
    except psycopg2.OperationalError as e:
        logger.error(f"Could not open waitlist database pool: {e}")
        raise


def get_connection():
    """
    Borrow a connection; pair every call with release_connection().

    Raises:
        psycopg2.pool.PoolError: If init_pool() has not been called.
    """
    if _pool is None:
        raise pool.PoolError("Waitlist database pool is not open. Call init_pool() first.")
    return _pool.getconn()


def release_connection(conn) -> None:
    """Hand a borrowed connection back to the pool."""
    if _pool is not None:
        _pool.putconn(conn)


def close_pool() -> None:
    """Close every pooled connection."""
    global _pool
    if _pool is not None:
        _pool.closeall()
        _pool = None
        logger.info("Waitlist database pool closed.")


async def run_db(func, *args):
    """Run blocking database work on the db thread pool and await its result."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(_executor, functools.partial(func, *args))

"""
===============================================================================
CRC CARD — infrastructure/db/pool.py
===============================================================================

Component:
  PostgreSQL connection pool (process-wide singleton)

Responsibilities:
  - Initialize, expose and close the pool.
  - Configure every new connection (statement_timeout).

Collaborators:
  - psycopg_pool.ConnectionPool
  - crosscutting/config.py (timeout)
  - api/main.py (lifespan: init_pool / close_pool)

Principles:
  - Fail fast: double init and use-before-init are errors.
===============================================================================
"""

from __future__ import annotations

import threading
from typing import Optional

from psycopg import Connection
from psycopg_pool import ConnectionPool

from ...crosscutting.logger import logger
from .errors import PoolAlreadyInitializedError, PoolNotInitializedError

_pool: Optional[ConnectionPool] = None
_pool_lock = threading.Lock()


def _configure_connection(conn: Connection) -> None:
    """Run once per new pooled connection."""
    from ...crosscutting.config import get_settings

    timeout_ms = int(get_settings().db_statement_timeout_ms)
    if timeout_ms > 0:
        conn.execute(f"SET statement_timeout = {timeout_ms}")
        conn.commit()


def init_pool(database_url: str, min_size: int, max_size: int) -> ConnectionPool:
    """Create and open the pool (once per process)."""
    global _pool

    with _pool_lock:
        if _pool is not None:
            raise PoolAlreadyInitializedError("Pool already initialized.")

        logger.info(
            "initializing DB pool",
            extra={"min_size": min_size, "max_size": max_size},
        )
        _pool = ConnectionPool(
            conninfo=database_url,
            min_size=min_size,
            max_size=max_size,
            configure=_configure_connection,
            open=True,
        )
        return _pool


def get_pool() -> ConnectionPool:
    if _pool is None:
        raise PoolNotInitializedError("Pool not initialized. Call init_pool() first.")
    return _pool


def close_pool() -> None:
    """Close the pool (idempotent)."""
    global _pool

    with _pool_lock:
        if _pool is None:
            return
        logger.info("closing DB pool")
        try:
            _pool.close()
        finally:
            _pool = None


def reset_pool() -> None:
    """Drop the singleton without closing it (tests)."""
    global _pool

    with _pool_lock:
        _pool = None


def ping() -> bool:
    """SELECT 1 through the pool; False on any failure."""
    try:
        with get_pool().connection() as conn:
            conn.execute("SELECT 1").fetchone()
        return True
    except Exception as exc:
        logger.warning("DB ping failed", extra={"error": str(exc)})
        return False

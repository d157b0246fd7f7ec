"""
===============================================================================
CRC CARD — infrastructure/db/errors.py
===============================================================================

Component:
  Typed pool/connectivity errors

Responsibilities:
  - Replace generic RuntimeErrors with "not initialized" / "already
    initialized" semantics.
===============================================================================
"""


class DatabasePoolError(Exception):
    """Base for pool errors."""


class PoolAlreadyInitializedError(DatabasePoolError):
    """init_pool() called twice."""


class PoolNotInitializedError(DatabasePoolError):
    """Pool used before init_pool()."""

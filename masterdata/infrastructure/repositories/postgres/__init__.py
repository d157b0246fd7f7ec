"""
PostgreSQL Repository Implementations.

Raw parametrized SQL over psycopg 3 and psycopg_pool.
"""

from .facility import PostgresFacilityRepository
from .user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresFacilityRepository",
]

"""
============================================================
CRC CARD
============================================================
Class: masterdata.infrastructure.repositories (Package exports)

Responsibilities:
- Expose the concrete repositories (Postgres and in-memory) from one import
  point.

Collaborators:
- Postgres repositories (raw SQL)
- In-memory repositories (tests / STORAGE_BACKEND=memory)
============================================================
"""

# ---------------------------
# In-memory implementations
# Fast unit tests and throwaway environments. Nothing survives a restart.
# ---------------------------
from .in_memory import InMemoryFacilityRepository, InMemoryUserRepository

# ---------------------------
# Postgres implementations
# Production persistence, unique keys enforced by the schema.
# ---------------------------
from .postgres import PostgresFacilityRepository, PostgresUserRepository

__all__ = [
    # Postgres
    "PostgresUserRepository",
    "PostgresFacilityRepository",
    # In-memory
    "InMemoryUserRepository",
    "InMemoryFacilityRepository",
]

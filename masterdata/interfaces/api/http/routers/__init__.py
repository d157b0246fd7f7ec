"""
===============================================================================
CRC CARD — interfaces/api/http/routers/__init__.py
===============================================================================

Name:
    Routers Package (HTTP)

Responsibilities:
    - Expose one router per entity for the root router to include.

Collaborators:
    - routers.users
    - routers.facilities

Notes:
    - This file defines NO endpoints. It only re-exports routers.
===============================================================================
"""

from .facilities import router as facilities_router
from .users import router as users_router

__all__ = [
    "facilities_router",
    "users_router",
]

"""
===============================================================================
CRC CARD — router.py (root router / composition)
===============================================================================

Responsibilities:
  - Define the root APIRouter included by FastAPI (app.include_router).
  - Centralize RFC7807 responses for OpenAPI.
  - Compose one sub-router per entity (users/facilities).

Patterns:
  - Composition over inheritance: the root router composes sub-routers.
  - Factory: build_router() keeps composition testable without import-time
    side effects.

Collaborators:
  - crosscutting.error_responses.OPENAPI_ERROR_RESPONSES
  - routers.* (feature sub-routers)

Notes:
  - Included from masterdata/api/main.py with prefix="/v1".
===============================================================================
"""

from __future__ import annotations

from fastapi import APIRouter

from ....crosscutting.error_responses import OPENAPI_ERROR_RESPONSES
from .routers.facilities import router as facilities_router
from .routers.users import router as users_router


def build_router() -> APIRouter:
    """Build the v1 root router."""
    api_router = APIRouter(responses=OPENAPI_ERROR_RESPONSES)

    api_router.include_router(users_router)
    api_router.include_router(facilities_router)

    return api_router


router = build_router()

__all__ = ["router", "build_router"]

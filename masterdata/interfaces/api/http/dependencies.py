"""
===============================================================================
CRC CARD — dependencies.py (shared router helpers)
===============================================================================

Responsibilities:
  - Parse list filters from query params ("ALL" / blank -> no filter).
  - Check the requested page size against the allowed options.
  - Build CSV download responses.

Patterns:
  - DRY: small helpers shared by the users and facilities routers.
  - Fail-fast: bad filter values become 422 before any use case runs.

Collaborators:
  - crosscutting.config (PAGE_SIZE_OPTIONS, get_settings)
  - crosscutting.error_responses (validation_error)
===============================================================================
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Type, TypeVar

from fastapi import Response

from ....crosscutting.config import PAGE_SIZE_OPTIONS, get_settings
from ....crosscutting.error_responses import validation_error

E = TypeVar("E", bound=Enum)

# Sentinel used by the list screens for "no filter".
ALL_FILTER = "ALL"

CSV_MEDIA_TYPE = "text/csv; charset=utf-8"


def parse_enum_filter(
    value: Optional[str], enum_cls: Type[E], field: str
) -> Optional[E]:
    """Map a query filter to its enum member (None means unfiltered)."""
    if value is None:
        return None
    cleaned = value.strip()
    if not cleaned or cleaned.upper() == ALL_FILTER:
        return None
    try:
        return enum_cls(cleaned.upper())
    except ValueError:
        allowed = ", ".join([ALL_FILTER] + [m.value for m in enum_cls])
        raise validation_error(
            f"Invalid {field} filter.",
            [{"field": field, "msg": f"must be one of: {allowed}"}],
        ) from None


def resolve_page_size(page_size: Optional[int]) -> int:
    """Default the page size from settings and reject unsupported values."""
    if page_size is None:
        return get_settings().default_page_size
    if page_size not in PAGE_SIZE_OPTIONS:
        allowed = ", ".join(str(n) for n in PAGE_SIZE_OPTIONS)
        raise validation_error(
            "Invalid page size.",
            [{"field": "page_size", "msg": f"must be one of: {allowed}"}],
        )
    return page_size


def csv_response(content: str, filename: str) -> Response:
    return Response(
        content=content,
        media_type=CSV_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )

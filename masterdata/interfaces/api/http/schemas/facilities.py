"""
===============================================================================
CRC CARD — schemas/facilities.py
===============================================================================

Module:
    HTTP schemas for facilities

Responsibilities:
    - Request DTOs for create/update/deactivate.
    - Response DTOs for single facilities and paginated lists.

Collaborators:
    - domain.entities.FacilityCategory, FacilityStatus
    - schemas.common

Notes:
    - Dates are accepted as "YYYY-MM-DD" (midnight UTC) or ISO datetimes.
===============================================================================
"""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from .....crosscutting.pagination import PageInfo
from .....domain.entities import FacilityCategory, FacilityStatus
from .common import BoolIn, NumberIn, PatchModel, TextIn


# -----------------------------------------------------------------------------
# Requests
# -----------------------------------------------------------------------------
class FacilityFieldsReq(PatchModel):
    code: TextIn = None
    name: TextIn = None
    name_kana: TextIn = None
    category: TextIn = None
    status: TextIn = None
    start_date: TextIn = None
    end_date: TextIn = None
    country: TextIn = None
    prefecture: TextIn = None
    city: TextIn = None
    address_line1: TextIn = None
    postal_code: TextIn = None
    latitude: NumberIn = None
    longitude: NumberIn = None
    phone: TextIn = None
    email: TextIn = None
    contact_name: TextIn = None
    contact_phone: TextIn = None
    contact_email: TextIn = None
    capacity: NumberIn = None
    display_order: NumberIn = None
    image_url: TextIn = None
    note: TextIn = None
    billing_code: TextIn = None
    is_integrated: BoolIn = None
    synced_at: TextIn = None
    updated_by: TextIn = None


class CreateFacilityReq(FacilityFieldsReq):
    created_by: TextIn = None


class UpdateFacilityReq(FacilityFieldsReq):
    """Partial patch: omitted keys keep their value, null clears them."""


class DeactivateFacilityReq(PatchModel):
    end_date: TextIn = None


# -----------------------------------------------------------------------------
# Responses
# -----------------------------------------------------------------------------
class FacilityRes(BaseModel):
    id: UUID
    code: str
    name: str
    name_kana: str | None = None
    category: FacilityCategory
    status: FacilityStatus
    start_date: datetime | None = None
    end_date: datetime | None = None
    country: str
    prefecture: str | None = None
    city: str | None = None
    address_line1: str | None = None
    postal_code: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    phone: str | None = None
    email: str | None = None
    contact_name: str | None = None
    contact_phone: str | None = None
    contact_email: str | None = None
    capacity: int | None = None
    display_order: int | None = None
    image_url: str | None = None
    note: str | None = None
    billing_code: str | None = None
    is_integrated: bool
    synced_at: datetime | None = None
    created_by: str | None = None
    updated_by: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class FacilitiesPageRes(BaseModel):
    items: list[FacilityRes]
    page_info: PageInfo

"""
===============================================================================
CRC CARD — interfaces/api/http/routers/facilities.py
===============================================================================

Class/Module:
    Facility Router

Responsibilities:
    - Expose HTTP endpoints for the facility master table.
    - Convert HTTP requests -> use-case inputs (raw form mappings).
    - Translate UseCaseError -> RFC7807 via error_mapping.
    - Paginate list results and render CSV exports.

Collaborators:
    - application.usecases.facilities (Create/Update/Deactivate/Get/List)
    - application.csv_export.facilities_to_csv
    - crosscutting.pagination.build_page
    - container (DI factories)
    - schemas.facilities (pydantic DTOs)

Notes:
    - Facilities are never deleted; POST /facilities/{id}/deactivate marks
      them INACTIVE.
===============================================================================
"""

from __future__ import annotations

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from .....application.csv_export import facilities_to_csv
from .....application.normalization import MISSING
from .....application.usecases.facilities import (
    CreateFacilityUseCase,
    DeactivateFacilityUseCase,
    GetFacilityUseCase,
    ListFacilitiesUseCase,
    UpdateFacilityUseCase,
)
from .....container import (
    get_create_facility_use_case,
    get_deactivate_facility_use_case,
    get_get_facility_use_case,
    get_list_facilities_use_case,
    get_update_facility_use_case,
)
from .....crosscutting.config import get_settings
from .....crosscutting.error_responses import internal_error
from .....crosscutting.pagination import build_page
from .....domain.entities import Facility, FacilityCategory, FacilityStatus
from .....domain.filtering import FacilitySearchSpec
from ..dependencies import csv_response, parse_enum_filter, resolve_page_size
from ..error_mapping import raise_use_case_error
from ..schemas.facilities import (
    CreateFacilityReq,
    DeactivateFacilityReq,
    FacilitiesPageRes,
    FacilityRes,
    UpdateFacilityReq,
)

router = APIRouter()


# =============================================================================
# Internal helpers
# =============================================================================


def _to_facility_res(facility: Facility) -> FacilityRes:
    return FacilityRes.model_validate(facility, from_attributes=True)


def _search_spec(
    keyword: Optional[str], category: Optional[str], status: Optional[str]
) -> FacilitySearchSpec:
    return FacilitySearchSpec(
        keyword=keyword,
        category=parse_enum_filter(category, FacilityCategory, "category"),
        status=parse_enum_filter(status, FacilityStatus, "status"),
    )


def _list_facilities(
    use_case: ListFacilitiesUseCase, spec: FacilitySearchSpec
) -> List[Facility]:
    result = use_case.execute(spec)
    if result.error is not None:
        raise_use_case_error(result.error)
    return list(result.facilities)


def _facility_or_raise(result) -> Facility:
    if result.error is not None:
        raise_use_case_error(result.error)
    if result.facility is None:
        raise internal_error("Facility operation returned no facility.")
    return result.facility


# =============================================================================
# Endpoints
# =============================================================================


@router.get("/facilities", response_model=FacilitiesPageRes, tags=["facilities"])
def list_facilities(
    keyword: Optional[str] = Query(
        None, description="Matches name, code, prefecture, city, address"
    ),
    category: Optional[str] = Query(None, description="Category or ALL"),
    status: Optional[str] = Query(None, description="Status or ALL"),
    page: int = Query(0, ge=0, description="Zero-based page index"),
    page_size: Optional[int] = Query(None, description="5, 10, 25 or 50"),
    use_case: ListFacilitiesUseCase = Depends(get_list_facilities_use_case),
):
    size = resolve_page_size(page_size)
    facilities = _list_facilities(use_case, _search_spec(keyword, category, status))

    result_page = build_page(facilities, page, size)
    return FacilitiesPageRes(
        items=[_to_facility_res(f) for f in result_page.items],
        page_info=result_page.page_info,
    )


# Declared before /facilities/{facility_id} so the literal path wins.
@router.get("/facilities/export.csv", tags=["facilities"])
def export_facilities_csv(
    keyword: Optional[str] = Query(None),
    category: Optional[str] = Query(None),
    status: Optional[str] = Query(None),
    use_case: ListFacilitiesUseCase = Depends(get_list_facilities_use_case),
):
    facilities = _list_facilities(use_case, _search_spec(keyword, category, status))
    limit = get_settings().csv_export_max_rows
    return csv_response(facilities_to_csv(facilities[:limit]), "facilities.csv")


@router.get(
    "/facilities/{facility_id}", response_model=FacilityRes, tags=["facilities"]
)
def get_facility(
    facility_id: UUID,
    use_case: GetFacilityUseCase = Depends(get_get_facility_use_case),
):
    return _to_facility_res(_facility_or_raise(use_case.execute(facility_id)))


@router.post(
    "/facilities", response_model=FacilityRes, status_code=201, tags=["facilities"]
)
def create_facility(
    req: CreateFacilityReq,
    use_case: CreateFacilityUseCase = Depends(get_create_facility_use_case),
):
    return _to_facility_res(_facility_or_raise(use_case.execute(req.to_raw())))


@router.patch(
    "/facilities/{facility_id}", response_model=FacilityRes, tags=["facilities"]
)
def update_facility(
    facility_id: UUID,
    req: UpdateFacilityReq,
    use_case: UpdateFacilityUseCase = Depends(get_update_facility_use_case),
):
    result = use_case.execute(facility_id, req.to_raw())
    return _to_facility_res(_facility_or_raise(result))


@router.post(
    "/facilities/{facility_id}/deactivate",
    response_model=FacilityRes,
    tags=["facilities"],
)
def deactivate_facility(
    facility_id: UUID,
    req: Optional[DeactivateFacilityReq] = None,
    use_case: DeactivateFacilityUseCase = Depends(get_deactivate_facility_use_case),
):
    end_date = req.to_raw().get("end_date", MISSING) if req is not None else MISSING
    return _to_facility_res(_facility_or_raise(use_case.execute(facility_id, end_date)))

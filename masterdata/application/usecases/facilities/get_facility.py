"""Use case: fetch one facility by id (NOT_FOUND when missing)."""

from __future__ import annotations

from uuid import UUID

from ....domain.repositories import FacilityRepository
from ..results import not_found
from .facility_results import FACILITY_ENTITY, FacilityResult


class GetFacilityUseCase:
    def __init__(self, repository: FacilityRepository) -> None:
        self._repository = repository

    def execute(self, facility_id: UUID) -> FacilityResult:
        facility = self._repository.find_by_id(facility_id)
        if facility is None:
            return FacilityResult(error=not_found(FACILITY_ENTITY, facility_id))
        return FacilityResult(facility=facility)

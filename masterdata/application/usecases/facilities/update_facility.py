"""
===============================================================================
USE CASE: Update Facility
===============================================================================

Name:
    Update Facility Use Case

Business Goal:
    Apply a partial patch to an existing facility.

Why (Context / Intent):
    - Absent fields keep their stored value, null/blank fields are cleared.
    - code is immutable once assigned.
    - status may be patched to any value; deactivation has its own use case
      because it also sets end_date.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Class:
    UpdateFacilityUseCase

Responsibilities:
    - Validate the patch (update mode).
    - Persist via FacilityRepository.update().
    - Translate NotFoundError into NOT_FOUND.

Collaborators:
    - application.validation: validate_facility
    - FacilityRepository: update(id, changes) -> Facility
===============================================================================
"""

from __future__ import annotations

import logging
from typing import Any, Mapping
from uuid import UUID

from ....crosscutting.exceptions import NotFoundError
from ....domain.repositories import FacilityRepository
from ...normalization import Mode
from ...validation import validate_facility
from ..results import not_found, validation_failed
from .facility_results import FACILITY_ENTITY, FacilityResult

logger = logging.getLogger(__name__)


class UpdateFacilityUseCase:
    def __init__(self, repository: FacilityRepository) -> None:
        self._repository = repository

    def execute(self, facility_id: UUID, raw: Mapping[str, Any]) -> FacilityResult:
        validation = validate_facility(raw, Mode.UPDATE)
        if not validation.ok:
            return FacilityResult(
                error=validation_failed(FACILITY_ENTITY, validation.errors)
            )

        try:
            facility = self._repository.update(facility_id, validation.values)
        except NotFoundError:
            return FacilityResult(error=not_found(FACILITY_ENTITY, facility_id))

        logger.info(
            "facility updated",
            extra={
                "facility_id": str(facility_id),
                "fields": sorted(validation.changes),
            },
        )
        return FacilityResult(facility=facility)

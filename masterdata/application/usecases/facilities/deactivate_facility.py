"""
===============================================================================
USE CASE: Deactivate Facility
===============================================================================

Name:
    Deactivate Facility Use Case

Business Goal:
    Take a facility out of operation without deleting it.

Why (Context / Intent):
    - Facilities are referenced by other records, so there is no hard delete.
    - status is forced to INACTIVE; end_date is set to the given date or
      cleared when none is given.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Class:
    DeactivateFacilityUseCase

Responsibilities:
    - Parse the optional end date ("YYYY-MM-DD" = midnight UTC).
    - Call FacilityRepository.deactivate().
    - Translate NotFoundError into NOT_FOUND.

Collaborators:
    - application.normalization: parse_date
    - FacilityRepository: deactivate(id, end_date) -> Facility
===============================================================================
"""

from __future__ import annotations

import logging
from typing import Any
from uuid import UUID

from ....crosscutting.exceptions import NotFoundError
from ....domain.repositories import FacilityRepository
from ....domain.value_objects import FieldError
from ...normalization import MISSING, Mode, NormalizationError, normalize, parse_date
from ..results import not_found, validation_failed
from .facility_results import FACILITY_ENTITY, FacilityResult

logger = logging.getLogger(__name__)


class DeactivateFacilityUseCase:
    def __init__(self, repository: FacilityRepository) -> None:
        self._repository = repository

    def execute(self, facility_id: UUID, end_date: Any = MISSING) -> FacilityResult:
        try:
            # Omit and Clear both mean "no end date".
            parsed_end_date = normalize(end_date, Mode.UPDATE, parse_date).apply(None)
        except NormalizationError as exc:
            return FacilityResult(
                error=validation_failed(
                    FACILITY_ENTITY, [FieldError("end_date", str(exc))]
                )
            )

        try:
            facility = self._repository.deactivate(facility_id, parsed_end_date)
        except NotFoundError:
            return FacilityResult(error=not_found(FACILITY_ENTITY, facility_id))

        logger.info(
            "facility deactivated",
            extra={"facility_id": str(facility_id), "end_date": parsed_end_date},
        )
        return FacilityResult(facility=facility)

"""
===============================================================================
USE CASE: Create Facility
===============================================================================

Name:
    Create Facility Use Case

Business Goal:
    Register a facility (head office, branch, warehouse, store...).

Why (Context / Intent):
    - code is human-assigned and must be unique; the unique index decides,
      and a conflict is reported as DUPLICATE_KEY on "code".
    - Omitted optional fields take storage defaults (country "JP",
      is_integrated false).

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Class:
    CreateFacilityUseCase

Responsibilities:
    - Validate input (create mode) against FACILITY_RULES.
    - Persist via FacilityRepository.create().
    - Translate DuplicateKeyError into a typed result.

Collaborators:
    - application.validation: validate_facility
    - FacilityRepository: create(data) -> Facility
===============================================================================
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from ....crosscutting.exceptions import DuplicateKeyError
from ....domain.repositories import FacilityRepository
from ...normalization import Mode
from ...validation import validate_facility
from ..results import duplicate_key, validation_failed
from .facility_results import DUPLICATE_CODE_MESSAGE, FACILITY_ENTITY, FacilityResult

logger = logging.getLogger(__name__)


class CreateFacilityUseCase:
    """Create a facility (validation first, storage second)."""

    def __init__(self, repository: FacilityRepository) -> None:
        self._repository = repository

    def execute(self, raw: Mapping[str, Any]) -> FacilityResult:
        # ---------------------------------------------------------------------
        # 1) Validate: a failure never reaches the repository.
        # ---------------------------------------------------------------------
        validation = validate_facility(raw, Mode.CREATE)
        if not validation.ok:
            return FacilityResult(
                error=validation_failed(FACILITY_ENTITY, validation.errors)
            )

        # ---------------------------------------------------------------------
        # 2) Persist. The unique index on code is the only duplicate check.
        # ---------------------------------------------------------------------
        try:
            facility = self._repository.create(validation.values)
        except DuplicateKeyError as exc:
            return FacilityResult(
                error=duplicate_key(FACILITY_ENTITY, exc.field, DUPLICATE_CODE_MESSAGE)
            )

        logger.info(
            "facility created",
            extra={"facility_id": str(facility.id), "code": facility.code},
        )
        return FacilityResult(facility=facility)

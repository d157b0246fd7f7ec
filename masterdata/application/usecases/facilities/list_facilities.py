"""
===============================================================================
USE CASE: List / Search Facilities
===============================================================================

Name:
    List Facilities Use Case

Business Goal:
    Feed the facility table: everything, or what matches
    keyword/category/status.

Why (Context / Intent):
    - The two paths order differently:
        * find_all(): display_order ASC (unset last), then code ASC
        * search():   code ASC
      so an empty spec must short-circuit to find_all() instead of calling
      search() with wildcard predicates.

-------------------------------------------------------------------------------
CRC CARD (Class-Responsibility-Collaborator)
-------------------------------------------------------------------------------
Class:
    ListFacilitiesUseCase

Responsibilities:
    - Choose find_all() vs search(spec).
    - Never mutate storage.

Collaborators:
    - FacilityRepository: find_all() / search(spec)
    - domain.filtering: FacilitySearchSpec
===============================================================================
"""

from __future__ import annotations

from typing import Optional

from ....domain.filtering import FacilitySearchSpec
from ....domain.repositories import FacilityRepository
from .facility_results import FacilityListResult


class ListFacilitiesUseCase:
    def __init__(self, repository: FacilityRepository) -> None:
        self._repository = repository

    def execute(self, spec: Optional[FacilitySearchSpec] = None) -> FacilityListResult:
        if spec is None or spec.is_empty:
            return FacilityListResult(facilities=self._repository.find_all())
        return FacilityListResult(facilities=self._repository.search(spec))

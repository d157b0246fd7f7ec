"""
===============================================================================
USE CASE RESULTS: Facilities
===============================================================================

Typed results returned by the facility use cases. Check `error` first.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from ....domain.entities import Facility
from ..results import UseCaseError

FACILITY_ENTITY = "Facility"
DUPLICATE_CODE_MESSAGE = "Facility code already exists."


@dataclass
class FacilityResult:
    facility: Optional[Facility] = None
    error: Optional[UseCaseError] = None


@dataclass
class FacilityListResult:
    facilities: List[Facility]
    error: Optional[UseCaseError] = None

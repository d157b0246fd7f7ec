"""
===============================================================================
USE CASES: Facilities (public exports)
===============================================================================
"""

# -----------------------------------------------------------------------------
# Use Cases
# -----------------------------------------------------------------------------
from .create_facility import CreateFacilityUseCase
from .deactivate_facility import DeactivateFacilityUseCase
from .get_facility import GetFacilityUseCase
from .list_facilities import ListFacilitiesUseCase
from .update_facility import UpdateFacilityUseCase

# -----------------------------------------------------------------------------
# DTOs / Result models
# -----------------------------------------------------------------------------
from .facility_results import FacilityListResult, FacilityResult

__all__ = [
    # Use Cases
    "CreateFacilityUseCase",
    "UpdateFacilityUseCase",
    "DeactivateFacilityUseCase",
    "GetFacilityUseCase",
    "ListFacilitiesUseCase",
    # DTOs / Result models
    "FacilityResult",
    "FacilityListResult",
]

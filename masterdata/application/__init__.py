"""
===============================================================================
APPLICATION LAYER (Public API / Exports)
===============================================================================

Stable entry points of the application layer:
  - normalization: raw form input -> tri-state field changes
  - validation: declarative rule tables per entity
  - csv_export: table exports

Note:
  - Use cases are imported from the `usecases/` subpackages.
===============================================================================
"""

from .csv_export import facilities_to_csv, users_to_csv
from .normalization import MISSING, Mode, NormalizationError, normalize
from .validation import (
    FACILITY_RULES,
    USER_RULES,
    FieldRule,
    ValidationResult,
    validate,
    validate_facility,
    validate_user,
)

__all__ = [
    # Normalization
    "MISSING",
    "Mode",
    "NormalizationError",
    "normalize",
    # Validation
    "FieldRule",
    "ValidationResult",
    "USER_RULES",
    "FACILITY_RULES",
    "validate",
    "validate_user",
    "validate_facility",
    # CSV
    "users_to_csv",
    "facilities_to_csv",
]

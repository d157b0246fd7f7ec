# =============================================================================
# FILE: domain/value_objects.py
# =============================================================================
"""
===============================================================================
DOMAIN: Value Objects (Immutable Domain Primitives)
===============================================================================

Name:
    Domain Value Objects

What it is:
    Immutable objects without identity, equal when their attributes are equal.

Contents:
    - Omit / Clear / Set: explicit tri-state for a single field change
    - FieldChange: union of the three variants
    - FieldError: one field-level validation failure

Principles:
    - Immutability (frozen dataclasses)
    - No side effects
    - Equality by value

Notes:
    - "absent" and "null" mean different things in an update patch:
      Omit keeps the stored value, Clear sets it to NULL. Python's None alone
      cannot tell them apart, hence the explicit variants.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Final, Generic, Mapping, TypeVar, Union

T = TypeVar("T")

ROOT_FIELD: Final[str] = "_root"


# -----------------------------------------------------------------------------
# Tri-state field change
# -----------------------------------------------------------------------------
@dataclass(frozen=True, slots=True)
class Omit:
    """The field was not supplied: keep whatever is stored."""

    def apply(self, current: Any) -> Any:
        return current


@dataclass(frozen=True, slots=True)
class Clear:
    """The field was explicitly emptied: store NULL."""

    def apply(self, current: Any) -> Any:
        return None


@dataclass(frozen=True, slots=True)
class Set(Generic[T]):
    """The field carries a concrete value."""

    value: T

    def apply(self, current: Any) -> T:
        return self.value


FieldChange = Union[Omit, Clear, Set]

OMIT: Final[Omit] = Omit()
CLEAR: Final[Clear] = Clear()


def changes_to_patch(changes: Mapping[str, FieldChange]) -> Dict[str, Any]:
    """
    Flatten a change map into a plain patch dict.

    Omit entries disappear, Clear becomes None, Set becomes its value.
    """
    patch: Dict[str, Any] = {}
    for name, change in changes.items():
        if isinstance(change, Omit):
            continue
        patch[name] = change.apply(None)
    return patch


# -----------------------------------------------------------------------------
# Validation feedback
# -----------------------------------------------------------------------------
@dataclass(frozen=True, slots=True)
class FieldError:
    """
    One validation failure.

    Attributes:
        field: field name (or "_root" for patch-level errors)
        message: human readable message
    """

    field: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {"field": self.field, "msg": self.message}

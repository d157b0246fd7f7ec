"""
===============================================================================
CRC CARD — application/normalization.py
===============================================================================

Module:
    Field normalizer (raw form input -> tri-state FieldChange)

Responsibilities:
    - Create mode: trim; absent/null/blank -> Omit (storage applies its
      default), otherwise Set(value).
    - Update mode: absent -> Omit (keep stored value), null/blank -> Clear,
      otherwise Set(value).
    - Typed variants (int, float, date, bool, enum) share the same tri-state
      logic and only differ by their parser.

Collaborators:
    - domain.value_objects: Omit / Clear / Set
    - application.validation: calls normalize() per rule, turns
      NormalizationError into a FieldError

Policy:
    - A malformed number/date/bool is rejected (NormalizationError), never
      silently dropped.
    - Dates: "YYYY-MM-DD" means midnight UTC of that calendar day.
===============================================================================
"""

from __future__ import annotations

import math
import re
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any, Callable, Final, Type, TypeVar

from ..domain.value_objects import CLEAR, OMIT, FieldChange, Set

E = TypeVar("E", bound=Enum)

Parser = Callable[[Any], Any]


class Mode(str, Enum):
    """Which operation the raw input belongs to."""

    CREATE = "create"
    UPDATE = "update"


class _Missing:
    """Sentinel for "key not present in the raw payload"."""

    _instance: "_Missing | None" = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final[_Missing] = _Missing()


class NormalizationError(ValueError):
    """Raw input could not be parsed into the field's type."""


_DATE_ONLY_RE: Final[re.Pattern[str]] = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_INT_RE: Final[re.Pattern[str]] = re.compile(r"[+-]?\d+")
_DECIMAL_RE: Final[re.Pattern[str]] = re.compile(
    r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?"
)
_TRUE_STRINGS: Final[frozenset[str]] = frozenset({"true", "1", "yes", "on"})
_FALSE_STRINGS: Final[frozenset[str]] = frozenset({"false", "0", "no", "off"})


# -----------------------------------------------------------------------------
# Parsers (non-blank input only)
# -----------------------------------------------------------------------------
def parse_str(value: Any) -> str:
    if not isinstance(value, str):
        raise NormalizationError("must be a string")
    return value


def parse_int(value: Any) -> int:
    if isinstance(value, bool):
        raise NormalizationError("must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value.is_integer():
            return int(value)
        raise NormalizationError("must be an integer")
    if isinstance(value, str) and _INT_RE.fullmatch(value):
        return int(value)
    raise NormalizationError("must be an integer")


def parse_float(value: Any) -> float:
    if isinstance(value, bool):
        raise NormalizationError("must be a number")
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str) and _DECIMAL_RE.fullmatch(value):
        number = float(value)
    else:
        raise NormalizationError("must be a number")
    if math.isnan(number) or math.isinf(number):
        raise NormalizationError("must be a finite number")
    return number


def parse_date(value: Any) -> datetime:
    """
    Parse a calendar date (or an ISO datetime) into an aware UTC datetime.

    "2024-04-01" -> 2024-04-01T00:00:00+00:00
    Naive datetimes are taken as UTC.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    elif isinstance(value, str):
        try:
            if _DATE_ONLY_RE.match(value):
                day = date.fromisoformat(value)
                return datetime(day.year, day.month, day.day, tzinfo=timezone.utc)
            parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            raise NormalizationError("must be a date (YYYY-MM-DD)") from None
    else:
        raise NormalizationError("must be a date (YYYY-MM-DD)")

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        lowered = value.lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    raise NormalizationError("must be a boolean")


def enum_parser(enum_cls: Type[E]) -> Callable[[Any], E]:
    """Build a parser accepting a member or its value in any letter case."""
    allowed = ", ".join(member.value for member in enum_cls)

    def _parse(value: Any) -> E:
        if isinstance(value, enum_cls):
            return value
        if isinstance(value, str):
            value = value.strip().upper()
        try:
            return enum_cls(value)
        except ValueError:
            raise NormalizationError(f"must be one of: {allowed}") from None

    return _parse


# -----------------------------------------------------------------------------
# Tri-state normalization
# -----------------------------------------------------------------------------
def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def normalize(raw: Any, mode: Mode, parse: Parser = parse_str) -> FieldChange:
    """
    Normalize one raw value.

    | raw                 | CREATE    | UPDATE    |
    |---------------------|-----------|-----------|
    | MISSING             | Omit      | Omit      |
    | None / "" / "  "    | Omit      | Clear     |
    | " x "               | Set("x")  | Set("x")  |

    Raises:
        NormalizationError: non-blank input the parser rejects.
    """
    if raw is MISSING:
        return OMIT
    if _is_blank(raw):
        return CLEAR if mode == Mode.UPDATE else OMIT
    if isinstance(raw, str):
        raw = raw.strip()
    return Set(parse(raw))


def normalize_optional_str(raw: Any = MISSING) -> FieldChange:
    return normalize(raw, Mode.CREATE, parse_str)


def normalize_nullable_str(raw: Any = MISSING) -> FieldChange:
    return normalize(raw, Mode.UPDATE, parse_str)


def normalize_optional_int(raw: Any = MISSING) -> FieldChange:
    return normalize(raw, Mode.CREATE, parse_int)


def normalize_nullable_int(raw: Any = MISSING) -> FieldChange:
    return normalize(raw, Mode.UPDATE, parse_int)


def normalize_optional_float(raw: Any = MISSING) -> FieldChange:
    return normalize(raw, Mode.CREATE, parse_float)


def normalize_nullable_float(raw: Any = MISSING) -> FieldChange:
    return normalize(raw, Mode.UPDATE, parse_float)


def normalize_optional_date(raw: Any = MISSING) -> FieldChange:
    return normalize(raw, Mode.CREATE, parse_date)


def normalize_nullable_date(raw: Any = MISSING) -> FieldChange:
    return normalize(raw, Mode.UPDATE, parse_date)

"""
===============================================================================
CRC CARD — application/validation.py
===============================================================================

Module:
    Entity validator (declarative rule tables + one generic validate())

Responsibilities:
    - Describe each entity field once as a FieldRule (kind, required,
      length, pattern, email/url format, enum, numeric range, updatable).
    - validate(rules, raw, mode): normalize every field, check its rule and
      return either the changes or an ordered list of FieldErrors.
    - Reject update patches that carry no field at all.

Collaborators:
    - application.normalization: tri-state normalization + typed parsers
    - domain.value_objects: FieldChange, FieldError
    - application.usecases: validate before any repository call
    - email_validator / pydantic: email and URL formats

Notes:
    - Errors follow rule-table order (stable for clients and tests).
    - Create mode only keeps Set values; omitted fields fall back to
      storage defaults.
    - Update mode keeps Set and Clear values; required fields cannot be
      cleared and non-updatable fields (user email, facility code,
      created_by) cannot be sent.
===============================================================================
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Type

from email_validator import EmailNotValidError, validate_email
from pydantic import HttpUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ..domain.entities import FacilityCategory, FacilityStatus, UserRole, UserStatus
from ..domain.value_objects import (
    ROOT_FIELD,
    Clear,
    FieldChange,
    FieldError,
    Omit,
    changes_to_patch,
)
from .normalization import (
    MISSING,
    Mode,
    NormalizationError,
    Parser,
    enum_parser,
    normalize,
    parse_bool,
    parse_date,
    parse_float,
    parse_int,
    parse_str,
)

NO_CHANGES_MESSAGE = "At least one field must be provided to update."

_HTTP_URL = TypeAdapter(HttpUrl)


class Kind(str, Enum):
    STR = "str"
    INT = "int"
    FLOAT = "float"
    DATE = "date"
    BOOL = "bool"
    ENUM = "enum"


_PARSERS: Dict[Kind, Parser] = {
    Kind.STR: parse_str,
    Kind.INT: parse_int,
    Kind.FLOAT: parse_float,
    Kind.DATE: parse_date,
    Kind.BOOL: parse_bool,
}


@dataclass(frozen=True)
class FieldRule:
    """
    Constraint descriptor for one field.

    Only the constraints that are set are checked; everything else is a
    no-op, so a rule reads like the form definition it came from.
    """

    name: str
    kind: Kind = Kind.STR
    required: bool = False
    max_length: Optional[int] = None
    pattern: Optional[re.Pattern[str]] = None
    pattern_message: str = "has an invalid format"
    email: bool = False
    url: bool = False
    choices: Optional[Type[Enum]] = None
    minimum: Optional[float] = None
    maximum: Optional[float] = None
    updatable: bool = True
    nullable: bool = True

    def parser(self) -> Parser:
        if self.kind == Kind.ENUM:
            if self.choices is None:
                raise ValueError(f"enum rule '{self.name}' needs choices")
            return enum_parser(self.choices)
        return _PARSERS[self.kind]

    def check(self, value: Any) -> Optional[str]:
        """Return the first violated constraint message, or None."""
        if isinstance(value, str):
            if self.max_length is not None and len(value) > self.max_length:
                return f"must be at most {self.max_length} characters"
            if self.pattern is not None and not self.pattern.fullmatch(value):
                return self.pattern_message
            if self.email and not _is_email(value):
                return "must be a valid email address"
            if self.url and not _is_url(value):
                return "must be a valid URL"
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            if self.minimum is not None and value < self.minimum:
                return f"must be greater than or equal to {_fmt(self.minimum)}"
            if self.maximum is not None and value > self.maximum:
                return f"must be less than or equal to {_fmt(self.maximum)}"
        return None


def _fmt(number: float) -> str:
    return str(int(number)) if float(number).is_integer() else str(number)


def _is_email(value: str) -> bool:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def _is_url(value: str) -> bool:
    try:
        _HTTP_URL.validate_python(value)
    except PydanticValidationError:
        return False
    return True


@dataclass
class ValidationResult:
    """
    Outcome of validate().

    changes holds Set values (create) or Set/Clear values (update); it is
    only meaningful when errors is empty.
    """

    changes: Dict[str, FieldChange] = field(default_factory=dict)
    errors: List[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def values(self) -> Dict[str, Any]:
        """Plain dict for the repository (Clear -> None)."""
        return changes_to_patch(self.changes)


def validate(
    rules: Sequence[FieldRule], raw: Mapping[str, Any], mode: Mode
) -> ValidationResult:
    """
    Validate raw input against a rule table.

    Keys of raw that no rule names are ignored; absence of a key is MISSING,
    which is different from an explicit None.
    """
    result = ValidationResult()
    supplied = False

    for rule in rules:
        raw_value = raw.get(rule.name, MISSING)
        if raw_value is not MISSING:
            supplied = True

        if mode == Mode.UPDATE and not rule.updatable:
            if raw_value is not MISSING:
                result.errors.append(FieldError(rule.name, "cannot be changed"))
            continue

        try:
            change = normalize(raw_value, mode, rule.parser())
        except NormalizationError as exc:
            result.errors.append(FieldError(rule.name, str(exc)))
            continue

        if isinstance(change, Omit):
            if mode == Mode.CREATE and rule.required:
                result.errors.append(FieldError(rule.name, "is required"))
            continue

        if isinstance(change, Clear):
            if rule.required or not rule.nullable:
                result.errors.append(FieldError(rule.name, "cannot be empty"))
                continue
            result.changes[rule.name] = change
            continue

        message = rule.check(change.value)
        if message is not None:
            result.errors.append(FieldError(rule.name, message))
            continue
        result.changes[rule.name] = change

    if mode == Mode.UPDATE and not supplied:
        result.errors.append(FieldError(ROOT_FIELD, NO_CHANGES_MESSAGE))

    return result


# -----------------------------------------------------------------------------
# Rule tables
# -----------------------------------------------------------------------------
_CODE_RE = re.compile(r"[A-Za-z0-9-]+")
_POSTAL_CODE_RE = re.compile(r"\d{3}-?\d{4}")
_PHONE_RE = re.compile(r"[0-9+\-() ]+")

_PHONE_MESSAGE = "may only contain digits, spaces and + - ( )"


def _audit_rules() -> Tuple[FieldRule, ...]:
    return (
        FieldRule("created_by", max_length=50, updatable=False),
        FieldRule("updated_by", max_length=50),
    )


USER_RULES: Tuple[FieldRule, ...] = (
    FieldRule("email", required=True, email=True, updatable=False),
    FieldRule("name", required=True),
    FieldRule("name_kana", max_length=100),
    FieldRule("role", kind=Kind.ENUM, required=True, choices=UserRole),
    FieldRule("status", kind=Kind.ENUM, required=True, choices=UserStatus),
    FieldRule("department", max_length=100),
    FieldRule("title", max_length=100),
    FieldRule("phone_number", max_length=50),
    FieldRule("image", max_length=200, url=True),
    FieldRule("note", max_length=500),
    FieldRule("mfa_enabled", kind=Kind.BOOL, nullable=False),
    FieldRule("is_locked", kind=Kind.BOOL, nullable=False),
    *_audit_rules(),
)

FACILITY_RULES: Tuple[FieldRule, ...] = (
    FieldRule(
        "code",
        required=True,
        max_length=16,
        pattern=_CODE_RE,
        pattern_message="may only contain letters, digits and hyphens",
        updatable=False,
    ),
    FieldRule("name", required=True, max_length=100),
    FieldRule("name_kana", max_length=100),
    FieldRule("category", kind=Kind.ENUM, required=True, choices=FacilityCategory),
    FieldRule("status", kind=Kind.ENUM, required=True, choices=FacilityStatus),
    FieldRule("start_date", kind=Kind.DATE),
    FieldRule("end_date", kind=Kind.DATE),
    FieldRule("country", max_length=2, nullable=False),
    FieldRule("prefecture", max_length=100),
    FieldRule("city", max_length=100),
    FieldRule("address_line1", max_length=200),
    FieldRule(
        "postal_code",
        max_length=8,
        pattern=_POSTAL_CODE_RE,
        pattern_message="must look like 123-4567",
    ),
    FieldRule("latitude", kind=Kind.FLOAT, minimum=-90, maximum=90),
    FieldRule("longitude", kind=Kind.FLOAT, minimum=-180, maximum=180),
    FieldRule("phone", max_length=30, pattern=_PHONE_RE, pattern_message=_PHONE_MESSAGE),
    FieldRule("email", max_length=100, email=True),
    FieldRule("contact_name", max_length=100),
    FieldRule(
        "contact_phone",
        max_length=30,
        pattern=_PHONE_RE,
        pattern_message=_PHONE_MESSAGE,
    ),
    FieldRule("contact_email", max_length=100, email=True),
    FieldRule("capacity", kind=Kind.INT, minimum=0),
    FieldRule("display_order", kind=Kind.INT, minimum=0),
    FieldRule("image_url", max_length=200),
    FieldRule("note", max_length=500),
    FieldRule("billing_code", max_length=32),
    FieldRule("is_integrated", kind=Kind.BOOL, nullable=False),
    FieldRule("synced_at", kind=Kind.DATE),
    *_audit_rules(),
)


def validate_user(raw: Mapping[str, Any], mode: Mode) -> ValidationResult:
    return validate(USER_RULES, raw, mode)


def validate_facility(raw: Mapping[str, Any], mode: Mode) -> ValidationResult:
    return validate(FACILITY_RULES, raw, mode)

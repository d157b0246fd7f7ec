"""
Name: Entity Validator Tests

Responsibilities:
  - Validate the user and facility rule tables in create and update mode
  - Validate error ordering, required/immutable fields and the empty-patch rule
"""

from datetime import datetime, timezone

import pytest

from masterdata.application.normalization import Mode
from masterdata.application.validation import (
    FACILITY_RULES,
    NO_CHANGES_MESSAGE,
    USER_RULES,
    FieldRule,
    Kind,
    validate,
    validate_facility,
    validate_user,
)
from masterdata.domain.entities import (
    FacilityCategory,
    FacilityStatus,
    UserRole,
    UserStatus,
)
from masterdata.domain.value_objects import CLEAR, Set

pytestmark = pytest.mark.unit


def _facility(**overrides):
    raw = {"code": "TKY-001", "name": "Tokyo", "category": "HEAD", "status": "ACTIVE"}
    raw.update(overrides)
    return raw


def _user(**overrides):
    raw = {
        "email": "taro@acme.co.jp",
        "name": "Taro",
        "role": "USER",
        "status": "ACTIVE",
    }
    raw.update(overrides)
    return raw


def _errors(result):
    return [(e.field, e.message) for e in result.errors]


class TestUserCreate:
    def test_minimal_user_is_valid(self):
        result = validate_user(_user(name=" Taro "), Mode.CREATE)

        assert result.ok
        assert result.values == {
            "email": "taro@acme.co.jp",
            "name": "Taro",
            "role": UserRole.USER,
            "status": UserStatus.ACTIVE,
        }

    def test_missing_required_fields(self):
        result = validate_user({}, Mode.CREATE)

        assert _errors(result) == [
            ("email", "is required"),
            ("name", "is required"),
            ("role", "is required"),
            ("status", "is required"),
        ]

    def test_blank_required_field_counts_as_missing(self):
        result = validate_user(_user(email="  "), Mode.CREATE)

        assert _errors(result) == [("email", "is required")]

    def test_invalid_email(self):
        result = validate_user(_user(email="not-an-email"), Mode.CREATE)

        assert _errors(result) == [("email", "must be a valid email address")]

    def test_invalid_image_url(self):
        result = validate_user(_user(image="not a url"), Mode.CREATE)

        assert _errors(result) == [("image", "must be a valid URL")]

    def test_valid_image_url(self):
        result = validate_user(
            _user(image="https://cdn.acme.co.jp/taro.png"), Mode.CREATE
        )

        assert result.ok

    def test_enum_and_bool_parsing(self):
        result = validate_user(_user(role="ADMIN", mfa_enabled="true"), Mode.CREATE)

        assert result.ok
        assert result.values["role"] is UserRole.ADMIN
        assert result.values["mfa_enabled"] is True

    def test_enum_values_are_case_insensitive(self):
        result = validate_user(_user(role=" manager ", status="invited"), Mode.CREATE)

        assert result.ok
        assert result.values["role"] is UserRole.MANAGER
        assert result.values["status"] is UserStatus.INVITED

    def test_unknown_role(self):
        result = validate_user(_user(role="ROOT"), Mode.CREATE)

        assert _errors(result) == [
            ("role", "must be one of: ADMIN, MANAGER, USER"),
        ]

    def test_max_length(self):
        result = validate_user(_user(department="x" * 101), Mode.CREATE)

        assert _errors(result) == [("department", "must be at most 100 characters")]

    def test_unknown_keys_are_ignored(self):
        result = validate_user(_user(password="secret"), Mode.CREATE)

        assert result.ok
        assert "password" not in result.values


class TestUserUpdate:
    def test_empty_patch_is_rejected(self):
        result = validate_user({}, Mode.UPDATE)

        assert _errors(result) == [("_root", NO_CHANGES_MESSAGE)]

    def test_email_cannot_be_changed(self):
        result = validate_user({"email": "new@acme.co.jp"}, Mode.UPDATE)

        assert _errors(result) == [("email", "cannot be changed")]

    def test_required_field_cannot_be_cleared(self):
        result = validate_user({"name": None}, Mode.UPDATE)

        assert _errors(result) == [("name", "cannot be empty")]

    def test_defaulted_field_cannot_be_cleared(self):
        result = validate_user({"role": "", "is_locked": None}, Mode.UPDATE)

        assert _errors(result) == [
            ("role", "cannot be empty"),
            ("is_locked", "cannot be empty"),
        ]

    def test_optional_field_is_cleared(self):
        result = validate_user({"department": None, "title": "Lead"}, Mode.UPDATE)

        assert result.ok
        assert result.changes == {"department": CLEAR, "title": Set("Lead")}
        assert result.values == {"department": None, "title": "Lead"}

    def test_absent_fields_are_untouched(self):
        result = validate_user({"note": "hello"}, Mode.UPDATE)

        assert list(result.changes) == ["note"]


class TestFacilityCreate:
    def test_minimal_facility_is_valid(self):
        result = validate_facility(_facility(), Mode.CREATE)

        assert result.ok
        assert result.values == {
            "code": "TKY-001",
            "name": "Tokyo",
            "category": FacilityCategory.HEAD,
            "status": FacilityStatus.ACTIVE,
        }

    def test_code_pattern(self):
        result = validate_facility(_facility(code="TKY 001"), Mode.CREATE)

        assert _errors(result) == [
            ("code", "may only contain letters, digits and hyphens")
        ]

    def test_code_max_length(self):
        result = validate_facility(_facility(code="A" * 17), Mode.CREATE)

        assert _errors(result) == [("code", "must be at most 16 characters")]

    @pytest.mark.parametrize("postal_code", ["100-0005", "1000005"])
    def test_postal_code_accepted(self, postal_code):
        assert validate_facility(_facility(postal_code=postal_code), Mode.CREATE).ok

    @pytest.mark.parametrize("postal_code", ["100-00", "abc-defg", "10-00005"])
    def test_postal_code_rejected(self, postal_code):
        result = validate_facility(_facility(postal_code=postal_code), Mode.CREATE)

        assert _errors(result) == [("postal_code", "must look like 123-4567")]

    def test_phone_pattern(self):
        ok = validate_facility(_facility(phone="+81 (3) 1234-5678"), Mode.CREATE)
        bad = validate_facility(_facility(phone="03-1234-5678 ext"), Mode.CREATE)

        assert ok.ok
        assert _errors(bad) == [
            ("phone", "may only contain digits, spaces and + - ( )")
        ]

    def test_coordinate_bounds(self):
        result = validate_facility(
            _facility(latitude="90.5", longitude=-181), Mode.CREATE
        )

        assert _errors(result) == [
            ("latitude", "must be less than or equal to 90"),
            ("longitude", "must be greater than or equal to -180"),
        ]

    def test_negative_capacity(self):
        result = validate_facility(_facility(capacity="-1"), Mode.CREATE)

        assert _errors(result) == [("capacity", "must be greater than or equal to 0")]

    def test_malformed_number_is_a_field_error(self):
        result = validate_facility(_facility(capacity="many"), Mode.CREATE)

        assert _errors(result) == [("capacity", "must be an integer")]

    def test_dates_are_parsed(self):
        result = validate_facility(
            _facility(start_date="2024-04-01", end_date=""), Mode.CREATE
        )

        assert result.ok
        assert result.values["start_date"] == datetime(2024, 4, 1, tzinfo=timezone.utc)
        assert "end_date" not in result.values

    def test_errors_follow_rule_table_order(self):
        result = validate_facility(
            {"status": "OPEN", "contact_email": "x", "code": "!"}, Mode.CREATE
        )

        assert [e.field for e in result.errors] == [
            "code",
            "name",
            "category",
            "status",
            "contact_email",
        ]


class TestFacilityUpdate:
    def test_code_cannot_be_changed(self):
        result = validate_facility({"code": "NEW-1"}, Mode.UPDATE)

        assert _errors(result) == [("code", "cannot be changed")]

    def test_status_cannot_be_cleared(self):
        result = validate_facility({"status": None}, Mode.UPDATE)

        assert _errors(result) == [("status", "cannot be empty")]

    def test_clear_optional_number(self):
        result = validate_facility({"capacity": None, "display_order": "3"}, Mode.UPDATE)

        assert result.ok
        assert result.values == {"capacity": None, "display_order": 3}

    def test_created_by_cannot_be_changed(self):
        result = validate_facility(
            {"created_by": "mallory", "updated_by": "bob"}, Mode.UPDATE
        )

        assert _errors(result) == [("created_by", "cannot be changed")]

    def test_patterns_apply_in_update_mode(self):
        result = validate_facility({"postal_code": "12-3"}, Mode.UPDATE)

        assert _errors(result) == [("postal_code", "must look like 123-4567")]


class TestGenericValidate:
    def test_rule_tables_have_unique_names(self):
        for rules in (USER_RULES, FACILITY_RULES):
            names = [rule.name for rule in rules]
            assert len(names) == len(set(names))

    def test_custom_rule_table(self):
        rules = (FieldRule("size", kind=Kind.INT, required=True, maximum=10),)

        assert _errors(validate(rules, {"size": "11"}, Mode.CREATE)) == [
            ("size", "must be less than or equal to 10")
        ]
        assert validate(rules, {"size": 10}, Mode.CREATE).values == {"size": 10}

    def test_enum_rule_without_choices_is_a_programming_error(self):
        with pytest.raises(ValueError, match="needs choices"):
            FieldRule("kind", kind=Kind.ENUM).parser()

"""
Name: Field Normalizer Tests

Responsibilities:
  - Validate create vs update tri-state rules
  - Validate numeric, date and boolean parsing (malformed input rejected)
"""

from datetime import date, datetime, timedelta, timezone

import pytest

from masterdata.application.normalization import (
    MISSING,
    Mode,
    NormalizationError,
    enum_parser,
    normalize,
    normalize_nullable_date,
    normalize_nullable_float,
    normalize_nullable_int,
    normalize_nullable_str,
    normalize_optional_date,
    normalize_optional_float,
    normalize_optional_int,
    normalize_optional_str,
    parse_bool,
)
from masterdata.domain.entities import FacilityCategory
from masterdata.domain.value_objects import CLEAR, OMIT, Set

pytestmark = pytest.mark.unit


class TestStringNormalization:
    @pytest.mark.parametrize("raw", [MISSING, None, "", "   "])
    def test_create_mode_blank_is_omit(self, raw):
        assert normalize_optional_str(raw) == OMIT

    def test_create_mode_trims(self):
        assert normalize_optional_str("  Osaka  ") == Set("Osaka")

    def test_update_mode_absent_is_omit(self):
        assert normalize_nullable_str() == OMIT
        assert normalize_nullable_str(MISSING) == OMIT

    @pytest.mark.parametrize("raw", [None, "", "  \t "])
    def test_update_mode_null_or_blank_is_clear(self, raw):
        assert normalize_nullable_str(raw) == CLEAR

    def test_update_mode_trims(self):
        assert normalize_nullable_str(" x ") == Set("x")

    def test_non_string_is_rejected(self):
        with pytest.raises(NormalizationError):
            normalize_optional_str(12)

    def test_missing_is_falsy_singleton(self):
        assert not MISSING
        assert repr(MISSING) == "MISSING"


class TestNumberNormalization:
    def test_int_from_string_and_native(self):
        assert normalize_optional_int("42") == Set(42)
        assert normalize_optional_int(" 7 ") == Set(7)
        assert normalize_optional_int(3) == Set(3)
        assert normalize_optional_int(5.0) == Set(5)

    @pytest.mark.parametrize("raw", ["abc", "1.5", "1_000", "0x10", 2.5, True])
    def test_malformed_int_is_rejected(self, raw):
        with pytest.raises(NormalizationError, match="integer"):
            normalize_optional_int(raw)

    def test_nullable_int(self):
        assert normalize_nullable_int(None) == CLEAR
        assert normalize_nullable_int("0") == Set(0)

    def test_float_from_string_and_native(self):
        assert normalize_optional_float("35.68") == Set(35.68)
        assert normalize_optional_float(139) == Set(139.0)
        assert normalize_optional_float("-.5") == Set(-0.5)
        assert normalize_optional_float("+1e3") == Set(1000.0)

    @pytest.mark.parametrize("raw", ["north", "nan", "inf", "1_000.5", "1e999", False])
    def test_malformed_float_is_rejected(self, raw):
        with pytest.raises(NormalizationError):
            normalize_optional_float(raw)

    def test_nullable_float(self):
        assert normalize_nullable_float("") == CLEAR


class TestDateNormalization:
    def test_calendar_date_is_midnight_utc(self):
        change = normalize_optional_date("2024-04-01")

        assert change == Set(datetime(2024, 4, 1, tzinfo=timezone.utc))

    def test_iso_datetime_is_converted_to_utc(self):
        change = normalize_optional_date("2024-04-01T09:00:00+09:00")

        assert change == Set(datetime(2024, 4, 1, 0, 0, tzinfo=timezone.utc))
        assert change.value.utcoffset() == timedelta(0)

    def test_naive_datetime_is_taken_as_utc(self):
        change = normalize_optional_date(datetime(2024, 4, 1, 12, 30))

        assert change == Set(datetime(2024, 4, 1, 12, 30, tzinfo=timezone.utc))

    def test_native_date(self):
        change = normalize_optional_date(date(2025, 1, 31))

        assert change == Set(datetime(2025, 1, 31, tzinfo=timezone.utc))

    @pytest.mark.parametrize("raw", ["2024-13-01", "tomorrow", "2024/04/01", 20240401])
    def test_malformed_date_is_rejected(self, raw):
        with pytest.raises(NormalizationError, match="date"):
            normalize_optional_date(raw)

    def test_nullable_date(self):
        assert normalize_nullable_date(None) == CLEAR
        assert normalize_nullable_date() == OMIT


class TestBoolAndEnumParsing:
    @pytest.mark.parametrize("raw", [True, "true", "TRUE", "1", "yes", "on", 1])
    def test_truthy(self, raw):
        assert parse_bool(raw) is True

    @pytest.mark.parametrize("raw", [False, "false", "0", "No", "off", 0])
    def test_falsy(self, raw):
        assert parse_bool(raw) is False

    @pytest.mark.parametrize("raw", ["maybe", 2, 1.0])
    def test_unknown_bool_is_rejected(self, raw):
        with pytest.raises(NormalizationError, match="boolean"):
            parse_bool(raw)

    def test_enum_parser(self):
        parse = enum_parser(FacilityCategory)

        assert parse("STORE") is FacilityCategory.STORE
        assert parse("store") is FacilityCategory.STORE
        assert parse(FacilityCategory.HEAD) is FacilityCategory.HEAD
        with pytest.raises(NormalizationError, match="one of"):
            parse("kiosk")

    def test_normalize_with_custom_parser(self):
        change = normalize(" BRANCH ", Mode.UPDATE, enum_parser(FacilityCategory))

        assert change == Set(FacilityCategory.BRANCH)

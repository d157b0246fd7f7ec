"""
Name: Query Filter Engine Tests

Responsibilities:
  - Validate keyword matching (trimmed, case-insensitive, any field)
  - Validate exact enum filters and AND semantics
  - Validate that input order is preserved
"""

import pytest

from masterdata.domain.entities import (
    FacilityCategory,
    FacilityStatus,
    UserRole,
    UserStatus,
)
from masterdata.domain.filtering import (
    FacilitySearchSpec,
    UserSearchSpec,
    filter_facilities,
    filter_users,
    normalize_keyword,
)

pytestmark = pytest.mark.unit


@pytest.fixture
def users(make_user):
    return [
        make_user(
            email="hanako@acme.co.jp",
            name="Hanako Sato",
            department="Sales",
            role=UserRole.MANAGER,
        ),
        make_user(
            email="jiro@acme.co.jp",
            name="Jiro Suzuki",
            department="Engineering",
            status=UserStatus.DISABLED,
        ),
        make_user(
            email="admin@acme.co.jp",
            name="Admin",
            department=None,
            role=UserRole.ADMIN,
        ),
    ]


@pytest.fixture
def facilities(make_facility):
    return [
        make_facility(
            code="OSK-01",
            name="Osaka Branch",
            category=FacilityCategory.BRANCH,
            prefecture="Osaka",
            city="Kita-ku",
        ),
        make_facility(
            code="TKY-01",
            name="Tokyo Head Office",
            category=FacilityCategory.HEAD,
            prefecture="Tokyo",
            address_line1="1-1 Marunouchi",
        ),
        make_facility(
            code="WH-9",
            name="Chiba Warehouse",
            category=FacilityCategory.WAREHOUSE,
            status=FacilityStatus.SUSPENDED,
            city="Narashino",
        ),
    ]


class TestNormalizeKeyword:
    @pytest.mark.parametrize("raw", [None, "", "   ", "\t\n"])
    def test_blank_is_none(self, raw):
        assert normalize_keyword(raw) is None

    def test_trims(self):
        assert normalize_keyword("  sales ") == "sales"


class TestUserFilter:
    def test_empty_spec_keeps_everything_in_order(self, users):
        spec = UserSearchSpec()

        assert spec.is_empty
        assert filter_users(users, spec) == users

    def test_keyword_is_case_insensitive_substring(self, users):
        result = filter_users(users, UserSearchSpec(keyword="SATO"))

        assert [u.name for u in result] == ["Hanako Sato"]

    def test_keyword_matches_email_and_department(self, users):
        by_email = filter_users(users, UserSearchSpec(keyword="jiro@"))
        by_department = filter_users(users, UserSearchSpec(keyword="engineer"))

        assert [u.name for u in by_email] == ["Jiro Suzuki"]
        assert [u.name for u in by_department] == ["Jiro Suzuki"]

    def test_keyword_is_trimmed(self, users):
        spec = UserSearchSpec(keyword="  sales  ")

        assert spec.keyword == "sales"
        assert [u.name for u in filter_users(users, spec)] == ["Hanako Sato"]

    def test_blank_keyword_is_no_constraint(self, users):
        spec = UserSearchSpec(keyword="   ")

        assert spec.is_empty
        assert filter_users(users, spec) == users

    def test_role_and_status_are_exact(self, users):
        managers = filter_users(users, UserSearchSpec(role=UserRole.MANAGER))
        disabled = filter_users(users, UserSearchSpec(status=UserStatus.DISABLED))

        assert [u.name for u in managers] == ["Hanako Sato"]
        assert [u.name for u in disabled] == ["Jiro Suzuki"]

    def test_predicates_are_anded(self, users):
        spec = UserSearchSpec(keyword="acme", role=UserRole.ADMIN)

        assert [u.name for u in filter_users(users, spec)] == ["Admin"]

    def test_no_match(self, users):
        spec = UserSearchSpec(keyword="sales", status=UserStatus.DISABLED)

        assert filter_users(users, spec) == []


class TestFacilityFilter:
    def test_keyword_matches_address_fields(self, facilities):
        assert [
            f.code for f in filter_facilities(facilities, FacilitySearchSpec(keyword="kita"))
        ] == ["OSK-01"]
        assert [
            f.code
            for f in filter_facilities(facilities, FacilitySearchSpec(keyword="marunouchi"))
        ] == ["TKY-01"]
        assert [
            f.code for f in filter_facilities(facilities, FacilitySearchSpec(keyword="wh-"))
        ] == ["WH-9"]

    def test_category_filter(self, facilities):
        spec = FacilitySearchSpec(category=FacilityCategory.HEAD)

        assert [f.code for f in filter_facilities(facilities, spec)] == ["TKY-01"]

    def test_status_filter(self, facilities):
        spec = FacilitySearchSpec(status=FacilityStatus.ACTIVE)

        assert [f.code for f in filter_facilities(facilities, spec)] == [
            "OSK-01",
            "TKY-01",
        ]

    def test_predicate_order_does_not_matter(self, facilities):
        a = FacilitySearchSpec(keyword="o", category=FacilityCategory.BRANCH)
        b = FacilitySearchSpec(category=FacilityCategory.BRANCH, keyword="o")

        assert filter_facilities(facilities, a) == filter_facilities(facilities, b)

    def test_filter_does_not_mutate_input(self, facilities):
        before = list(facilities)

        filter_facilities(facilities, FacilitySearchSpec(keyword="tokyo"))

        assert facilities == before

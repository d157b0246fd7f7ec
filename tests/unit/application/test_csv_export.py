"""
Name: CSV Export Tests

Responsibilities:
  - Validate header rows, quoting and empty cells
  - Validate that enums render by value
"""

import pytest

from masterdata.application.csv_export import facilities_to_csv, users_to_csv
from masterdata.domain.entities import FacilityCategory, UserRole

pytestmark = pytest.mark.unit


class TestUsersCsv:
    def test_header_only_when_empty(self):
        assert users_to_csv([]) == (
            '"name","email","role","status","department","title","phone"'
        )

    def test_row_values(self, make_user):
        user = make_user(
            role=UserRole.MANAGER,
            department="Sales",
            title=None,
            phone_number="03-1234-5678",
        )

        lines = users_to_csv([user]).split("\n")

        assert lines[1] == (
            '"Taro Yamada","taro@acme.co.jp","MANAGER","ACTIVE","Sales","","03-1234-5678"'
        )

    def test_embedded_quotes_are_doubled(self, make_user):
        user = make_user(name='Taro "TJ" Yamada')

        assert '"Taro ""TJ"" Yamada"' in users_to_csv([user])

    def test_no_trailing_newline(self, make_user):
        text = users_to_csv([make_user(), make_user(email="b@acme.co.jp")])

        assert not text.endswith("\n")
        assert len(text.split("\n")) == 3


class TestFacilitiesCsv:
    def test_header(self):
        assert facilities_to_csv([]) == (
            '"code","name","category","status","prefecture","city","phone","email"'
        )

    def test_row_values(self, make_facility):
        facility = make_facility(
            category=FacilityCategory.STORE,
            prefecture="Tokyo",
            city="Chiyoda, Marunouchi",
        )

        lines = facilities_to_csv([facility]).split("\n")

        assert lines[1] == (
            '"TKY-001","Tokyo Head Office","STORE","ACTIVE","Tokyo",'
            '"Chiyoda, Marunouchi","",""'
        )

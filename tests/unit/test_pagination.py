"""Unit tests for pagination utilities."""

import pytest

from masterdata.crosscutting.pagination import build_page, page_count, paginate

pytestmark = pytest.mark.unit


class TestPaginate:
    def test_first_page(self):
        assert paginate(list(range(12)), 0, 5) == [0, 1, 2, 3, 4]

    def test_last_partial_page(self):
        assert paginate(list(range(12)), 2, 5) == [10, 11]

    def test_out_of_range_page_is_empty(self):
        assert paginate(list(range(12)), 3, 5) == []

    def test_third_page_of_twenty_five_holds_the_tail(self):
        items = list(range(1, 26))

        assert paginate(items, 2, 10) == [21, 22, 23, 24, 25]
        assert paginate(items, 3, 10) == []

    def test_empty_sequence(self):
        assert paginate([], 0, 10) == []

    def test_negative_index_raises(self):
        with pytest.raises(ValueError, match="page_index"):
            paginate([1, 2], -1, 10)

    @pytest.mark.parametrize("size", [0, -5])
    def test_non_positive_size_raises(self, size):
        with pytest.raises(ValueError, match="page_size"):
            paginate([1, 2], 0, size)

    def test_pages_cover_sequence_exactly_once(self):
        items = list(range(23))
        pages = [paginate(items, i, 10) for i in range(page_count(len(items), 10))]

        assert [x for page in pages for x in page] == items


class TestBuildPage:
    def test_first_page_with_more(self):
        page = build_page(list(range(15)), 0, 10)

        assert len(page.items) == 10
        assert page.page_info.total == 15
        assert page.page_info.page_count == 2
        assert page.page_info.has_next is True
        assert page.page_info.has_prev is False

    def test_last_page(self):
        page = build_page(list(range(15)), 1, 10)

        assert page.items == [10, 11, 12, 13, 14]
        assert page.page_info.has_next is False
        assert page.page_info.has_prev is True

    def test_empty(self):
        page = build_page([], 0, 10)

        assert page.items == []
        assert page.page_info.page_count == 0
        assert page.page_info.has_next is False
        assert page.page_info.has_prev is False

    def test_exact_multiple_has_no_next(self):
        page = build_page(list(range(20)), 1, 10)

        assert page.page_info.has_next is False
        assert page.page_info.page_count == 2

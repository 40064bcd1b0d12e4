"""Tests for the over-fetch page window."""

import pytest

from procurement_search.core.exceptions import InvalidLimitError
from procurement_search.core.pagination import PageWindow


@pytest.mark.parametrize("limit", [0, -1, 101, 1000])
def test_limit_outside_range_is_rejected(limit):
    with pytest.raises(InvalidLimitError) as excinfo:
        PageWindow.checked(offset=0, limit=limit, max_limit=100)
    assert excinfo.value.status_code == 400
    assert excinfo.value.code == "INVALID_LIMIT"


@pytest.mark.parametrize("limit", [1, 50, 100])
def test_limit_inside_range_is_accepted(limit):
    window = PageWindow.checked(offset=30, limit=limit, max_limit=100)
    assert window.fetch_size == limit + 1
    assert window.offset == 30


def test_split_with_extra_row_is_not_the_end():
    window = PageWindow(offset=0, limit=3)
    page, end = window.split(["a", "b", "c", "d"])
    assert page == ["a", "b", "c"]
    assert end is False


def test_split_with_exactly_limit_rows_is_the_end():
    window = PageWindow(offset=0, limit=3)
    page, end = window.split(["a", "b", "c"])
    assert page == ["a", "b", "c"]
    assert end is True


def test_split_of_empty_page_is_the_end():
    page, end = PageWindow(offset=90, limit=10).split([])
    assert page == []
    assert end is True

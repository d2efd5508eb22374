"""Pagination — clamping and metadata are pure and never reject input.

Tests:
    - page/page_size clamped into [1, max_page_for(size)] and [1, max]
    - defaults applied when page/page_size are missing
    - total_pages == max(1, ceil(total / page_size))
    - has_next / has_prev derived from the clamped page
"""

import math

import pytest

from favorites.core.pagination import (
    MAX_SQL_OFFSET, PageRequest, clamp_page_request, max_page_for, page_info,
    total_pages_for,
)


def test_defaults_when_missing():
    req = clamp_page_request(None, None)
    assert req == PageRequest(page=1, page_size=20)
    assert req.offset == 0


def test_page_below_one_clamped_to_one():
    assert clamp_page_request(0, 10).page == 1
    assert clamp_page_request(-5, 10).page == 1


def test_page_size_clamped_to_max():
    assert clamp_page_request(1, 999).page_size == 100


def test_page_size_clamped_to_configured_max():
    req = clamp_page_request(1, 999, max_page_size=50)
    assert req.page_size == 50


def test_page_size_below_one_clamped_to_one():
    assert clamp_page_request(1, 0).page_size == 1
    assert clamp_page_request(1, -3).page_size == 1


def test_offset_is_page_minus_one_times_size():
    assert clamp_page_request(3, 25).offset == 50


def test_custom_default_page_size():
    assert clamp_page_request(None, None, default_page_size=5).page_size == 5


def test_empty_listing_has_one_page():
    info = page_info(PageRequest(page=1, page_size=20), total=0)
    assert info.total_pages == 1
    assert info.has_next is False
    assert info.has_prev is False


@pytest.mark.parametrize("total,size", [
    (0, 1), (1, 1), (19, 20), (20, 20), (21, 20), (101, 100), (7, 3),
])
def test_total_pages_formula(total, size):
    assert total_pages_for(total, size) == max(1, math.ceil(total / size))


def test_middle_page_has_next_and_prev():
    info = page_info(PageRequest(page=2, page_size=10), total=35)
    assert info.total_pages == 4
    assert info.has_next is True
    assert info.has_prev is True


def test_last_page_has_no_next():
    info = page_info(PageRequest(page=4, page_size=10), total=35)
    assert info.has_next is False
    assert info.has_prev is True


def test_page_past_the_end_keeps_requested_page():
    info = page_info(PageRequest(page=9, page_size=10), total=35)
    assert info.page == 9
    assert info.has_next is False
    assert info.has_prev is True


def test_huge_page_clamped_so_offset_fits_sql_integer():
    req = clamp_page_request(10**19, 20)
    assert req.page == max_page_for(20)
    assert req.offset <= MAX_SQL_OFFSET
    assert clamp_page_request(10**40, 1).offset <= MAX_SQL_OFFSET


def test_ordinary_pages_untouched_by_upper_bound():
    assert clamp_page_request(10**6, 100).page == 10**6

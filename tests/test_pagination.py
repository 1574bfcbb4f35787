"""Tests for the result window calculator."""
import pytest

from app.services.pagination import compute_window, format_window_label


@pytest.mark.parametrize("total,page_number,page_size,expected", [
    (0, 1, 50, (0, 0)),
    (120, 1, 50, (1, 50)),
    (120, 2, 50, (51, 100)),
    (120, 3, 50, (101, 120)),
    (7, 1, 50, (1, 7)),
    (50, 1, 50, (1, 50)),
])
def test_compute_window(total, page_number, page_size, expected):
    assert compute_window(total, page_number, page_size) == expected


def test_page_past_the_end_clamps():
    """A page beyond the results clamps the end instead of failing."""
    start, end = compute_window(120, 5, 50)
    assert start == 201
    assert end == 120


def test_window_label():
    assert format_window_label(120, 2, 50) == "Showing 51 to 100 of 120 results"
    assert format_window_label(0, 1) == "Showing 0 to 0 of 0 results"

from __future__ import annotations

import itertools

import pytest

from buildsize.services.viewport import page_count, page_range, visible_range


def test_top_of_list() -> None:
    assert visible_range(0.0, 90.0, 18.0, 100) == range(0, 5)


def test_partial_rows_are_included() -> None:
    assert visible_range(10.0, 30.0, 18.0, 100) == range(0, 3)


def test_end_clamped_to_item_count() -> None:
    assert visible_range(1700.0, 200.0, 18.0, 100) == range(94, 100)


def test_empty_when_no_items_or_no_height() -> None:
    assert len(visible_range(0.0, 100.0, 18.0, 0)) == 0
    assert len(visible_range(50.0, 0.0, 18.0, 10)) == 0
    assert len(visible_range(50.0, -3.0, 18.0, 10)) == 0


def test_scroll_past_end_keeps_last_item() -> None:
    assert visible_range(10_000.0, 50.0, 18.0, 10) == range(9, 10)


def test_negative_offset_treated_as_top() -> None:
    assert visible_range(-40.0, 36.0, 18.0, 10) == range(0, 2)


def test_item_height_must_be_positive() -> None:
    with pytest.raises(ValueError):
        visible_range(0.0, 10.0, 0.0, 10)


def test_bounds_hold_across_grid() -> None:
    offsets = [0.0, 0.5, 17.9, 18.0, 250.0, 5000.0]
    heights = [0.0, 1.0, 18.0, 400.0]
    counts = [0, 1, 7, 300]
    for offset, height, count in itertools.product(offsets, heights, counts):
        window = visible_range(offset, height, 18.0, count)
        assert 0 <= window.start <= window.stop <= count
        assert (len(window) == 0) == (count == 0 or height <= 0)


def test_pages() -> None:
    assert page_range(0, 10, 25) == range(0, 10)
    assert page_range(2, 10, 25) == range(20, 25)
    assert page_count(10, 25) == 3
    assert page_count(10, 0) == 1

from __future__ import annotations

import math


def visible_range(scroll_offset: float, viewport_height: float, item_height: float, item_count: int) -> range:
    """Return the indices of list items intersecting the viewport.

    ``scroll_offset`` and ``viewport_height`` are in the same units as
    ``item_height``. The result is a sub-range of ``range(item_count)`` and is
    empty only when there are no items or the viewport has no height. An
    offset past the end of the list is clamped so the last item stays visible.
    """
    if item_height <= 0:
        raise ValueError(f"item_height must be positive, got {item_height}")
    if item_count <= 0 or viewport_height <= 0:
        return range(0)
    offset = max(0.0, scroll_offset)
    start = min(item_count - 1, math.floor(offset / item_height))
    end = min(item_count, math.ceil((offset + viewport_height) / item_height))
    return range(start, max(start + 1, end))


def page_range(page_index: int, page_size: int, item_count: int) -> range:
    """Rows shown on page *page_index* of a list split into *page_size* rows."""
    return visible_range(float(page_index * page_size), float(page_size), 1.0, item_count)


def page_count(page_size: int, item_count: int) -> int:
    return max(1, (item_count + page_size - 1) // page_size)

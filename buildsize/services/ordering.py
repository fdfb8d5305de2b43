from __future__ import annotations

from functools import cmp_to_key
from typing import Callable

from buildsize.models.enums import SortKey
from buildsize.models.report import ReportEntry

type Comparator = Callable[[ReportEntry, ReportEntry], int]


def _cmp(a: object, b: object) -> int:
    return (a > b) - (a < b)  # type: ignore[operator]


def extension_of(name: str) -> str:
    """Return the extension of the last path component, including the dot."""
    basename = name.replace("\\", "/").rsplit("/", 1)[-1]
    dot = basename.rfind(".")
    return basename[dot:] if dot >= 0 else ""


def compare_index(x: ReportEntry, y: ReportEntry) -> int:
    return _cmp(x.original_index, y.original_index)


def compare_size(x: ReportEntry, y: ReportEntry) -> int:
    # Percent can carry more precision than a size printed in whole kilobytes.
    cmp = _cmp(x.percent, y.percent) or _cmp(x.size_in_bytes, y.size_in_bytes)
    if cmp:
        return -cmp
    return compare_index(x, y)


def compare_name(x: ReportEntry, y: ReportEntry) -> int:
    return _cmp(x.name.casefold(), y.name.casefold()) or compare_index(x, y)


def compare_extension(x: ReportEntry, y: ReportEntry) -> int:
    cmp = _cmp(extension_of(x.name).casefold(), extension_of(y.name).casefold())
    if cmp:
        return cmp
    return compare_name(x, y)


COMPARATORS: dict[SortKey, Comparator] = {
    SortKey.SIZE: compare_size,
    SortKey.NAME: compare_name,
    SortKey.EXTENSION: compare_extension,
    SortKey.INDEX: compare_index,
}


def sort_entries(entries: list[ReportEntry], key: SortKey) -> None:
    """Reorder *entries* in place by *key*; the new order is permanent."""
    entries.sort(key=cmp_to_key(COMPARATORS[key]))

from __future__ import annotations

import math
import re

from buildsize.models.report import ReportEntry, SizeValue

BUNDLE_NAME_PREFIX = "Bundle Name:"
COMPRESSED_SIZE_PREFIX = "Compressed Size:"
COMPLETE_BUILD_SIZE_NAME = "Complete build size"
CATEGORY_SECTION_LINE = "Uncompressed usage by category (Percentages based on user generated assets only):"
FILE_SECTION_LINE = "Used Assets and files from the Resources folder, sorted by uncompressed size:"
TERMINATOR_LINE = "-" * 79

_NAME = r"(?P<name>.+?)"
_SIZE = r"(?P<size>\d+(?:\.\d+)?)\s+(?P<units>[A-Za-z]{1,2})"
_PERCENT = r"(?P<percent>\d+\.\d+)%"

BUNDLE_NAME_RE = re.compile(rf"^\s*{re.escape(BUNDLE_NAME_PREFIX)}\s*{_NAME}\s*$", re.DOTALL)
COMPRESSED_SIZE_RE = re.compile(rf"^\s*{re.escape(COMPRESSED_SIZE_PREFIX)}\s*{_SIZE}\s*$", re.DOTALL)
CATEGORY_RE = re.compile(rf"^\s*{_NAME}\s+{_SIZE}(?:\s+{_PERCENT})?\s*$", re.DOTALL)
FILE_RE = re.compile(rf"^\s*{_SIZE}\s+{_PERCENT}\s+{_NAME}\s*$", re.DOTALL)


def _is_avatar_header(line: str) -> bool:
    return "avtr" in line and ".prefab.unity3d" in line


def _is_world_header(line: str) -> bool:
    return "scene-" in line and ".vrcw" in line


def is_segment_begin(line: str) -> bool:
    """Return True when *line* opens an avatar or world build report."""
    stripped = line.strip()
    if not stripped.startswith(BUNDLE_NAME_PREFIX):
        return False
    rest = stripped[len(BUNDLE_NAME_PREFIX) :]
    return _is_avatar_header(rest) or _is_world_header(rest)


def is_category_section(line: str) -> bool:
    return line.strip() == CATEGORY_SECTION_LINE


def is_file_section(line: str) -> bool:
    return line.strip() == FILE_SECTION_LINE


def is_terminator(line: str) -> bool:
    return line.strip() == TERMINATOR_LINE


def match_bundle_name(line: str) -> str | None:
    m = BUNDLE_NAME_RE.match(line)
    return m.group("name") if m else None


def _size_from_match(m: re.Match[str]) -> SizeValue | None:
    try:
        return SizeValue(float(m.group("size")), m.group("units"))
    except ValueError:
        return None


def _percent_from_match(m: re.Match[str]) -> float | None:
    raw = m.group("percent")
    if not raw:
        return 0.0
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def match_compressed_size(line: str) -> SizeValue | None:
    m = COMPRESSED_SIZE_RE.match(line)
    return _size_from_match(m) if m else None


def _parse_record(pattern: re.Pattern[str], line: str, index: int) -> ReportEntry | None:
    m = pattern.match(line)
    if m is None:
        return None
    size = _size_from_match(m)
    percent = _percent_from_match(m)
    if size is None or percent is None:
        return None
    return ReportEntry(original_index=index, name=m.group("name"), size=size, percent=percent)


def parse_category(line: str, index: int) -> ReportEntry | None:
    """Parse ``<name> <size> <unit> [<percent>%]``; a missing percent reads as 0.0."""
    return _parse_record(CATEGORY_RE, line, index)


def parse_file(line: str, index: int) -> ReportEntry | None:
    """Parse ``<size> <unit> <percent>% <path>``; the percent is required."""
    return _parse_record(FILE_RE, line, index)

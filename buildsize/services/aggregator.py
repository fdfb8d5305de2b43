from __future__ import annotations

import logging
from collections.abc import Iterable

from buildsize.models.enums import ReadErrorCode
from buildsize.models.report import Parsed, ReadError, ReadResult, Report
from buildsize.services import grammar
from buildsize.services.fs import DEFAULT_FS, FileSystem
from buildsize.services.parser import LineCursor, parse_segment

logger = logging.getLogger(__name__)


def clamp_retention(max_retain: int) -> int:
    return max(1, max_retain)


def _scan_cursor(cursor: LineCursor, reports: list[Report]) -> None:
    while (line := cursor.peek()) is not None:
        if not grammar.is_segment_begin(line):
            cursor.advance()
            continue
        outcome = parse_segment(cursor)
        if isinstance(outcome, Parsed):
            reports.append(outcome.report)


def scan_source(lines: Iterable[str]) -> list[Report]:
    """Return every complete report in *lines*, in the order they were written."""
    reports: list[Report] = []
    _scan_cursor(LineCursor(lines), reports)
    return reports


def read_all(sources: Iterable[str], max_retain: int, fs: FileSystem = DEFAULT_FS) -> ReadResult:
    """Read build reports from *sources*, ordered least to most recent.

    The returned reports are most-recent-first and capped at *max_retain*.
    Unreadable sources are recorded in ``errors`` and skipped; reports read
    from a source before it failed are kept.
    """
    result = ReadResult()
    collected: list[Report] = []
    for path in sources:
        if not fs.exists(path):
            logger.warning("Build log not found: %s", path)
            result.errors.append(ReadError(code=ReadErrorCode.NOT_FOUND, path=path, message="File does not exist"))
            continue
        before = len(collected)
        try:
            with fs.open_text(path) as handle:
                _scan_cursor(LineCursor(handle), collected)
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Error reading build log %s: %s", path, exc)
            result.errors.append(ReadError(code=ReadErrorCode.UNREADABLE, path=path, message=str(exc)))
        logger.debug("Read %d build report(s) from %s", len(collected) - before, path)

    collected.reverse()
    del collected[clamp_retention(max_retain) :]
    result.reports = collected
    return result

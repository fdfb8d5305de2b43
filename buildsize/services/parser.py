from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from buildsize.models.enums import ParseState
from buildsize.models.report import ZERO_SIZE, Parsed, ParseOutcome, Rejected, Report, ReportEntry, SizeValue
from buildsize.services import grammar

logger = logging.getLogger(__name__)

_TERMINAL = frozenset({ParseState.DONE, ParseState.REJECTED})


class LineCursor:
    """Peekable iterator over the lines of one log source.

    Trailing newlines are stripped. ``line_number`` counts consumed lines.
    """

    __slots__ = ("_lines", "_pending", "line_number")

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines: Iterator[str] = iter(lines)
        self._pending: str | None = None
        self.line_number = 0

    def peek(self) -> str | None:
        if self._pending is None:
            raw = next(self._lines, None)
            if raw is None:
                return None
            self._pending = raw.rstrip("\r\n")
        return self._pending

    def advance(self) -> str | None:
        line = self.peek()
        if line is not None:
            self._pending = None
            self.line_number += 1
        return line

    def __iter__(self) -> Iterator[str]:
        while (line := self.advance()) is not None:
            yield line


@dataclass(slots=True)
class _Draft:
    name: str | None = None
    compressed_size: SizeValue | None = None
    uncompressed_size: SizeValue = ZERO_SIZE
    categories: list[ReportEntry] = field(default_factory=list)
    files: list[ReportEntry] = field(default_factory=list)
    categories_read: bool = False
    files_read: bool = False

    def missing(self) -> list[str]:
        parts: list[str] = []
        if self.compressed_size is None:
            parts.append("compressed size")
        if not self.categories_read:
            parts.append("categories")
        if not self.files_read:
            parts.append("files")
        return parts

    def to_report(self) -> Report:
        assert self.name is not None and self.compressed_size is not None
        return Report(
            name=self.name,
            compressed_size=self.compressed_size,
            uncompressed_size=self.uncompressed_size,
            categories=self.categories,
            files=self.files,
        )


def _read_categories(cursor: LineCursor, draft: _Draft) -> None:
    while (line := cursor.peek()) is not None:
        if grammar.is_file_section(line) or grammar.is_terminator(line):
            return
        entry = grammar.parse_category(line, len(draft.categories))
        if entry is None:
            logger.warning("Unexpected line in category section of %s: %r", draft.name, line)
            return
        cursor.advance()
        if entry.name == grammar.COMPLETE_BUILD_SIZE_NAME:
            draft.uncompressed_size = entry.size
        draft.categories.append(entry)


def _read_files(cursor: LineCursor, draft: _Draft) -> None:
    while (line := cursor.peek()) is not None:
        if grammar.is_terminator(line) or grammar.is_category_section(line):
            return
        entry = grammar.parse_file(line, len(draft.files))
        if entry is None:
            logger.warning("Unexpected line in file section of %s: %r", draft.name, line)
            return
        cursor.advance()
        draft.files.append(entry)


def _transition(state: ParseState, line: str, cursor: LineCursor, draft: _Draft) -> ParseState:
    if state is ParseState.AWAIT_NAME:
        if grammar.is_segment_begin(line):
            name = grammar.match_bundle_name(line)
            if name is not None:
                draft.name = name
                return ParseState.AWAIT_COMPRESSED_SIZE
    elif state is ParseState.AWAIT_COMPRESSED_SIZE:
        size = grammar.match_compressed_size(line)
        if size is not None:
            draft.compressed_size = size
            return ParseState.READING_SECTIONS
    elif state is ParseState.READING_SECTIONS:
        if not draft.categories_read and grammar.is_category_section(line):
            _read_categories(cursor, draft)
            draft.categories_read = True
        elif not draft.files_read and grammar.is_file_section(line):
            _read_files(cursor, draft)
            draft.files_read = True
        if draft.categories_read and draft.files_read:
            return ParseState.DONE

    # Build reports always end with a terminator line; seeing one before the
    # report is complete means the begin line was a false positive.
    if grammar.is_terminator(line):
        return ParseState.REJECTED
    return state


def parse_segment(cursor: LineCursor) -> ParseOutcome:
    """Read one build report starting at the cursor's current line.

    The cursor should be positioned on a segment-begin line. On rejection the
    cursor is left just past the last line examined, so the caller can keep
    scanning for the next segment from there.
    """
    draft = _Draft()
    state = ParseState.AWAIT_NAME
    while state not in _TERMINAL:
        line = cursor.advance()
        if line is None:
            state = ParseState.REJECTED
            break
        state = _transition(state, line, cursor, draft)

    if state is ParseState.DONE:
        return Parsed(draft.to_report())

    if draft.name is None:
        return Rejected("no bundle name")
    reason = f"missing {', '.join(draft.missing())}"
    logger.warning("Discarding incomplete build report %s (line %d): %s", draft.name, cursor.line_number, reason)
    return Rejected(reason)

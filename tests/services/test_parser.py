from __future__ import annotations

import logging

import pytest

from buildsize.models.report import Parsed, Rejected, SizeValue
from buildsize.services.grammar import CATEGORY_SECTION_LINE, FILE_SECTION_LINE, TERMINATOR_LINE
from buildsize.services.parser import LineCursor, parse_segment
from tests.log_samples import segment


def _cursor_at_begin(lines: list[str]) -> LineCursor:
    cursor = LineCursor(lines)
    while not (cursor.peek() or "").startswith("Bundle Name:"):
        cursor.advance()
    return cursor


def test_cursor_peek_does_not_consume() -> None:
    cursor = LineCursor(["a\n", "b\r\n"])
    assert cursor.peek() == "a"
    assert cursor.peek() == "a"
    assert cursor.advance() == "a"
    assert cursor.advance() == "b"
    assert cursor.advance() is None
    assert cursor.peek() is None
    assert cursor.line_number == 2


def test_parses_complete_segment() -> None:
    outcome = parse_segment(_cursor_at_begin(segment()))

    assert isinstance(outcome, Parsed)
    report = outcome.report
    assert report.name == "avtr_0001.prefab.unity3d"
    assert report.compressed_size == SizeValue(3.2, "mb")
    assert report.uncompressed_size == SizeValue(14.2, "mb")
    assert [c.name for c in report.categories] == [
        "Textures",
        "Meshes",
        "Shaders",
        "Other Assets",
        "Complete build size",
    ]
    assert [f.name for f in report.files] == [
        "Assets/Textures/Body.png",
        "Assets/Models/Body.fbx",
        "Assets/Shaders/Toon.shader",
    ]
    assert [f.original_index for f in report.files] == [0, 1, 2]
    assert report.categories[-1].percent == 0.0


def test_cursor_left_on_trailing_terminator() -> None:
    cursor = _cursor_at_begin(segment() + ["after"])
    parse_segment(cursor)
    assert cursor.advance() == TERMINATOR_LINE
    assert cursor.advance() == "after"


def test_skips_noise_before_compressed_size() -> None:
    lines = segment()
    lines.insert(2, "Some unrelated editor line")
    outcome = parse_segment(_cursor_at_begin(lines))
    assert isinstance(outcome, Parsed)


def test_missing_file_section_is_rejected(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING)
    outcome = parse_segment(_cursor_at_begin(segment(with_files=False)))

    assert isinstance(outcome, Rejected)
    assert "files" in outcome.reason
    assert len(caplog.records) == 1
    assert "avtr_0001.prefab.unity3d" in caplog.records[0].getMessage()


def test_terminator_before_compressed_size_rejects() -> None:
    lines = ["Bundle Name: avtr_1.prefab.unity3d", TERMINATOR_LINE, "Compressed Size: 1.0 mb"]
    cursor = LineCursor(lines)

    outcome = parse_segment(cursor)

    assert isinstance(outcome, Rejected)
    assert "compressed size" in outcome.reason
    assert cursor.peek() == "Compressed Size: 1.0 mb"


def test_end_of_input_rejects() -> None:
    outcome = parse_segment(LineCursor(["Bundle Name: avtr_1.prefab.unity3d", "Compressed Size: 1.0 mb"]))
    assert isinstance(outcome, Rejected)


def test_bad_category_row_ends_section_but_keeps_report(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING)
    categories = ["Textures  1.0 mb  50.0%", "%%% garbage %%%", "Meshes  1.0 mb  50.0%"]
    lines = segment(categories=categories)

    outcome = parse_segment(_cursor_at_begin(lines))

    assert isinstance(outcome, Parsed)
    assert [c.name for c in outcome.report.categories] == ["Textures"]
    assert len(outcome.report.files) == 3
    assert outcome.report.uncompressed_size.size_in_bytes == 0
    assert any("category section" in r.getMessage() for r in caplog.records)


def test_bad_file_row_ends_section_but_keeps_report(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING)
    files = [" 1.0 mb\t 50.0% Assets/a.png", "Assets/b.png without size", " 1.0 mb\t 50.0% Assets/c.png"]

    outcome = parse_segment(_cursor_at_begin(segment(files=files)))

    assert isinstance(outcome, Parsed)
    assert [f.name for f in outcome.report.files] == ["Assets/a.png"]
    assert any("file section" in r.getMessage() for r in caplog.records)


def test_file_section_may_precede_category_section() -> None:
    lines = [
        "Bundle Name: scene-Win64-World.vrcw",
        "Compressed Size: 40.0 mb",
        FILE_SECTION_LINE,
        " 1.0 mb\t 50.0% Assets/a.png",
        CATEGORY_SECTION_LINE,
        "Textures  1.0 mb  50.0%",
        "Complete build size  2.0 mb",
        TERMINATOR_LINE,
    ]

    outcome = parse_segment(LineCursor(lines))

    assert isinstance(outcome, Parsed)
    assert outcome.report.name == "scene-Win64-World.vrcw"
    assert [f.name for f in outcome.report.files] == ["Assets/a.png"]
    assert [c.name for c in outcome.report.categories] == ["Textures", "Complete build size"]
    assert outcome.report.uncompressed_size == SizeValue(2.0, "mb")


def test_empty_sections_still_count_as_read() -> None:
    outcome = parse_segment(_cursor_at_begin(segment(categories=[], files=[])))
    assert isinstance(outcome, Parsed)
    assert outcome.report.categories == []
    assert outcome.report.files == []


def test_oversized_file_row_ends_section(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING)
    files = [" " + "9" * 400 + " kb\t 1.0% Assets/huge.png", " 1.0 mb\t 50.0% Assets/a.png"]

    outcome = parse_segment(_cursor_at_begin(segment(files=files)))

    assert isinstance(outcome, Parsed)
    assert outcome.report.files == []
    assert outcome.report.total_file_bytes == 0
    assert any("file section" in r.getMessage() for r in caplog.records)

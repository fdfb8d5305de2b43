from __future__ import annotations

from enum import Enum


class SizeUnit(str, Enum):
    BYTES = "b"
    KB = "kb"
    MB = "mb"
    GB = "gb"
    UNRECOGNIZED = "?"


class SortKey(str, Enum):
    SIZE = "size"
    NAME = "name"
    EXTENSION = "extension"
    INDEX = "index"


class ParseState(str, Enum):
    AWAIT_NAME = "await_name"
    AWAIT_COMPRESSED_SIZE = "await_compressed_size"
    READING_SECTIONS = "reading_sections"
    DONE = "done"
    REJECTED = "rejected"


class ReadErrorCode(str, Enum):
    NOT_FOUND = "not_found"
    UNREADABLE = "unreadable"

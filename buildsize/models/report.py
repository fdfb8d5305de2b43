from __future__ import annotations

import math
from dataclasses import dataclass, field

from buildsize.models.enums import ReadErrorCode, SizeUnit

_UNIT_TOKENS: dict[str, SizeUnit] = {
    "b": SizeUnit.BYTES,
    "byte": SizeUnit.BYTES,
    "bytes": SizeUnit.BYTES,
    "kb": SizeUnit.KB,
    "mb": SizeUnit.MB,
    "gb": SizeUnit.GB,
}

_UNIT_MULTIPLIERS: dict[SizeUnit, int] = {
    SizeUnit.BYTES: 1,
    SizeUnit.KB: 1024,
    SizeUnit.MB: 1024 * 1024,
    SizeUnit.GB: 1024 * 1024 * 1024,
    SizeUnit.UNRECOGNIZED: 1,
}


def unit_from_token(token: str) -> SizeUnit:
    return _UNIT_TOKENS.get(token.lower(), SizeUnit.UNRECOGNIZED)


@dataclass(slots=True, frozen=True)
class SizeValue:
    """A size as printed by the build log: magnitude plus unit token.

    ``unit`` and ``display`` are derived once at construction; use
    ``dataclasses.replace`` to get a new value with both recomputed.
    """

    magnitude: float
    token: str = "b"
    unit: SizeUnit = field(init=False)
    display: str = field(init=False, compare=False)

    def __post_init__(self) -> None:
        if self.magnitude < 0:
            raise ValueError(f"Size magnitude must be non-negative, got {self.magnitude}")
        unit = unit_from_token(self.token)
        if not math.isfinite(self.magnitude * _UNIT_MULTIPLIERS[unit]):
            raise ValueError(f"Size {self.magnitude} {self.token} is out of range")
        object.__setattr__(self, "unit", unit)
        object.__setattr__(self, "display", f"{self.magnitude:.1f} {self.token}")

    @property
    def size_in_bytes(self) -> int:
        return int(self.magnitude * _UNIT_MULTIPLIERS[self.unit])

    def __str__(self) -> str:
        return self.display


ZERO_SIZE = SizeValue(0.0, "b")


@dataclass(slots=True, frozen=True)
class ReportEntry:
    original_index: int
    name: str
    size: SizeValue
    percent: float = 0.0
    percent_text: str = field(init=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "percent_text", f"{self.percent:.1f}%")

    @property
    def size_in_bytes(self) -> int:
        return self.size.size_in_bytes


@dataclass(slots=True)
class Report:
    name: str
    compressed_size: SizeValue
    uncompressed_size: SizeValue = ZERO_SIZE
    categories: list[ReportEntry] = field(default_factory=list)
    files: list[ReportEntry] = field(default_factory=list)

    @property
    def total_file_bytes(self) -> int:
        return sum(entry.size_in_bytes for entry in self.files)


@dataclass(slots=True, frozen=True)
class Parsed:
    report: Report


@dataclass(slots=True, frozen=True)
class Rejected:
    reason: str


type ParseOutcome = Parsed | Rejected


@dataclass(slots=True, frozen=True)
class ReadError:
    code: ReadErrorCode
    path: str
    message: str


@dataclass(slots=True)
class ReadResult:
    reports: list[Report] = field(default_factory=list)
    errors: list[ReadError] = field(default_factory=list)


def report_labels(reports: list[Report]) -> list[str]:
    return [f"[{index}] {report.name}" for index, report in enumerate(reports)]

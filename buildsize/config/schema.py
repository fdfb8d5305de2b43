from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

MIN_LOG_COUNT = 1
MAX_LOG_COUNT = 1000


def clamp_log_count(value: int) -> int:
    return max(MIN_LOG_COUNT, min(MAX_LOG_COUNT, value))


@dataclass(slots=True)
class AppConfig:
    max_log_count: int = 20
    show_categories: bool = True
    log_paths: list[str] = field(default_factory=list)
    top_count: int = 50
    page_size: int = 100

    def to_dict(self) -> dict[str, Any]:
        return {
            "maxLogCount": self.max_log_count,
            "showCategories": self.show_categories,
            "logPaths": self.log_paths,
            "topCount": self.top_count,
            "pageSize": self.page_size,
        }


def from_dict(data: dict[str, Any], defaults: AppConfig) -> AppConfig:
    return AppConfig(
        max_log_count=clamp_log_count(int(data.get("maxLogCount", defaults.max_log_count))),
        show_categories=bool(data.get("showCategories", defaults.show_categories)),
        log_paths=[str(x) for x in data.get("logPaths", defaults.log_paths)],
        top_count=max(1, int(data.get("topCount", defaults.top_count))),
        page_size=max(5, int(data.get("pageSize", defaults.page_size))),
    )

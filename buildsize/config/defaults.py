from __future__ import annotations

from buildsize.config.schema import AppConfig


def default_config() -> AppConfig:
    return AppConfig()

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping
from pathlib import Path

from buildsize.services.fs import DEFAULT_FS, FileSystem

logger = logging.getLogger(__name__)

CURRENT_LOG_NAME = "Editor.log"
PREVIOUS_LOG_NAME = "Editor-prev.log"


def editor_log_dir(platform: str, home: str, env: Mapping[str, str]) -> str | None:
    """Return the directory the editor writes its logs to on *platform*."""
    if platform == "win32":
        local = env.get("LOCALAPPDATA") or str(Path(home) / "AppData" / "Local")
        return str(Path(local) / "Unity" / "Editor")
    if platform == "darwin":
        return str(Path(home) / "Library" / "Logs" / "Unity")
    if platform.startswith("linux"):
        return str(Path(home) / ".config" / "unity3d")
    logger.warning("Unsupported platform for locating editor logs: %s", platform)
    return None


def default_log_paths(
    platform: str | None = None,
    home: str | None = None,
    env: Mapping[str, str] | None = None,
) -> list[str]:
    """Return the editor log paths ordered least to most recent."""
    log_dir = editor_log_dir(
        platform if platform is not None else sys.platform,
        home if home is not None else str(Path.home()),
        env if env is not None else os.environ,
    )
    if log_dir is None:
        return []
    return [str(Path(log_dir) / PREVIOUS_LOG_NAME), str(Path(log_dir) / CURRENT_LOG_NAME)]


def existing_log_paths(paths: list[str], fs: FileSystem = DEFAULT_FS) -> list[str]:
    return [path for path in paths if fs.exists(path)]

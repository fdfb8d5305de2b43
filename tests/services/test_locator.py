from __future__ import annotations

import logging

import pytest

from buildsize.services.locator import default_log_paths, existing_log_paths
from tests.fs_mock import MemoryFileSystem


def test_linux_paths_oldest_first() -> None:
    paths = default_log_paths("linux", "/home/dev", {})
    assert paths == ["/home/dev/.config/unity3d/Editor-prev.log", "/home/dev/.config/unity3d/Editor.log"]


def test_macos_paths() -> None:
    paths = default_log_paths("darwin", "/Users/dev", {})
    assert paths[-1] == "/Users/dev/Library/Logs/Unity/Editor.log"


def test_windows_uses_local_app_data() -> None:
    paths = default_log_paths("win32", "/home/dev", {"LOCALAPPDATA": "/appdata/local"})
    assert paths[0].replace("\\", "/") == "/appdata/local/Unity/Editor/Editor-prev.log"


def test_unsupported_platform_warns(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING)
    assert default_log_paths("sunos5", "/home/dev", {}) == []
    assert "sunos5" in caplog.text


def test_existing_log_paths_filters_missing() -> None:
    fs = MemoryFileSystem().add_file("/logs/Editor.log", "")
    assert existing_log_paths(["/logs/Editor-prev.log", "/logs/Editor.log"], fs=fs) == ["/logs/Editor.log"]

from __future__ import annotations

from contextlib import AbstractContextManager
from pathlib import Path
from typing import Iterable, Protocol, TextIO


class FileSystem(Protocol):
    def expanduser(self, path: str) -> str: ...

    def exists(self, path: str) -> bool: ...

    def open_text(self, path: str, encoding: str = "utf-8") -> AbstractContextManager[Iterable[str]]: ...

    def read_text(self, path: str, encoding: str = "utf-8") -> str: ...


class OsFileSystem:
    def expanduser(self, path: str) -> str:
        return str(Path(path).expanduser())

    def exists(self, path: str) -> bool:
        return Path(path).exists()

    def open_text(self, path: str, encoding: str = "utf-8") -> TextIO:
        # Editor logs occasionally carry stray bytes from plugin output.
        return Path(path).open("r", encoding=encoding, errors="replace", newline=None)

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        return Path(path).read_text(encoding=encoding)


DEFAULT_FS: FileSystem = OsFileSystem()

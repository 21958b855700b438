"""
multilang/i18n/filesystem.py
────────────────────────────
Filesystem access used by the Translator.

`Filesystem` is the protocol the Translator depends on; `LocalFilesystem`
is the default implementation backed by the real disk.
"""
from __future__ import annotations

from pathlib import Path
from typing import Protocol


class Filesystem(Protocol):
    def is_dir(self, path: str | Path) -> bool: ...

    def is_file(self, path: str | Path) -> bool: ...

    def read_text(self, path: str | Path) -> str: ...

    def make_dir(self, path: str | Path) -> None: ...


class LocalFilesystem:
    """Filesystem backed by `pathlib`."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def is_dir(self, path: str | Path) -> bool:
        return bool(str(path)) and Path(path).is_dir()

    def is_file(self, path: str | Path) -> bool:
        return Path(path).is_file()

    def read_text(self, path: str | Path) -> str:
        with open(path, encoding=self.encoding) as f:
            return f.read()

    def make_dir(self, path: str | Path) -> None:
        Path(path).mkdir(parents=True, exist_ok=True)

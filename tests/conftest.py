"""
tests/conftest.py
─────────────────
Shared pytest fixtures for the multilang test suite.
"""
import json
from pathlib import Path

import pytest

from multilang.i18n.models import TranslatorConfig
from multilang.i18n.translator import Translator, reset_translator


class MemoryFilesystem:
    """In-memory Filesystem: a set of directories and a path → text mapping."""

    def __init__(self, dirs=(), files=None):
        self.dirs = {str(Path(d)) for d in dirs}
        self.files = {str(Path(p)): text for p, text in (files or {}).items()}
        self.reads: list[str] = []

    def is_dir(self, path) -> bool:
        return bool(str(path)) and str(Path(path)) in self.dirs

    def is_file(self, path) -> bool:
        return str(Path(path)) in self.files

    def read_text(self, path) -> str:
        self.reads.append(str(Path(path)))
        value = self.files[str(Path(path))]
        if isinstance(value, Exception):
            raise value
        return value

    def make_dir(self, path) -> None:
        self.dirs.add(str(Path(path)))


@pytest.fixture(autouse=True)
def _reset_shared_translator():
    reset_translator()
    yield
    reset_translator()


@pytest.fixture
def locale_dir(tmp_path: Path) -> Path:
    """A directory with en.json, fr.json and a malformed xx.json."""
    d = tmp_path / "langs"
    d.mkdir()
    (d / "en.json").write_text(
        json.dumps({"hi": "Hi", "greet": "Hello, {{name}}!", "empty": "", "nulled": None}),
        encoding="utf-8",
    )
    (d / "fr.json").write_text(json.dumps({"hi": "Salut", "greet": "Bonjour, {{name}} !"}), encoding="utf-8")
    (d / "xx.json").write_text("{not json", encoding="utf-8")
    return d


@pytest.fixture
def translator(locale_dir: Path) -> Translator:
    tr = Translator()
    tr.set_directory_path(locale_dir)
    tr.set_allowed_languages(["en", "fr", "de", "xx"])
    return tr


@pytest.fixture
def memory_fs() -> MemoryFilesystem:
    return MemoryFilesystem(
        dirs=["/langs"],
        files={"/langs/en.json": json.dumps({"hi": "Hi"})},
    )


@pytest.fixture
def memory_translator(memory_fs: MemoryFilesystem) -> Translator:
    tr = Translator(TranslatorConfig(), filesystem=memory_fs)
    tr.set_directory_path("/langs")
    tr.set_allowed_languages(["en"])
    return tr

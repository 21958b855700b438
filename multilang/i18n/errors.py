"""
multilang/i18n/errors.py
────────────────────────
Exceptions raised while configuring a Translator or resolving a key.

Every failure of the resolution pipeline has its own subclass of
`LanguageError`, so callers can catch the whole family or a single step.
"""
from __future__ import annotations


class LanguageError(Exception):
    """Base class for all translation errors."""


class NoLanguageConfiguredError(LanguageError):
    def __init__(self) -> None:
        super().__init__("The current language and the default language have not been set.")


class LanguageNotAllowedError(LanguageError):
    def __init__(self, language: str) -> None:
        self.language = language
        super().__init__(f"Language '{language}' is not allowed.")


class DirectoryNotFoundError(LanguageError):
    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Language directory '{path}' doesn't exist.")


class LanguageFileNotFoundError(LanguageError):
    def __init__(self, language: str, path: str) -> None:
        self.language = language
        self.path = path
        super().__init__(f"Language file '{language}' doesn't exist ({path}).")


class ReadFailedError(LanguageError):
    def __init__(self, language: str, path: str) -> None:
        self.language = language
        self.path = path
        super().__init__(f"Failed to read language file '{path}'.")


class DecodeFailedError(LanguageError):
    def __init__(self, language: str, path: str) -> None:
        self.language = language
        self.path = path
        super().__init__(f"Failed to decode language file '{path}' as a JSON object.")

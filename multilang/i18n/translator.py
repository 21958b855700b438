"""
multilang/i18n/translator.py
────────────────────────────
Translation lookup against per-language JSON files.

Usage:
    from multilang.i18n.translator import Translator

    tr = Translator()
    tr.set_directory_path("locales")
    tr.set_allowed_languages(["en", "es"])
    tr.set_default_language("en")
    tr.resolve("greet", replacements={"{{name}}": "Ada"})   # → "Hello, Ada!"

    # Process-wide shortcut built from config.settings
    from multilang.i18n.translator import t, set_lang
    set_lang("es")
    t("greet", replacements={"{{name}}": "Ada"})              # → "¡Hola, Ada!"
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from multilang.i18n.decoder import Decoder, JsonDecoder
from multilang.i18n.errors import (
    DecodeFailedError,
    DirectoryNotFoundError,
    LanguageFileNotFoundError,
    LanguageNotAllowedError,
    NoLanguageConfiguredError,
    ReadFailedError,
)
from multilang.i18n.filesystem import Filesystem, LocalFilesystem
from multilang.i18n.models import TranslationTable, TranslatorConfig
from multilang.i18n.substitution import replace_placeholders

logger = logging.getLogger(__name__)


class Translator:
    """
    Resolves text keys to localized strings.

    Holds its own `TranslatorConfig`; nothing is shared between instances.
    Language files are re-read on every call unless `cache_tables` is set.
    No internal locking: serialize access when sharing one instance
    between threads.
    """

    def __init__(
        self,
        config: TranslatorConfig | None = None,
        filesystem: Filesystem | None = None,
        decoder: Decoder | None = None,
    ) -> None:
        self.config = config if config is not None else TranslatorConfig()
        self.filesystem = filesystem if filesystem is not None else LocalFilesystem()
        self.decoder = decoder if decoder is not None else JsonDecoder()
        self._tables: dict[str, TranslationTable] = {}

    @classmethod
    def from_settings(cls, settings, filesystem: Filesystem | None = None) -> "Translator":
        """Build a translator from a `config.settings.Settings` instance."""
        tr = cls(
            TranslatorConfig(
                strict_current_language=settings.STRICT_CURRENT_LANG,
                tolerate_default_decode_error=settings.TOLERATE_DEFAULT_DECODE_ERROR,
                cache_tables=settings.CACHE_TABLES,
            ),
            filesystem=filesystem,
        )
        tr.set_directory_path(settings.TRANSLATIONS_DIR, force=settings.FORCE_CREATE_DIR)
        tr.set_allowed_languages(settings.allowed_languages)
        if settings.DEFAULT_LANG:
            tr.set_default_language(settings.DEFAULT_LANG)
        if settings.CURRENT_LANG:
            tr.set_current_language(settings.CURRENT_LANG)
        return tr

    # ── Configuration ─────────────────────────────────────────────────────────

    def get_directory_path(self) -> str:
        return self.config.directory_path

    def set_directory_path(self, path: str | Path, force: bool = False) -> None:
        """
        Point the translator at a directory of `{code}.json` files.

        Raises DirectoryNotFoundError if the directory is missing, unless
        `force` is set, in which case it is created first.
        """
        if not self.filesystem.is_dir(path):
            if not force:
                raise DirectoryNotFoundError(str(path))
            logger.info("Creating language directory %s", path)
            self.filesystem.make_dir(path)
        self.config.directory_path = str(path)
        self._tables.clear()

    def get_allowed_languages(self) -> list[str]:
        return self.config.allowed_languages

    def set_allowed_languages(self, languages: Iterable[str]) -> None:
        self.config.allowed_languages = list(languages)

    def get_default_language(self) -> str:
        return self.config.default_language

    def set_default_language(self, language: str) -> None:
        if not self.is_allowed_language(language):
            raise LanguageNotAllowedError(language)
        self.config.default_language = language

    def get_current_language(self) -> str:
        return self.config.current_language

    def set_current_language(self, language: str) -> None:
        if (
            self.config.strict_current_language
            and language
            and not self.is_allowed_language(language)
        ):
            raise LanguageNotAllowedError(language)
        self.config.current_language = language

    def is_allowed_language(self, language: str) -> bool:
        return language in self.config.allowed_languages

    # ── Resolution ────────────────────────────────────────────────────────────

    def language_file(self, language: str) -> Path:
        return Path(self.config.directory_path) / f"{language}.json"

    def select_language(self, language: str | None = None) -> str:
        """Return `language` if given, else the current language, else the default."""
        if language:
            return language
        current = self.config.current_language
        default = self.config.default_language
        if not current and not default:
            raise NoLanguageConfiguredError()
        return current or default

    def load_table(self, language: str) -> TranslationTable:
        """Validate, read and decode the file for `language`."""
        if not self.is_allowed_language(language):
            raise LanguageNotAllowedError(language)
        if not self.filesystem.is_dir(self.config.directory_path):
            raise DirectoryNotFoundError(self.config.directory_path)

        path = self.language_file(language)
        if not self.filesystem.is_file(path):
            raise LanguageFileNotFoundError(language, str(path))

        if self.config.cache_tables and language in self._tables:
            return self._tables[language]

        try:
            raw = self.filesystem.read_text(path)
        except (OSError, UnicodeDecodeError) as exc:
            raise ReadFailedError(language, str(path)) from exc
        if not raw:
            raise ReadFailedError(language, str(path))

        try:
            table = self.decoder.decode(raw)
        except ValueError as exc:
            if language == self.config.default_language and self.config.tolerate_default_decode_error:
                logger.warning("Malformed default language file %s; using an empty table", path)
                return {}
            raise DecodeFailedError(language, str(path)) from exc

        logger.debug("Loaded %d keys for '%s' from %s", len(table), language, path)
        if self.config.cache_tables:
            self._tables[language] = table
        return table

    def resolve(
        self,
        key: str,
        language: str | None = None,
        replacements: Mapping[str, Any] | None = None,
    ) -> str:
        """
        Translate `key`.

        Args:
            key: Text key; also returned when the key has no translation
            language: Language override; uses current, then default language if None
            replacements: Placeholder → value pairs replaced literally in the result

        Returns:
            The translated (and substituted) string, or `key` if that is empty.
        """
        table = self.load_table(self.select_language(language))
        template = table.get(key) or key
        if replacements:
            template = replace_placeholders(template, replacements)
        return template or key

    translate = resolve


# ── Process-wide translator ───────────────────────────────────────────────────

_translator: Translator | None = None


def get_translator() -> Translator:
    """Return the shared translator, building it from settings on first use."""
    global _translator
    if _translator is None:
        from config.settings import settings

        _translator = Translator.from_settings(settings)
    return _translator


def reset_translator(translator: Translator | None = None) -> None:
    """Replace the shared translator (or drop it so it is rebuilt lazily)."""
    global _translator
    _translator = translator


def set_lang(lang: str) -> None:
    """Set the current language of the shared translator."""
    get_translator().set_current_language(lang)


def get_lang() -> str:
    tr = get_translator()
    return tr.get_current_language() or tr.get_default_language()


def t(key: str, lang: str | None = None, replacements: Mapping[str, Any] | None = None) -> str:
    """Translate `key` with the shared translator."""
    return get_translator().resolve(key, lang, replacements)

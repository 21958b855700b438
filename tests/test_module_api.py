"""
tests/test_module_api.py
────────────────────────
Tests for the process-wide t / set_lang / get_lang helpers.
"""
import pytest

from config.settings import Settings
from multilang.i18n import translator as module
from multilang.i18n.errors import LanguageNotAllowedError
from multilang.i18n.translator import Translator, get_lang, get_translator, reset_translator, set_lang, t


@pytest.fixture
def shared(locale_dir):
    tr = Translator.from_settings(
        Settings(TRANSLATIONS_DIR=str(locale_dir), ALLOWED_LANGUAGES="en,fr", DEFAULT_LANG="en", CURRENT_LANG="")
    )
    reset_translator(tr)
    return tr


class TestModuleApi:
    def test_uses_default_language(self, shared):
        assert get_lang() == "en"
        assert t("hi") == "Hi"

    def test_set_lang(self, shared):
        set_lang("fr")
        assert get_lang() == "fr"
        assert t("greet", replacements={"{{name}}": "Ada"}) == "Bonjour, Ada !"

    def test_lang_override(self, shared):
        assert t("hi", "fr") == "Salut"

    def test_unknown_key(self, shared):
        assert t("missing.key") == "missing.key"

    def test_get_translator_returns_shared(self, shared):
        assert get_translator() is shared

    def test_unknown_language_raises(self, shared):
        with pytest.raises(LanguageNotAllowedError):
            t("hi", "it")

    def test_built_lazily_from_settings(self, monkeypatch, locale_dir):
        import config.settings

        monkeypatch.setattr(
            config.settings,
            "settings",
            Settings(TRANSLATIONS_DIR=str(locale_dir), ALLOWED_LANGUAGES="en", DEFAULT_LANG="en", CURRENT_LANG=""),
        )
        assert module._translator is None
        assert t("hi") == "Hi"
        assert module._translator is not None

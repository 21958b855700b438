"""
config/settings.py
──────────────────
Application configuration loaded from environment variables.
"""
import os
from dataclasses import dataclass
from pathlib import Path

_ROOT = Path(__file__).resolve().parents[1]


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


def split_languages(raw: str) -> list[str]:
    """Split a comma separated list of language codes, dropping blanks."""
    return [code.strip() for code in raw.split(",") if code.strip()]


@dataclass
class Settings:
    # Translations
    TRANSLATIONS_DIR: str = os.getenv("TRANSLATIONS_DIR", str(_ROOT / "locales"))
    ALLOWED_LANGUAGES: str = os.getenv("ALLOWED_LANGUAGES", "en,es")
    DEFAULT_LANG: str = os.getenv("DEFAULT_LANG", "en")
    CURRENT_LANG: str = os.getenv("CURRENT_LANG", "")
    FORCE_CREATE_DIR: bool = _flag("FORCE_CREATE_DIR", "false")

    # Behaviour flags
    STRICT_CURRENT_LANG: bool = _flag("STRICT_CURRENT_LANG", "false")
    TOLERATE_DEFAULT_DECODE_ERROR: bool = _flag("TOLERATE_DEFAULT_DECODE_ERROR", "true")
    CACHE_TABLES: bool = _flag("CACHE_TABLES", "false")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Preview server
    DEBUG: bool = _flag("DEBUG", "true")
    PORT: int = int(os.getenv("PORT", "8050"))
    HOST: str = os.getenv("HOST", "0.0.0.0")

    @property
    def allowed_languages(self) -> list[str]:
        return split_languages(self.ALLOWED_LANGUAGES)


settings = Settings()

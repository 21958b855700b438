"""
multilang/i18n/models.py
────────────────────────
Pydantic v2 models for translator configuration and decoded language files.
"""
from typing import Optional

from pydantic import BaseModel, Field, TypeAdapter

# Decoded form of a `{code}.json` file. `null` values behave like missing keys.
TranslationTable = dict[str, Optional[str]]

TABLE_ADAPTER: TypeAdapter[TranslationTable] = TypeAdapter(TranslationTable)


class TranslatorConfig(BaseModel):
    directory_path: str = ""
    allowed_languages: list[str] = Field(default_factory=list)
    default_language: str = ""
    current_language: str = ""

    # Reject non-allowed codes in set_current_language (set_default_language always checks).
    strict_current_language: bool = False
    # Resolve against an empty table when the default language file is malformed.
    tolerate_default_decode_error: bool = True
    # Keep decoded tables per language until the directory changes.
    cache_tables: bool = False

"""
multilang/i18n/decoder.py
─────────────────────────
JSON decoding of language files into translation tables.
"""
from __future__ import annotations

from typing import Protocol

from multilang.i18n.models import TABLE_ADAPTER, TranslationTable


class Decoder(Protocol):
    def decode(self, raw: str) -> TranslationTable:
        """Parse `raw` into a table, raising ValueError when it is not one."""
        ...


class JsonDecoder:
    """
    Validates a JSON document as a flat object of string values.

    Syntax errors, non-object documents and non-string values all raise
    `pydantic.ValidationError`, which is a `ValueError`.
    """

    def decode(self, raw: str) -> TranslationTable:
        return TABLE_ADAPTER.validate_json(raw)

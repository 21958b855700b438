"""
multilang/analytics/coverage.py
───────────────────────────────
Translation coverage across languages.

Provides:
  - coverage_frame()   : key × language matrix of raw templates
  - coverage_summary() : per-language translated / missing counts
"""
from __future__ import annotations

from collections.abc import Iterable

import pandas as pd

from multilang.i18n.translator import Translator


def coverage_frame(translator: Translator, languages: Iterable[str] | None = None) -> pd.DataFrame:
    """
    Build a DataFrame indexed by key with one column per language.

    Cells hold the raw template, or NA where the language has no non-empty
    value for the key. Errors from loading a language file propagate.
    """
    langs = list(languages) if languages is not None else translator.get_allowed_languages()
    columns = {}
    for lang in langs:
        table = translator.load_table(lang)
        columns[lang] = pd.Series({k: v for k, v in table.items() if v}, dtype="object")

    df = pd.DataFrame(columns, columns=langs)
    df.index.name = "key"
    return df.sort_index()


def coverage_summary(frame: pd.DataFrame) -> pd.DataFrame:
    """Summarize a coverage frame: one row per language."""
    total = len(frame.index)
    translated = frame.notna().sum()
    summary = pd.DataFrame(
        {
            "total": total,
            "translated": translated.astype(int),
            "missing": (total - translated).astype(int),
        },
        index=frame.columns,
    )
    summary["coverage_pct"] = (
        (summary["translated"] / total * 100.0).round(1) if total else 0.0
    )
    summary.index.name = "language"
    return summary

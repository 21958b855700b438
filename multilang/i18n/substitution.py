"""
multilang/i18n/substitution.py
──────────────────────────────
Literal placeholder replacement for resolved templates.
"""
from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any


def replace_placeholders(template: str, replacements: Mapping[str, Any]) -> str:
    """
    Replace every occurrence of each replacement key in `template`.

    Matching is literal and simultaneous: replaced text is never scanned
    again, and at a given position the longest matching key wins. Empty keys
    are ignored and values are converted with `str()`.

    Example:
        replace_placeholders("Hi {{name}}", {"{{name}}": "Ada"})  # → "Hi Ada"
    """
    needles = sorted((k for k in replacements if k), key=len, reverse=True)
    if not needles or not template:
        return template
    pattern = re.compile("|".join(re.escape(n) for n in needles))
    return pattern.sub(lambda m: str(replacements[m.group(0)]), template)

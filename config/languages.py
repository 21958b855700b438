"""
config/languages.py
───────────────────
Display labels for language codes used by the preview app.
"""

LANGUAGE_LABELS: dict[str, str] = {
    "de": "Deutsch",
    "en": "English",
    "es": "Español",
    "fr": "Français",
    "it": "Italiano",
    "pt": "Português",
    "tr": "Türkçe",
}


def language_label(code: str) -> str:
    """Return a human label for `code`, falling back to the upper-cased code."""
    return LANGUAGE_LABELS.get(code, code.upper())

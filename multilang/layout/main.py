"""
multilang/layout/main.py
────────────────────────
Preview application layout.

Contains:
  - Language selector, key input and replacements input
  - Resolved output panel
  - Coverage cards + key × language table
"""
from dash import dcc, html
import dash_bootstrap_components as dbc

from config.languages import language_label
from multilang.i18n.translator import Translator

MUTED = "#8b949e"


def create_layout(translator: Translator) -> dbc.Container:
    """Assemble the root preview layout."""
    languages = translator.get_allowed_languages()
    selected = translator.get_current_language() or translator.get_default_language() or None
    return dbc.Container(
        [
            # ── Header ────────────────────────────────────────────────────────
            html.Div(
                [
                    html.H2("Translation Preview", className="page-title"),
                    html.P(
                        f"Directory: {translator.get_directory_path() or '—'}",
                        className="page-subtitle",
                        style={"color": MUTED},
                    ),
                ],
                className="page-header my-3",
            ),
            # ── Resolve form ──────────────────────────────────────────────────
            dbc.Row(
                [
                    dbc.Col(
                        dcc.Dropdown(
                            id="preview-lang",
                            options=[{"label": language_label(c), "value": c} for c in languages],
                            value=selected,
                            placeholder="Current / default language",
                        ),
                        md=3,
                    ),
                    dbc.Col(dbc.Input(id="preview-key", placeholder="Key, e.g. greet", value=""), md=4),
                    dbc.Col(
                        dbc.Input(id="preview-replacements", placeholder='{"{{name}}": "Ada"}', value=""),
                        md=5,
                    ),
                ],
                className="g-2 mb-3",
            ),
            html.Div(id="preview-output", className="mb-4"),
            # ── Coverage ──────────────────────────────────────────────────────
            html.Div(id="coverage-cards", className="d-flex gap-2 mb-3"),
            html.Div(id="coverage-table"),
            dcc.Interval(id="coverage-refresh", interval=60_000, n_intervals=0),
        ],
        fluid=True,
    )

"""
multilang/callbacks/preview.py
──────────────────────────────
Preview page callbacks: resolve a key and render translation coverage.
"""
from __future__ import annotations

import json

import dash_bootstrap_components as dbc
from dash import Input, Output, html

from multilang.analytics.coverage import coverage_frame, coverage_summary
from multilang.i18n.errors import LanguageError
from multilang.i18n.translator import Translator
from multilang.layout.components.kpi_card import coverage_card

MUTED = "#8b949e"


def parse_replacements(text: str | None) -> dict[str, str]:
    """Parse the replacements input, a JSON object of placeholder → value."""
    if not text or not text.strip():
        return {}
    data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError("Replacements must be a JSON object.")
    return {str(k): str(v) for k, v in data.items()}


def render_preview(
    translator: Translator,
    key: str | None,
    language: str | None,
    replacements_text: str | None,
) -> html.Div:
    if not key:
        return html.Div("Type a key to preview its translation.", style={"color": MUTED})
    try:
        replacements = parse_replacements(replacements_text)
    except ValueError as exc:
        return dbc.Alert(f"Invalid replacements: {exc}", color="warning")
    try:
        text = translator.resolve(key, language, replacements)
    except LanguageError as exc:
        return dbc.Alert(str(exc), color="danger")
    return dbc.Alert(text, color="success" if text != key else "secondary")


def render_coverage(translator: Translator) -> tuple[list, html.Div]:
    try:
        frame = coverage_frame(translator)
    except LanguageError as exc:
        return [], dbc.Alert(str(exc), color="danger")

    summary = coverage_summary(frame)
    cards = [
        coverage_card(lang, float(row["coverage_pct"]), int(row["missing"]))
        for lang, row in summary.iterrows()
    ]
    table = dbc.Table.from_dataframe(
        frame.fillna("—").reset_index(),
        striped=True,
        bordered=False,
        hover=True,
        size="sm",
    )
    return cards, table


def register(app, translator: Translator) -> None:
    """Register preview page callbacks."""

    @app.callback(
        Output("preview-output", "children"),
        Input("preview-key", "value"),
        Input("preview-lang", "value"),
        Input("preview-replacements", "value"),
    )
    def update_preview(key, language, replacements_text):
        return render_preview(translator, key, language, replacements_text)

    @app.callback(
        Output("coverage-cards", "children"),
        Output("coverage-table", "children"),
        Input("coverage-refresh", "n_intervals"),
    )
    def update_coverage(_n):
        return render_coverage(translator)

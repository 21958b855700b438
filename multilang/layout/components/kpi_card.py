"""
multilang/layout/components/kpi_card.py
───────────────────────────────────────
Coverage indicator card per language.
"""
from dash import html

from config.languages import language_label

CARD_BG = "#161b22"
MUTED = "#8b949e"
OK = "#2ea44f"
WARN = "#e8a020"
BAD = "#da3633"


def coverage_color(pct: float) -> str:
    if pct >= 95.0:
        return OK
    if pct >= 75.0:
        return WARN
    return BAD


def coverage_card(language: str, coverage_pct: float, missing: int) -> html.Div:
    """
    Compact card showing how much of the key set a language covers.

    Args:
        language: Language code
        coverage_pct: Translated share of all known keys, 0–100
        missing: Number of keys without a translation
    """
    color = coverage_color(coverage_pct)
    return html.Div(
        [
            html.Div(
                language_label(language),
                style={"fontSize": ".68rem", "color": MUTED, "textTransform": "uppercase", "letterSpacing": ".06em"},
            ),
            html.Div(
                f"{coverage_pct:.1f}%",
                style={"fontSize": "1.4rem", "fontWeight": "700", "color": color, "lineHeight": "1.2", "marginTop": "2px"},
            ),
            html.Div(f"{missing} missing", style={"fontSize": ".68rem", "color": MUTED, "marginTop": "2px"}),
        ],
        style={
            "backgroundColor": CARD_BG,
            "border": f"1px solid {color}",
            "borderRadius": "8px",
            "padding": "14px 16px",
            "minWidth": "120px",
        },
    )

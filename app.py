"""
app.py
──────
Translation Preview — Application Entry Point.

Startup sequence:
  1. Configure logging
  2. Build the shared translator from config.settings
  3. Create Dash app with DARKLY bootstrap theme
  4. Register callbacks
  5. Run dev server (or expose `server` for gunicorn in production)
"""
import dash
import dash_bootstrap_components as dbc

from config.settings import settings
from multilang.i18n.translator import get_translator
from multilang.layout.main import create_layout
from multilang.log import configure_logging

# ── 1. Logging ────────────────────────────────────────────────────────────────
logger = configure_logging(settings.LOG_LEVEL)

# ── 2. Translator ─────────────────────────────────────────────────────────────
translator = get_translator()
logger.info(
    "Translations from %s (allowed: %s, default: %s)",
    translator.get_directory_path(),
    ", ".join(translator.get_allowed_languages()),
    translator.get_default_language() or "-",
)

# ── 3. Dash app ───────────────────────────────────────────────────────────────
app = dash.Dash(
    __name__,
    external_stylesheets=[dbc.themes.DARKLY],
    meta_tags=[{"name": "viewport", "content": "width=device-width, initial-scale=1"}],
    title="Translation Preview",
)

server = app.server  # gunicorn entry point
app.layout = create_layout(translator)

# ── 4. Register callbacks ─────────────────────────────────────────────────────
from multilang.callbacks import preview

preview.register(app, translator)

# ── 5. Run ────────────────────────────────────────────────────────────────────
if __name__ == "__main__":
    app.run(
        debug=settings.DEBUG,
        host=settings.HOST,
        port=settings.PORT,
    )

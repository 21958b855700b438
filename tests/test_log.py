"""
tests/test_log.py
─────────────────
Tests for package logging.
"""
import logging

from multilang.i18n.translator import Translator
from multilang.log import LOGGER_NAME, configure_logging, logger


class TestLogging:
    def test_configure_is_idempotent(self):
        configure_logging("DEBUG")
        configure_logging("INFO")
        assert len(logger.handlers) == 1
        assert logger.level == logging.INFO

    def test_tolerated_decode_failure_is_logged(self, translator, caplog):
        translator.set_default_language("xx")
        with caplog.at_level(logging.WARNING, logger=LOGGER_NAME):
            translator.resolve("hi")
        assert any("Malformed default language file" in r.message for r in caplog.records)

    def test_force_create_is_logged(self, tmp_path, caplog):
        with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
            Translator().set_directory_path(tmp_path / "new", force=True)
        assert any("Creating language directory" in r.message for r in caplog.records)

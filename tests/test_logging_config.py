"""Tests for structured logging configuration."""

import logging

import structlog

from cli.logging_config import _redact_sensitive, setup_logging


class TestLoggingConfig:
    """Test structlog setup modes."""

    def test_console_mode(self, capsys):
        """Console mode renders to stderr without raising."""
        setup_logging(json_mode=False, level="DEBUG")
        structlog.get_logger().info("entry_appended", mood_label="Calm")
        capsys.readouterr()

    def test_json_mode(self):
        setup_logging(json_mode=True, level="DEBUG")
        logging.getLogger("test_json").info("json test")

    def test_level_filtering(self):
        setup_logging(json_mode=False, level="WARNING")
        assert logging.getLogger().level == logging.WARNING

    def test_processor_chain(self):
        setup_logging(json_mode=True, level="DEBUG")
        config = structlog.get_config()
        assert _redact_sensitive in config["processors"]

    def test_default_level_is_info(self):
        setup_logging()
        assert logging.getLogger().level == logging.INFO

    def test_unknown_level_falls_back_to_info(self):
        setup_logging(level="chatty")
        assert logging.getLogger().level == logging.INFO


class TestRedaction:
    def test_notes_masked(self):
        out = _redact_sensitive(None, None, {"event": "entry_saved", "notes": "told Sam I was tired"})
        assert out["notes"] == "<redacted 20 chars>"
        assert out["event"] == "entry_saved"

    def test_empty_notes_untouched(self):
        out = _redact_sensitive(None, None, {"notes": ""})
        assert out["notes"] == ""

    def test_other_strings_untouched(self):
        out = _redact_sensitive(None, None, {"event": "entry_appended", "mood_label": "Calm"})
        assert out == {"event": "entry_appended", "mood_label": "Calm"}

    def test_non_string_values_kept(self):
        out = _redact_sensitive(None, None, {"battery_level": 80})
        assert out["battery_level"] == 80

"""Tests for structured logging configuration."""

import json
import logging

import structlog

from cli.logging_config import _mask_private_text, setup_logging


class TestLoggingConfig:
    """Test structlog setup modes."""

    def test_console_mode_smoke(self):
        setup_logging(json_mode=False, level="DEBUG")
        structlog.get_logger().info("test message", key="value")

    def test_level_filtering(self):
        setup_logging(json_mode=False, level="WARNING")
        assert logging.getLogger().level == logging.WARNING

    def test_default_level_is_info(self):
        setup_logging()
        assert logging.getLogger().level == logging.INFO

    def test_unknown_level_falls_back_to_info(self):
        setup_logging(level="CHATTY")
        assert logging.getLogger().level == logging.INFO

    def test_single_stream_handler_without_file(self):
        setup_logging()
        setup_logging()
        assert len(logging.getLogger().handlers) == 1

    def test_log_file_receives_json(self, tmp_path):
        log_file = tmp_path / "logs" / "moodboard.log"
        setup_logging(json_mode=False, level="INFO", log_file=log_file)
        assert len(logging.getLogger().handlers) == 2

        structlog.get_logger("test_file").info("file test")
        for handler in logging.getLogger().handlers:
            handler.flush()

        lines = log_file.read_text().strip().splitlines()
        record = json.loads(lines[-1])
        assert record["event"] == "file test"
        assert record["level"] == "info"

        # Detach so later tests don't keep writing into tmp_path
        setup_logging()

    def test_reconfigure_closes_previous_log_file(self, tmp_path):
        setup_logging(log_file=tmp_path / "first.log")
        file_handler = next(
            h for h in logging.getLogger().handlers if isinstance(h, logging.FileHandler)
        )
        assert file_handler.stream is not None

        setup_logging()
        assert file_handler.stream is None
        assert file_handler not in logging.getLogger().handlers


class TestMaskPrivateText:
    def test_notes_replaced_with_length(self):
        event = _mask_private_text(None, "info", {"event": "x", "notes": "slept badly"})
        assert event["notes"] == "<11 chars>"

    def test_other_keys_untouched(self):
        event = _mask_private_text(None, "info", {"event": "x", "mood": "Sad", "note": None})
        assert event["mood"] == "Sad"
        assert event["note"] is None

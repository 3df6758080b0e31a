"""
Tests for logging configuration.
"""

import logging
from logging.handlers import RotatingFileHandler
from unittest.mock import patch

import httpx

from loggers import LokiHandler, get_logger, send_to_loki


class TestLoki:
    """Tests for Loki integration."""

    def test_send_to_loki_posts_stream(self):
        """Test a log line is pushed as a labelled stream."""
        with patch("loggers.httpx.Client") as client_cls:
            client = client_cls.return_value.__enter__.return_value
            assert send_to_loki("INFO", "hello", "atm", "http://loki/push") is True

        url = client.post.call_args.args[0]
        body = client.post.call_args.kwargs["json"]
        assert url == "http://loki/push"
        assert body["streams"][0]["stream"] == {"level": "INFO", "app": "atm"}
        assert body["streams"][0]["values"][0][1] == "hello"

    def test_send_to_loki_failure(self):
        """Test transport errors are reported, not raised."""
        with patch("loggers.httpx.Client") as client_cls:
            client = client_cls.return_value.__enter__.return_value
            client.post.side_effect = httpx.ConnectError("refused")
            assert send_to_loki("ERROR", "boom", "atm", "http://loki/push") is False

    def test_loki_handler_emit(self):
        """Test the handler forwards formatted records."""
        handler = LokiHandler("atm", "http://loki/push")
        record = logging.LogRecord("t", logging.WARNING, __file__, 1, "careful", None, None)
        with patch("loggers.send_to_loki") as send:
            handler.emit(record)
        send.assert_called_once_with("WARNING", "careful", "atm", "http://loki/push")


class TestGetLogger:
    """Tests for get_logger."""

    def test_handlers_without_loki(self, tmp_path):
        """Test console and rotating file handlers are attached."""
        log_file = tmp_path / "nested" / "atm.log"
        logger = get_logger("test_no_loki", log_file=str(log_file), loki_url="")
        kinds = {type(h) for h in logger.handlers}
        assert RotatingFileHandler in kinds
        assert LokiHandler not in kinds
        assert log_file.parent.is_dir()

    def test_handlers_with_loki(self, tmp_path):
        """Test a Loki handler is attached when a URL is configured."""
        logger = get_logger(
            "test_with_loki",
            log_file=str(tmp_path / "atm.log"),
            loki_url="http://loki/push",
        )
        assert any(isinstance(h, LokiHandler) for h in logger.handlers)

    def test_repeated_calls_do_not_duplicate(self, tmp_path):
        """Test handlers are only attached once per logger."""
        log_file = str(tmp_path / "atm.log")
        first = get_logger("test_repeat", log_file=log_file, loki_url="")
        count = len(first.handlers)
        second = get_logger("test_repeat", log_file=log_file, loki_url="")
        assert second is first
        assert len(second.handlers) == count

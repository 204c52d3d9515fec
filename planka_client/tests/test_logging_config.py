"""Tests for logging configuration."""

import io
import logging

import pytest

from planka_client.logging_config import configure_logging, get_log_level


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestGetLogLevel:
    def test_defaults_to_warning(self, monkeypatch):
        monkeypatch.delenv("PLANKA_LOG_LEVEL", raising=False)
        monkeypatch.delenv("LOG_LEVEL", raising=False)

        assert get_log_level() == logging.WARNING

    def test_planka_variable_wins(self, monkeypatch):
        monkeypatch.setenv("PLANKA_LOG_LEVEL", "debug")
        monkeypatch.setenv("LOG_LEVEL", "ERROR")

        assert get_log_level() == logging.DEBUG

    def test_generic_variable(self, monkeypatch):
        monkeypatch.delenv("PLANKA_LOG_LEVEL", raising=False)
        monkeypatch.setenv("LOG_LEVEL", "info")

        assert get_log_level() == logging.INFO

    def test_unknown_level_name(self, monkeypatch):
        monkeypatch.setenv("PLANKA_LOG_LEVEL", "chatty")

        assert get_log_level() == logging.WARNING


class TestConfigureLogging:
    def test_verbose_writes_debug_to_stream(self):
        stream = io.StringIO()

        configure_logging(verbose=True, stream=stream)
        logging.getLogger("planka_client.test").debug("hello")

        assert "hello" in stream.getvalue()
        assert logging.getLogger("httpx").level == logging.WARNING

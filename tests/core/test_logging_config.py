"""Tests for axon.core.logging_config module."""

import json
import logging

import pytest

from axon.core import logging_config
from axon.core.logging_config import (
    JsonFormatter,
    LogConfig,
    configure_logging,
    get_logger,
    set_level,
)


@pytest.fixture
def fresh_root(monkeypatch):
    """Allow configure_logging to run and restore the root logger afterwards."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    root.handlers[:] = []
    monkeypatch.setattr(logging_config, "_configured", False)
    for var in (logging_config.ENV_LEVEL, logging_config.ENV_FORMAT, logging_config.ENV_FILE):
        monkeypatch.delenv(var, raising=False)
    yield root
    for handler in root.handlers:
        handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestLogConfig:
    """Tests for LogConfig."""

    def test_defaults(self, monkeypatch):
        """Test defaults without environment overrides."""
        monkeypatch.delenv("AXON_LOG_LEVEL", raising=False)
        monkeypatch.delenv("AXON_LOG_FORMAT", raising=False)
        monkeypatch.delenv("AXON_LOG_FILE", raising=False)

        config = LogConfig.from_env()

        assert config.level == "INFO"
        assert config.format == "text"
        assert config.file_path is None

    def test_from_env(self, monkeypatch):
        """Test environment variables are read."""
        monkeypatch.setenv("AXON_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("AXON_LOG_FORMAT", "json")

        config = LogConfig.from_env()

        assert config.level == "DEBUG"
        assert config.format == "json"
        assert isinstance(config.make_formatter(), JsonFormatter)

    def test_explicit_overrides_env(self, monkeypatch):
        """Test explicit values win over the environment."""
        monkeypatch.setenv("AXON_LOG_LEVEL", "DEBUG")

        config = LogConfig.from_env(level="WARNING", format=None)

        assert config.level == "WARNING"
        assert config.format == "text"

    def test_unknown_level(self, monkeypatch):
        """Test an unknown level name is rejected."""
        monkeypatch.delenv("AXON_LOG_FORMAT", raising=False)
        monkeypatch.setenv("AXON_LOG_LEVEL", "LOUD")
        with pytest.raises(ValueError, match="Unknown log level"):
            LogConfig.from_env()

    def test_level_case_insensitive(self, monkeypatch):
        """Test lowercase level names are accepted."""
        monkeypatch.delenv("AXON_LOG_FORMAT", raising=False)
        assert LogConfig.from_env(level="debug").level == "debug"

    def test_unknown_format(self, monkeypatch):
        """Test an unknown format is rejected."""
        monkeypatch.setenv("AXON_LOG_FORMAT", "xml")
        with pytest.raises(ValueError, match="Unknown log format"):
            LogConfig.from_env()


class TestJsonFormatter:
    """Tests for JsonFormatter."""

    def test_format(self):
        """Test records become JSON with extras."""
        record = logging.LogRecord(
            "axon.test", logging.INFO, __file__, 1, "hello %s", ("world",), None
        )
        record.run_id = "run-1"

        data = json.loads(JsonFormatter().format(record))

        assert data["level"] == "INFO"
        assert data["logger"] == "axon.test"
        assert data["message"] == "hello world"
        assert data["extra"] == {"run_id": "run-1"}


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_configures_root(self, fresh_root):
        """Test root logger gets level and one console handler."""
        config = configure_logging(level="DEBUG")

        assert config is not None
        assert fresh_root.level == logging.DEBUG
        assert len(fresh_root.handlers) == 1

    def test_second_call_ignored(self, fresh_root):
        """Test subsequent calls are ignored unless forced."""
        configure_logging(level="DEBUG")

        assert configure_logging(level="ERROR") is None
        assert fresh_root.level == logging.DEBUG

        configure_logging(level="ERROR", force=True)
        assert fresh_root.level == logging.ERROR

    def test_file_handler(self, fresh_root, tmp_path):
        """Test file output is added when a path is given."""
        log_file = tmp_path / "axon.log"
        configure_logging(level="INFO", file_path=str(log_file))

        get_logger("axon.test").info("written")
        for handler in fresh_root.handlers:
            handler.flush()
            if isinstance(handler, logging.FileHandler):
                handler.close()

        assert "written" in log_file.read_text()

    def test_force_closes_previous_handlers(self, fresh_root, tmp_path):
        """Test reconfiguring closes the handlers it replaces."""
        configure_logging(level="INFO", file_path=str(tmp_path / "first.log"))
        first_file = next(h for h in fresh_root.handlers if isinstance(h, logging.FileHandler))

        configure_logging(level="INFO", force=True)

        assert first_file not in fresh_root.handlers
        assert first_file.stream is None
        assert not any(isinstance(h, logging.FileHandler) for h in fresh_root.handlers)

    def test_unknown_level_leaves_root_untouched(self, fresh_root):
        """Test an invalid level fails before handlers are replaced."""
        configure_logging(level="INFO")
        handlers = fresh_root.handlers[:]

        with pytest.raises(ValueError, match="Unknown log level"):
            configure_logging(level="LOUD", force=True)

        assert fresh_root.handlers == handlers

    def test_set_level(self):
        """Test set_level on a named logger."""
        set_level("warning", "axon.test.level")
        assert logging.getLogger("axon.test.level").level == logging.WARNING

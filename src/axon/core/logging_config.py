"""Logging configuration for axon.

The library itself only creates module loggers; applications that embed
it call ``configure_logging`` once at startup to get console (and
optionally file) output.

Usage:
    from axon.core.logging_config import configure_logging, get_logger

    configure_logging(level="DEBUG")
    logger = get_logger(__name__)

Environment Variables:
    AXON_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    AXON_LOG_FORMAT: Output format ("text" or "json")
    AXON_LOG_FILE: Optional log file path
"""

from __future__ import annotations

import json
import logging
import os
import sys
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Literal

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
TEXT_FORMAT_WITH_MS = "%(asctime)s.%(msecs)03d - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ENV_LEVEL = "AXON_LOG_LEVEL"
ENV_FORMAT = "AXON_LOG_FORMAT"
ENV_FILE = "AXON_LOG_FILE"

# Attributes every LogRecord has; anything else came from `extra=`.
_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {
    "message",
    "asctime",
}

_configured = False


@dataclass
class LogConfig:
    """Logging configuration.

    Attributes:
        level: Log level name.
        format: Output format ("text" or "json").
        file_path: Optional file path for file logging.
        include_ms: Include milliseconds in text timestamps.
    """

    level: str = "INFO"
    format: Literal["text", "json"] = "text"
    file_path: str | None = None
    include_ms: bool = True

    @classmethod
    def from_env(cls, **overrides: Any) -> LogConfig:
        """Build a config from AXON_LOG_* variables.

        Explicit (non-None) overrides win over the environment.
        """
        config = cls(
            level=os.environ.get(ENV_LEVEL, "INFO"),
            format=os.environ.get(ENV_FORMAT, "text"),  # type: ignore[arg-type]
            file_path=os.environ.get(ENV_FILE),
        )
        for key, value in overrides.items():
            if value is not None:
                setattr(config, key, value)
        if not isinstance(logging.getLevelName(config.level.upper()), int):
            raise ValueError(f"Unknown log level: {config.level!r}")
        if config.format not in ("text", "json"):
            raise ValueError(f"Unknown log format: {config.format!r}")
        return config

    def make_formatter(self) -> logging.Formatter:
        if self.format == "json":
            return JsonFormatter()
        fmt = TEXT_FORMAT_WITH_MS if self.include_ms else TEXT_FORMAT
        return logging.Formatter(fmt, datefmt=DATE_FORMAT)


class JsonFormatter(logging.Formatter):
    """Formats records as one JSON object per line.

    {
        "timestamp": "2025-12-28T14:30:00.123000",
        "level": "DEBUG",
        "logger": "axon.core.graph.runnable",
        "message": "[20251228_143000_abc] node_start: node=fetch",
        "extra": {...}
    }
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        extra = {k: v for k, v in record.__dict__.items() if k not in _RECORD_ATTRS}
        if extra:
            log_data["extra"] = extra

        return json.dumps(log_data, default=str)


def configure_logging(
    level: str | None = None,
    format: Literal["text", "json"] | None = None,
    file_path: str | None = None,
    include_ms: bool | None = None,
    force: bool = False,
) -> LogConfig | None:
    """Configure the root logger.

    Only the first call has an effect unless force=True. Arguments left as
    None fall back to the AXON_LOG_* environment variables, then to the
    LogConfig defaults.

    Args:
        level: Log level name.
        format: "text" or "json".
        file_path: Also write to this file.
        include_ms: Include milliseconds in text timestamps.
        force: Reconfigure even if already configured.

    Returns:
        The applied LogConfig, or None if configuration was skipped.
    """
    global _configured
    if _configured and not force:
        return None

    config = LogConfig.from_env(
        level=level, format=format, file_path=file_path, include_ms=include_ms
    )
    formatter = config.make_formatter()

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, config.level.upper()))
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if config.file_path:
        file_handler = logging.FileHandler(config.file_path)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    _configured = True
    return config


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name (typically __name__)."""
    return logging.getLogger(name)


def set_level(level: str, logger_name: str | None = None) -> None:
    """Set log level for a specific logger, or the root logger if None."""
    logging.getLogger(logger_name).setLevel(getattr(logging, level.upper()))

"""
AlmantZod Logger
================

Structured logging for validators and schemas.

Records carry keyword context (field names, error lists) and are
rendered either as text lines or as JSON documents. Level and format
default to the ``log.level`` / ``log.format`` configuration keys.

Example:
    logger = get_logger("almantzod.validation")
    logger.debug("Validation failed", field="age", errors=errors)
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import Any, Dict, List, Optional, TextIO, Union


import orjson


class LogLevel(IntEnum):
    """Log levels, numbered like the standard library's."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL

    @classmethod
    def parse(cls, value: Union[str, int, "LogLevel"]) -> "LogLevel":
        """Parse a level name or number ("debug", 10, LogLevel.DEBUG)."""
        if isinstance(value, int):
            return cls(value)
        try:
            return cls[str(value).strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown log level: {value!r}") from None


@dataclass
class LogRecord:
    """A single log event with its keyword context."""

    level: LogLevel
    message: str
    logger_name: str
    context: Dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "timestamp": self.timestamp.isoformat(),
            "level": self.level.name,
            "message": self.message,
            "logger": self.logger_name,
        }
        if self.context:
            data["context"] = self.context
        return data


class TextFormatter:
    """
    Plain text formatter.

    Example output:
        2024-01-15 10:30:45 [DEBUG] Validation failed field=age errors=['age must be an integer']
    """

    def __init__(self, date_format: str = "%Y-%m-%d %H:%M:%S"):
        self.date_format = date_format

    def format(self, record: LogRecord) -> str:
        line = f"{record.timestamp.strftime(self.date_format)} [{record.level.name}] {record.message}"
        if record.context:
            line += " " + " ".join(f"{k}={v}" for k, v in record.context.items())
        return line


class JsonFormatter:
    """
    One JSON document per record.

    Example output:
        {"timestamp":"2024-01-15T10:30:45","level":"ERROR","message":"Unknown file extensions",...}
    """

    def format(self, record: LogRecord) -> str:
        return orjson.dumps(record.to_dict(), default=str).decode("utf-8")


Formatter = Union[TextFormatter, JsonFormatter]


class StreamHandler:
    """Writes formatted records to a stream (stderr by default)."""

    def __init__(self, stream: Optional[TextIO] = None, formatter: Optional[Formatter] = None):
        self.stream = stream
        self.formatter = formatter or TextFormatter()

    def emit(self, record: LogRecord) -> None:
        stream = self.stream or sys.stderr
        stream.write(self.formatter.format(record) + "\n")
        stream.flush()


class Logger:
    """Named logger that drops records below its level."""

    def __init__(
        self,
        name: str = "almantzod",
        level: LogLevel = LogLevel.WARNING,
        handlers: Optional[List[StreamHandler]] = None,
    ):
        self.name = name
        self.level = level
        self.handlers = handlers or []

    def set_level(self, level: Union[str, int, LogLevel]) -> "Logger":
        self.level = LogLevel.parse(level)
        return self

    def _log(self, level: LogLevel, message: str, context: Dict[str, Any]) -> None:
        if level < self.level:
            return

        record = LogRecord(level=level, message=message, logger_name=self.name, context=context)
        for handler in self.handlers:
            try:
                handler.emit(record)
            except Exception:
                pass  # a broken stream must not break validation

    def debug(self, message: str, **context: Any) -> None:
        self._log(LogLevel.DEBUG, message, context)

    def error(self, message: str, **context: Any) -> None:
        self._log(LogLevel.ERROR, message, context)


_loggers: Dict[str, Logger] = {}


def _configured_level() -> LogLevel:
    from almantzod.core.config import get_config

    try:
        return LogLevel.parse(get_config().get("log.level", "WARNING"))
    except ValueError:
        return LogLevel.WARNING


def _make_formatter(format: str) -> Formatter:
    return JsonFormatter() if format == "json" else TextFormatter()


def get_logger(name: str = "almantzod", level: Optional[LogLevel] = None) -> Logger:
    """
    Get or create a logger.

    New loggers take their level and output format from configuration
    unless ``level`` is given.
    """
    from almantzod.core.config import get_config

    if name not in _loggers:
        formatter = _make_formatter(get_config().get("log.format", "text"))
        _loggers[name] = Logger(
            name=name,
            level=level or _configured_level(),
            handlers=[StreamHandler(formatter=formatter)],
        )
    elif level is not None:
        _loggers[name].set_level(level)

    return _loggers[name]


def configure_logging(
    level: Union[str, int, LogLevel] = LogLevel.DEBUG,
    format: str = "text",
    stream: Optional[TextIO] = None,
) -> Logger:
    """
    Reconfigure every AlmantZod logger in place.

    Module-level loggers created at import time pick up the new level,
    format and stream. Returns the root "almantzod" logger.
    """
    level = LogLevel.parse(level)
    handler = StreamHandler(stream=stream, formatter=_make_formatter(format))

    _loggers.setdefault("almantzod", Logger(name="almantzod"))
    for logger in _loggers.values():
        logger.level = level
        logger.handlers = [handler]

    return _loggers["almantzod"]

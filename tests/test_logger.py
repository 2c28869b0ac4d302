"""
Logger Tests
"""

import io
import json

import pytest

from almantzod.utils.logger import (
    JsonFormatter,
    Logger,
    LogLevel,
    StreamHandler,
    TextFormatter,
    configure_logging,
    get_logger,
)


@pytest.fixture
def stream():
    return io.StringIO()


def test_level_filtering(stream):
    logger = Logger("test", level=LogLevel.WARNING, handlers=[StreamHandler(stream=stream)])
    logger.debug("hidden")
    logger.error("shown")
    output = stream.getvalue()
    assert "hidden" not in output
    assert "[ERROR] shown" in output


def test_text_formatter_includes_context(stream):
    handler = StreamHandler(stream=stream, formatter=TextFormatter())
    logger = Logger("test", level=LogLevel.DEBUG, handlers=[handler])
    logger.debug("Validation failed", field="age")
    assert "[DEBUG] Validation failed field=age" in stream.getvalue()


def test_json_formatter(stream):
    handler = StreamHandler(stream=stream, formatter=JsonFormatter())
    logger = Logger("test", level=LogLevel.DEBUG, handlers=[handler])
    logger.error("Unknown file extensions", extensions=["exe"])

    record = json.loads(stream.getvalue())
    assert record["level"] == "ERROR"
    assert record["logger"] == "test"
    assert record["context"] == {"extensions": ["exe"]}


def test_broken_stream_does_not_raise():
    class Broken(io.StringIO):
        def write(self, text):
            raise OSError("closed")

    logger = Logger("test", level=LogLevel.DEBUG, handlers=[StreamHandler(stream=Broken())])
    logger.error("ignored")


def test_parse_level():
    assert LogLevel.parse("debug") is LogLevel.DEBUG
    assert LogLevel.parse(40) is LogLevel.ERROR
    with pytest.raises(ValueError):
        LogLevel.parse("loud")


def test_get_logger_uses_configured_level(config):
    config.set("log.level", "ERROR")
    logger = get_logger("almantzod.tests.configured")
    assert logger.level is LogLevel.ERROR
    assert get_logger("almantzod.tests.configured") is logger


def test_get_logger_uses_configured_format(config):
    config.set("log.format", "json")
    logger = get_logger("almantzod.tests.json")
    assert isinstance(logger.handlers[0].formatter, JsonFormatter)


def test_configure_logging_updates_existing_loggers(stream):
    from almantzod.validation import IntegerValidator

    configure_logging(level="DEBUG", format="json", stream=stream)
    try:
        IntegerValidator().validate("x", field_name="count")
        records = [json.loads(line) for line in stream.getvalue().splitlines()]
        failures = [r for r in records if r["message"] == "Validation failed"]
        assert failures[0]["context"]["errors"] == ["count must be an integer"]
    finally:
        configure_logging(level="WARNING")

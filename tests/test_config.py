"""
Configuration Tests
"""

from almantzod.core.config import Config, get_config


def test_defaults():
    config = Config(environ={})
    assert config.get("log.level") == "WARNING"
    assert config.get("log.format") == "text"
    assert config.get("files.mime_types") == {}
    assert config.get("missing.key", "fallback") == "fallback"


def test_environment_overrides():
    config = Config(environ={
        "ALMANTZOD_LOG_LEVEL": "DEBUG",
        "ALMANTZOD_FILES_MIME_TYPES": '{"csv": "text/csv"}',
        "UNRELATED": "x",
    })
    assert config.get("log.level") == "DEBUG"
    assert config.get("files.mime_types") == {"csv": "text/csv"}
    assert config.get("log.format") == "text"


def test_malformed_json_stays_a_string():
    config = Config(environ={"ALMANTZOD_FILES_MIME_TYPES": "{csv"})
    assert config.get("files.mime_types") == "{csv"


def test_runtime_set_wins():
    config = Config(environ={"ALMANTZOD_LOG_LEVEL": "DEBUG"})
    config.set("log.level", "ERROR")
    assert config.get("log.level") == "ERROR"
    assert config.get("log.format") == "text"


def test_runtime_set_replaces_previous_value():
    config = Config(environ={})
    config.set("files.mime_types", {"csv": "text/csv"})
    config.set("files.mime_types", {"tsv": "text/tab-separated-values"})
    assert config.get("files.mime_types") == {"tsv": "text/tab-separated-values"}
    assert config.get("log.level") == "WARNING"


def test_custom_defaults_are_copied():
    defaults = {"log": {"level": "INFO"}}
    config = Config(defaults=defaults, environ={})
    defaults["log"]["level"] = "DEBUG"
    assert config.get("log.level") == "INFO"


def test_global_config_is_fixture_instance(config):
    assert get_config() is config

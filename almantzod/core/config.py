"""
AlmantZod Configuration
=======================

Settings read by the validators and the logger.

Three layers are consulted, highest first:
1. Runtime values set with ``Config.set``
2. ALMANTZOD_* environment variables
3. Defaults

Recognised keys:
    log.level          minimum level for library loggers ("WARNING")
    log.format         "text" or "json"
    files.mime_types   extra extension -> MIME type entries for FileValidator

Example:
    get_config().set("files.mime_types", {"csv": "text/csv"})
"""

from __future__ import annotations

import os
from typing import Any, Dict, Mapping, Optional

import orjson

ENV_PREFIX = "ALMANTZOD_"

DEFAULTS: Dict[str, Any] = {
    "log": {
        "level": "WARNING",
        "format": "text",
    },
    "files": {
        "mime_types": {},
    },
}


class Config:
    """
    Layered settings with dot-notation keys.

    Example:
        config = Config(environ={"ALMANTZOD_LOG_LEVEL": "DEBUG"})
        config.get("log.level")               # "DEBUG"
        config.get("log.missing", "default")  # "default"
    """

    def __init__(
        self,
        defaults: Optional[Mapping[str, Any]] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._defaults = _deep_copy(DEFAULTS if defaults is None else defaults)
        self._environment = _read_environment(os.environ if environ is None else environ)
        self._runtime: Dict[str, Any] = {}
        self._merged: Optional[Dict[str, Any]] = None

    def get(self, key: str, default: Any = None) -> Any:
        """Look up ``key`` ("files.mime_types") or return ``default``."""
        if self._merged is None:
            self._merged = {}
            for layer in (self._defaults, self._environment, self._runtime):
                _merge_into(self._merged, _deep_copy(layer))

        current: Any = self._merged
        for part in key.split("."):
            if not isinstance(current, dict) or part not in current:
                return default
            current = current[part]
        return current

    def set(self, key: str, value: Any) -> None:
        """Set a runtime value. It overrides the environment and defaults."""
        _assign(self._runtime, key, value)
        self._merged = None


def _read_environment(environ: Mapping[str, str]) -> Dict[str, Any]:
    # ALMANTZOD_FILES_MIME_TYPES -> files.mime_types
    settings: Dict[str, Any] = {}
    for name, raw in environ.items():
        if not name.startswith(ENV_PREFIX):
            continue
        key = name[len(ENV_PREFIX):].lower().replace("_", ".", 1)
        _assign(settings, key, _parse_env_value(raw))
    return settings


def _parse_env_value(raw: str) -> Any:
    """JSON objects and arrays are decoded, everything else stays a string."""
    if raw.startswith(("{", "[")):
        try:
            return orjson.loads(raw)
        except orjson.JSONDecodeError:
            pass
    return raw


def _assign(target: Dict[str, Any], key: str, value: Any) -> None:
    *parents, leaf = key.split(".")
    for part in parents:
        target = target.setdefault(part, {})
    target[leaf] = value


def _merge_into(base: Dict[str, Any], override: Mapping[str, Any]) -> None:
    for key, value in override.items():
        if isinstance(base.get(key), dict) and isinstance(value, dict):
            _merge_into(base[key], value)
        else:
            base[key] = value


def _deep_copy(data: Mapping[str, Any]) -> Dict[str, Any]:
    return {
        key: _deep_copy(value) if isinstance(value, Mapping) else value
        for key, value in data.items()
    }


_config: Optional[Config] = None


def get_config() -> Config:
    """Get the shared configuration, creating it from the environment."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def reset_config(config: Optional[Config] = None) -> Config:
    """Replace the shared configuration (used by tests)."""
    global _config
    _config = config or Config()
    return _config

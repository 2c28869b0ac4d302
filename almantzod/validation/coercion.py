"""
Coercion helpers shared by the field validators.

Each ``coerce_*`` function returns the converted value, or the
``INVALID`` sentinel when the input cannot be converted.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping, Sequence
from typing import Any

INVALID = object()

TRUE_STRINGS = frozenset({"true", "1"})
FALSE_STRINGS = frozenset({"false", "0"})

INTEGER_STRING = re.compile(r"[+-]?[0-9]+")


def is_blank(value: Any) -> bool:
    """True for None and for strings made only of whitespace."""
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def is_sequence(value: Any) -> bool:
    """Non-string sequences such as lists and tuples."""
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def is_mapping(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_integer(value: Any) -> bool:
    """Whole ``int`` values, excluding ``bool``."""
    return isinstance(value, int) and not isinstance(value, bool)


def coerce_int(value: Any) -> Any:
    """
    Convert ``value`` to ``int``.

    Strings must be ASCII decimal digits with an optional sign once
    surrounding whitespace is stripped. Floats are accepted when they
    carry no fractional part. Booleans, NaN and everything else are
    rejected.
    """
    if isinstance(value, bool):
        return INVALID
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        stripped = value.strip()
        if not INTEGER_STRING.fullmatch(stripped):
            return INVALID
        return int(stripped, 10)
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value) or not value.is_integer():
            return INVALID
        return int(value)
    return INVALID


def coerce_bool(value: Any) -> Any:
    """
    Convert ``"true"``/``"1"`` and ``"false"``/``"0"`` (any case) to ``bool``.

    Other strings are returned unchanged so the strict boolean check
    that follows rejects them.
    """
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in TRUE_STRINGS:
            return True
        if lowered in FALSE_STRINGS:
            return False
    return value

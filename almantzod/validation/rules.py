"""
AlmantZod Validation Rules
==========================

Built-in rules used by the field validators.

A rule is a frozen predicate plus a message template. Calling a rule
with ``(value, field)`` returns a ``RuleOutcome``: either a pass with
the (possibly transformed) value, or a failure with the rendered
message. A ``custom_message`` replaces the template verbatim.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, ClassVar, Dict, FrozenSet, Optional, Pattern, Tuple, Union

from almantzod.validation.result import ConfigurationError

BYTES_PER_MEGABYTE = 1024 * 1024

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
DIGIT_PATTERN = re.compile(r"[0-9]")
SPECIAL_CHAR_PATTERN = re.compile(r"[!@#$%^&*(),.?\":{}|<>]")
UPPERCASE_PATTERN = re.compile(r"[A-Z]")


@dataclass(frozen=True)
class RuleOutcome:
    """Outcome of applying one rule to one value."""

    valid: bool
    value: Any = None
    error: Optional[str] = None

    @classmethod
    def passed(cls, value: Any) -> RuleOutcome:
        return cls(valid=True, value=value)

    @classmethod
    def failed(cls, error: str) -> RuleOutcome:
        return cls(valid=False, error=error)


@dataclass(frozen=True)
class Rule(ABC):
    """
    Abstract validation rule.

    Implement `check` to create custom rules. Template parameters are
    the rule's own dataclass fields plus whatever `params` returns.

    Example:
        @dataclass(frozen=True)
        class Even(Rule):
            message: ClassVar[str] = "{field} must be even"

            def check(self, value: Any) -> bool:
                return value % 2 == 0
    """

    message: ClassVar[str] = "{field} is invalid"

    custom_message: Optional[str] = field(default=None, kw_only=True)

    @abstractmethod
    def check(self, value: Any) -> bool:
        """
        Check the value.

        Args:
            value: Coerced value to check

        Returns:
            True if valid, False otherwise
        """
        ...

    def params(self) -> Dict[str, Any]:
        """Extra template parameters."""
        return {}

    def apply(self, value: Any) -> Any:
        """Value handed to the next rule after a pass."""
        return value

    def get_message(self, field: str) -> str:
        """Get error message for ``field``."""
        if self.custom_message is not None:
            return self.custom_message
        values = {
            name: getattr(self, name)
            for name in self.__dataclass_fields__
            if name != "custom_message"
        }
        values.update(self.params())
        return self.message.format(field=field, **values)

    def __call__(self, value: Any, field: str) -> RuleOutcome:
        if self.check(value):
            return RuleOutcome.passed(self.apply(value))
        return RuleOutcome.failed(self.get_message(field))


def _require_number(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigurationError(f"{name} must be a number, got {value!r}")


def _require_non_negative(name: str, value: Any) -> None:
    _require_number(name, value)
    if value < 0:
        raise ConfigurationError(f"{name} must be a non-negative number, got {value!r}")


@dataclass(frozen=True)
class MinLength(Rule):
    """Minimum string length."""

    length: int
    message: ClassVar[str] = "{field} must be at least {length} characters long."

    def __post_init__(self) -> None:
        _require_non_negative("length", self.length)

    def check(self, value: Any) -> bool:
        return len(value) >= self.length


@dataclass(frozen=True)
class MaxLength(Rule):
    """Maximum string length."""

    length: int
    message: ClassVar[str] = "{field} must be no more than {length} characters long."

    def __post_init__(self) -> None:
        _require_non_negative("length", self.length)

    def check(self, value: Any) -> bool:
        return len(value) <= self.length


@dataclass(frozen=True)
class MinValue(Rule):
    """Minimum numeric value (inclusive)."""

    minimum: Union[int, float]
    message: ClassVar[str] = "{field} must be greater than or equal to {minimum}"

    def __post_init__(self) -> None:
        _require_number("minimum", self.minimum)

    def check(self, value: Any) -> bool:
        return value >= self.minimum


@dataclass(frozen=True)
class MaxValue(Rule):
    """Maximum numeric value (inclusive)."""

    maximum: Union[int, float]
    message: ClassVar[str] = "{field} must be less than or equal to {maximum}"

    def __post_init__(self) -> None:
        _require_number("maximum", self.maximum)

    def check(self, value: Any) -> bool:
        return value <= self.maximum


@dataclass(frozen=True)
class Positive(Rule):
    message: ClassVar[str] = "{field} must be a positive number"

    def check(self, value: Any) -> bool:
        return value > 0


@dataclass(frozen=True)
class Matches(Rule):
    """Whole value must match a regular expression."""

    pattern: Pattern
    description: str = "value"
    message: ClassVar[str] = "{field} must be a valid {description}"

    def check(self, value: Any) -> bool:
        return bool(self.pattern.fullmatch(value))


@dataclass(frozen=True)
class Contains(Rule):
    """At least one character of the value must match a pattern."""

    pattern: Pattern
    description: str
    message: ClassVar[str] = "{field} must contain at least one {description}."

    def check(self, value: Any) -> bool:
        return bool(self.pattern.search(value))


@dataclass(frozen=True)
class AllowedMimeTypes(Rule):
    """File descriptor type must be one of the resolved MIME types."""

    mime_types: FrozenSet[str]
    extensions: Tuple[str, ...]
    message: ClassVar[str] = "{field} must be of type: {types}"

    def params(self) -> Dict[str, Any]:
        return {"types": ", ".join(self.extensions)}

    def check(self, value: Any) -> bool:
        return value.type in self.mime_types


@dataclass(frozen=True)
class MaxFileSize(Rule):
    """File descriptor size must not exceed a limit given in megabytes."""

    megabytes: Union[int, float]
    message: ClassVar[str] = "{field} size must not exceed {megabytes} MB"

    def __post_init__(self) -> None:
        _require_non_negative("megabytes", self.megabytes)

    @property
    def max_bytes(self) -> float:
        return self.megabytes * BYTES_PER_MEGABYTE

    def check(self, value: Any) -> bool:
        return value.size <= self.max_bytes


@dataclass(frozen=True)
class CallableRule(Rule):
    """
    Rule wrapper for callable predicates.

    The predicate receives the coerced value. Exceptions raised by it
    count as a failed check.
    """

    func: Callable[[Any], Any]
    message: ClassVar[str] = "{field} is invalid"

    def check(self, value: Any) -> bool:
        try:
            return bool(self.func(value))
        except Exception:
            return False


@dataclass(frozen=True)
class Transform(Rule):
    """
    Replace the working value with ``func(value)``.

    Any exception raised by ``func`` counts as a failure.
    """

    func: Callable[[Any], Any]
    message: ClassVar[str] = "{field} is invalid"

    def check(self, value: Any) -> bool:
        return True

    def __call__(self, value: Any, field: str) -> RuleOutcome:
        try:
            return RuleOutcome.passed(self.func(value))
        except Exception:
            return RuleOutcome.failed(self.get_message(field))

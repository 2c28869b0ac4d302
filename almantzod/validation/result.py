"""
AlmantZod Validation Results
============================

Result types returned by field validators and object schemas,
and the exceptions raised by the ``*_or_fail`` helpers and by
invalid configuration.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

import orjson


class ConfigurationError(ValueError):
    """
    A validator was configured with invalid parameters.

    Raised immediately by the configuring call (for example an
    unknown file extension passed to ``FileValidator.type``),
    never from ``validate``.
    """


class ValidationError(Exception):
    """
    Validation failed exception.

    Only raised by the explicit ``validate_or_fail`` / ``parse_or_fail``
    / ``raise_if_invalid`` helpers. ``errors`` is either the list of
    messages of a field validator or the per-field map of a schema.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        errors: Optional[Union[List[str], Dict[str, str]]] = None,
    ) -> None:
        super().__init__(message)
        self.errors = errors if errors is not None else []

    def __str__(self) -> str:
        if isinstance(self.errors, dict) and self.errors:
            lines = [f"  - {name}: {msg}" for name, msg in self.errors.items()]
            return "Validation failed:\n" + "\n".join(lines)
        if self.errors:
            return "Validation failed:\n" + "\n".join(f"  - {msg}" for msg in self.errors)
        return "Validation failed"

    def first(self, field_name: Optional[str] = None) -> Optional[str]:
        """Get first error message."""
        if isinstance(self.errors, dict):
            if field_name:
                return self.errors.get(field_name)
            return next(iter(self.errors.values()), None)
        return self.errors[0] if self.errors else None


@dataclass(frozen=True)
class ValidationResult:
    """
    Result of a field validator.

    ``data`` holds the coerced value when ``valid`` is true and is
    ``None`` otherwise; ``errors`` is non-empty exactly when
    ``valid`` is false.
    """

    valid: bool
    data: Any = None
    errors: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.valid and self.errors:
            raise ValueError("A valid result cannot carry errors")
        if not self.valid and not self.errors:
            raise ValueError("An invalid result needs at least one error")
        if not self.valid and self.data is not None:
            raise ValueError("An invalid result cannot carry data")

    @classmethod
    def ok(cls, data: Any = None) -> ValidationResult:
        return cls(valid=True, data=data)

    @classmethod
    def fail(cls, errors: Sequence[str]) -> ValidationResult:
        return cls(valid=False, errors=list(errors))

    def __bool__(self) -> bool:
        """Allow using result as boolean."""
        return self.valid

    def failed(self) -> bool:
        return not self.valid

    def first_error(self) -> Optional[str]:
        return self.errors[0] if self.errors else None

    def to_dict(self) -> Dict[str, Any]:
        """Return the ``{valid, data}`` / ``{valid, errors}`` payload."""
        if self.valid:
            return {"valid": True, "data": self.data}
        return {"valid": False, "errors": list(self.errors)}

    def to_json(self) -> str:
        return orjson.dumps(self.to_dict(), default=_encode_default).decode("utf-8")

    def raise_if_invalid(self) -> None:
        """Raise ValidationError if invalid."""
        if not self.valid:
            raise ValidationError(errors=list(self.errors))


@dataclass(frozen=True)
class SchemaResult:
    """
    Result of an object schema.

    Unlike ``ValidationResult`` each failing field maps to a single
    message: the first one its validator reported.
    """

    valid: bool
    data: Dict[str, Any] = field(default_factory=dict)
    errors: Dict[str, str] = field(default_factory=dict)

    def __bool__(self) -> bool:
        return self.valid

    def failed(self) -> bool:
        return not self.valid

    def has_error(self, field_name: str) -> bool:
        """Check if field has error."""
        return field_name in self.errors

    def get_error(self, field_name: str) -> Optional[str]:
        return self.errors.get(field_name)

    def first_error(self) -> Optional[str]:
        return next(iter(self.errors.values()), None)

    def to_dict(self) -> Dict[str, Any]:
        if self.valid:
            return {"valid": True, "data": dict(self.data)}
        return {"valid": False, "errors": dict(self.errors)}

    def to_json(self) -> str:
        return orjson.dumps(self.to_dict(), default=_encode_default).decode("utf-8")

    def raise_if_invalid(self) -> None:
        if not self.valid:
            raise ValidationError(errors=dict(self.errors))


def _encode_default(value: Any) -> Any:
    # FileDescriptor and other mapping-like descriptors
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if isinstance(value, Mapping):
        return dict(value)
    raise TypeError(f"Type is not JSON serializable: {type(value).__name__}")

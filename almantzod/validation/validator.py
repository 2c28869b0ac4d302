"""
AlmantZod Validator
===================

Base class for field validators.

Every validator follows the same sequence in ``validate``:

1. Empty input with ``nullable()`` set succeeds with ``None``.
2. Empty input otherwise fails with ``"<field> is required"``.
3. The value is coerced and type checked; a failure here stops.
4. Every rule runs in insertion order. A passing rule's value
   becomes the working value, each failing rule adds its message.
5. The result is valid only if nothing failed.

Configuration calls return the validator itself so they can be
chained. ``validate`` never changes validator state.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, ClassVar, List, Optional, Tuple, TypeVar

from almantzod.utils.logger import get_logger
from almantzod.validation.coercion import is_blank
from almantzod.validation.result import ValidationError, ValidationResult
from almantzod.validation.rules import CallableRule, Rule, Transform

logger = get_logger("almantzod.validation")

V = TypeVar("V", bound="FieldValidator")


class FieldValidator(ABC):
    """
    Abstract field validator.

    Subclasses implement `_coerce` and add rule-building methods on top
    of `add_rule`.

    Example:
        class EvenValidator(FieldValidator):
            def _coerce(self, value, field):
                if not isinstance(value, int):
                    return None, [f"{field} must be an integer"]
                return value, []

        EvenValidator().refine(lambda v: v % 2 == 0, "Must be even").validate(3)
    """

    default_field_name: ClassVar[str] = "value"

    def __init__(self) -> None:
        self._rules: List[Rule] = []
        self._nullable = False

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(rules={[type(r).__name__ for r in self._rules]}, "
            f"nullable={self._nullable})"
        )

    @property
    def rules(self) -> Tuple[Rule, ...]:
        """Configured rules in insertion order."""
        return tuple(self._rules)

    @property
    def is_nullable(self) -> bool:
        return self._nullable

    def nullable(self: V) -> V:
        """Accept empty input as a valid ``None``."""
        self._nullable = True
        return self

    def add_rule(self: V, rule: Rule) -> V:
        """Append a rule; rules run in the order they were added."""
        self._rules.append(rule)
        logger.debug(
            "Rule added",
            validator=type(self).__name__,
            rule=type(rule).__name__,
        )
        return self

    def refine(
        self: V,
        predicate: Callable[[Any], Any],
        message: Optional[str] = None,
    ) -> V:
        """
        Add a custom predicate rule.

        Args:
            predicate: Called with the coerced value, truthy means valid
            message: Error message used verbatim on failure
        """
        return self.add_rule(CallableRule(predicate, custom_message=message))

    def transform(
        self: V,
        func: Callable[[Any], Any],
        message: Optional[str] = None,
    ) -> V:
        """Replace the working value with ``func(value)`` for later rules and the result."""
        return self.add_rule(Transform(func, custom_message=message))

    def _is_empty(self, value: Any) -> bool:
        return is_blank(value)

    @abstractmethod
    def _coerce(self, value: Any, field: str) -> Tuple[Any, List[str]]:
        """
        Coerce and type check a non-empty value.

        Returns:
            (coerced value, errors); rules only run when errors is empty
        """
        ...

    def _run_rules(self, value: Any, field: str) -> Tuple[Any, List[str]]:
        """Run every rule against ``value``, collecting all failures."""
        errors: List[str] = []

        for rule in self._rules:
            outcome = rule(value, field)
            if outcome.valid:
                value = outcome.value
            else:
                errors.append(outcome.error)

        return value, errors

    def _validate_present(self, value: Any, field: str) -> ValidationResult:
        """Steps 3 to 5 for a value that passed the required check."""
        coerced, errors = self._coerce(value, field)
        if errors:
            return ValidationResult.fail(errors)

        data, errors = self._run_rules(coerced, field)
        if errors:
            return ValidationResult.fail(errors)

        return ValidationResult.ok(data)

    def validate(self, value: Any, field_name: Optional[str] = None) -> ValidationResult:
        """
        Validate a value.

        Args:
            value: Raw input value
            field_name: Name used in error messages, defaults to
                ``default_field_name``

        Returns:
            ValidationResult with coerced data or error messages
        """
        field = field_name or self.default_field_name

        if self._is_empty(value):
            if self._nullable:
                return ValidationResult.ok(None)
            result = ValidationResult.fail([f"{field} is required"])
        else:
            result = self._validate_present(value, field)

        if not result.valid:
            logger.debug(
                "Validation failed",
                validator=type(self).__name__,
                field=field,
                errors=result.errors,
            )

        return result

    def validate_or_fail(self, value: Any, field_name: Optional[str] = None) -> Any:
        """
        Validate and return the data.

        Raises:
            ValidationError: if validation fails
        """
        result = self.validate(value, field_name=field_name)
        if not result.valid:
            raise ValidationError(errors=list(result.errors))
        return result.data

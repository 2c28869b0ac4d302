"""
AlmantZod Field Validators
==========================

String, integer, boolean, email and password validators.

Example:
    name = StringValidator().min(2).max(50)
    age = IntegerValidator().min(18).nullable()

    name.validate("  Ada  ", field_name="name")   # valid, data "Ada"
    age.validate("17", field_name="age")          # "age must be greater than or equal to 18"
"""

from __future__ import annotations

from typing import Any, List, Optional, Tuple, Union

from almantzod.validation.coercion import (
    INVALID,
    coerce_bool,
    coerce_int,
    is_blank,
    is_sequence,
)
from almantzod.validation.result import ValidationResult
from almantzod.validation.rules import (
    DIGIT_PATTERN,
    EMAIL_PATTERN,
    SPECIAL_CHAR_PATTERN,
    UPPERCASE_PATTERN,
    Contains,
    Matches,
    MaxLength,
    MaxValue,
    MinLength,
    MinValue,
    Positive,
)
from almantzod.validation.validator import FieldValidator

Number = Union[int, float]


class StringValidator(FieldValidator):
    """
    String validator.

    Values are trimmed before rules run and the trimmed value is
    returned. With ``array()`` the input must be a list of strings;
    every element is type checked and then run through the rules
    under the name ``<field>[i]``.
    """

    def __init__(self) -> None:
        super().__init__()
        self._is_array = False

    @property
    def is_array(self) -> bool:
        return self._is_array

    def array(self) -> StringValidator:
        """Expect a list of strings instead of a single string."""
        self._is_array = True
        return self

    def min(self, length: int, message: Optional[str] = None) -> StringValidator:
        """Trimmed length must be at least ``length``."""
        return self.add_rule(MinLength(length, custom_message=message))

    def max(self, length: int, message: Optional[str] = None) -> StringValidator:
        """Trimmed length must not exceed ``length``."""
        return self.add_rule(MaxLength(length, custom_message=message))

    def _is_empty(self, value: Any) -> bool:
        if self._is_array:
            return value is None or (is_sequence(value) and len(value) == 0)
        return is_blank(value)

    def _coerce(self, value: Any, field: str) -> Tuple[Any, List[str]]:
        if not isinstance(value, str):
            return None, [f"{field} must be a string"]
        return value.strip(), []

    def _validate_present(self, value: Any, field: str) -> ValidationResult:
        if not self._is_array:
            return super()._validate_present(value, field)

        if not is_sequence(value):
            return ValidationResult.fail([f"{field} must be an array"])

        type_errors = [
            f"{field}[{index}] must be a string"
            for index, item in enumerate(value)
            if not isinstance(item, str)
        ]
        if type_errors:
            return ValidationResult.fail(type_errors)

        items: List[Any] = []
        errors: List[str] = []
        for index, item in enumerate(value):
            item_value, item_errors = self._run_rules(item.strip(), f"{field}[{index}]")
            items.append(item_value)
            errors.extend(item_errors)

        if errors:
            return ValidationResult.fail(errors)
        return ValidationResult.ok(items)


class IntegerValidator(FieldValidator):
    """
    Integer validator.

    Strings are parsed in base 10 before any check, so ``"42"``
    validates to ``42``. Floats without a fractional part are
    accepted; booleans are not integers here.
    """

    def min(self, min_value: Number, message: Optional[str] = None) -> IntegerValidator:
        return self.add_rule(MinValue(min_value, custom_message=message))

    def max(self, max_value: Number, message: Optional[str] = None) -> IntegerValidator:
        return self.add_rule(MaxValue(max_value, custom_message=message))

    def positive(self, message: Optional[str] = None) -> IntegerValidator:
        """Value must be greater than zero."""
        return self.add_rule(Positive(custom_message=message))

    def _coerce(self, value: Any, field: str) -> Tuple[Any, List[str]]:
        coerced = coerce_int(value)
        if coerced is INVALID:
            return None, [f"{field} must be an integer"]
        return coerced, []


class BooleanValidator(FieldValidator):
    """
    Boolean validator.

    ``"true"``/``"1"`` and ``"false"``/``"0"`` (any case) are coerced;
    anything else must already be a ``bool``.
    """

    def _coerce(self, value: Any, field: str) -> Tuple[Any, List[str]]:
        coerced = coerce_bool(value)
        if not isinstance(coerced, bool):
            return None, [f"{field} must be a boolean"]
        return coerced, []


class EmailValidator(FieldValidator):
    """
    Email validator.

    The address format check always runs before any rule. A message
    given at construction replaces the format failure message.
    """

    default_field_name = "Email"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__()
        self._format = Matches(EMAIL_PATTERN, "email", custom_message=message)

    def max(self, length: int, message: Optional[str] = None) -> EmailValidator:
        """Raw length must not exceed ``length``."""
        return self.add_rule(MaxLength(length, custom_message=message))

    def _coerce(self, value: Any, field: str) -> Tuple[Any, List[str]]:
        if not isinstance(value, str):
            return None, [f"{field} must be a string"]

        outcome = self._format(value, field)
        if not outcome.valid:
            return None, [outcome.error]
        return outcome.value, []


class PasswordValidator(FieldValidator):
    """
    Password validator.

    No rule is applied by default: any non-empty string passes until
    rules are added. Passwords are never trimmed.
    """

    default_field_name = "Password"

    def min(self, length: int, message: Optional[str] = None) -> PasswordValidator:
        return self.add_rule(MinLength(length, custom_message=message))

    def contains_number(self, message: Optional[str] = None) -> PasswordValidator:
        return self.add_rule(Contains(DIGIT_PATTERN, "number", custom_message=message))

    def contains_special_char(self, message: Optional[str] = None) -> PasswordValidator:
        """Require one of ``!@#$%^&*(),.?":{}|<>``."""
        return self.add_rule(
            Contains(SPECIAL_CHAR_PATTERN, "special character", custom_message=message)
        )

    def contains_uppercase(self, message: Optional[str] = None) -> PasswordValidator:
        return self.add_rule(
            Contains(UPPERCASE_PATTERN, "uppercase letter", custom_message=message)
        )

    # camelCase names used by existing schema definitions
    containsNumber = contains_number
    containsSpecialChar = contains_special_char
    containsUppercase = contains_uppercase

    def _is_empty(self, value: Any) -> bool:
        return value is None or value == ""

    def _coerce(self, value: Any, field: str) -> Tuple[Any, List[str]]:
        if not isinstance(value, str):
            return None, [f"{field} must be a string"]
        return value, []

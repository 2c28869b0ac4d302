"""
AlmantZod Object Schema
=======================

Validates a whole record against a fixed field -> validator mapping.

Example:
    schema = ObjectSchema({
        "name": StringValidator().min(2),
        "email": EmailValidator(),
        "age": IntegerValidator().min(18),
        "password": PasswordValidator().min(8),
    })

    result = schema.parse_data(request_payload)

    if result.valid:
        save(result.data)
    else:
        print(result.errors)  # {"age": "age must be greater than or equal to 18"}
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, Mapping

from almantzod.utils.logger import get_logger
from almantzod.validation.coercion import is_mapping
from almantzod.validation.result import ConfigurationError, SchemaResult, ValidationError

logger = get_logger("almantzod.validation")

PASSWORD_FIELD = "password"
PASSWORD_CONFIRMATION_FIELD = "password_confirmation"
PASSWORD_MISMATCH_MESSAGE = "Password do not match"


class ObjectSchema:
    """
    Object schema.

    Every field is validated, even after an earlier field failed. A
    failing field reports only the first message of its validator.
    When the schema has a ``password`` field and the input carries
    ``password_confirmation``, the two values must be equal.
    """

    def __init__(self, fields: Mapping[str, Any]) -> None:
        """
        Initialize schema.

        Args:
            fields: Field name -> configured validator

        Raises:
            ConfigurationError: if a value has no ``validate`` method
        """
        if not is_mapping(fields):
            raise ConfigurationError("Schema fields must be a mapping of name to validator.")

        invalid = [
            name for name, validator in fields.items()
            if not callable(getattr(validator, "validate", None))
        ]
        if invalid:
            logger.error("Schema fields without validator", fields=invalid)
            raise ConfigurationError(
                f"Schema fields must map to validators: {', '.join(map(str, invalid))}."
            )

        self._fields: Dict[str, Any] = dict(fields)

    def __repr__(self) -> str:
        return f"ObjectSchema(fields={list(self._fields)})"

    @property
    def fields(self) -> Mapping[str, Any]:
        """Read-only view of the field -> validator mapping."""
        return MappingProxyType(self._fields)

    def parse_data(self, data: Mapping[str, Any]) -> SchemaResult:
        """
        Validate a record.

        Args:
            data: Input mapping; missing keys are validated as ``None``

        Returns:
            SchemaResult with validated data or one message per failing field

        Raises:
            TypeError: if ``data`` is not a mapping
        """
        if not is_mapping(data):
            raise TypeError(f"parse_data expects a mapping, got {type(data).__name__}")

        errors: Dict[str, str] = {}
        validated: Dict[str, Any] = {}

        for name, validator in self._fields.items():
            result = validator.validate(data.get(name), field_name=name)

            if result.valid:
                validated[name] = result.data
            else:
                errors[name] = result.errors[0]

        if PASSWORD_FIELD in self._fields and not self._passwords_match(data):
            errors.setdefault(PASSWORD_CONFIRMATION_FIELD, PASSWORD_MISMATCH_MESSAGE)

        if errors:
            logger.debug("Schema validation failed", fields=list(errors))
            return SchemaResult(valid=False, errors=errors)

        return SchemaResult(valid=True, data=validated)

    parseData = parse_data

    def parse_or_fail(self, data: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Validate a record and return the validated data.

        Raises:
            ValidationError: with the per-field errors if validation fails
        """
        result = self.parse_data(data)
        if not result.valid:
            raise ValidationError(errors=dict(result.errors))
        return dict(result.data)

    def _passwords_match(self, data: Mapping[str, Any]) -> bool:
        if PASSWORD_CONFIRMATION_FIELD not in data:
            return True
        return data.get(PASSWORD_FIELD) == data[PASSWORD_CONFIRMATION_FIELD]

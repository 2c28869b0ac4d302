"""
Factory object exposing one constructor per validator kind.

Example:
    from almantzod import az

    signup = az.object({
        "username": az.string().min(3).max(20),
        "email": az.email("Please enter a valid email address"),
        "age": az.integer().positive().nullable(),
        "password": az.password().min(8).contains_number(),
        "avatar": az.file().type(["png", "jpg"]).max_size(2).nullable(),
    })
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from almantzod.validation.fields import (
    BooleanValidator,
    EmailValidator,
    IntegerValidator,
    PasswordValidator,
    StringValidator,
)
from almantzod.validation.files import FileValidator
from almantzod.validation.schema import ObjectSchema


class AlmantZod:
    """Every call returns a fresh, unconfigured validator."""

    def string(self) -> StringValidator:
        return StringValidator()

    def integer(self) -> IntegerValidator:
        return IntegerValidator()

    def boolean(self) -> BooleanValidator:
        return BooleanValidator()

    def email(self, message: Optional[str] = None) -> EmailValidator:
        """Email validator; ``message`` replaces the format error."""
        return EmailValidator(message)

    def password(self) -> PasswordValidator:
        return PasswordValidator()

    def file(self) -> FileValidator:
        return FileValidator()

    def object(self, fields: Mapping[str, Any]) -> ObjectSchema:
        return ObjectSchema(fields)


az = AlmantZod()

"""
AlmantZod Validation System
===========================

Typed field validators with chained rules, composed into object
schemas.

Features:
- String, integer, boolean, email, password and file validators
- Chained rule configuration
- Nullable fields and input coercion
- Object schemas with per-field error attribution
"""

from almantzod.validation.result import (
    ConfigurationError,
    SchemaResult,
    ValidationError,
    ValidationResult,
)
from almantzod.validation.rules import (
    AllowedMimeTypes,
    CallableRule,
    Contains,
    Matches,
    MaxFileSize,
    MaxLength,
    MaxValue,
    MinLength,
    MinValue,
    Positive,
    Rule,
    RuleOutcome,
    Transform,
)
from almantzod.validation.validator import FieldValidator
from almantzod.validation.fields import (
    BooleanValidator,
    EmailValidator,
    IntegerValidator,
    PasswordValidator,
    StringValidator,
)
from almantzod.validation.files import FileDescriptor, FileValidator
from almantzod.validation.mimes import MIME_TYPES
from almantzod.validation.schema import ObjectSchema

__all__ = [
    # Results
    "ConfigurationError",
    "SchemaResult",
    "ValidationError",
    "ValidationResult",
    # Rules
    "AllowedMimeTypes",
    "CallableRule",
    "Contains",
    "Matches",
    "MaxFileSize",
    "MaxLength",
    "MaxValue",
    "MinLength",
    "MinValue",
    "Positive",
    "Rule",
    "RuleOutcome",
    "Transform",
    # Validators
    "FieldValidator",
    "BooleanValidator",
    "EmailValidator",
    "FileDescriptor",
    "FileValidator",
    "IntegerValidator",
    "PasswordValidator",
    "StringValidator",
    "MIME_TYPES",
    # Schema
    "ObjectSchema",
]

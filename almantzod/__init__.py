"""
AlmantZod
=========

Composable, synchronous data validation for form and API payloads.

Build field validators with chained rules, combine them into object
schemas, and get back a pass/fail result with per-field errors.

Quick Start:
    from almantzod import az

    schema = az.object({
        "name": az.string().min(2),
        "age": az.integer().min(18),
    })

    result = schema.parse_data({"name": "Ada", "age": "36"})
    result.data  # {"name": "Ada", "age": 36}
"""

from __future__ import annotations

__version__ = "1.0.0"
__license__ = "MIT"

from almantzod.factory import AlmantZod, az
from almantzod.validation import (
    BooleanValidator,
    ConfigurationError,
    EmailValidator,
    FieldValidator,
    FileDescriptor,
    FileValidator,
    IntegerValidator,
    ObjectSchema,
    PasswordValidator,
    SchemaResult,
    StringValidator,
    ValidationError,
    ValidationResult,
)


def __getattr__(name: str):
    """Lazy access to the configuration and logging helpers."""
    _imports = {
        "Config": "almantzod.core.config",
        "get_config": "almantzod.core.config",
        "configure_logging": "almantzod.utils.logger",
        "get_logger": "almantzod.utils.logger",
    }

    if name in _imports:
        import importlib
        module = importlib.import_module(_imports[name])
        return getattr(module, name)

    raise AttributeError(f"module 'almantzod' has no attribute '{name}'")


__all__ = [
    "__version__",
    "AlmantZod",
    "az",
    # Validators
    "BooleanValidator",
    "EmailValidator",
    "FieldValidator",
    "FileDescriptor",
    "FileValidator",
    "IntegerValidator",
    "PasswordValidator",
    "StringValidator",
    "ObjectSchema",
    # Results
    "ConfigurationError",
    "SchemaResult",
    "ValidationError",
    "ValidationResult",
    # Config / logging (lazy)
    "Config",
    "get_config",
    "configure_logging",
    "get_logger",
]

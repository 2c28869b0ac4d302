"""
AlmantZod File Validation
=========================

Validates upload descriptors (MIME type + byte size). File contents
are never read.

Accepted descriptors:
- ``FileDescriptor`` instances
- mappings with ``type`` and ``size`` keys
- objects with ``type`` (or ``content_type``) and ``size`` attributes

Example:
    avatar = FileValidator().type(["png", "jpg"]).max_size(2)

    avatar.validate({"type": "image/png", "size": 1024})
    avatar.validate([first, second], field_name="photos")
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from almantzod.utils.logger import get_logger
from almantzod.validation.coercion import coerce_int, is_integer, is_sequence
from almantzod.validation.mimes import resolve_extensions
from almantzod.validation.result import ConfigurationError, ValidationResult
from almantzod.validation.rules import AllowedMimeTypes, MaxFileSize
from almantzod.validation.validator import FieldValidator

logger = get_logger("almantzod.validation")


@dataclass(frozen=True)
class FileDescriptor:
    """An uploaded file as seen by the validator."""

    type: str
    size: int

    @classmethod
    def from_value(cls, value: Any) -> Optional[FileDescriptor]:
        """
        Build a descriptor from a supported value.

        Returns None when the value has no usable ``type``/``size``.
        """
        if isinstance(value, FileDescriptor):
            return value

        if isinstance(value, Mapping):
            mime_type = value.get("type")
            size = value.get("size")
        elif isinstance(value, (str, bytes, bytearray)) or value is None:
            return None
        else:
            mime_type = getattr(value, "type", None) or getattr(value, "content_type", None)
            size = getattr(value, "size", None)

        if not isinstance(mime_type, str) or not mime_type:
            return None
        size = coerce_int(size) if isinstance(size, float) else size
        if not is_integer(size) or size < 0:
            return None

        return cls(type=mime_type, size=size)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class FileValidator(FieldValidator):
    """
    File descriptor validator.

    A single descriptor validates to a ``FileDescriptor``. A list or
    tuple switches to multi-file mode: each element is checked under
    the name ``"<field> <i>"`` and the batch is all-or-nothing, so one
    bad element fails the whole call.
    """

    default_field_name = "file"

    def type(
        self,
        extensions: Union[str, Iterable[str]],
        message: Optional[str] = None,
    ) -> FileValidator:
        """
        Restrict the MIME type to the given file extensions.

        Raises:
            ConfigurationError: if an extension is not in the MIME table
        """
        if isinstance(extensions, str):
            extensions = [extensions]
        extensions = tuple(extensions)

        if not extensions:
            raise ConfigurationError("At least one file extension is required.")

        mime_types, unknown = resolve_extensions(extensions)
        if unknown:
            logger.error("Unknown file extensions", extensions=unknown)
            raise ConfigurationError(
                f"Invalid file extensions provided: {', '.join(unknown)}."
            )

        return self.add_rule(
            AllowedMimeTypes(frozenset(mime_types), extensions, custom_message=message)
        )

    def max_size(self, megabytes: Union[int, float], message: Optional[str] = None) -> FileValidator:
        """Size must not exceed ``megabytes * 1024 * 1024`` bytes."""
        return self.add_rule(MaxFileSize(megabytes, custom_message=message))

    maxSize = max_size

    def _is_empty(self, value: Any) -> bool:
        return value is None or (is_sequence(value) and len(value) == 0)

    def _coerce(self, value: Any, field: str) -> Tuple[Any, List[str]]:
        descriptor = FileDescriptor.from_value(value)
        if descriptor is None:
            return None, [f"{field} invalid format"]
        return descriptor, []

    def _validate_present(self, value: Any, field: str) -> ValidationResult:
        if not is_sequence(value):
            return super()._validate_present(value, field)

        files: List[Any] = []
        errors: List[str] = []

        for index, item in enumerate(value):
            name = f"{field} {index}"
            descriptor, item_errors = self._coerce(item, name)
            if not item_errors:
                descriptor, item_errors = self._run_rules(descriptor, name)

            if item_errors:
                errors.extend(item_errors)
            else:
                files.append(descriptor)

        if errors:
            return ValidationResult.fail(errors)
        return ValidationResult.ok(files)

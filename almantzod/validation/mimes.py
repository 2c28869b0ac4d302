"""
Extension to MIME type table used by ``FileValidator.type``.

The built-in table is fixed. Extra extensions can be registered
through the ``files.mime_types`` configuration key; they never
replace a built-in entry.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Tuple, Union

from almantzod.core.config import get_config

MIME_TYPES: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    # image/jpg is a legacy alias
    "jpg": ("image/jpeg", "image/jpg"),
    "jpeg": ("image/jpeg",),
    "png": ("image/png",),
    "gif": ("image/gif",),
    "pdf": ("application/pdf",),
    "txt": ("text/plain",),
    "doc": ("application/msword",),
    "docx": ("application/vnd.openxmlformats-officedocument.wordprocessingml.document",),
})


def normalize_extension(extension: str) -> str:
    """``".PNG"`` -> ``"png"``."""
    return extension.strip().lower().lstrip(".")


def mime_table() -> Dict[str, Tuple[str, ...]]:
    """Built-in table merged with configured extras."""
    table = dict(MIME_TYPES)
    extra: Mapping[str, Union[str, Iterable[str]]] = get_config().get("files.mime_types") or {}

    for extension, mime_types in extra.items():
        key = normalize_extension(extension)
        if key in table:
            continue
        if isinstance(mime_types, str):
            mime_types = (mime_types,)
        table[key] = tuple(mime_types)

    return table


def resolve_extensions(extensions: Iterable[str]) -> Tuple[List[str], List[str]]:
    """
    Resolve extensions to MIME types.

    Returns:
        (mime_types, unknown_extensions)
    """
    table = mime_table()
    mime_types: List[str] = []
    unknown: List[str] = []

    for extension in extensions:
        resolved = table.get(normalize_extension(extension)) if isinstance(extension, str) else None
        if resolved is None:
            unknown.append(str(extension))
            continue
        for mime_type in resolved:
            if mime_type not in mime_types:
                mime_types.append(mime_type)

    return mime_types, unknown

"""
Type registry — map a file type to its candidate file names.

Unknown types are treated as literal file names, so ``lookup`` never
fails and always returns at least one name.
"""

from __future__ import annotations

from reinit.core.data.file_types import FILE_TYPES
from reinit.core.models.file_type import FileTypeDescriptor

_BY_TYPE: dict[str, FileTypeDescriptor] = {ft.type.lower(): ft for ft in FILE_TYPES}


def get_descriptor(file_type: str) -> FileTypeDescriptor | None:
    """Case-insensitive lookup of a registered descriptor."""
    return _BY_TYPE.get(file_type.lower())


def lookup(file_type: str) -> tuple[str, ...]:
    """Return the name variations for ``file_type``.

    Args:
        file_type: Registered identifier (any case) or a literal file name.

    Returns:
        The registered variations, or ``(file_type,)`` when unknown.
    """
    descriptor = get_descriptor(file_type)
    if descriptor is None:
        return (file_type,)
    return descriptor.variations


def known_types() -> list[str]:
    """All registered identifiers, in table order."""
    return [ft.type for ft in FILE_TYPES]


def is_known(file_type: str, *, strict: bool = True) -> bool:
    """Whether ``file_type`` is registered.

    ``strict`` requires an exact, case-sensitive match (the CLI check);
    otherwise the comparison ignores case like ``lookup`` does.
    """
    if strict:
        return file_type in known_types()
    return get_descriptor(file_type) is not None

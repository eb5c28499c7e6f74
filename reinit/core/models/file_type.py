"""
File type model — a logical boilerplate category and its on-disk names.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator


class FileTypeDescriptor(BaseModel):
    """A registered file type.

    Attributes:
        type:       Identifier, e.g. ``md:README``.
        variations: Acceptable file names, in preference order.
    """

    model_config = ConfigDict(frozen=True)

    type: str
    variations: tuple[str, ...]

    @field_validator("variations")
    @classmethod
    def _at_least_one(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value:
            raise ValueError("a file type needs at least one variation")
        return value

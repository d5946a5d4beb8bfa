from __future__ import annotations

"""Shape contract for script-supplied format descriptors.

A descriptor is any object (mapping or attribute object) exposing::

    name: str
    extension: str          # without the leading dot
    read(file) -> MapView   # optional
    write(view, path, options: int) -> str | bytes   # optional

At least one of ``read``/``write`` must be callable. The model below validates
a *snapshot* of those members once, at registration. Adapters keep reading the
live descriptor afterwards.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, StrictStr, ValidationError, model_validator

INVALID_NAME = "Invalid map format object (requires string 'name' property)"
INVALID_EXTENSION = "Invalid map format object (requires string 'extension' property)"
INVALID_READ_WRITE = "Invalid map format object (requires a 'write' and/or 'read' function property)"

DESCRIPTOR_FIELDS = ("name", "extension", "read", "write")


class FormatDescriptorModel(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    name: StrictStr
    extension: StrictStr
    read: Optional[Any] = None
    write: Optional[Any] = None

    @model_validator(mode="after")
    def requires_read_or_write(self) -> "FormatDescriptorModel":
        if not callable(self.read) and not callable(self.write):
            raise ValueError(INVALID_READ_WRITE)
        return self


def descriptor_error_message(exc: ValidationError) -> str:
    """Map the first validation failure to the message scripts see."""
    errors = exc.errors()
    if not errors:
        return INVALID_READ_WRITE
    loc = errors[0].get("loc") or ()
    field = loc[0] if loc else None
    if field == "name":
        return INVALID_NAME
    if field == "extension":
        return INVALID_EXTENSION
    return INVALID_READ_WRITE

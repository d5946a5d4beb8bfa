from __future__ import annotations

"""Gatekeeper for script-supplied format descriptors."""

from typing import Any

from pydantic import ValidationError

from mapscript.contracts.format_descriptor import (
    DESCRIPTOR_FIELDS,
    FormatDescriptorModel,
    descriptor_error_message,
)
from mapscript.core.script_engine import ScriptEngine


def validate_map_format_object(engine: ScriptEngine, value: Any) -> bool:
    """Return True if ``value`` can back a map format.

    On failure the reason is reported through ``engine.throw_error`` and False
    is returned; nothing is registered.
    """
    snapshot = {name: engine.get_property(value, name) for name in DESCRIPTOR_FIELDS}
    try:
        FormatDescriptorModel(**snapshot)
    except ValidationError as e:
        engine.throw_error(descriptor_error_message(e))
        return False
    return True

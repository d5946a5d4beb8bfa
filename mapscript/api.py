"""Public mapscript API.

Prefer importing from here instead of reaching into internal subpackages:

    from mapscript.api import ScriptEngine, FormatRegistry, ScriptFormatModule
"""

from __future__ import annotations

from mapscript.components.formats import (
    ALL_FILES_FILTER,
    FileFormat,
    FormatHelper,
    MapFormat,
    ScriptedMapFormat,
    validate_map_format_object,
)
from mapscript.contracts.choices import Capability, WriteOption
from mapscript.contracts.io_config import SaveConfig
from mapscript.core.errors import MapScriptError, ReadOnlyMapError
from mapscript.core.script_engine import ScriptEngine, ScriptError
from mapscript.io import SaveFile, ScriptFile
from mapscript.model import Map, MapView, TileLayer, unwrap_map
from mapscript.registries.formats import FormatRegistry
from mapscript.use_cases.registration import ScriptFormatModule

__all__ = [
    "ScriptEngine",
    "ScriptError",
    "FormatRegistry",
    "ScriptFormatModule",
    "FileFormat",
    "MapFormat",
    "ScriptedMapFormat",
    "validate_map_format_object",
    "FormatHelper",
    "ALL_FILES_FILTER",
    "Capability",
    "WriteOption",
    "SaveConfig",
    "SaveFile",
    "ScriptFile",
    "Map",
    "MapView",
    "TileLayer",
    "unwrap_map",
    "MapScriptError",
    "ReadOnlyMapError",
]

from .errors import MapScriptError, ReadOnlyMapError
from .script_engine import ScriptEngine, ScriptError

__all__ = [
    "MapScriptError",
    "ReadOnlyMapError",
    "ScriptEngine",
    "ScriptError",
]

from __future__ import annotations

"""Registration of script-defined map formats.

Scripts hand the module a short name and a descriptor. A descriptor that fails
validation is reported through the script engine and never reaches the
registry. Registering under a short name that a script format already uses
replaces that format.
"""

import logging
from typing import Any, List, Optional

from mapscript.components.formats.descriptor_validation import validate_map_format_object
from mapscript.components.formats.scripted_map_format import ScriptedMapFormat
from mapscript.contracts.io_config import SaveConfig
from mapscript.core.script_engine import ScriptEngine
from mapscript.registries.base import Registry
from mapscript.registries.formats import FormatRegistry

logger = logging.getLogger(__name__)


class ScriptFormatModule:
    def __init__(
        self,
        engine: ScriptEngine,
        registry: FormatRegistry,
        *,
        config: Optional[SaveConfig] = None,
    ):
        self.engine = engine
        self.registry = registry
        self.config = config or SaveConfig.from_env()
        self._map_formats: Registry[str, ScriptedMapFormat] = Registry()

    def register_map_format(self, short_name: str, descriptor: Any) -> Optional[ScriptedMapFormat]:
        """Validate ``descriptor`` and register it as ``short_name``.

        Returns the new format, or None when the descriptor was rejected (the
        reason is pending on the engine).
        """
        if not isinstance(short_name, str) or not short_name:
            self.engine.throw_error("Invalid map format short name (non-empty string expected)")
            return None

        if not validate_map_format_object(self.engine, descriptor):
            return None

        taken = self.registry.find(short_name)
        if taken is not None and taken is not self._map_formats.try_get(short_name):
            self.engine.throw_error(f"A format with short name '{short_name}' is already registered")
            return None

        previous = self._map_formats.unregister(short_name)
        if previous is not None:
            previous.close()
            logger.info("replacing script map format %r", short_name)

        fmt = ScriptedMapFormat(short_name, descriptor, self.engine, self.registry, config=self.config)
        self._map_formats.put(short_name, fmt)
        logger.debug("registered script map format %r (%s)", short_name, fmt.name_filter())
        return fmt

    def unregister_map_format(self, short_name: str) -> bool:
        fmt = self._map_formats.unregister(short_name)
        if fmt is None:
            return False
        fmt.close()
        return True

    def map_formats(self) -> List[ScriptedMapFormat]:
        return list(self._map_formats.values())

    def reset(self) -> None:
        """Drop every script format, e.g. before the script environment is reloaded."""
        for fmt in list(self._map_formats.values()):
            fmt.close()
        self._map_formats.clear()

from __future__ import annotations

"""Map format backed by a script descriptor.

The adapter keeps a reference to the live descriptor and re-reads its members
on every use, so a script that swaps ``read``/``write``/``name``/``extension``
after registration is reflected in capabilities, filters and I/O.

Read pipeline:
  script ``read(ScriptFile)`` -> ``MapView`` -> clone of the viewed map.

Write pipeline:
  read-only ``MapView`` of the caller's map -> script ``write(view, path,
  options)`` -> ``str`` (text mode) or bytes-like (binary) -> atomic save.
"""

import logging
import os
from typing import Any, Optional

from mapscript.components.formats.file_format import MapFormat, PathLike
from mapscript.contracts.choices import Capability, WriteOption
from mapscript.contracts.io_config import SaveConfig
from mapscript.core.script_engine import ScriptEngine
from mapscript.io.save_file import SaveFile
from mapscript.io.script_file import ScriptFile
from mapscript.model.map import Map
from mapscript.model.map_view import MapView, unwrap_map
from mapscript.registries.formats import FormatRegistry

logger = logging.getLogger(__name__)

INVALID_READ_RESULT = "Invalid return value for 'read' (TileMap expected)"
INVALID_WRITE_RESULT = "Invalid return value for 'write' (string or ArrayBuffer expected)"
NO_READ_FUNCTION = "Format does not provide a 'read' function"
NO_WRITE_FUNCTION = "Format does not provide a 'write' function"
OPEN_FAILED = "Could not open file for writing."
COPY_FAILED = "Could not copy the map returned by 'read'."


class ScriptedMapFormat(MapFormat):
    def __init__(
        self,
        short_name: str,
        descriptor: Any,
        engine: ScriptEngine,
        registry: Optional[FormatRegistry] = None,
        *,
        config: Optional[SaveConfig] = None,
    ):
        super().__init__(short_name)
        self._descriptor = descriptor
        self._engine = engine
        self._config = config or SaveConfig.from_env()
        self._registry = registry
        if registry is not None:
            registry.add(self)

    def close(self) -> None:
        """Withdraw the format from its registry."""
        if self._registry is not None:
            self._registry.remove(self)
            self._registry = None

    @property
    def descriptor(self) -> Any:
        return self._descriptor

    def _property(self, name: str) -> Any:
        return self._engine.get_property(self._descriptor, name)

    def _string_property(self, name: str) -> str:
        value = self._property(name)
        return "" if value is None else str(value)

    def capabilities(self) -> Capability:
        caps = Capability.NoCapability
        if self._engine.is_callable(self._property("read")):
            caps |= Capability.Read
        if self._engine.is_callable(self._property("write")):
            caps |= Capability.Write
        return caps

    def name_filter(self) -> str:
        name = self._string_property("name")
        extension = self._string_property("extension")
        return f"{name} (*.{extension})"

    def supports_file(self, file_name: PathLike) -> bool:
        extension = "." + self._string_property("extension")
        return os.fspath(file_name).endswith(extension)

    def read(self, file_name: PathLike) -> Optional[Map]:
        self._error = ""

        read_fn = self._property("read")
        if not self._engine.is_callable(read_fn):
            self._error = NO_READ_FUNCTION
            return None

        file = ScriptFile(file_name, self._config)
        result = self._engine.call(read_fn, file)

        if self._engine.check_error(result):
            self._error = self._engine.error_message(result)
            logger.info("format %r failed to read %s: %s", self.short_name, file_name, self._error)
            return None

        if self._engine.is_object_of_type(result, MapView):
            try:
                return unwrap_map(result).clone()
            except Exception as e:
                self._error = f"{COPY_FAILED} ({e})"
                logger.warning("format %r could not copy map read from %s", self.short_name, file_name, exc_info=True)
                return None

        self._error = INVALID_READ_RESULT
        return None

    def write(self, map: Map, file_name: PathLike, options: WriteOption = WriteOption.NoOption) -> bool:
        self._error = ""

        write_fn = self._property("write")
        if not self._engine.is_callable(write_fn):
            self._error = NO_WRITE_FUNCTION
            return False

        view = MapView.borrow(map)
        result = self._engine.call(write_fn, view, os.fspath(file_name), int(options))

        if self._engine.check_error(result):
            self._error = self._engine.error_message(result)
            logger.info("format %r failed to write %s: %s", self.short_name, file_name, self._error)
            return False

        if self._engine.is_string(result):
            mode, data = "text", result
        else:
            data = self._engine.to_bytes(result)
            if data is None:
                self._error = INVALID_WRITE_RESULT
                return False
            mode = "binary"

        with SaveFile(file_name, self._config) as file:
            if not file.open(mode):
                self._error = f"{OPEN_FAILED} ({file.error_string})"
                return False
            if not (file.write(data) and file.commit()):
                self._error = file.error_string
                return False

        return True

    def __repr__(self) -> str:  # pragma: no cover
        return f"ScriptedMapFormat({self.short_name!r})"

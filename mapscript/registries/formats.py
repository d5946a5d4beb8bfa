from __future__ import annotations

"""Registry of available map formats.

The registry is an explicit service object owned by the host; nothing here is
a process-wide singleton. It provides no locking: callers serialize
registration against format I/O by keeping both on the script thread.
"""

import logging
from typing import TYPE_CHECKING, List, Optional

from mapscript.contracts.choices import Capability
from mapscript.registries.base import Registry

if TYPE_CHECKING:
    from mapscript.components.formats.file_format import FileFormat

logger = logging.getLogger(__name__)


class FormatRegistry:
    def __init__(self) -> None:
        self._formats: Registry[str, "FileFormat"] = Registry()

    def add(self, fmt: "FileFormat") -> None:
        existing = self._formats.try_get(fmt.short_name)
        if existing is fmt:
            return
        if existing is not None:
            raise ValueError(f"A format with short name {fmt.short_name!r} is already registered")
        self._formats.put(fmt.short_name, fmt)
        logger.debug("registered format %r", fmt.short_name)

    def remove(self, fmt: "FileFormat") -> bool:
        """Remove ``fmt`` if it is the registered object for its short name."""
        if self._formats.try_get(fmt.short_name) is not fmt:
            return False
        self._formats.unregister(fmt.short_name)
        logger.debug("removed format %r", fmt.short_name)
        return True

    def find(self, short_name: str) -> Optional["FileFormat"]:
        return self._formats.try_get(short_name)

    def formats(self, capability: Capability = Capability.NoCapability) -> List["FileFormat"]:
        """Registered formats having all bits of ``capability``, in registration order."""
        return [f for f in self._formats.values() if f.has_capabilities(capability)]

    def short_names(self) -> List[str]:
        return list(self._formats.keys())

    def __contains__(self, fmt: object) -> bool:
        short_name = getattr(fmt, "short_name", None)
        return short_name is not None and self._formats.try_get(short_name) is fmt

    def __len__(self) -> int:
        return len(self._formats)

from __future__ import annotations

"""File dialog helpers over a :class:`FormatRegistry`."""

from typing import List, Optional

from mapscript.components.formats.file_format import FileFormat, PathLike
from mapscript.contracts.choices import Capability
from mapscript.registries.formats import FormatRegistry

ALL_FILES_FILTER = "All Files (*)"
FILTER_SEPARATOR = ";;"


class FormatHelper:
    """Snapshot of the formats having ``capability``, in registration order."""

    def __init__(
        self,
        registry: FormatRegistry,
        capability: Capability,
        *,
        initial_filter: Optional[str] = None,
    ):
        self._formats: List[FileFormat] = registry.formats(capability)
        parts = [initial_filter] if initial_filter else []
        parts.extend(f.name_filter() for f in self._formats)
        self._filter = FILTER_SEPARATOR.join(parts)

    @property
    def formats(self) -> List[FileFormat]:
        return list(self._formats)

    @property
    def filter(self) -> str:
        return self._filter

    def format_by_name_filter(self, name_filter: str) -> Optional[FileFormat]:
        for fmt in self._formats:
            if fmt.name_filter() == name_filter:
                return fmt
        return None

    def find_format(self, file_name: PathLike) -> Optional[FileFormat]:
        for fmt in self._formats:
            if fmt.supports_file(file_name):
                return fmt
        return None

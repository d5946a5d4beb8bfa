from __future__ import annotations

"""Format adapter base classes.

Formats report failures through :attr:`FileFormat.error_string` instead of
raising: ``read`` returns None and ``write`` returns False on failure.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

from mapscript.contracts.choices import Capability, WriteOption
from mapscript.model.map import Map

PathLike = Union[str, Path]


class FileFormat(ABC):
    def __init__(self, short_name: str):
        self._short_name = short_name
        self._error = ""

    @property
    def short_name(self) -> str:
        return self._short_name

    @property
    def error_string(self) -> str:
        """Message of the last failed read/write (stale until the next call)."""
        return self._error

    @abstractmethod
    def capabilities(self) -> Capability:
        ...

    def has_capabilities(self, caps: Capability) -> bool:
        return (self.capabilities() & caps) == caps

    def is_read_only(self) -> bool:
        return not self.has_capabilities(Capability.Write)

    @abstractmethod
    def name_filter(self) -> str:
        """File dialog filter, e.g. ``"My Format (*.myf)"``."""

    @abstractmethod
    def supports_file(self, file_name: PathLike) -> bool:
        ...


class MapFormat(FileFormat):
    @abstractmethod
    def read(self, file_name: PathLike) -> Optional[Map]:
        ...

    @abstractmethod
    def write(self, map: Map, file_name: PathLike, options: WriteOption = WriteOption.NoOption) -> bool:
        ...

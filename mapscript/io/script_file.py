from __future__ import annotations

"""Read-only file accessor handed to ``read`` scripts.

Each call opens, reads and closes the file. Failures never raise: the reason
is stored in :attr:`ScriptFile.error` and an empty value is returned, so
scripts must check ``error`` to tell an empty file from a failed read.
"""

from pathlib import Path
from typing import Optional, Union

from mapscript.contracts.io_config import SaveConfig


def _describe(exc: BaseException) -> str:
    if isinstance(exc, OSError) and exc.strerror:
        return exc.strerror
    return str(exc)


class ScriptFile:
    def __init__(self, file_path: Union[str, Path], config: Optional[SaveConfig] = None):
        self._file_path = str(file_path)
        self._config = config or SaveConfig.from_env()
        self.error = ""

    @property
    def file_path(self) -> str:
        return self._file_path

    def read_as_text(self) -> str:
        try:
            with open(self._file_path, "r", encoding=self._config.text_encoding, newline=None) as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            self.error = _describe(e)
        return ""

    def read_as_binary(self) -> bytes:
        try:
            with open(self._file_path, "rb") as f:
                return f.read()
        except OSError as e:
            self.error = _describe(e)
        return b""

    def __repr__(self) -> str:  # pragma: no cover
        return f"ScriptFile({self._file_path!r})"

from __future__ import annotations

"""Atomic file saving.

Output is staged in a hidden temporary file next to the destination and moved
over it with :func:`os.replace` on :meth:`SaveFile.commit`. Until the commit
succeeds the destination is never touched; on any failure the staging file is
removed and the destination keeps its previous content (or stays absent).

Typical usage::

    with SaveFile(path) as f:
        if f.open("text") and f.write(text) and f.commit():
            ...
        else:
            print(f.error_string)
"""

import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import IO, Any, Optional, Union

from mapscript.contracts.choices import SaveMode
from mapscript.contracts.io_config import SaveConfig

logger = logging.getLogger(__name__)


def _describe(exc: BaseException) -> str:
    if isinstance(exc, OSError) and exc.strerror:
        return exc.strerror
    return str(exc)


# Longest piece of the destination name reused in the staging file name
STAGING_NAME_CHARS = 32


def _read_umask() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return umask


# Read once at import; the umask cannot be queried without setting it.
_PROCESS_UMASK = _read_umask()


def _default_file_mode() -> int:
    return 0o666 & ~_PROCESS_UMASK


class SaveFile:
    def __init__(self, file_name: Union[str, Path], config: Optional[SaveConfig] = None):
        self.file_name = Path(file_name)
        self.config = config or SaveConfig.from_env()
        self.error_string = ""
        self._mode: Optional[SaveMode] = None
        self._stream: Optional[IO[Any]] = None
        self._staging: Optional[Path] = None

    @property
    def is_open(self) -> bool:
        return self._stream is not None

    @property
    def has_error(self) -> bool:
        return bool(self.error_string)

    def open(self, mode: SaveMode) -> bool:
        """Create the staging file. Returns False (and sets error_string) on failure."""
        if self._stream is not None:
            raise RuntimeError("SaveFile is already open")
        if mode not in ("text", "binary"):
            raise ValueError(f"Unknown save mode: {mode!r}")

        try:
            fd, staging = tempfile.mkstemp(
                prefix=f".{self.file_name.name[:STAGING_NAME_CHARS]}.",
                suffix=".tmp",
                dir=str(self.file_name.parent),
            )
        except OSError as e:
            self.error_string = _describe(e)
            return False

        try:
            if mode == "text":
                self._stream = os.fdopen(
                    fd, "w", encoding=self.config.text_encoding, newline=self.config.newline
                )
            else:
                self._stream = os.fdopen(fd, "wb")
        except OSError as e:
            os.close(fd)
            os.unlink(staging)
            self.error_string = _describe(e)
            return False

        self._mode = mode
        self._staging = Path(staging)
        logger.debug("staging %s in %s", self.file_name, self._staging)
        return True

    def write(self, data: Union[str, bytes]) -> bool:
        if self._stream is None:
            raise RuntimeError("SaveFile is not open")
        if self._mode == "text" and not isinstance(data, str):
            raise TypeError("text mode SaveFile expects str data")
        if self._mode == "binary" and not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError("binary mode SaveFile expects bytes data")
        try:
            self._stream.write(data)
        except (OSError, UnicodeEncodeError) as e:
            self.error_string = _describe(e)
            return False
        return True

    def commit(self) -> bool:
        """Move the staged content over the destination.

        Refuses to commit after a failed write. The staging file is removed
        whenever the commit does not happen.
        """
        if self._stream is None or self._staging is None:
            raise RuntimeError("SaveFile is not open")
        if self.has_error:
            self.discard()
            return False

        stream, staging = self._stream, self._staging
        try:
            stream.flush()
            if self.config.fsync:
                os.fsync(stream.fileno())
            stream.close()
            self._stream = None

            try:
                mode = stat.S_IMODE(os.stat(self.file_name).st_mode)
            except FileNotFoundError:
                mode = _default_file_mode()
            os.chmod(staging, mode)

            os.replace(staging, self.file_name)
        except OSError as e:
            self.error_string = _describe(e)
            logger.warning("could not commit %s: %s", self.file_name, self.error_string)
            self.discard()
            return False

        self._staging = None
        self._mode = None
        return True

    def discard(self) -> None:
        """Drop any staged content; the destination is left untouched."""
        stream, staging = self._stream, self._staging
        self._stream = None
        self._staging = None
        self._mode = None
        if stream is not None:
            try:
                stream.close()
            except OSError:
                logger.debug("error closing staging file %s", staging, exc_info=True)
        if staging is not None:
            try:
                staging.unlink()
            except OSError:
                logger.debug("could not remove staging file %s", staging, exc_info=True)

    def __enter__(self) -> "SaveFile":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.discard()

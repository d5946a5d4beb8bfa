from __future__ import annotations

"""The script environment seen by the format bridge.

Scripts are plain Python objects supplied by the host. Calls into them are
synchronous; an exception raised by a script is turned into a
:class:`ScriptError` *value* so that callers inspect results instead of
unwinding through host code.

The environment is not reentrant. All format I/O must happen on the thread
that owns the engine.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Optional

import numpy as np

logger = logging.getLogger(__name__)

BINARY_TYPES = (bytes, bytearray, memoryview)


@dataclass(frozen=True)
class ScriptError:
    """A script-level error, returned in place of a call's result."""

    message: str
    exception: Optional[BaseException] = None

    def __str__(self) -> str:
        return self.message


def _exception_message(exc: BaseException) -> str:
    msg = str(exc)
    return msg if msg else type(exc).__name__


class ScriptEngine:
    def __init__(self) -> None:
        self._pending_error: Optional[ScriptError] = None

    # -- calls --------------------------------------------------------

    def call(self, fn: Callable[..., Any], *args: Any) -> Any:
        """Call ``fn`` with ``args``; script exceptions come back as ScriptError."""
        try:
            return fn(*args)
        except Exception as exc:
            logger.debug("script call %r raised", fn, exc_info=True)
            return ScriptError(_exception_message(exc), exc)

    def check_error(self, value: Any) -> bool:
        return isinstance(value, ScriptError)

    def error_message(self, value: Any) -> str:
        if isinstance(value, ScriptError):
            return value.message
        return str(value)

    # -- error reporting channel --------------------------------------

    def throw_error(self, message: str) -> ScriptError:
        """Report an error back to the script that called into the host."""
        err = ScriptError(message)
        self._pending_error = err
        logger.warning("%s", message)
        return err

    @property
    def pending_error(self) -> Optional[ScriptError]:
        return self._pending_error

    def take_error(self) -> Optional[ScriptError]:
        err, self._pending_error = self._pending_error, None
        return err

    # -- values -------------------------------------------------------

    def get_property(self, obj: Any, name: str) -> Any:
        """Read member ``name`` from a mapping or attribute object.

        Absent members read as None, and so do members whose lookup raises.
        """
        if obj is None:
            return None
        try:
            if isinstance(obj, Mapping):
                return obj.get(name)
            return getattr(obj, name, None)
        except Exception:
            logger.warning("reading member %r of %r raised", name, type(obj).__name__, exc_info=True)
            return None

    def is_string(self, value: Any) -> bool:
        return isinstance(value, str)

    def is_callable(self, value: Any) -> bool:
        return callable(value)

    def is_binary(self, value: Any) -> bool:
        if isinstance(value, BINARY_TYPES):
            return True
        return isinstance(value, np.ndarray) and value.dtype == np.uint8 and value.ndim == 1

    def to_bytes(self, value: Any) -> Optional[bytes]:
        """Return the raw bytes of a binary value, or None if it is not binary."""
        if not self.is_binary(value):
            return None
        if isinstance(value, np.ndarray):
            return np.ascontiguousarray(value).tobytes()
        return bytes(value)

    def is_object_of_type(self, value: Any, cls: type) -> bool:
        return isinstance(value, cls)

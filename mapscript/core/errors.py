"""Host-side exceptions.

These never cross a format's ``read``/``write`` boundary: adapters convert
them into the adapter's error string.
"""


class MapScriptError(RuntimeError):
    """Base class for errors raised by the host side of the bridge."""


class ReadOnlyMapError(MapScriptError):
    """Raised when a script tries to modify a map it only borrowed."""

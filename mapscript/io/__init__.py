"""File access for the format bridge.

- :mod:`mapscript.io.script_file`: read-only file handle passed to ``read`` scripts
- :mod:`mapscript.io.save_file`: stage-then-replace atomic saving
"""

from .save_file import SaveFile
from .script_file import ScriptFile

__all__ = ["SaveFile", "ScriptFile"]

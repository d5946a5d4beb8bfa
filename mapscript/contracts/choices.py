from __future__ import annotations

"""Flag types shared across format adapters.

Design intent:
- Keep this file dependency-free (stdlib + typing only).
- Capabilities are always *derived* by adapters; nothing stores them.
"""

from enum import IntFlag
from typing import Literal, TypeAlias


class Capability(IntFlag):
    NoCapability = 0
    Read = 0x1
    Write = 0x2
    ReadWrite = Read | Write


class WriteOption(IntFlag):
    """Options handed to a format's ``write``.

    The core passes these to scripts as a plain integer bitmask and never
    interprets them.
    """

    NoOption = 0
    WriteMinimized = 0x1


# Mode accepted by :meth:`mapscript.io.save_file.SaveFile.open`
SaveMode: TypeAlias = Literal["text", "binary"]

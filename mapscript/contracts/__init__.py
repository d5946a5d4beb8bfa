"""Shared contracts.

Pydantic models and flag types used across mapscript. Keep module imports
explicit in most of the codebase:

    from mapscript.contracts.choices import Capability
"""

from .choices import Capability, SaveMode, WriteOption
from .format_descriptor import FormatDescriptorModel
from .io_config import SaveConfig

__all__ = ["Capability", "WriteOption", "SaveMode", "FormatDescriptorModel", "SaveConfig"]

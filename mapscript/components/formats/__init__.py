"""Map format adapters.

- :mod:`.file_format`: ``FileFormat`` / ``MapFormat`` base classes
- :mod:`.descriptor_validation`: checks a script descriptor before it is trusted
- :mod:`.scripted_map_format`: adapter implementing read/write through a script
- :mod:`.format_helper`: dialog filters and format lookup by file name
"""

from .descriptor_validation import validate_map_format_object
from .file_format import FileFormat, MapFormat
from .format_helper import ALL_FILES_FILTER, FormatHelper
from .scripted_map_format import ScriptedMapFormat

__all__ = [
    "FileFormat",
    "MapFormat",
    "ScriptedMapFormat",
    "validate_map_format_object",
    "FormatHelper",
    "ALL_FILES_FILTER",
]

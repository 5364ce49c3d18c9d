"""
pangolin-io: filesystem, image, font and properties helpers.

The implementation is split into modules by concern (path questions, size
formatting, OS identification, resource/properties/image/font loading).
"""

from .environment import SystemSnapshot
from .errors import (
    DecodeError,
    ErrorKind,
    InvalidArgumentError,
    PangolinIOError,
    ResourceNotFoundError,
    UnsupportedOperationError,
)
from .os_family import NA, OSFamily, classify_os_name, get_system_os
from .paths import DIR_MARKER, file_name_prefix, file_name_suffix
from .results import LoadResult, attempt
from .shell_open import is_desktop_supported, open_dir_by_platform
from .sizes import format_file_size

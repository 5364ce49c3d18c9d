"""
Questions about a filesystem path.

Every predicate re-reads the host on each call; nothing is cached, so two
calls only agree while the filesystem stays unchanged. A `None` path is a
programming error and raises `InvalidArgumentError`; a path that does not
exist simply answers False.
"""

from __future__ import annotations

import os
import stat
import sys
from pathlib import Path, PureWindowsPath

import psutil

from .environment import SystemSnapshot
from .errors import require


DIR_MARKER = "[DIR]"

_FILE_ATTRIBUTE_HIDDEN = 0x2

PathLike = str | os.PathLike[str]


def _as_path(path: PathLike | None) -> Path:
    return Path(require(path, "path"))


def _stat_or_none(p: Path) -> os.stat_result | None:
    try:
        return p.stat()
    except (OSError, ValueError):
        return None


def exists(path: PathLike) -> bool:
    return _stat_or_none(_as_path(path)) is not None


def is_file(path: PathLike) -> bool:
    st = _stat_or_none(_as_path(path))
    return st is not None and stat.S_ISREG(st.st_mode)


def is_directory(path: PathLike) -> bool:
    st = _stat_or_none(_as_path(path))
    return st is not None and stat.S_ISDIR(st.st_mode)


def is_hidden(path: PathLike) -> bool:
    p = _as_path(path)
    st = _stat_or_none(p)
    if st is None:
        return False
    if sys.platform == "win32":
        attributes = getattr(st, "st_file_attributes", 0)
        return bool(attributes & _FILE_ATTRIBUTE_HIDDEN)
    return p.name.startswith(".")


def _has_access(path: PathLike, mode: int) -> bool:
    p = _as_path(path)
    return _stat_or_none(p) is not None and os.access(p, mode)


def is_readable(path: PathLike) -> bool:
    return _has_access(path, os.R_OK)


def is_writable(path: PathLike) -> bool:
    return _has_access(path, os.W_OK)


def is_executable(path: PathLike) -> bool:
    return _has_access(path, os.X_OK)


# --- shell-level classification -------------------------------------------


def is_path_to_drive(path: PathLike) -> bool:
    """True if the path is the mount point of a disk partition the host lists."""
    p = _as_path(path)
    if _stat_or_none(p) is None:
        return False
    target = os.path.normcase(os.path.abspath(p))
    for partition in psutil.disk_partitions(all=False):
        if os.path.normcase(os.path.abspath(partition.mountpoint)) == target:
            return True
    return False


def is_path_to_system_root(path: PathLike) -> bool:
    p = Path(os.path.abspath(_as_path(path)))
    return p.parent == p


def is_path_to_file_system_node(path: PathLike) -> bool:
    """Device entries (/dev/sda, /dev/null) and UNC share roots."""
    p = _as_path(path)
    windows_path = PureWindowsPath(os.fspath(p))
    if windows_path.drive.startswith("\\\\") and windows_path == PureWindowsPath(windows_path.anchor):
        return True
    st = _stat_or_none(p)
    return st is not None and (stat.S_ISBLK(st.st_mode) or stat.S_ISCHR(st.st_mode))


# --- name decomposition ---------------------------------------------------


def file_name_prefix(path: PathLike) -> str:
    """File name without its last extension, or DIR_MARKER for a directory."""
    p = _as_path(path)
    if is_directory(p):
        return DIR_MARKER
    name = p.name
    head, dot, _ = name.rpartition(".")
    return head if dot else name


def file_name_suffix(path: PathLike) -> str:
    """Text after the last '.' of the file name ('' if none), or DIR_MARKER."""
    p = _as_path(path)
    if is_directory(p):
        return DIR_MARKER
    _, dot, tail = p.name.rpartition(".")
    return tail if dot else ""


def home_dir(snapshot: SystemSnapshot) -> Path:
    return require(snapshot, "snapshot").home_dir


def user_dir(snapshot: SystemSnapshot) -> Path:
    return require(snapshot, "snapshot").user_dir

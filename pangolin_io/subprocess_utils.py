"""
Subprocess helpers.

On Windows, a "windowed" build has no console attached, so helper processes
like explorer.exe may flash their own console window unless we suppress it
via creation flags/startup info.
"""

from __future__ import annotations

import os
import subprocess
from collections.abc import Sequence
from typing import Any


def _has_console_window() -> bool:
    if os.name != "nt":
        return True
    try:
        import ctypes  # only available/meaningful on Windows

        return bool(ctypes.windll.kernel32.GetConsoleWindow())
    except (AttributeError, OSError):
        return False


def _no_window_kwargs() -> dict[str, Any]:
    if os.name != "nt":
        return {}
    if _has_console_window():
        return {}

    kwargs: dict[str, Any] = {}
    create_no_window = getattr(subprocess, "CREATE_NO_WINDOW", 0)
    if create_no_window:
        kwargs["creationflags"] = create_no_window

    startupinfo_cls = getattr(subprocess, "STARTUPINFO", None)
    if startupinfo_cls is not None:
        startupinfo = startupinfo_cls()
        startupinfo.dwFlags |= getattr(subprocess, "STARTF_USESHOWWINDOW", 1)
        startupinfo.wShowWindow = 0
        kwargs["startupinfo"] = startupinfo

    return kwargs


def launch_detached(cmd: Sequence[str]) -> subprocess.Popen[bytes]:
    """Start a GUI helper and return without waiting for it."""
    return subprocess.Popen(
        list(cmd),
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        **_no_window_kwargs(),
        **({"start_new_session": True} if os.name != "nt" else {}),
    )

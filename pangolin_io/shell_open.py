from __future__ import annotations

import shutil
import sys
from collections.abc import Callable
from pathlib import Path

from .errors import UnsupportedOperationError, require
from .subprocess_utils import launch_detached


def is_desktop_supported() -> bool:
    """Whether this host has a file manager we know how to drive."""
    if sys.platform == "win32":
        return True
    if sys.platform == "darwin":
        return shutil.which("open") is not None
    return shutil.which("xdg-open") is not None


def reveal_command(path: Path) -> list[str]:
    """
    Command that shows `path` in the system file manager.

    Explorer and Finder select the entry inside its folder; xdg-open can only
    open a folder, so files are revealed by opening their parent.
    """
    if sys.platform == "win32":
        return ["explorer", f"/select,{path}"]
    if sys.platform == "darwin":
        return ["open", "-R", str(path)]
    folder = path if path.is_dir() else path.parent
    return ["xdg-open", str(folder)]


def open_dir_by_platform(path: Path | str, log: Callable[[str], None] | None = None) -> None:
    """Open the folder containing `path` with the system file manager."""
    require(path, "path")
    if not is_desktop_supported():
        raise UnsupportedOperationError("This operation is not supported on this OS!")

    resolved = Path(path).expanduser().resolve()
    try:
        launch_detached(reveal_command(resolved))
    except OSError as exc:
        raise UnsupportedOperationError("This platform does not support this!") from exc
    if log:
        log(f"Revealed '{resolved}'")


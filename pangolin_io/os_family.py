"""
Operating system families.

`classify_os_name` maps whatever the host reports as its OS name onto a small
closed set. The rules are tested in order and the first hit wins: "darwin"
also contains "win", so the MAC rule has to come before WINDOWS.
"""

from __future__ import annotations

import platform
import re
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .environment import SystemSnapshot


NA = "<NA>"


class OSFamily(Enum):
    LINUX = "linux"
    WINDOWS = "windows"
    DOS = "dos"
    MAC = "mac"
    SOLARIS = "solaris"
    OTHER = "other"

    @property
    def root_path(self) -> str | None:
        """Static root of the family; WINDOWS and OTHER have none."""
        return _ROOT_PATHS[self]


_ROOT_PATHS: dict[OSFamily, str | None] = {
    OSFamily.LINUX: "/",
    OSFamily.WINDOWS: None,
    OSFamily.DOS: "C:",
    OSFamily.MAC: "/",
    OSFamily.SOLARIS: "/",
    OSFamily.OTHER: None,
}

_RULES: tuple[tuple[re.Pattern[str], OSFamily], ...] = (
    (re.compile(r"nix|nux|aix"), OSFamily.LINUX),
    (re.compile(r"sunos"), OSFamily.SOLARIS),
    (re.compile(r"mac|darwin"), OSFamily.MAC),
    (re.compile(r"win"), OSFamily.WINDOWS),
    (re.compile(r"dos"), OSFamily.DOS),
)


def classify_os_name(os_name: str) -> OSFamily:
    lowered = (os_name or "").lower()
    for pattern, family in _RULES:
        if pattern.search(lowered):
            return family
    return OSFamily.OTHER


def read_os_name() -> str:
    """The host's OS name ("Linux", "Windows", "Darwin"...) or NA."""
    try:
        name = platform.system()
    except OSError:
        return NA
    return name or NA


def get_system_os(snapshot: SystemSnapshot | None = None) -> OSFamily:
    if snapshot is not None:
        return classify_os_name(snapshot.os_name)
    return classify_os_name(read_os_name())

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from .os_family import OSFamily, classify_os_name, read_os_name


@dataclass(frozen=True)
class SystemSnapshot:
    """
    Read-only view of the host, captured once at startup and handed to the
    helpers that need it (OS family, root path, home and working directory).
    """

    os_name: str
    env: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    home_dir: Path = Path(".")
    user_dir: Path = Path(".")

    @classmethod
    def capture(
        cls,
        *,
        os_name: str | None = None,
        env: Mapping[str, str] | None = None,
    ) -> SystemSnapshot:
        env_copy = dict(os.environ if env is None else env)
        return cls(
            os_name=os_name if os_name is not None else read_os_name(),
            env=MappingProxyType(env_copy),
            home_dir=_read_home_dir(),
            user_dir=_read_user_dir(),
        )

    @property
    def os_family(self) -> OSFamily:
        return classify_os_name(self.os_name)

    @property
    def root_path(self) -> str | None:
        family = self.os_family
        if family is OSFamily.WINDOWS:
            return self.env.get("COMPUTERNAME")
        return family.root_path


def _read_home_dir() -> Path:
    try:
        return Path.home()
    except (RuntimeError, KeyError):
        return Path(".")


def _read_user_dir() -> Path:
    try:
        return Path.cwd()
    except OSError:
        return Path(".")

"""
Font loading.

Fonts decode through Pillow's FreeType binding. Sizes are in points; the
resource and "safe" loaders never go below FONT_MIN_SIZE, `load_font` uses
the size it is given.
"""

from __future__ import annotations

import io
from collections.abc import Callable
from pathlib import Path
from typing import IO, Any

from . import deps, paths
from .errors import DecodeError, InvalidArgumentError, PangolinIOError, ResourceNotFoundError, require
from .resources import Anchor, anchor_label, read_resource_bytes


FONT_MIN_SIZE = 11.0


def _decode(stream: IO[bytes], size: float, source: str) -> Any:
    deps.require_pillow("font loading")
    if size <= 0:
        raise InvalidArgumentError(f"Font size must be positive, got {size}")
    try:
        return deps.ImageFont.truetype(stream, size)
    except OSError as exc:
        raise DecodeError(f"{source} is not a usable font: {exc}") from exc


def default_font(size: float = FONT_MIN_SIZE) -> Any:
    """Pillow's bundled font; the fixed-size bitmap one when FreeType is missing."""
    deps.require_pillow("font loading")
    try:
        return deps.ImageFont.load_default(size=size)
    except ImportError:
        return deps.ImageFont.load_default()


def load_font(path: Path | str, size: float) -> Any:
    require(path, "path")
    if not paths.is_readable(path) or paths.is_directory(path):
        raise ResourceNotFoundError(f"Path [='{path}'] is not readable")

    with open(path, "rb") as handle:
        return _decode(handle, size, f"Path [='{path}']")


def load_font_safe(
    path: Path | str,
    size: float,
    log: Callable[[str], None] | None = None,
) -> Any:
    """Like `load_font`, but falls back to the default font instead of raising."""
    require(path, "path")
    size = max(size, FONT_MIN_SIZE)
    try:
        return load_font(path, size)
    except PangolinIOError:
        if log:
            log(f"Failed to load font for path[='{path}']")
        return default_font(size)


def load_font_from_resource(anchor: Anchor, name: str, size: float) -> Any:
    size = max(size, FONT_MIN_SIZE)
    data = read_resource_bytes(anchor, name)
    return _decode(io.BytesIO(data), size, f"Font [='{name}'] for [='{anchor_label(anchor)}']")

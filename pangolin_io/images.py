from __future__ import annotations

import io
from pathlib import Path
from typing import IO, Any

from . import deps, paths
from .errors import DecodeError, ResourceNotFoundError, require
from .resources import Anchor, anchor_label, read_resource_bytes


def _decode(stream: IO[bytes], source: str) -> Any:
    deps.require_pillow("image loading")
    try:
        img = deps.Image.open(stream)
        img.load()
    except deps.UnidentifiedImageError as exc:
        raise DecodeError(f"{source} is not a recognised image") from exc
    except (OSError, SyntaxError, ValueError) as exc:
        # truncated or corrupt pixel data
        raise DecodeError(f"{source} could not be decoded: {exc}") from exc
    return img


def load_image(path: Path | str) -> Any:
    """Decode an image file with Pillow. The file is closed on return."""
    require(path, "path")
    if not paths.is_readable(path) or paths.is_directory(path):
        raise ResourceNotFoundError(f"Path[='{path}'] is not readable")

    with open(path, "rb") as handle:
        return _decode(handle, f"Path[='{path}']")


def load_image_from_resource(anchor: Anchor, name: str) -> Any:
    data = read_resource_bytes(anchor, name)
    return _decode(io.BytesIO(data), f"file [='{name}'] for [='{anchor_label(anchor)}']")

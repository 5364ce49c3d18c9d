"""
Bundled resource lookup.

A resource is located by an anchor and a '/'-separated name relative to the
anchor's package. The anchor may be a package or module name, a module
object, or a class (its defining module is used).
"""

from __future__ import annotations

import importlib
import re
import sys
from collections.abc import Callable
from importlib import resources as importlib_resources
from importlib.resources.abc import Traversable
from pathlib import Path
from types import ModuleType
from typing import IO

from .errors import InvalidArgumentError, ResourceNotFoundError, require

Anchor = str | ModuleType | type

# \r\n, \r or \n only; form feeds and other separators stay inside a line
LINE_BREAK = re.compile(r"\r\n|\r|\n")


def anchor_label(anchor: Anchor) -> str:
    if isinstance(anchor, type):
        return f"{anchor.__module__}.{anchor.__qualname__}"
    if isinstance(anchor, ModuleType):
        return anchor.__name__
    return str(anchor)


def _anchor_module(anchor: Anchor) -> ModuleType:
    if isinstance(anchor, ModuleType):
        return anchor
    if isinstance(anchor, type):
        module = sys.modules.get(anchor.__module__)
        if module is None:
            raise ResourceNotFoundError(f"Module of class [='{anchor_label(anchor)}'] is not loaded")
        return module
    if isinstance(anchor, str):
        try:
            return importlib.import_module(anchor)
        except ModuleNotFoundError as exc:
            raise ResourceNotFoundError(f"Anchor [='{anchor}'] is not an importable module") from exc
    raise InvalidArgumentError(f"Unsupported resource anchor type: {type(anchor).__name__}")


def _resource_root(anchor: Anchor) -> Traversable:
    module = _anchor_module(anchor)
    if hasattr(module, "__path__"):
        return importlib_resources.files(module.__name__)
    if module.__package__:
        return importlib_resources.files(module.__package__)
    module_file = getattr(module, "__file__", None)
    if module_file:
        return Path(module_file).parent
    raise ResourceNotFoundError(f"Anchor [='{anchor_label(anchor)}'] has no location on disk")


def find_resource(anchor: Anchor, name: str) -> Traversable:
    require(anchor, "anchor")
    require(name, "name")

    if name.startswith("/"):
        # names are always relative to the anchor's package; there is no global root
        raise InvalidArgumentError(f"Resource name [='{name}'] must be relative to its anchor")

    node = _resource_root(anchor)
    for part in name.split("/"):
        if part:
            node = node / part
    if not node.is_file():
        raise ResourceNotFoundError(
            f"Resource [='{name}'] not found for anchor [='{anchor_label(anchor)}']"
        )
    return node


def open_resource(anchor: Anchor, name: str) -> IO[bytes]:
    return find_resource(anchor, name).open("rb")


def read_resource_bytes(anchor: Anchor, name: str) -> bytes:
    with open_resource(anchor, name) as stream:
        return stream.read()


def load_resource_string(
    anchor: Anchor,
    name: str,
    append_newline: bool = False,
    log: Callable[[str], None] | None = None,
) -> str:
    """
    Read a text resource line by line.

    Line endings are dropped; with `append_newline` every line (including the
    last) is followed by a single "\\n" instead.
    """
    data = read_resource_bytes(anchor, name)
    text = decode_text(data)
    separator = "\n" if append_newline else ""
    lines = LINE_BREAK.split(text)
    if lines[-1] == "":
        lines.pop()
    if log:
        log(f"Read {len(lines)} lines from '{name}'")
    return "".join(line + separator for line in lines)


def decode_text(data: bytes) -> str:
    """UTF-8 (BOM dropped), falling back to ISO-8859-1 for legacy files."""
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError:
        return data.decode("iso-8859-1")

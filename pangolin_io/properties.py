"""
`.properties` files: codec plus path/resource loaders and a writer.

The format is the classic key/value one: `#` and `!` start comment lines,
keys end at the first unescaped `=`, `:` or whitespace, a line ending in an
odd number of backslashes continues on the next line, and values support the
`\\t \\n \\r \\f \\uXXXX` escapes. Files are read as UTF-8 with an ISO-8859-1
fallback and written as UTF-8.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from datetime import datetime
from pathlib import Path
from types import MappingProxyType

from . import paths
from .errors import DecodeError, InvalidArgumentError, ResourceNotFoundError, require
from .resources import LINE_BREAK, Anchor, anchor_label, decode_text, read_resource_bytes


DEFAULT_COMMENT = "<Auto Generated Comment!>"

_WHITESPACE = " \t\f"
_SEPARATORS = "=:"
_HEX_DIGITS = set("0123456789abcdefABCDEF")

_UNESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
_ESCAPES = {"\t": "\\t", "\n": "\\n", "\r": "\\r", "\f": "\\f"}


# --- codec ----------------------------------------------------------------


def _continues(line: str) -> bool:
    trailing = len(line) - len(line.rstrip("\\"))
    return trailing % 2 == 1


def _logical_lines(text: str) -> Iterator[str]:
    natural = LINE_BREAK.split(text)
    index = 0
    while index < len(natural):
        line = natural[index].lstrip(_WHITESPACE)
        index += 1
        if not line or line[0] in "#!":
            continue
        while _continues(line):
            line = line[:-1]
            if index >= len(natural):
                break
            line += natural[index].lstrip(_WHITESPACE)
            index += 1
        yield line


def _split_key_value(line: str) -> tuple[str, str]:
    end = 0
    while end < len(line):
        char = line[end]
        if char == "\\":
            end += 2
            continue
        if char in _SEPARATORS or char in _WHITESPACE:
            break
        end += 1
    end = min(end, len(line))
    key = line[:end]

    start = end
    if start < len(line) and line[start] in _SEPARATORS:
        start += 1
    else:
        while start < len(line) and line[start] in _WHITESPACE:
            start += 1
        if start < len(line) and line[start] in _SEPARATORS:
            start += 1
    while start < len(line) and line[start] in _WHITESPACE:
        start += 1
    return key, line[start:]


def _unescape(text: str) -> str:
    out: list[str] = []
    index = 0
    while index < len(text):
        char = text[index]
        index += 1
        if char != "\\":
            out.append(char)
            continue
        if index >= len(text):
            break
        char = text[index]
        index += 1
        if char == "u":
            digits = text[index : index + 4]
            if len(digits) < 4 or not set(digits) <= _HEX_DIGITS:
                raise DecodeError(f"Malformed \\uxxxx encoding near '\\u{digits}'")
            out.append(chr(int(digits, 16)))
            index += 4
        else:
            out.append(_UNESCAPES.get(char, char))
    return "".join(out)


def _escape(text: str, *, is_key: bool) -> str:
    out: list[str] = []
    for index, char in enumerate(text):
        if char == " ":
            out.append("\\ " if is_key or index == 0 else " ")
        elif char in _ESCAPES:
            out.append(_ESCAPES[char])
        elif char in "=:#!\\":
            out.append("\\" + char)
        else:
            out.append(char)
    return "".join(out)


def parse_properties(text: str, into: dict[str, str] | None = None) -> dict[str, str]:
    """Parse properties text, adding entries to `into` (a new dict if omitted)."""
    require(text, "text")
    properties = {} if into is None else into
    for line in _logical_lines(text):
        key, value = _split_key_value(line)
        properties[_unescape(key)] = _unescape(value)
    return properties


def dump_properties(
    properties: Mapping[str, str],
    comment: str | None = None,
    *,
    timestamp: datetime | None = None,
) -> str:
    require(properties, "properties")
    lines: list[str] = []
    if comment is not None:
        for comment_line in LINE_BREAK.split(comment):
            lines.append(comment_line if comment_line[:1] in ("#", "!") else f"#{comment_line}")
    stamp = timestamp or datetime.now().astimezone()
    lines.append("#" + stamp.strftime("%a %b %d %H:%M:%S %Z %Y"))
    for key, value in properties.items():
        lines.append(f"{_escape(str(key), is_key=True)}={_escape(str(value), is_key=False)}")
    return "\n".join(lines) + "\n"


# --- loaders --------------------------------------------------------------


def load_properties(
    path: Path | str,
    properties: dict[str, str] | None = None,
    log: Callable[[str], None] | None = None,
) -> dict[str, str]:
    """
    Read a properties file into `properties` (a new dict if omitted) and
    return it.

    Raises ResourceNotFoundError when the file is not readable and
    InvalidArgumentError when `path` is a directory.
    """
    require(path, "path")
    if not paths.is_readable(path):
        raise ResourceNotFoundError(f"Path[='{path}'] not readable")
    if paths.is_directory(path):
        raise InvalidArgumentError(f"You try to read properties from dir[='{path}']")

    data = Path(path).read_bytes()
    loaded = parse_properties(decode_text(data), properties)
    if log:
        log(f"Loaded {len(loaded)} properties from '{path}'")
    return loaded


def load_properties_from_resource(
    anchor: Anchor,
    name: str,
    properties: dict[str, str] | None = None,
    log: Callable[[str], None] | None = None,
) -> dict[str, str]:
    require(anchor, "anchor")
    require(name, "name")
    if log:
        log(f"try to load '{name}' from '{anchor_label(anchor)}'")
    loaded = parse_properties(decode_text(read_resource_bytes(anchor, name)), properties)
    if log:
        log(f"'{name}' loaded Okay!")
    return loaded


def load_resource_bundle(anchor: Anchor, name: str) -> Mapping[str, str]:
    """Read-only view of a bundled properties file (e.g. UI messages)."""
    return MappingProxyType(load_properties_from_resource(anchor, name))


def write_properties(
    path: Path | str,
    properties: Mapping[str, str],
    comment: str | None = None,
    log: Callable[[str], None] | None = None,
) -> None:
    require(path, "path")
    require(properties, "properties")
    if comment is None:
        comment = DEFAULT_COMMENT

    with open(path, "w", encoding="utf-8", newline="\n") as handle:
        handle.write(dump_properties(properties, comment))

    if log:
        log(f"Wrote to '{path}' okay!")

"""
Error taxonomy shared by every helper.

Each failure is tagged with an `ErrorKind` so callers (and `results.attempt`)
can tell a bad argument from a missing resource, a decoder rejection, or a
host that lacks the requested integration.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorKind(Enum):
    INVALID_ARGUMENT = "invalid_argument"
    NOT_FOUND = "not_found"
    DECODE = "decode"
    UNSUPPORTED = "unsupported"


class PangolinIOError(Exception):
    kind: ErrorKind


class InvalidArgumentError(PangolinIOError, ValueError):
    """A required argument is missing or unusable. Raised before any I/O."""

    kind = ErrorKind.INVALID_ARGUMENT


class ResourceNotFoundError(PangolinIOError, OSError):
    """The path or bundled resource cannot be opened for reading."""

    kind = ErrorKind.NOT_FOUND


class DecodeError(PangolinIOError, ValueError):
    """An image, font or properties decoder rejected the bytes."""

    kind = ErrorKind.DECODE


class UnsupportedOperationError(PangolinIOError, OSError):
    """The host has no desktop integration for the requested call."""

    kind = ErrorKind.UNSUPPORTED


def require(value: Any, name: str) -> Any:
    if value is None:
        raise InvalidArgumentError(f"{name} is None")
    return value

"""
Result-or-error values for callers that prefer not to use try/except.

`attempt(load_image, path)` returns a `LoadResult` holding either the decoded
value or the `PangolinIOError` that stopped it; `kind` tells an invalid
argument from a missing resource, a decode failure or an unsupported host.
Exceptions outside that taxonomy still propagate.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from .errors import ErrorKind, PangolinIOError

T = TypeVar("T")


@dataclass(frozen=True)
class LoadResult(Generic[T]):
    value: T | None = None
    error: PangolinIOError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> ErrorKind | None:
        return self.error.kind if self.error is not None else None

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    def value_or(self, default: T) -> T:
        return default if self.error is not None else self.value  # type: ignore[return-value]


def attempt(func: Callable[..., T], *args: Any, **kwargs: Any) -> LoadResult[T]:
    try:
        return LoadResult(value=func(*args, **kwargs))
    except PangolinIOError as exc:
        return LoadResult(error=exc)

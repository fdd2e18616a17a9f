from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class CatchResult(Generic[T]):
    """Outcome of a wrapped handler.

    ``value`` holds what the handler returned and ``error`` the exception it
    raised; at most one of them is set. ``ok`` is derived from ``error`` so it
    cannot disagree with it. A handler that returns ``None`` successfully
    yields ``value=None, error=None, ok=True``.

    Build instances with :meth:`success` or :meth:`failure`.

    >>> value, error, ok = CatchResult.success(5)
    >>> (value, error, ok)
    (5, None, True)
    >>> match CatchResult.failure(KeyError("k")):
    ...     case CatchResult(None, KeyError() as exc):
    ...         print("missing", exc)
    missing 'k'
    """

    __match_args__ = ("value", "error")

    value: T | None = None
    error: Exception | None = None

    def __post_init__(self) -> None:
        if self.error is not None and self.value is not None:
            raise ValueError("CatchResult cannot carry both a value and an error")

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> CatchResult[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: Exception) -> CatchResult[Any]:
        if error is None:
            raise ValueError("failure requires an error")
        return cls(error=error)

    def __iter__(self) -> Iterator[Any]:
        yield self.value
        yield self.error
        yield self.ok


__all__ = ["CatchResult"]

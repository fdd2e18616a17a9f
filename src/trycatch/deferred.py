from __future__ import annotations

import asyncio
import inspect
from collections.abc import Awaitable
from concurrent.futures import Future
from typing import Any, TypeVar

T = TypeVar("T")


def is_deferred(value: Any) -> bool:
    """Report whether *value* is a result that still has to be awaited.

    Awaitables (coroutines, tasks, :class:`asyncio.Future` and any object whose
    class defines ``__await__``) count, as does
    :class:`concurrent.futures.Future`, which registers continuations through
    ``add_done_callback``.

    >>> from concurrent.futures import Future
    >>> is_deferred(Future())
    True
    >>> is_deferred(None), is_deferred(1), is_deferred({"__await__": None})
    (False, False, False)
    """

    if value is None:
        return False
    if isinstance(value, Future):
        return True
    return inspect.isawaitable(value)


def as_awaitable(value: Awaitable[T] | Future[T]) -> Awaitable[T]:
    """Return something the running event loop can ``await`` for *value*.

    :class:`concurrent.futures.Future` objects are bridged with
    :func:`asyncio.wrap_future`; other awaitables pass through unchanged.
    """

    if isinstance(value, Future):
        return asyncio.wrap_future(value)
    if not inspect.isawaitable(value):
        raise TypeError(f"{type(value).__name__!r} object is not awaitable")
    return value


__all__ = ["as_awaitable", "is_deferred"]

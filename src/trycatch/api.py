from __future__ import annotations

import asyncio
import inspect
import logging
import warnings
from collections.abc import Awaitable, Callable, Coroutine
from concurrent.futures import Future
from typing import Any, TypeVar

from .config import get_config
from .deferred import as_awaitable, is_deferred
from .result import CatchResult

T = TypeVar("T")

Handler = Callable[[], T | Awaitable[T]] | Awaitable[T] | Future[T]
ErrorCallback = Callable[[Exception], Any]

logger = logging.getLogger("trycatch.api")

# Callback tasks scheduled from the synchronous path, held until they finish.
_PENDING_CALLBACKS: set[asyncio.Future[Any]] = set()


def try_(
    handler: Handler[T], on_error: ErrorCallback | None = None
) -> T | None | Coroutine[Any, Any, T | None]:
    """Run *handler* and return its value, or ``None`` if it raised.

    A callable handler is called straight away, even if it is also awaitable.
    When it returns an awaitable (or is a non-callable awaitable), the result
    is a coroutine resolving to the awaited value or ``None``. Otherwise the
    value is returned directly, so the same entry point serves both kinds of
    handler. Prefer :func:`try_sync` or :func:`try_async` when the kind is
    known at the call site.

    ``on_error`` receives the exception before ``None`` is produced. On the
    asynchronous path an awaitable returned by it is awaited first. On the
    synchronous path it is started as a task on the running loop and not
    waited for; with no running loop it is closed with a ``RuntimeWarning``.
    Errors raised by ``on_error`` itself are not captured.

    >>> try_(lambda: 1)
    1
    >>> errors = []
    >>> try_(lambda: 1 / 0, errors.append) is None
    True
    >>> type(errors[0]).__name__
    'ZeroDivisionError'
    >>> import asyncio
    >>> async def fetch():
    ...     return 5
    >>> asyncio.run(try_(fetch))
    5
    """

    if not callable(handler):
        return _settle(_require_deferred(handler), on_error)
    try:
        value = handler()  # type: ignore[operator]
    except Exception as error:
        _notify(error, on_error)
        return None
    if is_deferred(value):
        return _settle(value, on_error)
    return value


def try_sync(
    handler: Callable[[], T], on_error: ErrorCallback | None = None
) -> T | None:
    """Synchronous :func:`try_` that never inspects the returned value.

    >>> try_sync(lambda: "done")
    'done'
    >>> try_sync(lambda: int("x")) is None
    True
    """

    _ensure_callable(handler)
    try:
        return handler()
    except Exception as error:
        _notify(error, on_error)
        return None


async def try_async(
    handler: Handler[T], on_error: ErrorCallback | None = None
) -> T | None:
    """Asynchronous :func:`try_`; always returns a coroutine.

    Plain values returned by *handler* are passed through, so synchronous
    callables may be used here as well.

    >>> import asyncio
    >>> async def boom():
    ...     raise LookupError("gone")
    >>> asyncio.run(try_async(boom)) is None
    True
    >>> asyncio.run(try_async(lambda: 3))
    3
    """

    if not callable(handler):
        return await _settle(_require_deferred(handler), on_error)
    try:
        value = handler()  # type: ignore[operator]
    except Exception as error:
        await _notify_async(error, on_error)
        return None
    if is_deferred(value):
        return await _settle(value, on_error)
    return value


def catch(
    handler: Handler[T],
) -> CatchResult[T] | Coroutine[Any, Any, CatchResult[T]]:
    """Run *handler* and describe the outcome as a :class:`CatchResult`.

    Mirrors :func:`try_`: synchronous handlers produce a result directly,
    asynchronous ones a coroutine resolving to it.

    >>> catch(lambda: 1)
    CatchResult(value=1, error=None)
    >>> outcome = catch(lambda: {}["key"])
    >>> outcome.ok, type(outcome.error).__name__
    (False, 'KeyError')
    >>> import asyncio
    >>> async def five():
    ...     return 5
    >>> asyncio.run(catch(five)).ok
    True
    """

    slot = _ErrorSlot()
    value = try_(handler, slot)
    # try_ only hands back something awaitable when it took the async path.
    if is_deferred(value):
        return _collect(value, slot)  # type: ignore[arg-type]
    return slot.result(value)


def catch_sync(handler: Callable[[], T]) -> CatchResult[T]:
    """Synchronous :func:`catch`.

    >>> catch_sync(lambda: [1, 2][5]).ok
    False
    """

    slot = _ErrorSlot()
    value = try_sync(handler, slot)
    return slot.result(value)


async def catch_async(handler: Handler[T]) -> CatchResult[T]:
    """Asynchronous :func:`catch`; always returns a coroutine."""

    slot = _ErrorSlot()
    value = await try_async(handler, slot)
    return slot.result(value)


# Second names kept stable for callers of the earlier API.
attempt = try_
try_catch = catch


class _ErrorSlot:
    """Error callback that remembers the exception for a single call."""

    __slots__ = ("error",)

    def __init__(self) -> None:
        self.error: Exception | None = None

    def __call__(self, error: Exception) -> None:
        self.error = error

    def result(self, value: Any) -> CatchResult[Any]:
        if self.error is not None:
            return CatchResult.failure(self.error)
        return CatchResult.success(value)


async def _collect(pending: Awaitable[Any], slot: _ErrorSlot) -> CatchResult[Any]:
    value = await pending
    return slot.result(value)


async def _settle(deferred: Any, on_error: ErrorCallback | None) -> Any:
    try:
        return await as_awaitable(deferred)
    except Exception as error:
        await _notify_async(error, on_error)
        return None


def _ensure_callable(handler: Any) -> None:
    if not callable(handler):
        raise TypeError(
            f"handler must be callable or awaitable, got {type(handler).__name__!r}"
        )


def _require_deferred(handler: Any) -> Any:
    if not is_deferred(handler):
        raise TypeError(
            f"handler must be callable or awaitable, got {type(handler).__name__!r}"
        )
    return handler


def _log_failure(error: Exception) -> None:
    logger.log(
        get_config().log_level,
        "handler failed: %s: %s",
        type(error).__name__,
        error,
    )


def _notify(error: Exception, on_error: ErrorCallback | None) -> None:
    _log_failure(error)
    if on_error is None:
        return
    outcome = on_error(error)
    if is_deferred(outcome):
        _schedule_callback(outcome)


def _schedule_callback(outcome: Any) -> None:
    """Start an awaitable returned by an error callback without waiting for it."""

    if isinstance(outcome, Future):
        return
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        if inspect.iscoroutine(outcome):
            outcome.close()
        warnings.warn(
            "on_error returned an awaitable outside a running event loop; "
            "it was not awaited (use try_async or catch_async)",
            RuntimeWarning,
            stacklevel=4,
        )
        return
    task = asyncio.ensure_future(outcome)
    _PENDING_CALLBACKS.add(task)
    task.add_done_callback(_PENDING_CALLBACKS.discard)


async def _notify_async(error: Exception, on_error: ErrorCallback | None) -> None:
    _log_failure(error)
    if on_error is None:
        return
    outcome = on_error(error)
    if is_deferred(outcome):
        await as_awaitable(outcome)


__all__ = [
    "ErrorCallback",
    "Handler",
    "attempt",
    "catch",
    "catch_async",
    "catch_sync",
    "try_",
    "try_async",
    "try_catch",
    "try_sync",
]

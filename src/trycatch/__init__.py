"""Run sync or async handlers and get their failures back as values.

`trycatch` wraps a zero-argument handler, calls it, and turns a raised
exception (or a failed awaitable) into either ``None`` (:func:`try_`) or a
:class:`CatchResult` (:func:`catch`). The same entry points accept synchronous
and asynchronous handlers; explicit ``*_sync``/``*_async`` variants and the
:func:`select_try`/:func:`select_catch` helpers pin the mode up front.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from .api import (
    ErrorCallback,
    Handler,
    attempt,
    catch,
    catch_async,
    catch_sync,
    try_,
    try_async,
    try_catch,
    try_sync,
)
from .config import (
    Mode,
    UnsupportedModeError,
    WrapperConfig,
    configure,
    get_config,
    reset,
)
from .deferred import as_awaitable, is_deferred
from .modes import select_catch, select_try
from .result import CatchResult

__all__ = [
    "CatchResult",
    "ErrorCallback",
    "Handler",
    "Mode",
    "UnsupportedModeError",
    "WrapperConfig",
    "as_awaitable",
    "attempt",
    "catch",
    "catch_async",
    "catch_sync",
    "configure",
    "get_config",
    "is_deferred",
    "reset",
    "select_catch",
    "select_try",
    "try_",
    "try_async",
    "try_catch",
    "try_sync",
]

try:
    __version__ = version("trycatch")
except PackageNotFoundError:  # pragma: no cover - during local dev
    __version__ = "0.0.0"

"""Pick a concrete wrapper from a ``sync``/``async`` mode tag."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .api import catch_async, catch_sync, try_async, try_sync
from .config import Mode, UnsupportedModeError, get_config

_TRY_BY_MODE: dict[str, Callable[..., Any]] = {
    "sync": try_sync,
    "async": try_async,
}

_CATCH_BY_MODE: dict[str, Callable[..., Any]] = {
    "sync": catch_sync,
    "async": catch_async,
}


def _lookup(
    table: dict[str, Callable[..., Any]], mode: Mode | None
) -> Callable[..., Any]:
    if mode is None:
        mode = get_config().mode
    try:
        return table[mode]
    except (KeyError, TypeError):
        raise UnsupportedModeError(mode) from None


def select_try(mode: Mode | None = None) -> Callable[..., Any]:
    """Return :func:`try_sync` or :func:`try_async` for *mode*.

    *mode* must be ``"sync"`` or ``"async"``; any other tag raises
    :class:`UnsupportedModeError`. Passing ``None`` (the default) is the one
    exception: it selects the configured default mode, see
    :class:`WrapperConfig`.

    >>> select_try("async").__name__
    'try_async'
    >>> select_try("bogus")
    Traceback (most recent call last):
    ...
    trycatch.config.UnsupportedModeError: unsupported mode 'bogus'. Expected one of: async, sync
    """

    return _lookup(_TRY_BY_MODE, mode)


def select_catch(mode: Mode | None = None) -> Callable[..., Any]:
    """Return :func:`catch_sync` or :func:`catch_async` for *mode*.

    Accepts the same tags as :func:`select_try`; ``None`` selects the
    configured default mode.
    """

    return _lookup(_CATCH_BY_MODE, mode)


__all__ = ["select_catch", "select_try"]

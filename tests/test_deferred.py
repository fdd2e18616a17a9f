from __future__ import annotations

import asyncio
import types
from concurrent.futures import Future, ThreadPoolExecutor

import pytest

from trycatch import as_awaitable, is_deferred


class Ready:
    def __await__(self):
        yield from ()
        return 3


class Thenable:
    def then(self, on_success, on_failure=None):
        return self


async def sample() -> int:
    return 1


def test_coroutine_is_deferred() -> None:
    coro = sample()
    try:
        assert is_deferred(coro)
    finally:
        coro.close()


def test_custom_awaitable_and_concurrent_future_are_deferred() -> None:
    assert is_deferred(Ready())
    assert is_deferred(Future())


def test_generator_based_coroutine_is_deferred() -> None:
    @types.coroutine
    def legacy():
        yield

    gen = legacy()
    try:
        assert is_deferred(gen)
    finally:
        gen.close()


@pytest.mark.asyncio
async def test_asyncio_future_and_task_are_deferred() -> None:
    loop = asyncio.get_running_loop()
    future = loop.create_future()
    task = asyncio.ensure_future(sample())
    assert is_deferred(future)
    assert is_deferred(task)
    future.cancel()
    assert await task == 1


@pytest.mark.parametrize(
    "value",
    [None, 0, 1.5, "text", b"raw", [], {"then": None}, object(), sample, Thenable()],
)
def test_non_deferred_values(value: object) -> None:
    assert is_deferred(value) is False


def test_as_awaitable_rejects_plain_values() -> None:
    with pytest.raises(TypeError):
        as_awaitable(3)  # type: ignore[arg-type]


@pytest.mark.asyncio
async def test_as_awaitable_bridges_concurrent_future() -> None:
    with ThreadPoolExecutor(max_workers=1) as pool:
        future = pool.submit(lambda: "bridged")
        assert await as_awaitable(future) == "bridged"
    assert await as_awaitable(Ready()) == 3

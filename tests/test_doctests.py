from __future__ import annotations

import doctest

import pytest

import trycatch.api
import trycatch.deferred
import trycatch.modes
import trycatch.result


@pytest.mark.parametrize(
    "module",
    [trycatch.api, trycatch.deferred, trycatch.modes, trycatch.result],
    ids=lambda module: module.__name__,
)
def test_module_doctests(module) -> None:
    failure_count, _ = doctest.testmod(
        module,
        optionflags=doctest.NORMALIZE_WHITESPACE | doctest.ELLIPSIS,
    )
    assert failure_count == 0

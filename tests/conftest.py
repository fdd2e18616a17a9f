from __future__ import annotations

from collections.abc import Iterator

import pytest

from trycatch import WrapperConfig, configure, reset


@pytest.fixture(autouse=True)
def restore_config() -> Iterator[None]:
    configure(WrapperConfig())
    yield
    reset()

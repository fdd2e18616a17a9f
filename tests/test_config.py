from __future__ import annotations

import logging
import os
from unittest import mock

import pytest

from trycatch import UnsupportedModeError, WrapperConfig, configure, get_config, reset


def test_wrapper_config_defaults() -> None:
    config = WrapperConfig()
    assert config.mode == "sync"
    assert config.log_level == logging.DEBUG


def test_wrapper_config_rejects_unknown_mode() -> None:
    with pytest.raises(UnsupportedModeError):
        WrapperConfig(mode="parallel")  # type: ignore[arg-type]


def test_wrapper_config_from_env() -> None:
    with mock.patch.dict(
        os.environ,
        {"TRYCATCH_MODE": " Async ", "TRYCATCH_LOG_LEVEL": "info"},
        clear=True,
    ):
        config = WrapperConfig.from_env()

    assert config.mode == "async"
    assert config.log_level == logging.INFO


def test_wrapper_config_from_env_numeric_level() -> None:
    with mock.patch.dict(os.environ, {"TRYCATCH_LOG_LEVEL": "25"}, clear=True):
        config = WrapperConfig.from_env()
    assert config.log_level == 25


def test_wrapper_config_from_env_invalid_values() -> None:
    with mock.patch.dict(
        os.environ,
        {"TRYCATCH_MODE": "invalid", "TRYCATCH_LOG_LEVEL": "loud"},
        clear=True,
    ):
        config = WrapperConfig.from_env()

    assert config.mode == "sync"
    assert config.log_level == logging.DEBUG


def test_configure_and_reset() -> None:
    custom = WrapperConfig(mode="async", log_level=logging.ERROR)
    configure(custom)
    assert get_config() is custom
    with mock.patch.dict(os.environ, {}, clear=True):
        reset()
        assert get_config() == WrapperConfig()

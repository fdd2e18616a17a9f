from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Literal, get_args

Mode = Literal["sync", "async"]

MODES: tuple[str, ...] = get_args(Mode)


class UnsupportedModeError(ValueError):
    """Raised when a mode tag other than ``sync`` or ``async`` is requested."""

    def __init__(self, mode: object) -> None:
        valid = ", ".join(sorted(MODES))
        super().__init__(f"unsupported mode {mode!r}. Expected one of: {valid}")
        self.mode = mode


@dataclass(slots=True)
class WrapperConfig:
    """Process-wide defaults for the wrappers.

    Only selection and diagnostics are configurable; the wrappers themselves
    keep no state between calls.
    """

    mode: Mode = "sync"
    log_level: int = logging.DEBUG

    def __post_init__(self) -> None:
        if self.mode not in MODES:
            raise UnsupportedModeError(self.mode)

    @classmethod
    def from_env(cls) -> WrapperConfig:
        """Load overrides from environment variables.

        Supported variables (all optional):

        ``TRYCATCH_MODE``
            Default mode for the selectors, ``sync`` or ``async``.
        ``TRYCATCH_LOG_LEVEL``
            Level used when logging captured failures. Accepts a level name
            (``DEBUG``, ``INFO``...) or an integer.
        """

        def _parse_level(value: str | None) -> int | None:
            if value is None:
                return None
            stripped = value.strip()
            if stripped.isdigit():
                return int(stripped)
            level = logging.getLevelName(stripped.upper())
            return level if isinstance(level, int) else None

        env = os.environ

        mode_raw = env.get("TRYCATCH_MODE", "sync").strip().lower()
        mode: Mode
        if mode_raw in MODES:
            mode = mode_raw  # type: ignore[assignment]
        else:
            mode = "sync"

        level = _parse_level(env.get("TRYCATCH_LOG_LEVEL"))

        return cls(
            mode=mode,
            log_level=level if level is not None else logging.DEBUG,
        )


_CONFIG: WrapperConfig | None = None


def get_config() -> WrapperConfig:
    """Return the active configuration, loading it from the environment once."""

    global _CONFIG
    if _CONFIG is None:
        _CONFIG = WrapperConfig.from_env()
    return _CONFIG


def configure(config: WrapperConfig) -> None:
    """Replace the active configuration."""

    global _CONFIG
    _CONFIG = config


def reset() -> None:
    """Drop the active configuration so the next lookup re-reads the environment."""

    global _CONFIG
    _CONFIG = None


__all__ = [
    "MODES",
    "Mode",
    "UnsupportedModeError",
    "WrapperConfig",
    "configure",
    "get_config",
    "reset",
]

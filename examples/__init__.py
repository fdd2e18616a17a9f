"""Runnable examples that showcase the trycatch wrappers.

The ``scenarios`` module exposes a ``SCENARIOS`` list and a ``run_all()``
helper so the outcomes can be rendered without additional wiring.
"""

from __future__ import annotations

from . import scenarios

__all__ = ["scenarios"]

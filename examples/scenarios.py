"""Everyday call sites rewritten without ``try``/``except`` blocks.

Each scenario pairs a handler that may fail with one of the ``trycatch``
wrappers and returns plain data, so ``run_all()`` can print the outcomes.
"""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from trycatch import (
    CatchResult,
    catch,
    catch_async,
    is_deferred,
    select_try,
    try_,
    try_async,
)

logger = logging.getLogger("trycatch.examples")

__all__ = [
    "Scenario",
    "parse_ports",
    "require_ports",
    "load_settings",
    "probe_endpoints",
    "read_with_fallback",
    "SCENARIOS",
    "run_all",
]


def parse_ports(raw_values: Iterable[str]) -> list[int | None]:
    """Convert user input to port numbers, keeping ``None`` for bad entries."""

    return [try_(lambda value=value: int(value)) for value in raw_values]


def require_ports(raw_values: Sequence[str]) -> list[int]:
    """Like :func:`parse_ports`, but reject the whole batch on a bad entry."""

    ports = parse_ports(raw_values)
    if None in ports:
        raise ValueError(f"invalid port in {list(raw_values)!r}")
    return ports  # type: ignore[return-value]


def load_settings(documents: Sequence[str]) -> dict[str, Any]:
    """Parse JSON documents and report which ones were rejected."""

    loaded: list[Any] = []
    rejected: list[str] = []
    for document in documents:
        match catch(lambda document=document: json.loads(document)):
            case CatchResult(value, None):
                loaded.append(value)
            case CatchResult(_, error):
                rejected.append(type(error).__name__)
    return {"loaded": loaded, "rejected": rejected}


async def _probe(host: str) -> str:
    await asyncio.sleep(0)
    if host.endswith(".invalid"):
        raise ConnectionError(f"{host} unreachable")
    return f"{host}: 200"


async def probe_endpoints(hosts: Sequence[str]) -> list[dict[str, Any]]:
    """Probe hosts concurrently and collect one structured result per host."""

    results = await asyncio.gather(
        *(catch_async(lambda host=host: _probe(host)) for host in hosts)
    )
    return [
        {"host": host, "ok": result.ok, "detail": result.value or str(result.error)}
        for host, result in zip(hosts, results)
    ]


async def read_with_fallback(primary: str, fallback: str) -> str:
    """Fall back to a secondary source, logging the primary failure."""

    async def report(error: Exception) -> None:
        logger.info("primary source failed: %s", error)

    value = await try_async(lambda: _probe(primary), report)
    if value is None:
        sync_try = select_try("sync")
        value = sync_try(lambda: f"{fallback}: cached")
    return value


@dataclass(frozen=True, slots=True)
class Scenario:
    """A named call site and the arguments it is demonstrated with."""

    name: str
    summary: str
    entrypoint: Callable[..., Any]
    args: tuple[Any, ...] = ()
    tags: tuple[str, ...] = ()

    def execute(self) -> CatchResult[Any]:
        """Run the scenario, capturing its failure instead of raising it."""

        outcome = catch(lambda: self.entrypoint(*self.args))
        if is_deferred(outcome):
            return asyncio.run(outcome)
        return outcome

    def describe(self, result: CatchResult[Any]) -> str:
        tag_suffix = f" [{' '.join(self.tags)}]" if self.tags else ""
        if result.ok:
            return f"{self.name}{tag_suffix}: {result.value}"
        return f"{self.name}{tag_suffix}: failed with {result.error!r}"


SCENARIOS: list[Scenario] = [
    Scenario(
        name="Port parsing",
        summary="Invalid CLI values become None instead of aborting the run.",
        entrypoint=parse_ports,
        args=(("8080", "http", "443"),),
        tags=("sync", "try"),
    ),
    Scenario(
        name="Strict port parsing",
        summary="A scenario that fails shows up as a failed result, not a crash.",
        entrypoint=require_ports,
        args=(("8080", "http"),),
        tags=("sync", "catch"),
    ),
    Scenario(
        name="Settings documents",
        summary="Pattern matching on CatchResult separates good and bad JSON.",
        entrypoint=load_settings,
        args=(('{"debug": true}', "{oops", "[1, 2]"),),
        tags=("sync", "catch"),
    ),
    Scenario(
        name="Endpoint probes",
        summary="Concurrent probes each resolve to their own result record.",
        entrypoint=probe_endpoints,
        args=(("api.example.com", "edge.invalid"),),
        tags=("async", "catch"),
    ),
    Scenario(
        name="Fallback read",
        summary="An async failure hands over to a synchronous fallback.",
        entrypoint=read_with_fallback,
        args=("primary.invalid", "replica"),
        tags=("async", "try"),
    ),
]


def run_all(verbose: bool = True) -> dict[str, CatchResult[Any]]:
    """Execute each scenario and optionally print formatted output."""

    results: dict[str, CatchResult[Any]] = {}
    for scenario in SCENARIOS:
        result = scenario.execute()
        results[scenario.name] = result
        if verbose:
            print(scenario.describe(result))
    return results


if __name__ == "__main__":
    run_all()

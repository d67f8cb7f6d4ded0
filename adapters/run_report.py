"""Adapter: RunReport implements TallyProducer.

Reads reports shaped as a list of runs, each with a flat list of tests
carrying a ``state`` field (the Cypress module API results format).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from adapters.json_report import JsonReport, duration_of

if TYPE_CHECKING:
    from collections.abc import Iterator


def _test_duration(test: Any) -> float:
    if "duration" in test:
        return duration_of(test["duration"])
    attempts = test.get("attempts") or []
    if attempts:
        return duration_of(attempts[-1].get("wallClockDuration"))
    return 0.0


class RunReport(JsonReport):
    """Flat run / tests report shape."""

    shape = "run"

    def _outcomes(self, data: Any) -> Iterator[tuple[Any, float]]:
        for run in data["runs"]:
            for test in run["tests"]:
                yield test["state"], _test_duration(test)

"""Adapter: AssertionReport implements TallyProducer.

Reads reports shaped as a list of suites, each holding a flat list of
assertions (the Jest/Vitest JSON reporter format)::

    {"testResults": [{"assertionResults": [{"status": "passed", "duration": 4}]}]}
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from adapters.json_report import JsonReport, duration_of

if TYPE_CHECKING:
    from collections.abc import Iterator


class AssertionReport(JsonReport):
    """Nested suite / assertion report shape."""

    shape = "assertion"

    def _outcomes(self, data: Any) -> Iterator[tuple[Any, float]]:
        for suite in data["testResults"]:
            for assertion in suite["assertionResults"]:
                yield assertion["status"], duration_of(assertion.get("duration"))

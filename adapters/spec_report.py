"""Adapter: SpecReport implements TallyProducer.

Reads reports shaped as suites containing specs, specs containing tests,
and tests carrying a list of result attempts (the Playwright JSON reporter
format). Only the first attempt decides a test's status, so a test that
failed and then passed on retry counts as failed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from adapters.json_report import JsonReport, duration_of

if TYPE_CHECKING:
    from collections.abc import Iterator


class SpecReport(JsonReport):
    """Nested suite / spec / test report shape."""

    shape = "spec"

    def _outcomes(self, data: Any) -> Iterator[tuple[Any, float]]:
        for suite in data["suites"]:
            yield from self._suite_outcomes(suite)

    def _suite_outcomes(self, suite: Any) -> Iterator[tuple[Any, float]]:
        for spec in suite["specs"]:
            for test in spec["tests"]:
                first = test["results"][0]
                yield first["status"], duration_of(first.get("duration"))
        # describe() blocks show up as child suites
        for child in suite.get("suites") or ():
            yield from self._suite_outcomes(child)

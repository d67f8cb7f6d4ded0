"""Summary renderer — project AggregateStats into console and documents.

Every suite in the stats appears exactly once in each output, and the
grand totals shown are the AggregateStats fields unchanged.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from domain.models import RateBand, RateBands
from kernel.console import console

if TYPE_CHECKING:
    from domain.models import AggregateStats

_BAND_MARKERS = {
    RateBand.GOOD: "✅",
    RateBand.WARNING: "⚠️",
    RateBand.BAD: "❌",
}


def rate_band(rate: float, bands: RateBands | None = None) -> RateBand:
    """Place a pass rate into the good / warning / bad band."""
    bands = bands or RateBands()
    if rate >= bands.good:
        return RateBand.GOOD
    if rate >= bands.warning:
        return RateBand.WARNING
    return RateBand.BAD


def format_rate(rate: float) -> str:
    """Render a rate with exactly two decimals, e.g. ``80.00``."""
    return f"{rate:.2f}"


def render_markdown(
    stats: AggregateStats,
    generated_at: str,
    bands: RateBands | None = None,
) -> str:
    """Render the summary as a markdown document.

    Args:
        stats: Aggregated statistics.
        generated_at: ISO-8601 timestamp written at the bottom.
        bands: Pass-rate bands for the status column.

    Returns:
        The markdown text, newline-terminated.
    """
    lines = [
        "# Test Execution Summary",
        "",
        "## Overview",
        "",
        f"- **Total Tests**: {stats.total_tests}",
        f"- **Passed**: {stats.total_passed}",
        f"- **Failed**: {stats.total_failed}",
        f"- **Skipped**: {stats.total_skipped}",
        f"- **Pass Rate**: {format_rate(stats.pass_rate)}%",
        f"- **Fail Rate**: {format_rate(stats.fail_rate)}%",
        f"- **Duration**: {stats.total_duration_ms / 1000:.1f}s",
        "",
        "## Test Suite Results",
        "",
        "| Suite | Passed | Failed | Skipped | Total | Pass Rate | Status |",
        "|-------|--------|--------|---------|-------|-----------|--------|",
    ]
    for name, suite in stats.suites.items():
        band = rate_band(suite.pass_rate, bands)
        lines.append(
            f"| {name} | {suite.passed} | {suite.failed} | {suite.skipped} | {suite.total} "
            f"| {format_rate(suite.pass_rate)}% | {_BAND_MARKERS[band]} {band.value} |"
        )
    lines += ["", "---", "", f"Generated at: {generated_at}", ""]
    return "\n".join(lines)


def render_json(stats: AggregateStats, generated_at: str) -> str:
    """Render the summary as a JSON document."""
    payload = {"generatedAt": generated_at, **stats.as_dict()}
    return json.dumps(payload, indent=2, ensure_ascii=False) + "\n"


def render_console(stats: AggregateStats, bands: RateBands | None = None) -> None:
    """Print the summary transcript through the configured console backend."""
    console.summary_header("Test Execution Summary")
    console.kv(
        {
            "Total Tests": str(stats.total_tests),
            "Passed": str(stats.total_passed),
            "Failed": str(stats.total_failed),
            "Skipped": str(stats.total_skipped),
            "Pass Rate": f"{format_rate(stats.pass_rate)}%",
        },
        title="Overall Statistics",
    )
    console.info("Suite Breakdown:")
    for name, suite in stats.suites.items():
        console.suite_result(
            name.capitalize(),
            suite.passed,
            suite.total,
            f"{format_rate(suite.pass_rate)}%",
            rate_band(suite.pass_rate, bands).value,
        )

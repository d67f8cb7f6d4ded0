"""Result aggregator — fold per-suite tallies into overall statistics.

Pure and deterministic: the same tallies always give an equal
AggregateStats. No timestamps are added here.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from domain.models import AggregateStats, SuiteStats, SuiteTally

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger("perfgate.aggregator")


def percentage(part: int, whole: int) -> float:
    """Return ``part / whole * 100`` rounded to 2 places, ``0.0`` when *whole* is 0."""
    if whole <= 0:
        return 0.0
    return round(part / whole * 100, 2)


def merge_tallies(first: SuiteTally, second: SuiteTally) -> SuiteTally:
    """Sum two tallies counted under the same category."""
    return SuiteTally(
        passed=first.passed + second.passed,
        failed=first.failed + second.failed,
        skipped=first.skipped + second.skipped,
        duration_ms=first.duration_ms + second.duration_ms,
    )


def aggregate(tallies: Mapping[str, SuiteTally]) -> AggregateStats:
    """Combine suite tallies into AggregateStats.

    Args:
        tallies: Suite name -> tally. Iteration order is kept in the result.

    Returns:
        AggregateStats with grand totals, global rates, and per-suite rates.
    """
    total_passed = 0
    total_failed = 0
    total_skipped = 0
    total_duration = 0.0
    suites: dict[str, SuiteStats] = {}

    for name, tally in tallies.items():
        total_passed += tally.passed
        total_failed += tally.failed
        total_skipped += tally.skipped
        total_duration += tally.duration_ms
        suites[name] = SuiteStats(tally=tally, pass_rate=percentage(tally.passed, tally.total))

    total_tests = total_passed + total_failed + total_skipped
    stats = AggregateStats(
        total_passed=total_passed,
        total_failed=total_failed,
        total_skipped=total_skipped,
        total_tests=total_tests,
        pass_rate=percentage(total_passed, total_tests),
        fail_rate=percentage(total_failed, total_tests),
        total_duration_ms=total_duration,
        suites=suites,
    )
    logger.info(
        "Aggregated %d suite(s): %d tests, %d failed, pass rate %.2f%%",
        len(suites),
        total_tests,
        total_failed,
        stats.pass_rate,
    )
    return stats

"""Threshold evaluator — classify observed values against benchmarks.

``classify`` is the production rule and checks the warning threshold
before the critical one. With the shipped data (warning <= critical) any
value past the critical threshold is therefore reported as a warning,
never a fail. ``classify_critical_first`` is the corrected ordering; both
satisfy ``ThresholdPolicy`` so callers choose without other changes.

Pure functions, no I/O. Classification never raises.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from domain.models import (
    BenchmarkEvaluation,
    ClassificationResult,
    EvaluationReport,
    ThresholdStatus,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from domain.models import Benchmark
    from domain.ports import ThresholdPolicy
    from modules.catalog.core import BenchmarkCatalog

logger = logging.getLogger("perfgate.evaluator")

_SEVERITY = {
    ThresholdStatus.PASS: 0,
    ThresholdStatus.WARNING: 1,
    ThresholdStatus.FAIL: 2,
}


def classify(benchmark: Benchmark, actual: float) -> ClassificationResult:
    """Classify *actual* against *benchmark*, warning threshold first.

    Args:
        benchmark: The benchmark definition.
        actual: Observed value in the benchmark's unit.

    Returns:
        A ClassificationResult. ``diff`` is ``actual - target``.
    """
    diff = actual - benchmark.target

    if diff <= 0:
        return ClassificationResult(meets_target=True, status=ThresholdStatus.PASS, diff=diff)

    if benchmark.warning_threshold is not None and actual >= benchmark.warning_threshold:
        return ClassificationResult(meets_target=False, status=ThresholdStatus.WARNING, diff=diff)

    if benchmark.critical_threshold is not None and actual >= benchmark.critical_threshold:
        return ClassificationResult(meets_target=False, status=ThresholdStatus.FAIL, diff=diff)

    return ClassificationResult(meets_target=False, status=ThresholdStatus.WARNING, diff=diff)


def classify_critical_first(benchmark: Benchmark, actual: float) -> ClassificationResult:
    """Classify *actual* against *benchmark*, critical threshold first."""
    diff = actual - benchmark.target

    if diff <= 0:
        return ClassificationResult(meets_target=True, status=ThresholdStatus.PASS, diff=diff)

    if benchmark.critical_threshold is not None and actual >= benchmark.critical_threshold:
        return ClassificationResult(meets_target=False, status=ThresholdStatus.FAIL, diff=diff)

    return ClassificationResult(meets_target=False, status=ThresholdStatus.WARNING, diff=diff)


def evaluate(
    catalog: BenchmarkCatalog,
    measurements: Mapping[str, float],
    policy: ThresholdPolicy = classify,
) -> EvaluationReport:
    """Classify a batch of measurements keyed by benchmark id.

    Ids with no matching benchmark are collected in ``unknown_ids``.

    Args:
        catalog: Catalog to resolve benchmark ids against.
        measurements: Benchmark id -> observed value.
        policy: Classification rule, ``classify`` by default.

    Returns:
        An EvaluationReport in measurement order.
    """
    evaluations: list[BenchmarkEvaluation] = []
    unknown: list[str] = []

    for benchmark_id, actual in measurements.items():
        benchmark = catalog.get_by_id(benchmark_id)
        if benchmark is None:
            logger.warning("Unknown benchmark id: %s", benchmark_id)
            unknown.append(benchmark_id)
            continue
        result = policy(benchmark, float(actual))
        logger.debug(
            "  %s: actual=%s target=%s -> %s",
            benchmark_id,
            actual,
            benchmark.target,
            result.status.value,
        )
        evaluations.append(BenchmarkEvaluation(benchmark=benchmark, actual=float(actual), result=result))

    return EvaluationReport(evaluations=tuple(evaluations), unknown_ids=tuple(unknown))


def worst_status(report: EvaluationReport) -> ThresholdStatus:
    """Return the most severe status in *report* (``PASS`` when empty)."""
    worst = ThresholdStatus.PASS
    for ev in report.evaluations:
        if _SEVERITY[ev.result.status] > _SEVERITY[worst]:
            worst = ev.result.status
    return worst

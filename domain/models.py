"""Core data types for perfgate.

All types are frozen dataclasses with complete type annotations.
This module has ZERO imports from outside the Python standard library.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping


class BenchmarkCategory(Enum):
    """What a benchmark measures."""

    RESPONSE_TIME = "response_time"
    THROUGHPUT = "throughput"
    MEMORY = "memory"
    CPU = "cpu"
    NETWORK = "network"


class MeasurementMethod(Enum):
    """How raw samples are reduced to the observed value."""

    P50 = "p50"
    P95 = "p95"
    P99 = "p99"
    AVG = "avg"
    MIN = "min"
    MAX = "max"


class ThresholdStatus(Enum):
    """Three-tier classification of an observed value."""

    PASS = "pass"
    WARNING = "warning"
    FAIL = "fail"


class SuiteCategory(Enum):
    """Logical test category a report source is counted under."""

    UNIT = "unit"
    INTEGRATION = "integration"
    E2E = "e2e"
    VISUAL = "visual"
    ACCESSIBILITY = "accessibility"
    PERFORMANCE = "performance"


class RateBand(Enum):
    """Presentation band for a pass rate."""

    GOOD = "good"
    WARNING = "warning"
    BAD = "bad"


# ---------------------------------------------------------------------------
# Benchmark catalog types
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Benchmark:
    """A named performance target with optional thresholds."""

    id: str
    name: str
    description: str
    category: BenchmarkCategory
    target: float
    unit: str
    measurement_method: MeasurementMethod
    threshold: float | None = None
    warning_threshold: float | None = None
    critical_threshold: float | None = None


@dataclass(frozen=True)
class BenchmarkSuite:
    """Named, ordered collection of benchmarks."""

    id: str
    name: str
    description: str
    benchmarks: tuple[Benchmark, ...]


@dataclass(frozen=True)
class PerformanceTarget:
    """The suites an agent is evaluated against."""

    agent: str
    suites: tuple[BenchmarkSuite, ...]


@dataclass(frozen=True)
class ClassificationResult:
    """Outcome of classifying one observed value against one benchmark."""

    meets_target: bool
    status: ThresholdStatus
    diff: float


@dataclass(frozen=True)
class BenchmarkEvaluation:
    """A benchmark, the value observed for it, and its classification."""

    benchmark: Benchmark
    actual: float
    result: ClassificationResult


@dataclass(frozen=True)
class EvaluationReport:
    """Classifications for a batch of measurements."""

    evaluations: tuple[BenchmarkEvaluation, ...]
    unknown_ids: tuple[str, ...] = ()


# ---------------------------------------------------------------------------
# Test result aggregation types
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SuiteTally:
    """Passed/failed/skipped counters for one test category.

    ``total`` is derived so it can never disagree with the counters.
    """

    passed: int = 0
    failed: int = 0
    skipped: int = 0
    duration_ms: float = 0.0

    @property
    def total(self) -> int:
        return self.passed + self.failed + self.skipped


@dataclass(frozen=True)
class SuiteStats:
    """A suite tally augmented with its pass rate."""

    tally: SuiteTally
    pass_rate: float

    @property
    def passed(self) -> int:
        return self.tally.passed

    @property
    def failed(self) -> int:
        return self.tally.failed

    @property
    def skipped(self) -> int:
        return self.tally.skipped

    @property
    def total(self) -> int:
        return self.tally.total


def _frozen_suites(suites: Mapping[str, SuiteStats]) -> Mapping[str, SuiteStats]:
    return MappingProxyType(dict(suites))


@dataclass(frozen=True)
class AggregateStats:
    """Overall statistics folded from every suite tally."""

    total_passed: int
    total_failed: int
    total_skipped: int
    total_tests: int
    pass_rate: float
    fail_rate: float
    total_duration_ms: float = 0.0
    suites: Mapping[str, SuiteStats] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        object.__setattr__(self, "suites", _frozen_suites(self.suites))

    def as_dict(self) -> dict[str, Any]:
        """Return a JSON-ready dict with a stable key order."""
        return {
            "totalPassed": self.total_passed,
            "totalFailed": self.total_failed,
            "totalSkipped": self.total_skipped,
            "totalTests": self.total_tests,
            "passRate": self.pass_rate,
            "failRate": self.fail_rate,
            "totalDurationMs": self.total_duration_ms,
            "suites": {
                name: {
                    "passed": s.passed,
                    "failed": s.failed,
                    "skipped": s.skipped,
                    "total": s.total,
                    "durationMs": s.tally.duration_ms,
                    "passRate": s.pass_rate,
                }
                for name, s in self.suites.items()
            },
        }


@dataclass(frozen=True)
class RateBands:
    """Lower bounds (inclusive, percent) of the good and warning bands."""

    good: float = 90.0
    warning: float = 70.0


@dataclass(frozen=True)
class ReportSource:
    """Where one report file lives and how it is counted."""

    category: SuiteCategory
    shape: str
    path: str

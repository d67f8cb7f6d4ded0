"""
wiring.py — Maps each pipeline step to its implementation.

Report shapes are bound to adapter classes here, and the pure modules
(aggregator, evaluator, catalog) are exposed under the step names the
kernel calls. Supporting a new test runner means registering one adapter
in ``REPORT_ADAPTERS``; nothing downstream changes.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from adapters.assertion_report import AssertionReport
from adapters.local_fs import LocalFileSystem
from adapters.run_report import RunReport
from adapters.spec_report import SpecReport
from domain.models import SuiteCategory, SuiteTally
from kernel.config import SHAPE_ASSERTION, SHAPE_RUN, SHAPE_SPEC
from modules.aggregator.core import aggregate, merge_tallies
from modules.catalog.core import CATALOG
from modules.evaluator.core import classify, classify_critical_first, evaluate

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from adapters.json_report import JsonReport
    from domain.models import AggregateStats, EvaluationReport
    from domain.ports import FileSystemPort, TallyProducer
    from kernel.config import Settings

logger = logging.getLogger("perfgate.wiring")

REPORT_ADAPTERS: dict[str, type[JsonReport]] = {
    SHAPE_ASSERTION: AssertionReport,
    SHAPE_SPEC: SpecReport,
    SHAPE_RUN: RunReport,
}


def file_system(settings: Settings, fs: FileSystemPort | None = None) -> FileSystemPort:
    """Return *fs*, or the local disk rooted at the project directory."""
    return fs if fs is not None else LocalFileSystem(str(settings.root))


def build_producers(settings: Settings, fs: FileSystemPort | None = None) -> list[TallyProducer]:
    """Instantiate one adapter per configured report source."""
    fs = file_system(settings, fs)
    return [
        REPORT_ADAPTERS[src.shape](fs, src.path, src.category)
        for src in settings.sources
    ]


def collect_tallies(producers: Iterable[TallyProducer]) -> dict[str, SuiteTally]:
    """Read every producer and return a tally for every suite category.

    Categories with no producer get an all-zero tally; two producers for
    the same category are summed. A malformed report propagates its
    ReportMalformedError and nothing after it is read.
    """
    tallies: dict[str, SuiteTally] = {c.value: SuiteTally() for c in SuiteCategory}
    for producer in producers:
        name = producer.category.value
        tallies[name] = merge_tallies(tallies[name], producer.read_tally())
    return tallies


def aggregate_results(tallies: Mapping[str, SuiteTally]) -> AggregateStats:
    """Fold collected tallies into AggregateStats."""
    return aggregate(tallies)


def check_measurements(
    measurements: Mapping[str, float],
    *,
    critical_first: bool = False,
) -> EvaluationReport:
    """Classify measurements against the shipped catalog."""
    policy = classify_critical_first if critical_first else classify
    logger.debug("Threshold policy: %s", policy.__name__)
    return evaluate(CATALOG, measurements, policy)

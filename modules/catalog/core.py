"""Benchmark catalog — immutable registry of benchmark definitions.

Built once from the literal table in ``modules/catalog/data.py`` and
exposed through read-only lookups. Lookups never raise: misses return
``None`` or an empty tuple.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from domain.errors import CatalogError
from domain.models import (
    Benchmark,
    BenchmarkCategory,
    BenchmarkSuite,
    MeasurementMethod,
    PerformanceTarget,
)
from modules.catalog import data

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger("perfgate.catalog")

_THRESHOLD_FIELDS = ("threshold", "warning_threshold", "critical_threshold")


def _optional_float(value: Any) -> float | None:
    return None if value is None else float(value)


def _benchmark_from_row(row: dict[str, Any]) -> Benchmark:
    """Build a Benchmark from one row of the data table."""
    return Benchmark(
        id=row["id"],
        name=row["name"],
        description=row.get("description", ""),
        category=BenchmarkCategory(row["category"]),
        target=float(row["target"]),
        unit=row["unit"],
        measurement_method=MeasurementMethod(row["measurement_method"]),
        threshold=_optional_float(row.get("threshold")),
        warning_threshold=_optional_float(row.get("warning_threshold")),
        critical_threshold=_optional_float(row.get("critical_threshold")),
    )


class BenchmarkCatalog:
    """Read-only registry of benchmark suites and per-agent targets.

    Args:
        suites: Collection key -> suite, in presentation order.
        agents: Agent id -> performance target.

    Raises:
        CatalogError: If a benchmark id repeats across collections or a
            threshold is negative.
    """

    def __init__(
        self,
        suites: Mapping[str, BenchmarkSuite],
        agents: Mapping[str, PerformanceTarget],
    ) -> None:
        self._suites = MappingProxyType(dict(suites))
        self._agents = MappingProxyType(dict(agents))
        self._all = tuple(b for s in self._suites.values() for b in s.benchmarks)
        self._by_id = MappingProxyType(self._index(self._all))

    @staticmethod
    def _index(benchmarks: tuple[Benchmark, ...]) -> dict[str, Benchmark]:
        by_id: dict[str, Benchmark] = {}
        for b in benchmarks:
            if b.id in by_id:
                msg = f"Duplicate benchmark id: {b.id}"
                raise CatalogError(msg)
            for name in _THRESHOLD_FIELDS:
                value = getattr(b, name)
                if value is not None and value < 0:
                    msg = f"Benchmark {b.id} has negative {name}: {value}"
                    raise CatalogError(msg)
            by_id[b.id] = b
        return by_id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BenchmarkCatalog):
            return NotImplemented
        return self._suites == other._suites and self._agents == other._agents

    def __len__(self) -> int:
        return len(self._all)

    def suites(self) -> Mapping[str, BenchmarkSuite]:
        """Return collection key -> suite."""
        return self._suites

    def agents(self) -> Mapping[str, PerformanceTarget]:
        """Return agent id -> performance target."""
        return self._agents

    def get_all(self) -> tuple[Benchmark, ...]:
        """Return every benchmark, collection order then benchmark order."""
        return self._all

    def get_by_category(self, category: BenchmarkCategory | str) -> tuple[Benchmark, ...]:
        """Return benchmarks in *category*; unknown categories give ``()``."""
        value = category.value if isinstance(category, BenchmarkCategory) else category
        return tuple(b for b in self._all if b.category.value == value)

    def get_by_agent(self, agent_id: str) -> tuple[Benchmark, ...]:
        """Return the benchmarks an agent is evaluated against.

        An unknown agent is not an error; it simply has no benchmarks.
        """
        target = self._agents.get(agent_id)
        if target is None:
            logger.debug("No performance target for agent %r", agent_id)
            return ()
        return tuple(b for s in target.suites for b in s.benchmarks)

    def get_by_id(self, benchmark_id: str) -> Benchmark | None:
        """Return the benchmark with *benchmark_id*, or ``None``."""
        return self._by_id.get(benchmark_id)


def load_catalog() -> BenchmarkCatalog:
    """Build the catalog from the shipped data table.

    Calling it again produces an equal catalog.
    """
    suites: dict[str, BenchmarkSuite] = {}
    for key, (suite_id, name, description, rows) in data.COLLECTIONS.items():
        suites[key] = BenchmarkSuite(
            id=suite_id,
            name=name,
            description=description,
            benchmarks=tuple(_benchmark_from_row(r) for r in rows),
        )

    agents: dict[str, PerformanceTarget] = {}
    for agent_id, (display, keys) in data.AGENT_TARGETS.items():
        agents[agent_id] = PerformanceTarget(
            agent=display,
            suites=tuple(suites[k] for k in keys),
        )

    catalog = BenchmarkCatalog(suites, agents)
    logger.debug(
        "Loaded benchmark catalog v%s: %d benchmarks in %d suites",
        data.CATALOG_VERSION,
        len(catalog),
        len(suites),
    )
    return catalog


CATALOG = load_catalog()

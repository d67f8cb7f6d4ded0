"""Shared pytest fixtures and test factories for perfgate.

Provides:
- Fake port implementations (FileSystem, TallyProducer)
- Factory functions for domain models
- Pytest fixtures wrapping the most commonly used factories
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from domain.models import (
    Benchmark,
    BenchmarkCategory,
    MeasurementMethod,
    SuiteCategory,
    SuiteTally,
)
from kernel.console import configure

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable


# ── Fake Port Implementations ─────────────────────────────────────────────


class InMemoryFileSystem:
    """Stateful in-memory FileSystemPort.

    Tracks file contents and supports read/write/exists.
    Useful when tests need to verify file system side effects.
    """

    def __init__(self, files: dict[str, str] | None = None) -> None:
        self._files: dict[str, str] = dict(files or {})

    def read_file(self, path: str) -> str:
        """Read file content from memory."""
        if path not in self._files:
            msg = f"File not found: {path}"
            raise FileNotFoundError(msg)
        return self._files[path]

    def write_file(self, path: str, content: str) -> None:
        """Write file content to memory."""
        self._files[path] = content

    def file_exists(self, path: str) -> bool:
        """Check if a file exists in memory."""
        return path in self._files


class FakeProducer:
    """Fake TallyProducer returning a configured tally or raising."""

    def __init__(
        self,
        category: SuiteCategory,
        tally: SuiteTally | None = None,
        *,
        raise_exc: Exception | None = None,
        source: str = "fake.json",
    ) -> None:
        self.category = category
        self.source = source
        self._tally = tally or SuiteTally()
        self._raise_exc = raise_exc
        self.calls = 0

    def read_tally(self) -> SuiteTally:
        """Return the configured tally or raise."""
        self.calls += 1
        if self._raise_exc is not None:
            raise self._raise_exc
        return self._tally


# ── Domain Model Factories ───────────────────────────────────────────────


def make_benchmark(
    id: str = "agent_response_time",  # noqa: A002
    target: float = 500,
    warning_threshold: float | None = 600,
    critical_threshold: float | None = 1000,
    category: BenchmarkCategory = BenchmarkCategory.RESPONSE_TIME,
    unit: str = "ms",
    method: MeasurementMethod = MeasurementMethod.P95,
) -> Benchmark:
    """Create a Benchmark with sensible defaults."""
    return Benchmark(
        id=id,
        name=id.replace("_", " ").title(),
        description="test benchmark",
        category=category,
        target=target,
        unit=unit,
        measurement_method=method,
        warning_threshold=warning_threshold,
        critical_threshold=critical_threshold,
    )


def make_tally(passed: int = 0, failed: int = 0, skipped: int = 0, duration_ms: float = 0.0) -> SuiteTally:
    """Create a SuiteTally."""
    return SuiteTally(passed=passed, failed=failed, skipped=skipped, duration_ms=duration_ms)


# ── Pytest Fixtures ──────────────────────────────────────────────────────


@pytest.fixture(autouse=True)
def _plain_console() -> Iterable[None]:
    """Keep every test on the plain console backend."""
    configure(backend="plain")
    yield
    configure(backend="plain")


@pytest.fixture
def in_memory_fs() -> InMemoryFileSystem:
    """Provide a stateful in-memory FileSystemPort."""
    return InMemoryFileSystem()


@pytest.fixture
def sample_benchmark() -> Benchmark:
    """Provide the target 500 / warning 600 / critical 1000 benchmark."""
    return make_benchmark()


@pytest.fixture
def benchmark_factory() -> Callable[..., Benchmark]:
    """Provide the make_benchmark factory function."""
    return make_benchmark


@pytest.fixture
def tally_factory() -> Callable[..., SuiteTally]:
    """Provide the make_tally factory function."""
    return make_tally


@pytest.fixture
def producer_factory() -> Callable[..., FakeProducer]:
    """Provide the FakeProducer constructor."""
    return FakeProducer

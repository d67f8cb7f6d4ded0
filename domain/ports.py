"""Port interfaces for perfgate.

All ports are defined as typing.Protocol — structural subtyping means any class
with matching method signatures satisfies the Protocol without inheritance.

This module has ZERO external imports — only stdlib and typing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from domain.models import Benchmark, ClassificationResult, SuiteCategory, SuiteTally


class FileSystemPort(Protocol):
    """Abstraction over file system operations."""

    def read_file(self, path: str) -> str:
        """Read and return the contents of a file."""
        ...

    def write_file(self, path: str, content: str) -> None:
        """Write content to a file, creating parent directories as needed."""
        ...

    def file_exists(self, path: str) -> bool:
        """Return True if the file exists."""
        ...


class TallyProducer(Protocol):
    """Turns one external test report into a canonical tally.

    Adding a new test-runner source means adding one implementation of
    this port; the aggregator never changes.
    """

    source: str
    category: SuiteCategory

    def read_tally(self) -> SuiteTally:
        """Parse the report. An absent report gives an all-zero tally."""
        ...


class ThresholdPolicy(Protocol):
    """Classifies an observed value against a benchmark's thresholds."""

    def __call__(self, benchmark: Benchmark, actual: float) -> ClassificationResult:
        ...

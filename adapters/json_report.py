"""Shared reading logic for JSON test-report adapters.

Each concrete adapter implements ``_outcomes`` for one report shape and
inherits the missing-file and malformed-file handling from ``JsonReport``.
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from domain.errors import ReportMalformedError
from domain.models import SuiteTally

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from domain.models import SuiteCategory
    from domain.ports import FileSystemPort

logger = logging.getLogger("perfgate.adapters")

PASSED = "passed"
FAILED = "failed"

# Errors raised while walking a document that does not have the expected shape.
_SHAPE_ERRORS = (KeyError, IndexError, TypeError, AttributeError)


def duration_of(value: Any) -> float:
    """Return *value* as a duration, or 0 when it is missing or not numeric."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    return float(value)


def tally_outcomes(outcomes: Iterable[tuple[Any, float]]) -> SuiteTally:
    """Count ``(status, duration)`` pairs into a SuiteTally.

    ``passed`` and ``failed`` are counted as such; any other status is
    counted as skipped.
    """
    passed = failed = skipped = 0
    duration = 0.0
    for status, elapsed in outcomes:
        if status == PASSED:
            passed += 1
        elif status == FAILED:
            failed += 1
        else:
            skipped += 1
        duration += elapsed
    return SuiteTally(passed=passed, failed=failed, skipped=skipped, duration_ms=duration)


class JsonReport(ABC):
    """Base TallyProducer for a JSON report file.

    Args:
        fs: File system the report is read from.
        source: Path of the report file.
        category: Suite category the report is counted under.
    """

    shape = ""

    def __init__(self, fs: FileSystemPort, source: str, category: SuiteCategory) -> None:
        self._fs = fs
        self.source = source
        self.category = category

    def read_tally(self) -> SuiteTally:
        """Parse the report into a tally.

        Returns:
            The tally, all zeros when the file does not exist.

        Raises:
            ReportMalformedError: If the file exists but cannot be read as
                UTF-8 text, is not valid JSON, or does not have this
                adapter's shape.
        """
        if not self._fs.file_exists(self.source):
            logger.debug("No %s report at %s", self.category.value, self.source)
            return SuiteTally()

        try:
            text = self._fs.read_file(self.source)
        except (OSError, UnicodeDecodeError) as exc:
            raise ReportMalformedError(self.source, self.category.value, f"unreadable file: {exc}") from exc

        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ReportMalformedError(self.source, self.category.value, f"invalid JSON: {exc}") from exc

        try:
            tally = tally_outcomes(self._outcomes(data))
        except _SHAPE_ERRORS as exc:
            reason = f"unexpected {self.shape} report structure ({type(exc).__name__}: {exc})"
            raise ReportMalformedError(self.source, self.category.value, reason) from exc

        logger.info(
            "Read %s report %s: %d passed, %d failed, %d skipped",
            self.category.value,
            self.source,
            tally.passed,
            tally.failed,
            tally.skipped,
        )
        return tally

    @abstractmethod
    def _outcomes(self, data: Any) -> Iterator[tuple[Any, float]]:
        """Yield ``(status, duration_ms)`` for every test in *data*."""

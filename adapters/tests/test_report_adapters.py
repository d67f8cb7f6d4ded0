"""Tests for the JSON report adapters (assertion, spec and run shapes)."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import pytest

from adapters.assertion_report import AssertionReport
from adapters.json_report import JsonReport, duration_of, tally_outcomes
from adapters.local_fs import LocalFileSystem
from adapters.run_report import RunReport
from adapters.spec_report import SpecReport
from domain.errors import ReportMalformedError
from domain.models import SuiteCategory, SuiteTally

if TYPE_CHECKING:
    from pathlib import Path

    from conftest import InMemoryFileSystem


def _write(fs: InMemoryFileSystem, path: str, doc: Any) -> None:
    fs.write_file(path, json.dumps(doc))


def _assertion_doc(*statuses: str, duration: float = 1.0) -> dict[str, Any]:
    return {
        "testResults": [
            {"assertionResults": [{"status": s, "duration": duration} for s in statuses]},
        ],
    }


def _spec_test(*attempts: str) -> dict[str, Any]:
    return {"results": [{"status": a, "duration": 10} for a in attempts]}


def _run_doc(*states: str) -> dict[str, Any]:
    return {"runs": [{"tests": [{"state": s, "duration": 100} for s in states]}]}


# ---------------------------------------------------------------------------
# Assertion shape
# ---------------------------------------------------------------------------


def test_assertion_report_counts(in_memory_fs: InMemoryFileSystem) -> None:
    _write(in_memory_fs, "unit.json", _assertion_doc("passed", "passed", "failed", "pending", "todo"))
    tally = AssertionReport(in_memory_fs, "unit.json", SuiteCategory.UNIT).read_tally()
    assert tally == SuiteTally(passed=2, failed=1, skipped=2, duration_ms=5.0)


def test_assertion_report_spans_suites(in_memory_fs: InMemoryFileSystem) -> None:
    doc = {
        "testResults": [
            {"assertionResults": [{"status": "passed"}]},
            {"assertionResults": [{"status": "failed"}, {"status": "passed"}]},
            {"assertionResults": []},
        ],
    }
    _write(in_memory_fs, "unit.json", doc)
    tally = AssertionReport(in_memory_fs, "unit.json", SuiteCategory.UNIT).read_tally()
    assert (tally.passed, tally.failed, tally.skipped) == (2, 1, 0)
    assert tally.duration_ms == 0.0


def test_assertion_report_missing_key_is_malformed(in_memory_fs: InMemoryFileSystem) -> None:
    _write(in_memory_fs, "unit.json", {"testResults": [{"tests": []}]})
    with pytest.raises(ReportMalformedError, match="unexpected assertion report structure") as excinfo:
        AssertionReport(in_memory_fs, "unit.json", SuiteCategory.UNIT).read_tally()
    assert excinfo.value.source == "unit.json"
    assert excinfo.value.category == "unit"


# ---------------------------------------------------------------------------
# Spec shape
# ---------------------------------------------------------------------------


def test_spec_report_counts_first_attempt_only(in_memory_fs: InMemoryFileSystem) -> None:
    doc = {
        "suites": [
            {
                "specs": [
                    {"tests": [_spec_test("passed"), _spec_test("failed", "passed")]},
                    {"tests": [_spec_test("skipped")]},
                ],
            },
        ],
    }
    _write(in_memory_fs, "int.json", doc)
    tally = SpecReport(in_memory_fs, "int.json", SuiteCategory.INTEGRATION).read_tally()
    assert tally == SuiteTally(passed=1, failed=1, skipped=1, duration_ms=30.0)


def test_spec_report_walks_child_suites(in_memory_fs: InMemoryFileSystem) -> None:
    doc = {
        "suites": [
            {
                "specs": [{"tests": [_spec_test("passed")]}],
                "suites": [
                    {
                        "specs": [{"tests": [_spec_test("failed")]}],
                        "suites": [{"specs": [{"tests": [_spec_test("passed")]}]}],
                    },
                ],
            },
        ],
    }
    _write(in_memory_fs, "int.json", doc)
    tally = SpecReport(in_memory_fs, "int.json", SuiteCategory.INTEGRATION).read_tally()
    assert (tally.passed, tally.failed) == (2, 1)


def test_spec_report_test_without_results_is_malformed(in_memory_fs: InMemoryFileSystem) -> None:
    _write(in_memory_fs, "int.json", {"suites": [{"specs": [{"tests": [{"results": []}]}]}]})
    with pytest.raises(ReportMalformedError, match="IndexError"):
        SpecReport(in_memory_fs, "int.json", SuiteCategory.INTEGRATION).read_tally()


# ---------------------------------------------------------------------------
# Run shape
# ---------------------------------------------------------------------------


def test_run_report_counts(in_memory_fs: InMemoryFileSystem) -> None:
    _write(in_memory_fs, "e2e.json", _run_doc("passed", "failed", "pending", "passed"))
    tally = RunReport(in_memory_fs, "e2e.json", SuiteCategory.E2E).read_tally()
    assert tally == SuiteTally(passed=2, failed=1, skipped=1, duration_ms=400.0)


def test_run_report_duration_from_last_attempt(in_memory_fs: InMemoryFileSystem) -> None:
    doc = {
        "runs": [
            {
                "tests": [
                    {"state": "passed", "attempts": [{"wallClockDuration": 50}, {"wallClockDuration": 70}]},
                    {"state": "failed"},
                ],
            },
        ],
    }
    _write(in_memory_fs, "e2e.json", doc)
    tally = RunReport(in_memory_fs, "e2e.json", SuiteCategory.E2E).read_tally()
    assert tally.duration_ms == 70.0
    assert tally.total == 2


def test_run_report_multiple_runs(in_memory_fs: InMemoryFileSystem) -> None:
    doc = {"runs": [_run_doc("passed")["runs"][0], _run_doc("failed", "failed")["runs"][0]]}
    _write(in_memory_fs, "e2e.json", doc)
    tally = RunReport(in_memory_fs, "e2e.json", SuiteCategory.E2E).read_tally()
    assert (tally.passed, tally.failed) == (1, 2)


# ---------------------------------------------------------------------------
# Shared behaviour
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("adapter", [AssertionReport, SpecReport, RunReport])
def test_missing_file_is_zero_tally(in_memory_fs: InMemoryFileSystem, adapter: type) -> None:
    assert adapter(in_memory_fs, "absent.json", SuiteCategory.UNIT).read_tally() == SuiteTally()


@pytest.mark.parametrize("adapter", [AssertionReport, SpecReport, RunReport])
def test_invalid_json_is_malformed(in_memory_fs: InMemoryFileSystem, adapter: type) -> None:
    in_memory_fs.write_file("broken.json", "{not json")
    with pytest.raises(ReportMalformedError, match="invalid JSON") as excinfo:
        adapter(in_memory_fs, "broken.json", SuiteCategory.E2E).read_tally()
    assert "Malformed e2e report broken.json" in str(excinfo.value)


@pytest.mark.parametrize("adapter", [AssertionReport, SpecReport, RunReport])
def test_wrong_top_level_type_is_malformed(in_memory_fs: InMemoryFileSystem, adapter: type) -> None:
    _write(in_memory_fs, "list.json", [1, 2, 3])
    with pytest.raises(ReportMalformedError):
        adapter(in_memory_fs, "list.json", SuiteCategory.UNIT).read_tally()


def test_report_malformed_error_is_value_error() -> None:
    assert issubclass(ReportMalformedError, ValueError)


def test_adapter_exposes_source_and_category(in_memory_fs: InMemoryFileSystem) -> None:
    report = RunReport(in_memory_fs, "e2e.json", SuiteCategory.E2E)
    assert report.source == "e2e.json"
    assert report.category is SuiteCategory.E2E
    assert report.shape == "run"


@pytest.mark.parametrize(("value", "expected"), [(12, 12.0), (1.5, 1.5), (None, 0.0), ("3", 0.0), (True, 0.0)])
def test_duration_of(value: Any, expected: float) -> None:
    assert duration_of(value) == expected


def test_tally_outcomes_unknown_status_is_skipped() -> None:
    tally = tally_outcomes([("passed", 1.0), ("broken", 2.0), (None, 0.0)])
    assert tally == SuiteTally(passed=1, skipped=2, duration_ms=3.0)


# ---------------------------------------------------------------------------
# Unreadable files
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("adapter", [AssertionReport, SpecReport, RunReport])
def test_non_utf8_file_is_malformed(tmp_path: Path, adapter: type) -> None:
    (tmp_path / "binary.json").write_bytes(b'{"testResults": [\xff\xfe]}')
    with pytest.raises(ReportMalformedError, match="unreadable file") as excinfo:
        adapter(LocalFileSystem(str(tmp_path)), "binary.json", SuiteCategory.UNIT).read_tally()
    assert excinfo.value.source == "binary.json"
    assert excinfo.value.category == "unit"


class _LockedFileSystem:
    """Reports every file as present but refuses to read it."""

    def file_exists(self, path: str) -> bool:
        return True

    def read_file(self, path: str) -> str:
        msg = f"Permission denied: {path}"
        raise PermissionError(msg)

    def write_file(self, path: str, content: str) -> None:
        msg = f"Read-only: {path}"
        raise PermissionError(msg)


def test_os_error_on_read_is_malformed() -> None:
    report = RunReport(_LockedFileSystem(), "e2e.json", SuiteCategory.E2E)
    with pytest.raises(ReportMalformedError, match="Permission denied"):
        report.read_tally()


def test_adapter_without_outcomes_cannot_be_built(in_memory_fs: InMemoryFileSystem) -> None:
    class Incomplete(JsonReport):
        shape = "incomplete"

    with pytest.raises(TypeError):
        Incomplete(in_memory_fs, "x.json", SuiteCategory.UNIT)  # type: ignore[abstract]

"""Tests for kernel/config.py — settings resolution."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from domain.errors import ConfigError
from domain.models import RateBands, SuiteCategory
from kernel.config import config_file, load_settings, log_file

if TYPE_CHECKING:
    from pathlib import Path


def _write_config(root: Path, text: str) -> None:
    path = config_file(root)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------


def test_defaults_without_config(tmp_path: Path) -> None:
    settings = load_settings(tmp_path, env={})
    assert settings.results_dir == tmp_path / "test-results"
    assert settings.summary_path == tmp_path / "test-summary-report.md"
    assert settings.bands == RateBands()
    assert [(s.category, s.shape) for s in settings.sources] == [
        (SuiteCategory.UNIT, "assertion"),
        (SuiteCategory.INTEGRATION, "spec"),
        (SuiteCategory.E2E, "run"),
    ]
    assert settings.sources[0].path == str(tmp_path / "test-results" / "vitest-results.json")
    assert settings.sources[1].path == str(tmp_path / "test-results" / "results.json")
    assert settings.sources[2].path == str(tmp_path / "test-results" / "cypress-results.json")


def test_paths_live_under_dot_dir(tmp_path: Path) -> None:
    assert config_file(tmp_path) == tmp_path / ".perfgate" / "config.yaml"
    assert log_file(tmp_path) == tmp_path / ".perfgate" / "perfgate.log"


# ---------------------------------------------------------------------------
# Environment overrides
# ---------------------------------------------------------------------------


def test_results_path_env_moves_every_default_source(tmp_path: Path) -> None:
    results = tmp_path / "ci-output"
    settings = load_settings(tmp_path, env={"RESULTS_PATH": str(results)})
    assert settings.results_dir == results
    assert all(s.path.startswith(str(results)) for s in settings.sources)


def test_relative_results_path_is_under_root(tmp_path: Path) -> None:
    settings = load_settings(tmp_path, env={"RESULTS_PATH": "out"})
    assert settings.results_dir == tmp_path / "out"


def test_per_category_env_overrides_one_source(tmp_path: Path) -> None:
    settings = load_settings(tmp_path, env={"PERFGATE_E2E_REPORT": "cypress/out.json"})
    e2e = next(s for s in settings.sources if s.category is SuiteCategory.E2E)
    unit = next(s for s in settings.sources if s.category is SuiteCategory.UNIT)
    assert e2e.path == str(tmp_path / "cypress" / "out.json")
    assert unit.path == str(tmp_path / "test-results" / "vitest-results.json")


def test_env_wins_over_config_file(tmp_path: Path) -> None:
    _write_config(tmp_path, "results_dir: from-config\n")
    settings = load_settings(tmp_path, env={"RESULTS_PATH": "from-env"})
    assert settings.results_dir == tmp_path / "from-env"


# ---------------------------------------------------------------------------
# Config file
# ---------------------------------------------------------------------------


def test_config_file_values(tmp_path: Path) -> None:
    _write_config(
        tmp_path,
        "results_dir: reports\n"
        "summary_file: docs/summary.md\n"
        "bands:\n  good: 95\n  warning: 80\n"
        "sources:\n"
        "  - {category: unit, shape: assertion, file: jest.json}\n"
        "  - {category: visual, shape: spec, file: visual.json}\n",
    )
    settings = load_settings(tmp_path, env={})
    assert settings.results_dir == tmp_path / "reports"
    assert settings.summary_path == tmp_path / "docs" / "summary.md"
    assert settings.bands == RateBands(good=95.0, warning=80.0)
    assert [(s.category, s.shape, s.path) for s in settings.sources] == [
        (SuiteCategory.UNIT, "assertion", str(tmp_path / "reports" / "jest.json")),
        (SuiteCategory.VISUAL, "spec", str(tmp_path / "reports" / "visual.json")),
    ]


def test_empty_config_file_uses_defaults(tmp_path: Path) -> None:
    _write_config(tmp_path, "")
    assert load_settings(tmp_path, env={}).bands == RateBands()


@pytest.mark.parametrize(
    ("text", "match"),
    [
        ("- just\n- a list\n", "must contain a mapping"),
        ("results_dir: [unclosed\n", "Cannot parse"),
        ("sources: nope\n", "must be a list"),
        ("sources:\n  - {category: unit, file: a.json}\n", "Invalid source entry"),
        ("sources:\n  - {category: unit, shape: xml, file: a.xml}\n", "Unknown report shape"),
        ("sources:\n  - {category: smoke, shape: run, file: a.json}\n", "Unknown suite category"),
        ("bands: 90\n", "'bands' must be a mapping"),
        ("bands: {good: high}\n", "Invalid rate bands"),
        ("bands: {good: 60, warning: 80}\n", "must not exceed"),
    ],
)
def test_invalid_config_raises(tmp_path: Path, text: str, match: str) -> None:
    _write_config(tmp_path, text)
    with pytest.raises(ConfigError, match=match):
        load_settings(tmp_path, env={})

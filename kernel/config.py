"""
kernel/config.py — Project paths, defaults, and settings loading.

Defaults live as module constants. ``load_settings`` layers the optional
``.perfgate/config.yaml`` and then environment variables on top of them.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

from domain.errors import ConfigError
from domain.models import RateBands, ReportSource, SuiteCategory

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger("perfgate.config")

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------

PERFGATE_DIR = ".perfgate"
CONFIG_FILE = "config.yaml"
LOG_FILE = "perfgate.log"

DEFAULT_RESULTS_DIR = "test-results"
DEFAULT_SUMMARY_FILE = "test-summary-report.md"

# ---------------------------------------------------------------------------
# Report sources
# ---------------------------------------------------------------------------

# Shape names understood by wiring.build_producers.
SHAPE_ASSERTION = "assertion"
SHAPE_SPEC = "spec"
SHAPE_RUN = "run"
KNOWN_SHAPES = (SHAPE_ASSERTION, SHAPE_SPEC, SHAPE_RUN)

DEFAULT_SOURCES: tuple[tuple[SuiteCategory, str, str], ...] = (
    (SuiteCategory.UNIT, SHAPE_ASSERTION, "vitest-results.json"),
    (SuiteCategory.INTEGRATION, SHAPE_SPEC, "results.json"),
    (SuiteCategory.E2E, SHAPE_RUN, "cypress-results.json"),
)

# ---------------------------------------------------------------------------
# Environment variables
# ---------------------------------------------------------------------------

ENV_RESULTS_PATH = "RESULTS_PATH"
ENV_SOURCE_TEMPLATE = "PERFGATE_{category}_REPORT"


def perfgate_dir(project_root: Path) -> Path:
    """Return the .perfgate directory path for a project."""
    return project_root / PERFGATE_DIR


def config_file(project_root: Path) -> Path:
    """Return the config.yaml path."""
    return perfgate_dir(project_root) / CONFIG_FILE


def log_file(project_root: Path) -> Path:
    """Return the perfgate.log path."""
    return perfgate_dir(project_root) / LOG_FILE


@dataclass(frozen=True)
class Settings:
    """Resolved configuration for one run."""

    root: Path
    results_dir: Path
    summary_path: Path
    sources: tuple[ReportSource, ...]
    bands: RateBands = field(default_factory=RateBands)


def _load_yaml(path: Path) -> dict[str, Any]:
    if not path.is_file():
        return {}
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        msg = f"Cannot parse {path}: {exc}"
        raise ConfigError(msg) from exc
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        msg = f"{path} must contain a mapping, got {type(raw).__name__}"
        raise ConfigError(msg)
    return raw


def _category(value: Any) -> SuiteCategory:
    try:
        return SuiteCategory(value)
    except ValueError:
        valid = ", ".join(c.value for c in SuiteCategory)
        msg = f"Unknown suite category {value!r} (expected one of: {valid})"
        raise ConfigError(msg) from None


def _parse_sources(raw: Any) -> list[tuple[SuiteCategory, str, str]]:
    if not isinstance(raw, list):
        msg = "'sources' must be a list of {category, shape, file} mappings"
        raise ConfigError(msg)
    parsed: list[tuple[SuiteCategory, str, str]] = []
    for entry in raw:
        if not isinstance(entry, dict) or not {"category", "shape", "file"} <= entry.keys():
            msg = f"Invalid source entry: {entry!r}"
            raise ConfigError(msg)
        shape = str(entry["shape"])
        if shape not in KNOWN_SHAPES:
            msg = f"Unknown report shape {shape!r} (expected one of: {', '.join(KNOWN_SHAPES)})"
            raise ConfigError(msg)
        parsed.append((_category(entry["category"]), shape, str(entry["file"])))
    return parsed


def _parse_bands(raw: Any) -> RateBands:
    if not isinstance(raw, dict):
        msg = "'bands' must be a mapping with 'good' and 'warning' keys"
        raise ConfigError(msg)
    defaults = RateBands()
    try:
        good = float(raw.get("good", defaults.good))
        warning = float(raw.get("warning", defaults.warning))
    except (TypeError, ValueError) as exc:
        msg = f"Invalid rate bands: {raw!r}"
        raise ConfigError(msg) from exc
    if warning > good:
        msg = f"Warning band ({warning}) must not exceed good band ({good})"
        raise ConfigError(msg)
    return RateBands(good=good, warning=warning)


def load_settings(project_root: Path, env: Mapping[str, str] | None = None) -> Settings:
    """Resolve settings for *project_root*.

    Precedence, lowest first: module defaults, ``.perfgate/config.yaml``,
    environment variables.

    Args:
        project_root: Directory relative paths are resolved against.
        env: Environment mapping, ``os.environ`` when omitted.

    Returns:
        The resolved Settings.

    Raises:
        ConfigError: If the config file or a value in it is invalid.
    """
    env = os.environ if env is None else env
    data = _load_yaml(config_file(project_root))

    results_dir = Path(env.get(ENV_RESULTS_PATH) or data.get("results_dir", DEFAULT_RESULTS_DIR))
    if not results_dir.is_absolute():
        results_dir = project_root / results_dir

    summary_path = project_root / str(data.get("summary_file", DEFAULT_SUMMARY_FILE))
    bands = _parse_bands(data["bands"]) if "bands" in data else RateBands()
    raw_sources = _parse_sources(data["sources"]) if "sources" in data else list(DEFAULT_SOURCES)

    sources: list[ReportSource] = []
    for category, shape, filename in raw_sources:
        override = env.get(ENV_SOURCE_TEMPLATE.format(category=category.value.upper()))
        path = Path(override) if override else results_dir / filename
        if not path.is_absolute():
            path = project_root / path
        sources.append(ReportSource(category=category, shape=shape, path=str(path)))

    logger.debug("Results dir: %s, %d source(s)", results_dir, len(sources))
    return Settings(
        root=project_root,
        results_dir=results_dir,
        summary_path=summary_path,
        sources=tuple(sources),
        bands=bands,
    )

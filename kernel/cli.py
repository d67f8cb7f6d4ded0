#!/usr/bin/env python3
"""
perfgate CLI -- test-result summaries and benchmark threshold checks.

Usage:
  perfgate summary [--results-dir DIR] [--output PATH] [--json PATH]
  perfgate benchmarks list [--category C] [--agent A]
  perfgate benchmarks check MEASUREMENTS [--critical-first]

Exit codes for ``summary``: 0 when no test failed, 1 when any failed,
2 when a report or the configuration is malformed. ``benchmarks check``
exits 0, 1 or 2 for a worst status of pass, warning or fail, and 3 when
the measurements file cannot be used.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import replace
from pathlib import Path

import yaml

from domain.errors import ConfigError, ReportMalformedError
from domain.models import BenchmarkCategory, ThresholdStatus
from kernel.console import configure, console
from kernel.pipeline import EXIT_ERROR, EXIT_OK, EXIT_TESTS_FAILED, exit_code_for

logger = logging.getLogger("perfgate")

# ``benchmarks check`` input that cannot be read or parsed.
EXIT_BAD_MEASUREMENTS = 3

_CHECK_EXIT_CODES = {
    ThresholdStatus.PASS: EXIT_OK,
    ThresholdStatus.WARNING: EXIT_TESTS_FAILED,
    ThresholdStatus.FAIL: EXIT_ERROR,
}


def _fmt(value: float | None) -> str:
    if value is None:
        return "--"
    return f"{value:g}"


# ---------------------------------------------------------------------------
# CLI commands
# ---------------------------------------------------------------------------


def cmd_summary(args: argparse.Namespace) -> int:
    """Aggregate test reports and write the summary document."""
    from kernel.config import ENV_RESULTS_PATH, load_settings
    from kernel.pipeline import run_summary

    root = Path.cwd()
    env = dict(os.environ)
    if args.results_dir:
        env[ENV_RESULTS_PATH] = str(Path(args.results_dir).resolve())
    try:
        settings = load_settings(root, env)
    except ConfigError as exc:
        logger.error("Invalid configuration: %s", exc)
        console.error(f"Invalid configuration: {exc}")
        return EXIT_ERROR

    if args.output:
        settings = replace(settings, summary_path=Path(args.output).resolve())

    try:
        stats = run_summary(settings, json_path=Path(args.json).resolve() if args.json else None)
    except ReportMalformedError as exc:
        logger.error("Aborting summary: %s", exc)
        console.error(f"Error generating test summary: {exc}")
        console.info(f"Source: {exc.source}")
        return EXIT_ERROR

    code = exit_code_for(stats)
    if code == EXIT_OK:
        console.success("No failing tests.")
    else:
        console.error(f"{stats.total_failed} test(s) failed.")
    return code


def cmd_benchmarks_list(args: argparse.Namespace) -> int:
    """Show catalog entries, optionally filtered."""
    from modules.catalog.core import CATALOG

    if args.agent:
        benchmarks = CATALOG.get_by_agent(args.agent)
        if not benchmarks:
            console.warning(f"No benchmarks for agent '{args.agent}'")
            return EXIT_OK
    elif args.category:
        benchmarks = CATALOG.get_by_category(args.category)
    else:
        benchmarks = CATALOG.get_all()

    rows = [
        [
            b.id,
            b.category.value,
            f"{_fmt(b.target)} {b.unit}",
            _fmt(b.warning_threshold),
            _fmt(b.critical_threshold),
            b.measurement_method.value,
        ]
        for b in benchmarks
    ]
    console.table(["Id", "Category", "Target", "Warning", "Critical", "Method"], rows, title="Benchmarks")
    return EXIT_OK


def _load_measurements(path: Path) -> dict[str, float]:
    """Read a YAML or JSON mapping of benchmark id -> observed value."""
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        msg = f"Cannot read measurements from {path}: {exc}"
        raise ConfigError(msg) from exc
    if not isinstance(raw, dict):
        msg = f"{path} must contain a mapping of benchmark id to value"
        raise ConfigError(msg)
    measurements: dict[str, float] = {}
    for key, value in raw.items():
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            msg = f"Measurement for {key!r} is not a number: {value!r}"
            raise ConfigError(msg)
        measurements[str(key)] = float(value)
    return measurements


def cmd_benchmarks_check(args: argparse.Namespace) -> int:
    """Classify measurements against their benchmarks."""
    import wiring
    from modules.evaluator.core import worst_status

    try:
        measurements = _load_measurements(Path(args.measurements))
    except ConfigError as exc:
        logger.error("%s", exc)
        console.error(str(exc))
        return EXIT_BAD_MEASUREMENTS

    report = wiring.check_measurements(measurements, critical_first=args.critical_first)

    rows = [
        [
            ev.benchmark.id,
            f"{_fmt(ev.actual)} {ev.benchmark.unit}",
            f"{_fmt(ev.benchmark.target)} {ev.benchmark.unit}",
            f"{ev.result.diff:+g}",
            ev.result.status.value,
        ]
        for ev in report.evaluations
    ]
    console.table(["Benchmark", "Actual", "Target", "Diff", "Status"], rows, title="Benchmark Check")
    for unknown in report.unknown_ids:
        console.warning(f"Unknown benchmark id: {unknown}")

    worst = worst_status(report)
    if worst is ThresholdStatus.PASS:
        console.success("All benchmarks meet their targets.")
    elif worst is ThresholdStatus.WARNING:
        console.warning("Some benchmarks exceed their targets.")
    else:
        console.error("Some benchmarks crossed their critical threshold.")
    return _CHECK_EXIT_CODES[worst]


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------


def _setup_logging(project_dir: Path, level: int) -> None:
    """Configure file logging to .perfgate/perfgate.log."""
    from kernel.config import log_file

    path = log_file(project_dir)
    path.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=str(path),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        level=level,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="perfgate",
        description="perfgate -- test summaries and performance benchmark gates",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--quiet", action="store_true", help="Only log warnings and errors")
    parser.add_argument(
        "--console",
        choices=["auto", "rich", "plain"],
        default="auto",
        help="Terminal output backend (default: auto)",
    )
    sub = parser.add_subparsers(dest="command")

    # perfgate summary
    summary_p = sub.add_parser("summary", help="Aggregate test reports into a summary")
    summary_p.add_argument("--results-dir", default=None, help="Directory holding the report files")
    summary_p.add_argument("--output", default=None, help="Markdown summary path")
    summary_p.add_argument("--json", default=None, help="Also write a JSON summary to this path")

    # perfgate benchmarks
    bench_p = sub.add_parser("benchmarks", help="Query and check performance benchmarks")
    bench_sub = bench_p.add_subparsers(dest="bench_command")

    list_p = bench_sub.add_parser("list", help="List catalog benchmarks")
    list_p.add_argument(
        "--category",
        choices=[c.value for c in BenchmarkCategory],
        default=None,
        help="Only this category",
    )
    list_p.add_argument("--agent", default=None, help="Only benchmarks for this agent id")

    check_p = bench_sub.add_parser("check", help="Classify measured values")
    check_p.add_argument("measurements", help="YAML/JSON file mapping benchmark id to value")
    check_p.add_argument(
        "--critical-first",
        action="store_true",
        help="Check the critical threshold before the warning threshold",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    # -- Console configuration (terminal output) ----------------------------
    configure(backend=args.console)

    # -- Logging configuration (file-based audit log) -----------------------
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    else:
        level = logging.INFO
    _setup_logging(Path.cwd(), level)

    if args.command == "summary":
        return cmd_summary(args)
    if args.command == "benchmarks" and args.bench_command == "list":
        return cmd_benchmarks_list(args)
    if args.command == "benchmarks" and args.bench_command == "check":
        return cmd_benchmarks_check(args)
    parser.print_help()
    return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())

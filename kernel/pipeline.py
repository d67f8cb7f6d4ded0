"""
kernel/pipeline.py — Fixed summary run.

The backbone of ``perfgate summary``. It calls the replaceable steps
through wiring.py and owns the output side effects:

  1. read report sources      (wiring.build_producers / collect_tallies)
  2. aggregate                (wiring.aggregate_results)
  3. render and write         (modules.renderer)

Every source is read and aggregated before anything is written, so a
malformed report aborts the run with no document on disk.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

import wiring
from kernel.console import console
from modules.renderer.core import render_console, render_json, render_markdown

if TYPE_CHECKING:
    from pathlib import Path

    from domain.models import AggregateStats
    from domain.ports import FileSystemPort
    from kernel.config import Settings

logger = logging.getLogger("perfgate.pipeline")

EXIT_OK = 0
EXIT_TESTS_FAILED = 1
EXIT_ERROR = 2


def exit_code_for(stats: AggregateStats) -> int:
    """Return 0 when no test failed, 1 otherwise."""
    return EXIT_OK if stats.total_failed == 0 else EXIT_TESTS_FAILED


def run_summary(
    settings: Settings,
    *,
    fs: FileSystemPort | None = None,
    json_path: Path | None = None,
    generated_at: str | None = None,
) -> AggregateStats:
    """Aggregate all report sources, print the transcript, write documents.

    Args:
        settings: Resolved settings.
        fs: File system reports are read from and documents written to;
            the local disk under ``settings.root`` when omitted.
        json_path: Where to also write a JSON summary, if anywhere.
        generated_at: Timestamp override; defaults to now (UTC).

    Returns:
        The AggregateStats that were rendered.

    Raises:
        ReportMalformedError: If any present report cannot be parsed.
    """
    generated_at = generated_at or datetime.now(UTC).isoformat()

    fs = wiring.file_system(settings, fs)

    console.step(1, 3, "Reading report sources...")
    producers = wiring.build_producers(settings, fs)
    tallies = wiring.collect_tallies(producers)
    console.step_detail(f"{len(producers)} report source(s) configured")

    console.step(2, 3, "Aggregating results...")
    stats = wiring.aggregate_results(tallies)

    console.step(3, 3, "Rendering summary...")
    render_console(stats, settings.bands)

    markdown = render_markdown(stats, generated_at, settings.bands)
    fs.write_file(str(settings.summary_path), markdown)
    logger.info("Wrote summary to %s", settings.summary_path)
    console.success(f"Test summary report generated: {settings.summary_path}")

    if json_path is not None:
        fs.write_file(str(json_path), render_json(stats, generated_at))
        logger.info("Wrote JSON summary to %s", json_path)
        console.step_detail(f"JSON summary: {json_path}")

    return stats

"""kernel.console._protocol -- ConsoleProtocol definition.

Pure standard-library typing.Protocol for the perfgate terminal output system.
No external dependencies allowed in this file.
"""

from __future__ import annotations

from typing import Protocol


class ConsoleProtocol(Protocol):
    """perfgate terminal output protocol.

    Three layers of methods:

    **General messages** -- usable from any module::

        console.info("Read 3 report sources")
        console.success("All tests passed")
        console.warning("Integration report not found")
        console.error("Malformed unit report")

    **Structured panels** -- tables and key-value displays::

        console.table(["Id", "Target"], [["handoff_latency", "200 ms"]], title="Benchmarks")
        console.kv({"Total Tests": "10", "Passed": "8"})

    **Run lifecycle** -- used by kernel/pipeline.py and the renderer::

        console.step(1, 3, "Reading report sources...")
        console.summary_header("Test Execution Summary")
        console.suite_result("Unit", 8, 10, "80.00%", "warning")
    """

    # -- General messages ---------------------------------------------------

    def info(self, message: str) -> None:
        """Informational message."""
        ...

    def success(self, message: str) -> None:
        """Success / positive-outcome message."""
        ...

    def warning(self, message: str) -> None:
        """Warning message."""
        ...

    def error(self, message: str) -> None:
        """Error message."""
        ...

    # -- Structured panels --------------------------------------------------

    def table(self, headers: list[str], rows: list[list[str]], *, title: str = "") -> None:
        """Display a table with *headers* and *rows*."""
        ...

    def kv(self, data: dict[str, str], *, title: str = "") -> None:
        """Display key-value pairs."""
        ...

    # -- Run lifecycle ------------------------------------------------------

    def step(self, current: int, total: int, description: str) -> None:
        """Display a pipeline step indicator ``[current/total] description``."""
        ...

    def step_detail(self, message: str) -> None:
        """Display an indented detail line under the current step."""
        ...

    def summary_header(self, title: str) -> None:
        """Display the banner that opens a summary transcript."""
        ...

    def suite_result(self, name: str, passed: int, total: int, rate: str, band: str) -> None:
        """Display one suite line, highlighted by *band* (good/warning/bad)."""
        ...

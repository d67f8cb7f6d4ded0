"""kernel.console._plain -- Plain-text backend.

print()-based output with no markup. Used when stdout is not a TTY
(CI logs, pipes) or when plain output is requested explicitly.
"""

from __future__ import annotations

import sys

_BAND_TAGS = {"good": "[ok]", "warning": "[warn]", "bad": "[fail]"}


class PlainBackend:
    """ConsoleProtocol implementation using only built-in print()."""

    # -- General messages ---------------------------------------------------

    def info(self, message: str) -> None:
        print(f"  {message}")

    def success(self, message: str) -> None:
        print(f"  [ok] {message}")

    def warning(self, message: str) -> None:
        print(f"  [warn] {message}")

    def error(self, message: str) -> None:
        print(f"  [error] {message}", file=sys.stderr)

    # -- Structured panels --------------------------------------------------

    def table(self, headers: list[str], rows: list[list[str]], *, title: str = "") -> None:
        if title:
            print(f"\n  {title}:")

        if not headers and not rows:
            return

        # Calculate column widths
        all_rows = [headers, *rows]
        col_widths = [
            max(len(str(row[i])) if i < len(row) else 0 for row in all_rows)
            for i in range(len(headers))
        ]

        header_line = "  " + "  ".join(
            h.ljust(w) for h, w in zip(headers, col_widths, strict=True)
        )
        print(header_line)
        print("  " + "  ".join("-" * w for w in col_widths))

        for row in rows:
            cells = [
                str(row[i]).ljust(col_widths[i]) if i < len(row) else " " * col_widths[i]
                for i in range(len(headers))
            ]
            print("  " + "  ".join(cells))

    def kv(self, data: dict[str, str], *, title: str = "") -> None:
        if title:
            print(f"\n  {title}:")
        if not data:
            return
        max_key = max(len(k) for k in data)
        for k, v in data.items():
            print(f"  {k.rjust(max_key)}: {v}")

    # -- Run lifecycle ------------------------------------------------------

    def step(self, current: int, total: int, description: str) -> None:
        print(f"\n  [{current}/{total}] {description}")

    def step_detail(self, message: str) -> None:
        print(f"    {message}")

    def summary_header(self, title: str) -> None:
        rule = "=" * 50
        print(f"\n{rule}")
        print(title.upper())
        print(rule)

    def suite_result(self, name: str, passed: int, total: int, rate: str, band: str) -> None:
        tag = _BAND_TAGS.get(band, "")
        print(f"  {name}: {passed}/{total} ({rate}) {tag}".rstrip())

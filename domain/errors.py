"""Exception types for perfgate.

A missing report file is not an error (it yields an empty tally) and an
unknown benchmark id is reported as a value, so neither appears here.
"""

from __future__ import annotations


class PerfgateError(Exception):
    """Base class for every error raised by perfgate."""


class ReportMalformedError(PerfgateError, ValueError):
    """A report file exists but cannot be parsed into a tally."""

    def __init__(self, source: str, category: str, reason: str) -> None:
        self.source = source
        self.category = category
        self.reason = reason
        super().__init__(f"Malformed {category} report {source}: {reason}")


class ConfigError(PerfgateError, ValueError):
    """The project configuration is invalid."""


class CatalogError(PerfgateError, ValueError):
    """The static benchmark table violates a catalog invariant."""

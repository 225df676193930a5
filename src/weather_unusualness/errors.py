"""Errors that end an analysis run.

Hierarchy::

    AnalysisError
    ├── DataUnavailable       forecast/historical fetch failed or was malformed
    ├── EmptyWindow           no historical highs matched the date window
    └── InsufficientVariance  standard deviation is zero or NaN

None of these are retried. The CLI reports them and exits non-zero.
"""

from __future__ import annotations

from typing import Any


class AnalysisError(Exception):
    """Base class for all analysis failures."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for display or JSON output."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class DataUnavailable(AnalysisError):
    """A weather API call failed or returned missing fields."""


class EmptyWindow(AnalysisError):
    """No historical observations fell inside the month-day window."""


class InsufficientVariance(AnalysisError):
    """The historical sample has no usable spread, so a z-score is undefined."""

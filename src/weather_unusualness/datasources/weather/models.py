"""Weather data models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import date


@dataclass(frozen=True)
class DailyObservation:
    """Daily high temperature for one calendar day.

    ``temperature`` is None when the archive has no value for that day.
    """

    date: date
    temperature: float | None

    @property
    def month_day(self) -> str:
        """Zero-padded ``MM-DD`` key, comparable lexicographically."""
        return f"{self.date.month:02d}-{self.date.day:02d}"

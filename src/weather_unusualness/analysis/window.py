"""Month-day window selection across years.

A window is a pair of zero-padded ``MM-DD`` strings. Fixed width makes
plain string comparison match calendar order, so ``"04-02" < "04-10"``.
When the window straddles New Year the start sorts after the end
(``"12-28"`` > ``"01-02"``) and membership becomes an either/or test.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from weather_unusualness.datasources.weather.models import DailyObservation


@dataclass(frozen=True)
class WindowSpec:
    """Inclusive month-day bounds, e.g. ``WindowSpec("04-17", "04-27")``."""

    start: str
    end: str

    @property
    def wraps(self) -> bool:
        """True when the window crosses Dec 31 → Jan 1."""
        return self.start > self.end

    def __str__(self) -> str:
        return f"{self.start} to {self.end}"


def month_day(day: date) -> str:
    """Format a date as zero-padded ``MM-DD``."""
    return f"{day.month:02d}-{day.day:02d}"


# Beyond half a year the two bounds pass each other and the window inverts
MAX_WINDOW_DAYS = 182


def window_for(today: date, window_days: int = 5) -> WindowSpec:
    """Build the window from ``today - window_days`` to ``today + window_days``.

    Raises:
        ValueError: If ``window_days`` is outside 0..182.
    """
    if not 0 <= window_days <= MAX_WINDOW_DAYS:
        msg = f"window_days must be between 0 and {MAX_WINDOW_DAYS}, got {window_days}"
        raise ValueError(msg)
    delta = timedelta(days=window_days)
    return WindowSpec(start=month_day(today - delta), end=month_day(today + delta))


def in_window(md: str, window: WindowSpec) -> bool:
    """Check whether a ``MM-DD`` string falls inside the window."""
    if window.wraps:
        return md >= window.start or md <= window.end
    return window.start <= md <= window.end


def filter_window(series: Iterable[DailyObservation], window: WindowSpec) -> list[float]:
    """Return the temperatures whose month-day falls inside the window.

    Observations with no temperature are skipped even when the date
    matches. An empty result is returned as-is; deciding whether that is
    fatal is up to the caller.
    """
    return [
        obs.temperature
        for obs in series
        if obs.temperature is not None and in_window(obs.month_day, window)
    ]

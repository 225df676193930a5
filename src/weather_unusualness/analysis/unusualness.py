"""Compare today's forecast high with the historical window.

Sequence for one run:

    series → filter_window → compute_mean_and_stddev → z-score → classify

Raises ``EmptyWindow`` when nothing matches the window and
``InsufficientVariance`` when the spread is zero or NaN. A sample smaller
than ``min_sample_size`` is allowed but recorded in ``warnings``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from weather_unusualness.analysis.rating import Rating, classify
from weather_unusualness.analysis.statistics import SummaryStatistics, compute_mean_and_stddev
from weather_unusualness.analysis.window import WindowSpec, filter_window, window_for
from weather_unusualness.errors import EmptyWindow, InsufficientVariance

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from datetime import date

    from weather_unusualness.datasources.weather.models import DailyObservation

DEFAULT_WINDOW_DAYS = 5
DEFAULT_MIN_SAMPLE_SIZE = 30


@dataclass
class AnalysisResult:
    """Everything the presentation layer needs for one analysis."""

    today_high: float
    statistics: SummaryStatistics
    z_score: float
    rating: Rating
    explanation: str
    sample: list[float]
    window: WindowSpec | None = None
    warnings: list[str] = field(default_factory=list)

    @property
    def mean(self) -> float:
        return self.statistics.mean

    @property
    def std_dev(self) -> float:
        return self.statistics.std_dev

    @property
    def sample_size(self) -> int:
        return len(self.sample)


def compare_to_sample(
    today_high: float,
    sample: Sequence[float],
    *,
    month_index: int,
    window: WindowSpec | None = None,
    min_sample_size: int = DEFAULT_MIN_SAMPLE_SIZE,
) -> AnalysisResult:
    """Rate ``today_high`` against an already-filtered historical sample.

    Args:
        today_high: Today's forecast high.
        sample: Historical highs from the month-day window.
        month_index: Today's month, 0 = January.
        window: Window the sample was drawn from (for messages and display).
        min_sample_size: Sizes below this add a quality warning.

    Raises:
        EmptyWindow: If ``sample`` is empty.
        InsufficientVariance: If the standard deviation is zero or NaN.
    """
    details = {"window": str(window)} if window else {}
    if not sample:
        msg = "No historical data found for the date window."
        raise EmptyWindow(msg, details)

    warnings: list[str] = []
    if len(sample) < min_sample_size:
        warnings.append(f"Only {len(sample)} historical data points found for the window.")

    stats = compute_mean_and_stddev(sample)
    if not stats.is_valid:
        msg = (
            "Could not calculate valid standard deviation "
            "(possibly identical historical values or insufficient data)."
        )
        raise InsufficientVariance(msg, {**details, "sample_size": len(sample)})

    z_score = (today_high - stats.mean) / stats.std_dev
    rated = classify(z_score, month_index)

    return AnalysisResult(
        today_high=today_high,
        statistics=stats,
        z_score=z_score,
        rating=rated.rating,
        explanation=rated.explanation,
        sample=list(sample),
        window=window,
        warnings=warnings,
    )


def analyze(
    today_high: float,
    series: Iterable[DailyObservation],
    today: date,
    *,
    window_days: int = DEFAULT_WINDOW_DAYS,
    min_sample_size: int = DEFAULT_MIN_SAMPLE_SIZE,
    year_range: tuple[int, int] | None = None,
) -> AnalysisResult:
    """Rate today's forecast high against the same time of year in history.

    Args:
        today_high: Today's forecast high.
        series: Daily highs spanning full calendar years.
        today: Date the window is centred on.
        window_days: Half-width of the month-day window.
        min_sample_size: Sizes below this add a quality warning.
        year_range: ``(start, end)`` years of ``series``, used in error messages.

    Raises:
        EmptyWindow: If no observation falls in the window.
        InsufficientVariance: If the window's highs have no spread.
    """
    window = window_for(today, window_days)
    sample = filter_window(series, window)

    if not sample:
        msg = f"No historical data found for the date window {window.start} to {window.end}"
        details: dict[str, object] = {"window": str(window)}
        if year_range:
            msg += f" between {year_range[0]}-{year_range[1]}"
            details["year_range"] = f"{year_range[0]}-{year_range[1]}"
        raise EmptyWindow(msg + ".", details)

    return compare_to_sample(
        today_high,
        sample,
        month_index=today.month - 1,
        window=window,
        min_sample_size=min_sample_size,
    )

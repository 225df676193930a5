"""Statistical comparison of today's forecast against history.

Pure functions over datasource models. No I/O, no HTTP, no Prefect
decorators; flows/ fetches data and renderers/ draws the results.

Modules:
  - window: month-day window (WindowSpec) and filtering of a daily series
  - statistics: sample mean and standard deviation
  - rating: z-score -> rating and explanation sentence
  - unusualness: the end-to-end comparison producing an AnalysisResult
"""

from weather_unusualness.analysis.rating import (
    MONTH_CONTEXT,
    Rating,
    RatingResult,
    classify,
    month_context,
)
from weather_unusualness.analysis.statistics import SummaryStatistics, compute_mean_and_stddev
from weather_unusualness.analysis.unusualness import (
    DEFAULT_MIN_SAMPLE_SIZE,
    DEFAULT_WINDOW_DAYS,
    AnalysisResult,
    analyze,
    compare_to_sample,
)
from weather_unusualness.analysis.window import (
    MAX_WINDOW_DAYS,
    WindowSpec,
    filter_window,
    in_window,
    month_day,
    window_for,
)

__all__ = [
    "DEFAULT_MIN_SAMPLE_SIZE",
    "DEFAULT_WINDOW_DAYS",
    "MAX_WINDOW_DAYS",
    "MONTH_CONTEXT",
    "AnalysisResult",
    "Rating",
    "RatingResult",
    "SummaryStatistics",
    "WindowSpec",
    "analyze",
    "classify",
    "compare_to_sample",
    "compute_mean_and_stddev",
    "filter_window",
    "in_window",
    "month_context",
    "month_day",
    "window_for",
]

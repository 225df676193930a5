"""Sample mean and standard deviation."""

from __future__ import annotations

import math
import statistics
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence


@dataclass(frozen=True)
class SummaryStatistics:
    """Mean and sample (N-1) standard deviation of a sample."""

    mean: float
    std_dev: float

    @property
    def is_valid(self) -> bool:
        """False when a z-score cannot be derived (zero or NaN spread)."""
        return not math.isnan(self.std_dev) and self.std_dev != 0


def compute_mean_and_stddev(values: Sequence[float]) -> SummaryStatistics:
    """Compute the mean and sample standard deviation of ``values``.

    Uses Bessel's correction (divide by ``n - 1``). A single value has a
    standard deviation of 0. An empty sequence yields NaN for both fields
    and must not be treated as a valid statistic.

    The result does not depend on the order of ``values``.
    """
    if not values:
        return SummaryStatistics(mean=math.nan, std_dev=math.nan)

    mean = float(statistics.mean(values))
    if len(values) == 1:
        return SummaryStatistics(mean=mean, std_dev=0.0)

    return SummaryStatistics(mean=mean, std_dev=float(statistics.stdev(values)))

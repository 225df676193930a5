"""Map a z-score to an unusualness rating and explanation.

| abs(z)        | rating            | qualifier                       |
|---------------|-------------------|---------------------------------|
| > 3.0         | Very Unusual      | much warmer / much colder       |
| (2.0, 3.0]    | Unusual           | warmer / colder                 |
| (1.0, 2.0]    | Slightly Unusual  | slightly warmer / slightly colder |
| (0.5, 1.0]    | Average           | slightly warmer / slightly colder |
| <= 0.5        | Average           | about average                   |

Direction is "above"/"below" except in the "about average" tier, where it
is "at" ("exactly at" for a z-score of exactly 0).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Rating(StrEnum):
    """Unusualness ratings shown to the user."""

    VERY_UNUSUAL = "Very Unusual"
    UNUSUAL = "Unusual"
    SLIGHTLY_UNUSUAL = "Slightly Unusual"
    AVERAGE = "Average"


# Seasonal phrase by month index (0 = January)
MONTH_CONTEXT = [
    "early January",
    "mid-February",
    "early March",
    "mid-April",
    "late May",
    "mid-June",
    "early July",
    "mid-August",
    "late September",
    "mid-October",
    "early November",
    "mid-December",
]


@dataclass(frozen=True)
class RatingResult:
    """Classification of a single z-score."""

    rating: Rating
    explanation: str
    qualifier: str
    direction: str


def month_context(month_index: int) -> str:
    """Seasonal phrase for a 0-based month index."""
    if 0 <= month_index < len(MONTH_CONTEXT):
        return MONTH_CONTEXT[month_index]
    return "this time of year"


def _tier(z_score: float) -> tuple[Rating, str, str]:
    a = abs(z_score)
    warmer = z_score > 0
    direction = "above" if z_score >= 0 else "below"

    if a > 3.0:
        return Rating.VERY_UNUSUAL, "much warmer" if warmer else "much colder", direction
    if a > 2.0:
        return Rating.UNUSUAL, "warmer" if warmer else "colder", direction
    if a > 1.0:
        return Rating.SLIGHTLY_UNUSUAL, "slightly warmer" if warmer else "slightly colder", direction
    if a > 0.5:
        return Rating.AVERAGE, "slightly warmer" if warmer else "slightly colder", direction
    return Rating.AVERAGE, "about average", "exactly at" if z_score == 0 else "at"


def classify(z_score: float, month_index: int) -> RatingResult:
    """Rate a z-score and build the explanation sentence.

    Args:
        z_score: Standard deviations between today's high and the mean.
        month_index: Today's month, 0 = January.

    Returns:
        RatingResult with the rating, explanation, and the qualifier and
        direction words used in it.
    """
    rating, qualifier, direction = _tier(z_score)
    explanation = (
        f"It is {qualifier} than average for {month_context(month_index)}. "
        f"The high temperature is {abs(z_score):.1f} standard deviations "
        f"{direction} normal for this time of year."
    )
    return RatingResult(
        rating=rating,
        explanation=explanation,
        qualifier=qualifier,
        direction=direction,
    )

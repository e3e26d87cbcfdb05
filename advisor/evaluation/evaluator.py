"""Sowing evaluator: classifies a daily forecast for grass seeding."""

from itertools import islice

from advisor.models.evaluation import EvaluationResult, Rating, Recommendation
from advisor.models.forecast import ForecastSeries

WINDOW_SIZE = 14  # days from today that are examined
AVG_TEMP_THRESHOLD_C = 8.0
FROST_TEMP_THRESHOLD_C = 2.0
REQUIRED_WARM_DAYS = 10
MAX_ALLOWED_FROST_DAYS = 2

EXCELLENT_MIN_WARM_DAYS = 12
EXCELLENT_MAX_FROST_DAYS = 1
MARGINAL_MIN_WARM_DAYS = 5


def evaluate(series: ForecastSeries) -> EvaluationResult:
    """Count warm and frost days in the window and classify them.

    Only the first WINDOW_SIZE days are examined; a shorter series is
    evaluated over what is there. A warm day has a max/min average at or
    above AVG_TEMP_THRESHOLD_C, a frost day a minimum strictly below
    FROST_TEMP_THRESHOLD_C. NaN temperatures fail both comparisons.

    Args:
        series: Daily forecast, day 0 first.

    Returns:
        Counts with the recommendation and rating derived from them.
    """
    days_above_threshold = 0
    frost_days = 0

    for day in islice(series, WINDOW_SIZE):
        if day.avg_temp_c >= AVG_TEMP_THRESHOLD_C:
            days_above_threshold += 1
        if day.min_temp_c < FROST_TEMP_THRESHOLD_C:
            frost_days += 1

    return EvaluationResult(
        days_above_threshold=days_above_threshold,
        frost_days=frost_days,
        recommendation=recommend(days_above_threshold, frost_days),
        rating=rate(days_above_threshold, frost_days),
    )


def recommend(days_above_threshold: int, frost_days: int) -> Recommendation:
    if (
        days_above_threshold >= REQUIRED_WARM_DAYS
        and frost_days <= MAX_ALLOWED_FROST_DAYS
    ):
        return Recommendation.GO
    return Recommendation.NO_GO


def rate(days_above_threshold: int, frost_days: int) -> Rating:
    """Rate the window on the ladder, first matching tier wins.

    Frost only matters for GOOD and EXCELLENT: a frosty window with enough
    warm days still rates MARGINAL.
    """
    if (
        days_above_threshold >= EXCELLENT_MIN_WARM_DAYS
        and frost_days <= EXCELLENT_MAX_FROST_DAYS
    ):
        return Rating.EXCELLENT
    if (
        days_above_threshold >= REQUIRED_WARM_DAYS
        and frost_days <= MAX_ALLOWED_FROST_DAYS
    ):
        return Rating.GOOD
    if days_above_threshold >= MARGINAL_MIN_WARM_DAYS:
        return Rating.MARGINAL
    return Rating.POOR

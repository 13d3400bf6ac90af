"""Consistency scoring based on the coefficient of variation."""

import math

from nutrition_coach.services.aggregation import mean

_MIN_VALUES = 2


def coefficient_of_variation(values: list[float]) -> float:
    """Population standard deviation over mean.

    Returns 0 for fewer than two values or a non-positive mean.
    """
    if len(values) < _MIN_VALUES:
        return 0.0
    average = mean(values)
    if average <= 0:
        return 0.0
    variance = sum((value - average) ** 2 for value in values) / len(values)
    return math.sqrt(variance) / average


def consistency_score(values: list[float]) -> float:
    """Map a series to [0, 1] where 1 means perfectly steady."""
    return max(0.0, 1.0 - coefficient_of_variation(values))

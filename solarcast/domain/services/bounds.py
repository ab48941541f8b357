"""Physical and statistical bounds shared by the forecasting services."""

import math

KP_INDEX_MIN = 0.0
KP_INDEX_MAX = 9.0
MIN_SOLAR_WIND_SPEED = 200.0
MIN_CONFIDENCE = 0.2


def clamp(value: float, lower: float, upper: float) -> float:
    """Clamp ``value`` into ``[lower, upper]``; NaN collapses to ``lower``."""
    if math.isnan(value):
        return lower
    return min(upper, max(lower, value))

"""Reduction of a forecast to a single activity level."""

from solarcast.domain.entities.errors import ForecastPipelineError
from solarcast.domain.entities.forecast import Forecast, RiskAssessment
from solarcast.domain.entities.observation import ActivityLevel

# (level, kp at or above, storm probability strictly above), most severe first
RISK_THRESHOLDS = (
    (ActivityLevel.SEVERE, 7.0, 0.7),
    (ActivityLevel.HIGH, 5.0, 0.4),
    (ActivityLevel.MODERATE, 3.0, 0.2),
)


def classify_activity(kp_index: float, storm_probability: float = 0.0) -> ActivityLevel:
    for level, kp_threshold, probability_threshold in RISK_THRESHOLDS:
        if kp_index >= kp_threshold or storm_probability > probability_threshold:
            return level
    return ActivityLevel.LOW


def classify_risk(forecast: Forecast, representative_kp: float) -> RiskAssessment:
    """
    Summarize ``forecast``.

    Args:
        forecast: Projected points, at least one.
        representative_kp: Predicted kp on the model path, the observed kp
            on the fallback path.

    Raises:
        ForecastPipelineError: If the forecast is empty.
    """
    if not forecast:
        raise ForecastPipelineError("Cannot classify an empty forecast")

    max_probability = max(point.geomagnetic_storm_probability for point in forecast)
    mean_confidence = sum(point.confidence for point in forecast) / len(forecast)

    return RiskAssessment(
        summarized_risk=classify_activity(representative_kp, max_probability),
        confidence=mean_confidence,
        max_storm_probability=max_probability,
    )

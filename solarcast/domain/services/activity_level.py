"""Helpers deriving activity information from raw solar wind readings."""

from enum import Enum

from solarcast.domain.entities.observation import ActivityLevel
from solarcast.domain.services.bounds import KP_INDEX_MAX
from solarcast.domain.services.risk_classification import classify_activity


class NotificationType(str, Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    ALERT = "alert"


_NOTIFICATIONS = {
    ActivityLevel.LOW: NotificationType.INFO,
    ActivityLevel.MODERATE: NotificationType.WARNING,
    ActivityLevel.HIGH: NotificationType.ERROR,
    ActivityLevel.SEVERE: NotificationType.ALERT,
}


def estimate_kp_index(solar_wind_speed: float, magnetic_field_bz: float) -> float:
    """
    Rough kp estimate from solar wind speed and Bz magnitude.

    Real kp comes from ground magnetometers; this is only good enough to
    feed the forecaster when nothing better is available.
    """
    bz = abs(magnetic_field_bz)
    estimate = 1.0

    if solar_wind_speed > 500:
        estimate += 1
    if solar_wind_speed > 700:
        estimate += 2

    if bz > 5:
        estimate += 1
    if bz > 10:
        estimate += 2
    if bz > 15:
        estimate += 3

    return min(KP_INDEX_MAX, estimate)


def activity_level_for_kp(kp_index: float) -> ActivityLevel:
    return classify_activity(kp_index)


def notification_type_for_level(level: ActivityLevel) -> NotificationType:
    return _NOTIFICATIONS[level]

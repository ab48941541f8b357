"""Linear-additive geomagnetic storm probability shared by all prediction paths."""

from solarcast.domain.services.bounds import clamp

KP_WEIGHT = 1.0 / 18.0
WIND_SPEED_BASELINE = 300.0
WIND_SPEED_SCALE = 1500.0
BZ_SCALE = 30.0
MAX_TERM_CONTRIBUTION = 0.3


def storm_probability(
    kp_index: float, solar_wind_speed: float, magnetic_field_bz: float
) -> float:
    """
    Heuristic probability of a geomagnetic storm.

    Kp contributes up to 0.5 on the 0-9 scale, fast solar wind and a
    southward (negative) Bz contribute up to 0.3 each.
    """
    kp_term = kp_index * KP_WEIGHT
    wind_term = min(
        MAX_TERM_CONTRIBUTION,
        max(0.0, (solar_wind_speed - WIND_SPEED_BASELINE) / WIND_SPEED_SCALE),
    )
    bz_term = min(MAX_TERM_CONTRIBUTION, max(0.0, -magnetic_field_bz / BZ_SCALE))
    return clamp(kp_term + wind_term + bz_term, 0.0, 1.0)

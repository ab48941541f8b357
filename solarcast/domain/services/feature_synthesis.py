"""
Synthetic feature history around the current observation.

No telemetry archive backs the service, so the model input is a short
window oscillating around the current normalized observation. Features per
timestep: kp, solar wind speed, Bz, proton flux proxy, x-ray flux proxy.
"""

import numpy as np

from solarcast.domain.entities.forecast import FeatureWindow
from solarcast.domain.entities.observation import NormalizedObservation

WINDOW_TIMESTEPS = 24
WINDOW_FEATURES = 5

PROTON_FLUX_BASELINE = 0.5
XRAY_FLUX_BASELINE = 0.3


def synthesize_feature_window(
    observation: NormalizedObservation, timesteps: int = WINDOW_TIMESTEPS
) -> FeatureWindow:
    steps = np.arange(timesteps, dtype=np.float64)
    trend = np.sin(steps / 5.0) * 0.2

    values = np.column_stack(
        [
            observation.kp_index * (1.0 + trend),
            observation.solar_wind_speed * (1.0 + 0.8 * trend),
            observation.magnetic_field_bz * (1.0 - 0.5 * trend),
            PROTON_FLUX_BASELINE * (1.0 + 1.2 * trend),
            XRAY_FLUX_BASELINE * (1.0 + trend),
        ]
    )
    return FeatureWindow(values=values)

"""Simulated current conditions for when the live feed cannot be read."""

from __future__ import annotations

import random
from datetime import datetime, timezone
from typing import Callable, Optional

from solarcast.domain.entities.observation import CurrentConditions
from solarcast.domain.ports.random_source import RandomSource
from solarcast.domain.services.activity_level import activity_level_for_kp

SYNTHETIC_SOURCE = "synthetic"

BASE_SOLAR_WIND_SPEED = 450.0
BASE_SOLAR_WIND_DENSITY = 5.0
BASE_MAGNETIC_FIELD_BZ = -5.0
BASE_X_RAY_FLUX = 2.3e-6


class SyntheticConditionsSource:
    """Moderate-activity conditions with +/-15% jitter on every reading."""

    def __init__(
        self,
        random_source: Optional[RandomSource] = None,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ) -> None:
        self._random = random_source or random.Random()
        self._clock = clock

    def _jitter(self) -> float:
        return self._random.uniform(0.85, 1.15)

    def current(self) -> CurrentConditions:
        kp_index = self._random.uniform(3.0, 5.0)
        return CurrentConditions(
            timestamp=self._clock(),
            solar_wind_speed=BASE_SOLAR_WIND_SPEED * self._jitter(),
            solar_wind_density=BASE_SOLAR_WIND_DENSITY * self._jitter(),
            magnetic_field_bz=BASE_MAGNETIC_FIELD_BZ * self._jitter(),
            x_ray_flux=BASE_X_RAY_FLUX * self._jitter(),
            kp_index=kp_index,
            activity_level=activity_level_for_kp(kp_index),
            source=SYNTHETIC_SOURCE,
        )

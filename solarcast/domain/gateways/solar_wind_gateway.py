"""
Domain Gateway - Solar Wind Feed

Interface for the upstream service publishing real-time solar wind
measurements and space weather alerts.
"""

from abc import ABC, abstractmethod
from typing import List

from solarcast.domain.entities.observation import SolarWindSample, SpaceWeatherAlert


class ISolarWindGateway(ABC):
    """Interface for the real-time solar wind and alerts feed."""

    @abstractmethod
    async def fetch_solar_wind(self) -> List[SolarWindSample]:
        """
        Fetch the recent solar wind samples.

        Returns:
            Samples ordered newest first. Rows without speed or Bz are
            dropped by the implementation.

        Raises:
            ObservationFeedError: When the feed cannot be read
        """
        pass

    @abstractmethod
    async def fetch_alerts(self) -> List[SpaceWeatherAlert]:
        """
        Fetch the currently published alerts, watches and warnings.

        Returns:
            Alerts ordered newest first

        Raises:
            ObservationFeedError: When the feed cannot be read
        """
        pass

"""
Infrastructure Gateway - NOAA SWPC Implementation

Reads the real-time solar wind product and the alerts product published as
JSON by the NOAA Space Weather Prediction Center.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional

import httpx
import structlog

from solarcast.domain.entities.errors import ObservationFeedError
from solarcast.domain.entities.observation import SolarWindSample, SpaceWeatherAlert
from solarcast.domain.gateways.solar_wind_gateway import ISolarWindGateway

logger = structlog.get_logger(__name__)

DEFAULT_SOLAR_WIND_URL = (
    "https://services.swpc.noaa.gov/json/rtsw/rtsw_wind_1m.json"
)
DEFAULT_ALERTS_URL = "https://services.swpc.noaa.gov/json/alerts.json"

# The plasma and magnetometer products name their columns differently.
_SPEED_KEYS = ("speed", "proton_speed")
_BZ_KEYS = ("bz", "bz_gsm")
_DENSITY_KEYS = ("density", "proton_density")
_TEMPERATURE_KEYS = ("temperature", "proton_temperature")


def _parse_timestamp(value: Any) -> Optional[datetime]:
    if not isinstance(value, str) or not value:
        return None
    text = value.strip().replace("Z", "+00:00")
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def _first_float(row: Dict[str, Any], keys: Iterable[str]) -> Optional[float]:
    for key in keys:
        value = row.get(key)
        if value is None or value == "":
            continue
        try:
            return float(value)
        except (TypeError, ValueError):
            continue
    return None


class NoaaSwpcGateway(ISolarWindGateway):
    """Implementation of the solar wind gateway over HTTP."""

    def __init__(
        self,
        solar_wind_url: str = DEFAULT_SOLAR_WIND_URL,
        alerts_url: str = DEFAULT_ALERTS_URL,
        timeout: float = 10.0,
    ):
        """
        Initialize the NOAA SWPC gateway.

        Args:
            solar_wind_url: URL of the real-time solar wind JSON product
            alerts_url: URL of the alerts JSON product
            timeout: Request timeout in seconds
        """
        self.solar_wind_url = solar_wind_url
        self.alerts_url = alerts_url
        self.timeout = timeout

    async def fetch_solar_wind(self) -> List[SolarWindSample]:
        payload = await self._get_json(self.solar_wind_url)
        samples = self._parse_solar_wind(payload)
        logger.info(
            "noaa.solar_wind.fetched",
            rows=len(payload) if isinstance(payload, list) else 0,
            samples=len(samples),
        )
        return samples

    async def fetch_alerts(self) -> List[SpaceWeatherAlert]:
        payload = await self._get_json(self.alerts_url)
        alerts = self._parse_alerts(payload)
        logger.info("noaa.alerts.fetched", alerts=len(alerts))
        return alerts

    async def _get_json(self, url: str) -> Any:
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(
                    url, headers={"Accept": "application/json"}
                )
                response.raise_for_status()
                return response.json()

        except httpx.HTTPStatusError as e:
            logger.error(
                "noaa.http_error",
                status_code=e.response.status_code,
                url=url,
            )
            raise ObservationFeedError(
                f"NOAA SWPC HTTP error {e.response.status_code}",
                {"url": url},
            ) from e

        except httpx.RequestError as e:
            logger.error("noaa.request_error", error=str(e), url=url)
            raise ObservationFeedError(
                f"NOAA SWPC request failed: {str(e)}", {"url": url}
            ) from e

        except ValueError as e:
            logger.error("noaa.invalid_json", error=str(e), url=url)
            raise ObservationFeedError(
                "NOAA SWPC returned invalid JSON", {"url": url}
            ) from e

    def _parse_solar_wind(self, payload: Any) -> List[SolarWindSample]:
        if not isinstance(payload, list):
            raise ObservationFeedError("Unexpected solar wind payload format")

        samples: List[SolarWindSample] = []
        for row in payload:
            if not isinstance(row, dict):
                continue
            time_tag = _parse_timestamp(row.get("time_tag"))
            speed = _first_float(row, _SPEED_KEYS)
            bz = _first_float(row, _BZ_KEYS)
            if time_tag is None or speed is None or bz is None:
                continue
            samples.append(
                SolarWindSample(
                    time_tag=time_tag,
                    speed=speed,
                    magnetic_field_bz=bz,
                    density=_first_float(row, _DENSITY_KEYS),
                    temperature=_first_float(row, _TEMPERATURE_KEYS),
                    bt=_first_float(row, ("bt",)),
                )
            )

        samples.sort(key=lambda sample: sample.time_tag, reverse=True)
        return samples

    def _parse_alerts(self, payload: Any) -> List[SpaceWeatherAlert]:
        if not isinstance(payload, list):
            raise ObservationFeedError("Unexpected alerts payload format")

        alerts: List[SpaceWeatherAlert] = []
        for row in payload:
            if not isinstance(row, dict):
                continue
            issued_at = _parse_timestamp(row.get("issue_datetime"))
            if issued_at is None:
                continue
            alerts.append(
                SpaceWeatherAlert(
                    product_id=str(row.get("product_id") or ""),
                    issued_at=issued_at,
                    message=str(row.get("message") or "").strip(),
                )
            )

        alerts.sort(key=lambda alert: alert.issued_at, reverse=True)
        return alerts

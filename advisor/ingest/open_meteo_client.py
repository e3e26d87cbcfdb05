"""Open-Meteo forecast API client."""

import logging

import httpx

from advisor.config.schema import DEFAULT_USER_AGENT

logger = logging.getLogger(__name__)

OPEN_METEO_BASE_URL = "https://api.open-meteo.com"
DAILY_VARIABLES = ("temperature_2m_max", "temperature_2m_min")


class OpenMeteoClient:
    def __init__(
        self,
        base_url: str = OPEN_METEO_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 10.0,
        forecast_days: int = 16,
        timezone: str = "Europe/London",
    ):
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.timeout = timeout
        self.forecast_days = forecast_days
        self.timezone = timezone

    def get_daily_forecast(self, latitude: float, longitude: float) -> dict:
        """Fetch daily max/min 2m temperatures for a point.

        Raises httpx.HTTPStatusError on a non-2xx response and
        httpx.RequestError when the service cannot be reached.
        """
        url = f"{self.base_url}/v1/forecast"
        params = {
            "latitude": latitude,
            "longitude": longitude,
            "daily": ",".join(DAILY_VARIABLES),
            "forecast_days": self.forecast_days,
            "timezone": self.timezone,
        }
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}
        try:
            resp = httpx.get(url, params=params, headers=headers, timeout=self.timeout)
            resp.raise_for_status()
            return resp.json()
        except httpx.HTTPStatusError as e:
            logger.error(
                "Open-Meteo error for lat=%s lon=%s: %s", latitude, longitude, e
            )
            raise
        except httpx.RequestError as e:
            logger.error(
                "Open-Meteo request failed for lat=%s lon=%s: %s",
                latitude, longitude, e,
            )
            raise

"""Forecast fetcher: retrieves Open-Meteo daily temperatures for a location."""

import logging
import math

import httpx

from advisor.errors import ForecastError
from advisor.ingest.open_meteo_client import OpenMeteoClient
from advisor.models.common import utc_now_iso
from advisor.models.forecast import DailyForecast, ForecastDay, Location

logger = logging.getLogger(__name__)


class ForecastFetcher:
    def __init__(self, client: OpenMeteoClient):
        self.client = client

    def fetch(self, location: Location) -> DailyForecast:
        """Fetch the daily forecast for a resolved location.

        Every failure is raised as ForecastError with a user-facing message.
        """
        try:
            raw = self.client.get_daily_forecast(location.latitude, location.longitude)
        except httpx.HTTPStatusError as e:
            raise ForecastError(f"Forecast error: {e.response.reason_phrase}") from e
        except httpx.RequestError as e:
            raise ForecastError(f"Forecast request failed: {e}") from e
        except ValueError as e:
            raise ForecastError(f"Invalid forecast response: {e}") from e

        forecast = _extract_daily_forecast(raw, location)
        logger.info(
            "Fetched %d forecast days for %s", len(forecast.days), location.postcode
        )
        return forecast


def _extract_daily_forecast(raw: dict, location: Location) -> DailyForecast:
    """Pair up the daily max/min lists from an Open-Meteo response.

    The max list decides how many days there are. A null temperature
    reads as 0°C. A minimum missing off the end of a short list becomes
    NaN, so that day is neither warm nor frost.
    """
    daily = raw.get("daily") if isinstance(raw, dict) else None
    if not isinstance(daily, dict):
        raise ForecastError("Forecast response missing daily temperatures")

    maxes = daily.get("temperature_2m_max")
    mins = daily.get("temperature_2m_min")
    if not isinstance(maxes, list) or not isinstance(mins, list):
        raise ForecastError("Forecast response missing daily temperatures")

    days: list[ForecastDay] = []
    for i, t_max in enumerate(maxes):
        min_temp_c = _as_temperature(mins[i]) if i < len(mins) else math.nan
        days.append(
            ForecastDay(max_temp_c=_as_temperature(t_max), min_temp_c=min_temp_c)
        )

    if len(mins) != len(maxes):
        logger.warning(
            "Forecast for %s has %d max and %d min values",
            location.postcode, len(maxes), len(mins),
        )

    return DailyForecast(
        latitude=float(raw.get("latitude", location.latitude)),
        longitude=float(raw.get("longitude", location.longitude)),
        timezone=str(raw.get("timezone", "")),
        dates=tuple(str(d) for d in daily.get("time") or []),
        days=tuple(days),
        fetched_at=utc_now_iso(),
    )


def _as_temperature(value: object) -> float:
    if value is None:
        return 0.0
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan

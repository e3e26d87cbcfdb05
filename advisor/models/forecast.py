"""Geocoding and daily forecast data models."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True)
class Location:
    postcode: str
    latitude: float
    longitude: float


@dataclass(frozen=True)
class ForecastDay:
    max_temp_c: float
    min_temp_c: float

    @property
    def avg_temp_c(self) -> float:
        return (self.max_temp_c + self.min_temp_c) / 2


# Day 0 is today.
ForecastSeries: TypeAlias = Sequence[ForecastDay]


@dataclass(frozen=True)
class DailyForecast:
    latitude: float
    longitude: float
    timezone: str
    dates: tuple[str, ...]  # YYYY-MM-DD, may be empty
    days: tuple[ForecastDay, ...]
    fetched_at: str

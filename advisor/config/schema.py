"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

DEFAULT_POSTCODE = "HP18 9HE"
DEFAULT_USER_AGENT = "grass-sowing-advisor/0.1.0"


class GeocoderConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = "https://api.postcodes.io"
    timeout_seconds: float = Field(default=10.0, gt=0.0)


class ForecastConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = "https://api.open-meteo.com"
    # Open-Meteo serves at most 16 days of daily data
    forecast_days: int = Field(default=16, ge=1, le=16)
    timezone: str = "Europe/London"
    timeout_seconds: float = Field(default=10.0, gt=0.0)


class ServerConfig(BaseModel):
    model_config = {"extra": "forbid"}

    host: str = "127.0.0.1"
    port: int = Field(default=8777, ge=1, le=65535)


class AdvisorConfig(BaseModel):
    model_config = {"extra": "forbid"}

    default_postcode: str = Field(default=DEFAULT_POSTCODE, min_length=1)
    user_agent: str = DEFAULT_USER_AGENT
    geocoder: GeocoderConfig = GeocoderConfig()
    forecast: ForecastConfig = ForecastConfig()
    server: ServerConfig = ServerConfig()

"""Tests for config schema validation."""

import pytest
from pydantic import ValidationError

from advisor.config.schema import (
    AdvisorConfig,
    ForecastConfig,
    GeocoderConfig,
    ServerConfig,
)


class TestAdvisorConfig:
    def test_defaults(self):
        config = AdvisorConfig()
        assert config.default_postcode == "HP18 9HE"
        assert config.geocoder.base_url == "https://api.postcodes.io"
        assert config.forecast.base_url == "https://api.open-meteo.com"
        assert "grass-sowing-advisor" in config.user_agent

    def test_extra_fields_rejected(self):
        with pytest.raises(ValidationError, match="Extra inputs are not permitted"):
            AdvisorConfig(unknown_field="bad")

    def test_nested_extra_fields_rejected(self):
        with pytest.raises(ValidationError, match="Extra inputs are not permitted"):
            ForecastConfig(forecast_days=16, hourly=True)

    def test_empty_default_postcode_rejected(self):
        with pytest.raises(ValidationError):
            AdvisorConfig(default_postcode="")


class TestForecastConfig:
    def test_defaults(self):
        config = ForecastConfig()
        assert config.forecast_days == 16
        assert config.timezone == "Europe/London"

    def test_forecast_days_bounds(self):
        ForecastConfig(forecast_days=1)
        ForecastConfig(forecast_days=16)
        with pytest.raises(ValidationError):
            ForecastConfig(forecast_days=0)
        with pytest.raises(ValidationError):
            ForecastConfig(forecast_days=17)

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            ForecastConfig(timeout_seconds=0.0)


class TestGeocoderConfig:
    def test_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            GeocoderConfig(timeout_seconds=-1.0)


class TestServerConfig:
    def test_defaults(self):
        config = ServerConfig()
        assert config.host == "127.0.0.1"
        assert config.port == 8777

    def test_port_bounds(self):
        with pytest.raises(ValidationError):
            ServerConfig(port=0)
        with pytest.raises(ValidationError):
            ServerConfig(port=70000)

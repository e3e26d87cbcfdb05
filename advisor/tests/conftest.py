"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from advisor.config.schema import AdvisorConfig, ForecastConfig, GeocoderConfig

FIXTURE_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def default_config() -> AdvisorConfig:
    return AdvisorConfig()


@pytest.fixture
def test_config() -> AdvisorConfig:
    """Config pointing both collaborators at fake hosts."""
    return AdvisorConfig(
        geocoder=GeocoderConfig(base_url="https://test-postcodes.example.com"),
        forecast=ForecastConfig(base_url="https://test-meteo.example.com"),
    )


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "default_postcode": "SW1A 1AA",
        "forecast": {"forecast_days": 14},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def postcode_response() -> dict:
    with open(FIXTURE_DIR / "postcodes_hp18_9he.json") as f:
        return json.load(f)


@pytest.fixture
def invalid_postcode_response() -> dict:
    with open(FIXTURE_DIR / "postcodes_invalid.json") as f:
        return json.load(f)


@pytest.fixture
def forecast_response() -> dict:
    with open(FIXTURE_DIR / "open_meteo_daily.json") as f:
        return json.load(f)


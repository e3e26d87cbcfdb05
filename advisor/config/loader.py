"""YAML config loader with hashing."""

import hashlib
from pathlib import Path

import yaml

from advisor.config.schema import AdvisorConfig


def load_config(path: str | Path | None = None) -> AdvisorConfig:
    """Load and validate config from a YAML file.

    With no path, or an empty file, every section takes its defaults.
    """
    if path is None:
        return AdvisorConfig()

    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    return AdvisorConfig(**raw)


def config_hash(config: AdvisorConfig) -> str:
    """Compute a deterministic SHA256 hash of the config."""
    data = config.model_dump_json(indent=None)
    return hashlib.sha256(data.encode()).hexdigest()[:16]


"""Persisted user defaults for salarysim.

Stored as JSON at $SALARYSIM_HOME/config.json (default ~/.salarysim).
Keys are addressed as "section.field", e.g. "simulation.headcount".
"""

import json
import logging
import os
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from ..validation import require_quantile_edges
from .errors import ConfigError, InvalidParameterError
from .models import DEFAULT_BAND_EDGES

logger = logging.getLogger(__name__)

CONFIG_HOME_ENV = "SALARYSIM_HOME"


class SimulationDefaults(BaseModel):
    total_budget: float = Field(default=461000.0, gt=0)
    headcount: int = Field(default=70, gt=0)
    coefficient_of_variation: float = Field(default=0.5, gt=0)
    seed: int | None = Field(default=123, ge=0)


class BandDefaults(BaseModel):
    edges: list[float] = Field(default_factory=lambda: list(DEFAULT_BAND_EDGES))


class SalarySimConfig(BaseModel):
    simulation: SimulationDefaults = Field(default_factory=SimulationDefaults)
    bands: BandDefaults = Field(default_factory=BandDefaults)


# key -> parser for the raw CLI string
CONFIG_KEYS = {
    "simulation.total_budget": "float",
    "simulation.headcount": "int",
    "simulation.coefficient_of_variation": "float",
    "simulation.seed": "int",
    "bands.edges": "float_list",
}


def get_config_dir() -> Path:
    return Path(os.environ.get(CONFIG_HOME_ENV, Path.home() / ".salarysim"))


def get_config_path() -> Path:
    return get_config_dir() / "config.json"


def get_config() -> SalarySimConfig:
    """Load the config, falling back to defaults if no file exists."""
    path = get_config_path()
    if not path.exists():
        return SalarySimConfig()
    try:
        with open(path) as f:
            return SalarySimConfig.model_validate(json.load(f))
    except (json.JSONDecodeError, ValidationError) as e:
        raise ConfigError(f"Config file {path} is invalid: {e}") from e


def save_config(config: SalarySimConfig) -> Path:
    path = get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(config.model_dump(mode="json"), f, indent=2)
    logger.debug(f"[Config] saved to {path}")
    return path


def reset_config() -> Path:
    return save_config(SalarySimConfig())


def _parse_value(key: str, raw: str):
    kind = CONFIG_KEYS[key]
    if kind == "int":
        if key == "simulation.seed" and raw.lower() in ("none", "null", ""):
            return None
        try:
            return int(raw)
        except ValueError:
            raise ConfigError(f"Invalid integer for {key}: {raw!r}") from None
    if kind == "float":
        try:
            return float(raw)
        except ValueError:
            raise ConfigError(f"Invalid number for {key}: {raw!r}") from None
    try:
        return [float(part) for part in raw.split(",") if part.strip()]
    except ValueError:
        raise ConfigError(
            f"Invalid list for {key}: {raw!r} (expected comma-separated numbers)"
        ) from None


def set_config_value(key: str, raw: str) -> SalarySimConfig:
    """Parse raw for key, validate, and persist the updated config."""
    if key not in CONFIG_KEYS:
        raise ConfigError(
            f"Unknown key: {key}. Valid keys: {', '.join(sorted(CONFIG_KEYS))}"
        )

    value = _parse_value(key, raw)
    if key == "bands.edges":
        try:
            value = require_quantile_edges(value, "bands.edges")
        except InvalidParameterError as e:
            raise ConfigError(str(e)) from e
    section, field = key.split(".", 1)

    data = get_config().model_dump()
    data[section][field] = value
    try:
        config = SalarySimConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid value for {key}: {raw!r}\n{e}") from e

    save_config(config)
    return config

"""Centralized configuration management for the pavement adviser."""

import logging
import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class ScoringWeightsConfig(BaseModel):
    """Weights for the six scoring factors.

    These weights control how much each factor contributes to a type's
    raw score. They should sum to 1.0.
    """
    traffic_volume: float = Field(0.30, description="Weight for commercial traffic volume")
    design_life: float = Field(0.20, description="Weight for the selected design life")
    subgrade_cbr: float = Field(0.15, description="Weight for subgrade strength (CBR)")
    slab_thickness: float = Field(0.10, description="Weight for the selected slab thickness")
    environment: float = Field(
        0.10,
        description="Weight for the environmental factor (marine exposure)"
    )
    construction: float = Field(
        0.15,
        description="Weight for the construction factor (utilities, labour, cost, time, width)"
    )


class ScoreBoundsConfig(BaseModel):
    """Bounds applied to the adjusted scores before ranking."""
    balance_ratio: float = Field(
        1.5,
        gt=1.0,
        description="The leader may not exceed this multiple of the runner-up"
    )
    floor_ratio: float = Field(
        0.5,
        ge=0.0,
        lt=1.0,
        description="No type may fall below this fraction of the leader"
    )


class ConfidenceThresholdsConfig(BaseModel):
    """Thresholds for confidence level determination.

    The base level comes from the highest score; the margin over the
    runner-up then moves it one level down or up.
    """
    very_high: int = Field(90, description="Minimum highest score for Very High confidence")
    high: int = Field(80, description="Minimum highest score for High confidence")
    moderate: int = Field(70, description="Minimum highest score for Moderate confidence")
    low: int = Field(60, description="Minimum highest score for Low confidence")
    close_margin: int = Field(
        5,
        description="Margins below this lower the confidence by one level"
    )
    clear_margin: int = Field(
        15,
        description="Margins at or above this raise the confidence by one level"
    )
    alternative_margin: int = Field(
        10,
        description="Margins below this make the runner-up a viable alternative"
    )


class ReliabilityConfig(BaseModel):
    """Reliability index settings."""
    base: int = Field(75, description="Starting reliability")
    complete_input_bonus: int = Field(10, description="Bonus when all four primary factors are given")
    optimal_combination_bonus: int = Field(
        15,
        description="Bonus for each type-optimal combination matched"
    )
    heavy_traffic_thin_slab_penalty: int = Field(20, description="Traffic bucket 4 with a 150 mm slab")
    long_life_thin_slab_penalty: int = Field(15, description="40 year design life with a 150 mm slab")
    light_traffic_long_life_penalty: int = Field(10, description="Traffic bucket 1 with 40 year life")
    minimum: int = Field(50, description="Lower clamp")
    maximum: int = Field(95, description="Upper clamp")


class CompatibilityConfig(BaseModel):
    """Configuration for the compatibility model."""
    hazard_swap_ratio: float = Field(
        0.8,
        gt=0.0,
        le=1.0,
        description="Runner-up share of the top score that triggers the CRCP hazard swap"
    )


class SimulationConfig(BaseModel):
    """Configuration for the Monte Carlo probability estimator."""
    default_sample_size: int = Field(1000, ge=1, description="Trials when no size is given")
    max_sample_size: int = Field(1_000_000, ge=1, description="Largest accepted sample size")
    workers: int = Field(1, ge=1, description="Thread pool size used to run trial chunks")


class AdviserConfig(BaseModel):
    """Complete configuration for the pavement adviser."""
    scoring_weights: ScoringWeightsConfig = Field(default_factory=ScoringWeightsConfig)
    score_bounds: ScoreBoundsConfig = Field(default_factory=ScoreBoundsConfig)
    confidence_thresholds: ConfidenceThresholdsConfig = Field(default_factory=ConfidenceThresholdsConfig)
    reliability: ReliabilityConfig = Field(default_factory=ReliabilityConfig)
    compatibility: CompatibilityConfig = Field(default_factory=CompatibilityConfig)
    simulation: SimulationConfig = Field(default_factory=SimulationConfig)


# Global config instance
_config: Optional[AdviserConfig] = None

CONFIG_ENV_VAR = "CONPAVE_ADVISER_CONFIG"

# Looked up in the working directory, project file first
CONFIG_FILE_NAMES = ("adviser-config.yaml", "adviser-config.yml")


def user_config_path() -> Path:
    return Path.home() / ".config" / "conpave-adviser" / "config.yaml"


def get_config() -> AdviserConfig:
    """Active configuration, defaults until a file is loaded."""
    global _config
    if _config is None:
        _config = AdviserConfig()
    return _config


def load_config(path: Path) -> AdviserConfig:
    """Load and activate an adviser configuration file.

    Sections left out of the file keep their defaults, so a file may
    override only the settings it cares about (for example a site
    office raising the Monte Carlo sample cap).

    Args:
        path: Path to the YAML configuration file.

    Returns:
        The loaded AdviserConfig.

    Raises:
        ConfigurationError: If the file is not valid YAML, is not a
            mapping of sections, or holds out-of-range settings.
    """
    global _config
    path = Path(path)

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"{path} is not valid YAML: {e}", path) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"{path} must contain a mapping of configuration sections", path)

    unknown = sorted(set(data) - set(AdviserConfig.model_fields))
    if unknown:
        raise ConfigurationError(f"{path} has unknown sections: {', '.join(unknown)}", path)

    try:
        config = AdviserConfig.model_validate(data)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ConfigurationError(f"Invalid settings in {path}: {problems}", path) from e

    logger.debug("Loaded adviser configuration from %s", path)
    _config = config
    return _config


def reset_config() -> None:
    """Reset configuration to defaults."""
    global _config
    _config = AdviserConfig()


def find_config_file() -> Optional[Path]:
    """Locate the adviser configuration file, if any.

    Order: the CONPAVE_ADVISER_CONFIG environment variable, the working
    directory (adviser-config.yaml, then .yml), then
    ~/.config/conpave-adviser/config.yaml.

    Raises:
        ConfigurationError: If the environment variable names a missing file.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        path = Path(env_path)
        if not path.is_file():
            raise ConfigurationError(f"{CONFIG_ENV_VAR} points to a missing file: {path}", path)
        return path

    candidates = [Path(name) for name in CONFIG_FILE_NAMES] + [user_config_path()]
    return next((path for path in candidates if path.is_file()), None)


def save_default_config(path: Path) -> None:
    """Write the default configuration as commented YAML.

    The header lists every section with its summary so the file documents
    itself; values are the built-in defaults.
    """
    lines = [
        "# ConPave Adviser Configuration",
        "#",
        "# Sections:",
    ]
    for name, field_info in AdviserConfig.model_fields.items():
        summary = (field_info.annotation.__doc__ or "").strip().splitlines()[0]
        lines.append(f"#   {name}: {summary}")
    lines += [
        "#",
        f"# Searched for in ${CONFIG_ENV_VAR}, ./{CONFIG_FILE_NAMES[0]}",
        "# and ~/.config/conpave-adviser/config.yaml. Omitted sections keep",
        "# their defaults.",
        "",
    ]

    body = yaml.dump(
        AdviserConfig().model_dump(mode="json"),
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        f.write("\n".join(lines) + "\n" + body)

"""Run configuration for training and evaluation."""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from tictactoe_sim.exceptions import ConfigurationError


class RunConfig(BaseModel):
    """Configuration of a self-play training run."""

    training_episodes: int = Field(default=20000, description="Self-play games")
    evaluation_episodes: int = Field(default=1000, description="Evaluation games")
    opponent: str = Field(default="random", description="Evaluation opponent")
    learner_plays_first: bool = Field(
        default=True, description="Evaluated learner plays X"
    )
    alpha: float = Field(default=0.1, description="Learning rate")
    epsilon: float = Field(default=0.01, description="Exploration probability")
    seed: Optional[int] = Field(default=None, description="Random seed")
    report_interval: int = Field(
        default=1000, description="Self-play episodes between progress lines"
    )
    verbose: bool = Field(default=False, description="Print every evaluation move")

    @field_validator("training_episodes", "evaluation_episodes")
    @classmethod
    def validate_episodes(cls, v: int) -> int:
        """Validate episode counts."""
        if v < 0:
            raise ValueError("episode counts cannot be negative")
        return v

    @field_validator("opponent")
    @classmethod
    def validate_opponent(cls, v: str) -> str:
        """Validate evaluation opponent."""
        valid_opponents = ["random", "interactive"]
        if v not in valid_opponents:
            raise ValueError(f"opponent must be one of: {', '.join(valid_opponents)}")
        return v

    @field_validator("alpha")
    @classmethod
    def validate_alpha(cls, v: float) -> float:
        if not 0.0 < v <= 1.0:
            raise ValueError("alpha must be in (0, 1]")
        return v

    @field_validator("epsilon")
    @classmethod
    def validate_epsilon(cls, v: float) -> float:
        if not 0.0 <= v <= 1.0:
            raise ValueError("epsilon must be in [0, 1]")
        return v

    @field_validator("report_interval")
    @classmethod
    def validate_report_interval(cls, v: int) -> int:
        if v < 1:
            raise ValueError("report_interval must be at least 1")
        return v


def load_config(
    config_path: Optional[Path] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> RunConfig:
    """Load run configuration.

    Values come from the defaults, then the YAML file (if any), then
    ``overrides``. Override entries set to None are ignored.

    Args:
        config_path: Path to a YAML configuration file
        overrides: Values taking precedence over the file

    Returns:
        Validated run configuration

    Raises:
        ConfigurationError: If the file cannot be read or values are invalid
    """
    config_data: Dict[str, Any] = {}
    if config_path is not None:
        config_data.update(_load_yaml_file(config_path))

    for key, value in (overrides or {}).items():
        if value is not None:
            config_data[key] = value

    try:
        return RunConfig(**config_data)
    except ValidationError as e:
        raise ConfigurationError(f"Configuration validation failed: {e}") from e


def save_config(config: RunConfig, config_path: Path) -> None:
    """Save configuration to a YAML file.

    Raises:
        ConfigurationError: If configuration cannot be saved
    """
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            yaml.dump(
                config.model_dump(mode="json"),
                f,
                default_flow_style=False,
                sort_keys=False,
            )
    except OSError as e:
        raise ConfigurationError(
            f"Failed to save configuration to {config_path}: {e}"
        ) from e


def _load_yaml_file(file_path: Path) -> Dict[str, Any]:
    """Load and parse a YAML mapping.

    Raises:
        ConfigurationError: If file cannot be loaded or parsed
    """
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {file_path}: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Failed to read {file_path}: {e}") from e

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Configuration file must contain a YAML object, got {type(data).__name__}"
        )

    return data

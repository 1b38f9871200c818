"""Tests for run configuration."""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from tictactoe_sim.config import RunConfig, load_config, save_config
from tictactoe_sim.exceptions import ConfigurationError


class TestRunConfig:
    """Test configuration model validation."""

    def test_default_config(self) -> None:
        """Test creating default configuration."""
        config = RunConfig()

        assert config.training_episodes == 20000
        assert config.evaluation_episodes == 1000
        assert config.opponent == "random"
        assert config.learner_plays_first is True
        assert config.alpha == 0.1
        assert config.epsilon == 0.01
        assert config.seed is None
        assert config.verbose is False

    def test_invalid_opponent(self) -> None:
        """Test that unknown opponents are rejected."""
        with pytest.raises(ValidationError, match="opponent must be one of"):
            RunConfig(opponent="minimax")

    def test_negative_episodes(self) -> None:
        """Test that negative episode counts are rejected."""
        with pytest.raises(ValidationError):
            RunConfig(training_episodes=-1)
        with pytest.raises(ValidationError):
            RunConfig(evaluation_episodes=-5)

    def test_alpha_range(self) -> None:
        """Test learning rate bounds."""
        assert RunConfig(alpha=1.0).alpha == 1.0
        with pytest.raises(ValidationError):
            RunConfig(alpha=0.0)
        with pytest.raises(ValidationError):
            RunConfig(alpha=1.5)

    def test_epsilon_range(self) -> None:
        """Test exploration probability bounds."""
        assert RunConfig(epsilon=0.0).epsilon == 0.0
        with pytest.raises(ValidationError):
            RunConfig(epsilon=-0.1)

    def test_report_interval(self) -> None:
        """Test that report interval must be positive."""
        with pytest.raises(ValidationError):
            RunConfig(report_interval=0)


class TestConfigLoading:
    """Test loading and saving configuration files."""

    def test_load_without_file(self) -> None:
        """Test that no file gives the defaults."""
        assert load_config() == RunConfig()

    def test_load_yaml(self, tmp_path: Path) -> None:
        """Test loading values from YAML."""
        config_path = tmp_path / "run.yaml"
        config_path.write_text(
            yaml.dump({"training_episodes": 500, "opponent": "interactive", "seed": 9})
        )

        config = load_config(config_path)

        assert config.training_episodes == 500
        assert config.opponent == "interactive"
        assert config.seed == 9
        assert config.evaluation_episodes == 1000

    def test_overrides_take_precedence(self, tmp_path: Path) -> None:
        """Test that overrides beat file values and None overrides are ignored."""
        config_path = tmp_path / "run.yaml"
        config_path.write_text(yaml.dump({"training_episodes": 500, "seed": 9}))

        config = load_config(
            config_path, overrides={"training_episodes": 10, "seed": None}
        )

        assert config.training_episodes == 10
        assert config.seed == 9

    def test_empty_file(self, tmp_path: Path) -> None:
        """Test that an empty file gives the defaults."""
        config_path = tmp_path / "empty.yaml"
        config_path.write_text("")
        assert load_config(config_path) == RunConfig()

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        """Test that malformed YAML raises ConfigurationError."""
        config_path = tmp_path / "bad.yaml"
        config_path.write_text("training_episodes: [1, 2\n")

        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            load_config(config_path)

    def test_non_mapping(self, tmp_path: Path) -> None:
        """Test that a YAML list is rejected."""
        config_path = tmp_path / "list.yaml"
        config_path.write_text("- 1\n- 2\n")

        with pytest.raises(ConfigurationError, match="YAML object"):
            load_config(config_path)

    def test_invalid_values(self, tmp_path: Path) -> None:
        """Test that invalid values raise ConfigurationError."""
        config_path = tmp_path / "run.yaml"
        config_path.write_text(yaml.dump({"alpha": 2.0}))

        with pytest.raises(ConfigurationError, match="validation failed"):
            load_config(config_path)

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test that a missing file raises ConfigurationError."""
        with pytest.raises(ConfigurationError, match="Failed to read"):
            load_config(tmp_path / "missing.yaml")

    def test_save_config(self, tmp_path: Path) -> None:
        """Test that a saved configuration loads back."""
        config = RunConfig(training_episodes=42, learner_plays_first=False, seed=1)
        config_path = tmp_path / "nested" / "run.yaml"

        save_config(config, config_path)

        assert config_path.exists()
        assert load_config(config_path) == config

"""Tests for config loading and validation."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from referee.config import load_config
from referee.schemas.config import NarrativeSettings, RefereeConfig
from referee.schemas.constraints import ConstraintSet


class TestRefereeConfig:
    """Test the RefereeConfig Pydantic model directly."""

    def test_defaults(self) -> None:
        cfg = RefereeConfig()
        assert cfg.constraints == ConstraintSet()
        assert cfg.narrative == NarrativeSettings()
        assert cfg.narrative.model == "gpt-4o"
        assert cfg.narrative.temperature == 0.7
        assert cfg.narrative.top_p == 0.95
        assert cfg.narrative.max_retries == 0
        assert cfg.output_directory == "./output"

    def test_partial_constraints_keep_defaults(self) -> None:
        cfg = RefereeConfig(constraints={"traffic": "high"})
        assert cfg.constraints.traffic == "high"
        assert cfg.constraints.budget == "medium"

    def test_invalid_constraint_value(self) -> None:
        with pytest.raises(ValidationError, match="traffic"):
            RefereeConfig(constraints={"traffic": "sometimes"})

    @pytest.mark.parametrize(
        "narrative",
        [{"temperature": 3.0}, {"top_p": 1.5}, {"max_tokens": 0}, {"max_retries": -1}],
    )
    def test_invalid_narrative_settings(self, narrative: dict) -> None:
        with pytest.raises(ValidationError):
            RefereeConfig(narrative=narrative)


class TestLoadConfig:
    """Test YAML file loading."""

    def test_no_path_gives_defaults(self) -> None:
        assert load_config() == RefereeConfig()

    def test_load_valid_file(self, tmp_config: Path) -> None:
        cfg = load_config(tmp_config)
        assert cfg.constraints.traffic == "unpredictable"
        assert cfg.constraints.control == "high"
        assert cfg.output_directory.endswith("output")

    def test_camel_case_dev_speed(self, tmp_path: Path) -> None:
        cfg_file = tmp_path / "config.yml"
        cfg_file.write_text("constraints:\n  devSpeed: low\n")
        assert load_config(cfg_file).constraints.dev_speed == "low"

    def test_file_not_found(self) -> None:
        with pytest.raises(FileNotFoundError):
            load_config("/nonexistent/config.yml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        bad = tmp_path / "bad.yml"
        bad.write_text("just a string")
        with pytest.raises(ValueError, match="YAML mapping"):
            load_config(bad)

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        empty = tmp_path / "empty.yml"
        empty.write_text("")
        assert load_config(empty) == RefereeConfig()

    def test_null_sections_become_defaults(self, tmp_path: Path) -> None:
        """YAML sections with every key commented out load as None."""
        cfg_file = tmp_path / "config.yml"
        cfg_file.write_text(
            """\
constraints:
  # traffic: high
narrative:
output_directory: ./reports
"""
        )
        cfg = load_config(cfg_file)
        assert cfg.constraints == ConstraintSet()
        assert cfg.narrative == NarrativeSettings()
        assert cfg.output_directory == "./reports"

    def test_malformed_yaml_is_value_error(self, tmp_path: Path) -> None:
        bad = tmp_path / "bad.yml"
        bad.write_text("constraints: [unclosed\n")
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_config(bad)

    @pytest.mark.parametrize(
        "content",
        ["1: 2\n", "constraints:\n  1: high\n", "narrative:\n  2: 0.5\n"],
    )
    def test_non_string_keys_rejected(self, tmp_path: Path, content: str) -> None:
        cfg_file = tmp_path / "config.yml"
        cfg_file.write_text(content)
        with pytest.raises(ValueError, match="keys must be strings"):
            load_config(cfg_file)

"""Tests for the YAML configuration loader."""

from pathlib import Path

import pytest

from flightprep.core.config import ConfigError, ConfigLoader


@pytest.fixture
def plan_file(tmp_path: Path) -> Path:
    path = tmp_path / "plan.yaml"
    path.write_text(
        "parameters:\n"
        "  cruise_ias: 95\n"
        "  takeoff_time: '09:15'\n"
        "legs:\n"
        "  - {from: LLHZ, to: NTNYA, distance_nm: 12}\n"
    )
    return path


class TestConfigLoader:
    """Test ConfigLoader loading and access."""

    def test_load_and_get(self, plan_file: Path) -> None:
        """Test dot-notation access after loading."""
        config = ConfigLoader.load(plan_file)

        assert config.get("parameters.cruise_ias") == 95
        assert config.get("parameters.takeoff_time") == "09:15"
        assert config.get("parameters.missing", default="x") == "x"
        assert config.get("legs.0") is None

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test a missing file raises ConfigError."""
        with pytest.raises(ConfigError, match="not found"):
            ConfigLoader.load(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        """Test malformed YAML raises ConfigError."""
        path = tmp_path / "bad.yaml"
        path.write_text("legs: [unclosed\n")

        with pytest.raises(ConfigError, match="Failed to load"):
            ConfigLoader.load(path)

    def test_non_mapping_root(self, tmp_path: Path) -> None:
        """Test a list at the root is rejected."""
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ConfigError, match="mapping"):
            ConfigLoader.load(path)

    def test_empty_file(self, tmp_path: Path) -> None:
        """Test an empty file loads as an empty configuration."""
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert ConfigLoader.load(path).to_dict() == {}

    def test_get_list(self, plan_file: Path) -> None:
        """Test list access and its errors."""
        config = ConfigLoader.load(plan_file)

        assert len(config.get_list("legs")) == 1
        assert config.get_list("waypoints") == []
        with pytest.raises(ConfigError):
            config.get_list("parameters")

    def test_get_section(self, plan_file: Path) -> None:
        """Test section access and its errors."""
        config = ConfigLoader.load(plan_file)

        assert config.get_section("parameters")["cruise_ias"] == 95
        with pytest.raises(ConfigError, match="not found"):
            config.get_section("aircraft")
        with pytest.raises(ConfigError, match="not a section"):
            config.get_section("legs")

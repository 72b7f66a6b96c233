"""Unit tests for configuration management."""

from pathlib import Path

import pytest

from quantlab.config.defaults import DefaultConfig, get_default_config
from quantlab.config.loader import ConfigLoader
from quantlab.config.validation import ConfigValidator
from quantlab.errors import MalformedDataError


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """Config directory with one instrument override file."""
    (tmp_path / "instruments.yaml").write_text(
        "instruments:\n"
        "  INFY:\n"
        "    volatility:\n"
        "      window_size: 10\n"
        "    orderbook:\n"
        "      equal_price_priority: fifo\n"
    )
    return tmp_path


class TestDefaultConfig:
    """Test suite for default configuration."""

    def test_default_config_creation(self) -> None:
        """Test that default configuration can be created."""
        config = get_default_config()
        assert config.volatility.window_size == 20
        assert config.pairs.trading_days == 252
        assert config.orderbook.equal_price_priority == "lifo"
        assert config.simulation.days == 100


class TestConfigLoader:
    """Test suite for configuration loader."""

    def test_config_loader_creation(self) -> None:
        """Test that ConfigLoader can be created."""
        loader = ConfigLoader.create()
        assert isinstance(loader.config_dir, Path)

    def test_merge_config_defaults_only(self, tmp_path: Path) -> None:
        """Test config merging with no override file."""
        loader = ConfigLoader.create(tmp_path)
        config = loader.merge_config("UNKNOWN-INSTRUMENT")

        assert config["volatility"]["window_size"] == 20
        assert config["pairs"]["trading_days"] == 252

    def test_instrument_overrides(self, config_dir: Path) -> None:
        """Test instrument-specific values replace defaults."""
        loader = ConfigLoader.create(config_dir)
        config = loader.merge_config("INFY")

        assert config["volatility"]["window_size"] == 10
        assert config["orderbook"]["equal_price_priority"] == "fifo"
        # Other defaults should remain
        assert config["orderbook"]["max_levels"] == 5

    def test_explicit_overrides_take_precedence(self, config_dir: Path) -> None:
        """Test explicit overrides beat instrument overrides."""
        loader = ConfigLoader.create(config_dir)
        config = loader.merge_config("INFY", {"volatility": {"window_size": 5}})

        assert config["volatility"]["window_size"] == 5

    def test_build_config(self, config_dir: Path) -> None:
        """Test merged values are converted back to dataclasses."""
        loader = ConfigLoader.create(config_dir)
        config = loader.build_config("INFY", {"pairs": {"trading_days": 250}})

        assert isinstance(config, DefaultConfig)
        assert config.volatility.window_size == 10
        assert config.pairs.trading_days == 250

    def test_build_config_ignores_unknown_keys(self, tmp_path: Path) -> None:
        """Test unknown keys do not break dataclass construction."""
        loader = ConfigLoader.create(tmp_path)
        config = loader.build_config(overrides={"volatility": {"window_size": 7, "unused": 1}})

        assert config.volatility.window_size == 7

    def test_empty_yaml_file(self, tmp_path: Path) -> None:
        """Test an empty override file is treated as no overrides."""
        (tmp_path / "instruments.yaml").write_text("")
        loader = ConfigLoader.create(tmp_path)

        assert loader.load_instrument_config("INFY") == {}


class TestConfigValidator:
    """Test suite for configuration validation."""

    def test_defaults_are_valid(self) -> None:
        """Test merged defaults pass validation."""
        config = ConfigLoader.create().merge_config()
        assert ConfigValidator.validate_config(config) == []

    @pytest.mark.parametrize("window_size", [0, -1, 2.5, True, "20"])
    def test_invalid_volatility_window(self, window_size) -> None:
        """Test volatility window must be a positive integer."""
        errors = ConfigValidator.validate_config({"volatility": {"window_size": window_size}})

        assert len(errors) == 1
        assert errors[0].field == "window_size"
        assert errors[0].value == window_size

    def test_invalid_priority(self) -> None:
        """Test order book tie-break must be lifo or fifo."""
        errors = ConfigValidator.validate_orderbook_params({"equal_price_priority": "newest"})
        assert [e.field for e in errors] == ["equal_price_priority"]

    def test_invalid_pairs_and_simulation(self) -> None:
        """Test errors are collected across sections."""
        errors = ConfigValidator.validate_config({
            "pairs": {"trading_days": 0},
            "simulation": {"days": -5, "seed": "abc"},
        })

        assert sorted(e.field for e in errors) == ["days", "seed", "trading_days"]

    def test_null_seed_allowed(self) -> None:
        """Test an unseeded simulation is valid."""
        assert ConfigValidator.validate_simulation_params({"seed": None}) == []

    @pytest.mark.parametrize("section", ["volatility", "pairs", "orderbook", "simulation", "reporting"])
    def test_non_mapping_section(self, section) -> None:
        """Test a scalar section is reported instead of raising."""
        errors = ConfigValidator.validate_config({section: 5})

        assert len(errors) == 1
        assert errors[0].field == section
        assert errors[0].message == "Must be a mapping"
        assert errors[0].value == 5

    def test_invalid_reporting(self) -> None:
        """Test reporting widths and scale are checked."""
        errors = ConfigValidator.validate_reporting_params({
            "percent_scale": 0,
            "ticker_width": -1,
            "value_width": 10,
        })
        assert [e.field for e in errors] == ["percent_scale", "ticker_width"]


class TestMalformedConfigFiles:
    """Test override files with the wrong shape."""

    @pytest.mark.parametrize("content", [
        "- INFY\n- TCS\n",
        "instruments:\n  - INFY\n",
        "instruments: 5\n",
        "instruments:\n  INFY: 20\n",
    ])
    def test_malformed_instruments_file(self, tmp_path: Path, content: str) -> None:
        """Test wrongly shaped override files raise MalformedDataError."""
        (tmp_path / "instruments.yaml").write_text(content)
        loader = ConfigLoader.create(tmp_path)

        with pytest.raises(MalformedDataError) as exc_info:
            loader.load_instrument_config("INFY")

        assert exc_info.value.expected_format == "mapping"

    def test_other_ticker_unaffected_by_missing_entry(self, config_dir: Path) -> None:
        """Test a ticker absent from the file gets no overrides."""
        loader = ConfigLoader.create(config_dir)
        assert loader.load_instrument_config("TCS") == {}

    def test_build_config_rejects_non_mapping_section(self, tmp_path: Path) -> None:
        """Test build_config raises a data error for a scalar section."""
        loader = ConfigLoader.create(tmp_path)

        with pytest.raises(MalformedDataError):
            loader.build_config(overrides={"volatility": 5})

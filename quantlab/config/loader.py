"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional

import yaml

from ..errors import MalformedDataError
from .defaults import DefaultConfig, get_default_config


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_instrument_config(self, ticker: str) -> dict[str, Any]:
        """Load instrument-specific configuration overrides."""
        instruments_file = self.config_dir / "instruments.yaml"

        if not instruments_file.exists():
            return {}

        with open(instruments_file) as f:
            instruments_config = yaml.safe_load(f) or {}

        if not isinstance(instruments_config, dict):
            raise MalformedDataError(
                f"{instruments_file} must contain a mapping",
                raw_data=instruments_config,
                expected_format="mapping"
            )

        instruments = instruments_config.get("instruments") or {}
        if not isinstance(instruments, dict):
            raise MalformedDataError(
                f"'instruments' in {instruments_file} must be a mapping of ticker to overrides",
                raw_data=instruments,
                expected_format="mapping"
            )

        instrument_config = instruments.get(ticker) or {}
        if not isinstance(instrument_config, dict):
            raise MalformedDataError(
                f"Overrides for {ticker} in {instruments_file} must be a mapping",
                raw_data=instrument_config,
                expected_format="mapping",
                context={"ticker": ticker}
            )

        return instrument_config

    def merge_config(
        self,
        ticker: Optional[str] = None,
        overrides: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Explicit overrides (highest priority)
        2. Instrument-specific overrides
        3. Global defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)

        if ticker is not None:
            config = self._deep_merge(config, self.load_instrument_config(ticker))

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def build_config(
        self,
        ticker: Optional[str] = None,
        overrides: Optional[dict[str, Any]] = None
    ) -> DefaultConfig:
        """Merge configuration and convert it back to typed dataclasses."""
        merged = self.merge_config(ticker, overrides)

        sections = {}
        for section in fields(DefaultConfig):
            default_section = getattr(self.defaults, section.name)
            known = {f.name for f in fields(default_section)}
            section_values = merged.get(section.name) or {}
            if not isinstance(section_values, dict):
                raise MalformedDataError(
                    f"Configuration section '{section.name}' must be a mapping",
                    raw_data=section_values,
                    expected_format="mapping"
                )
            values = {
                key: value
                for key, value in section_values.items()
                if key in known
            }
            sections[section.name] = type(default_section)(**values)

        return DefaultConfig(**sections)

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name in obj.__dataclass_fields__:
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result

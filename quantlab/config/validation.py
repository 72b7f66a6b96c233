"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_volatility_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate volatility parameters."""
        errors = []

        if "window_size" in params:
            value = params["window_size"]
            if not _is_positive_int(value):
                errors.append(ValidationError(
                    field="window_size",
                    message="Must be a positive integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_pairs_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate pairs-trading parameters."""
        errors = []

        if "trading_days" in params:
            value = params["trading_days"]
            if not _is_positive_int(value):
                errors.append(ValidationError(
                    field="trading_days",
                    message="Must be a positive integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_orderbook_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate order book parameters."""
        errors = []

        if "equal_price_priority" in params:
            value = params["equal_price_priority"]
            if value not in ("lifo", "fifo"):
                errors.append(ValidationError(
                    field="equal_price_priority",
                    message="Must be 'lifo' or 'fifo'",
                    value=value
                ))

        if "max_levels" in params:
            value = params["max_levels"]
            if not _is_positive_int(value):
                errors.append(ValidationError(
                    field="max_levels",
                    message="Must be a positive integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_simulation_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate price simulation parameters."""
        errors = []

        for name in ("days", "leader_move_range", "follower_noise_range"):
            if name in params:
                value = params[name]
                if not _is_positive_int(value):
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a positive integer",
                        value=value
                    ))

        if "seed" in params:
            value = params["seed"]
            if value is not None and (not isinstance(value, int) or isinstance(value, bool)):
                errors.append(ValidationError(
                    field="seed",
                    message="Must be an integer or null",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_reporting_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate console reporting parameters."""
        errors = []

        if "percent_scale" in params:
            value = params["percent_scale"]
            if (not isinstance(value, (int, float)) or isinstance(value, bool)
                    or value <= 0):
                errors.append(ValidationError(
                    field="percent_scale",
                    message="Must be a positive number",
                    value=value
                ))

        for name in ("ticker_width", "value_width"):
            if name in params and not _is_positive_int(params[name]):
                errors.append(ValidationError(
                    field=name,
                    message="Must be a positive integer",
                    value=params[name]
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []
        section_validators = {
            "volatility": ConfigValidator.validate_volatility_params,
            "pairs": ConfigValidator.validate_pairs_params,
            "orderbook": ConfigValidator.validate_orderbook_params,
            "simulation": ConfigValidator.validate_simulation_params,
            "reporting": ConfigValidator.validate_reporting_params,
        }

        for section, validate in section_validators.items():
            if section not in config:
                continue
            params = config[section]
            if not isinstance(params, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=params
                ))
                continue
            errors.extend(validate(params))

        return errors

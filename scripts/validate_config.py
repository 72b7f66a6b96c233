#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from typing import List

import yaml

from quantlab.config.loader import ConfigLoader
from quantlab.config.validation import ConfigValidator, ValidationError


def validate_instrument_config(loader: ConfigLoader, ticker: str) -> List[ValidationError]:
    """Validate the merged configuration for a specific instrument."""
    config = loader.merge_config(ticker)
    return ConfigValidator.validate_config(config)


def main():
    """Validate defaults plus every instrument listed in instruments.yaml."""
    print("Validating quantlab configuration...")

    loader = ConfigLoader.create()
    instruments_file = loader.config_dir / "instruments.yaml"

    tickers = []
    if instruments_file.exists():
        with open(instruments_file) as f:
            tickers = list((yaml.safe_load(f) or {}).get("instruments", {}))

    all_valid = True
    for ticker in [*tickers, "UNKNOWN-INSTRUMENT"]:
        errors = validate_instrument_config(loader, ticker)
        if errors:
            print(f"{ticker}: {len(errors)} validation errors")
            for error in errors:
                print(f"  - {error.field}: {error.message} (value: {error.value})")
            all_valid = False
        else:
            print(f"{ticker}: configuration is valid")

    sys.exit(0 if all_valid else 1)


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import List

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from quantflow.config.loader import ConfigLoader
from quantflow.config.validation import ConfigValidator, ValidationError
from quantflow.errors import InvalidArgumentError


def validate_asset_config(loader: ConfigLoader, asset_id: str) -> List[ValidationError]:
    """Validate merged configuration for a specific asset."""
    config = loader.merge_config(asset_id)
    return ConfigValidator.validate_config(config)


def main():
    """Main validation function."""
    print("🔍 Validating QuantFlow configuration...")

    loader = ConfigLoader.create()

    # Assets listed in config/assets.yaml plus one that falls back to defaults
    assets = ["bitcoin", "ethereum", "solana", "ripple", "cardano", "unknown-asset"]

    all_valid = True

    for asset_id in assets:
        print(f"\n📊 Validating {asset_id}...")
        errors = validate_asset_config(loader, asset_id)

        if errors:
            print(f"❌ Found {len(errors)} validation errors:")
            for error in errors:
                print(f"  • {error.field}: {error.message} (value: {error.value})")
            all_valid = False
            continue

        try:
            config = loader.build_config(asset_id)
        except InvalidArgumentError as e:
            print(f"❌ Could not build config: {e}")
            all_valid = False
            continue

        print(f"✅ {asset_id} configuration is valid (warm-up: {config.get_warmup_period()} points)")

    # Per-call overrides
    print("\n📋 Testing per-call overrides...")
    overrides = {
        "moving_average": {"short_window": 10, "long_window": 30},
        "weights": {"trend": 0.5, "momentum": 0.25, "convergence": 0.25},
    }
    errors = ConfigValidator.validate_config(loader.merge_config("bitcoin", overrides))
    if errors:
        print("❌ Override validation failed:")
        for error in errors:
            print(f"  • {error.field}: {error.message}")
        all_valid = False
    else:
        print("✅ Override validation passed")

    if all_valid:
        print("\n🎉 All configuration validation passed!")
        sys.exit(0)
    else:
        print("\n❌ Configuration validation failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
Configuration Demo - QuantFlow Signal Engine

Demonstrates the configuration precedence:
1. Per-call overrides / flat options (highest)
2. Per-asset overrides from config/assets.yaml
3. Global defaults (lowest)

Run: python examples/configuration_demo.py
"""

from quantflow.config.defaults import get_default_config
from quantflow.config.loader import ConfigLoader
from quantflow.config.options import config_from_options
from quantflow.config.validation import ConfigValidator
from quantflow.data.models import PriceSeries
from quantflow.engine import analyze_series
from quantflow.errors import InvalidArgumentError


def main():
    defaults = get_default_config()
    print("🔧 Defaults")
    print(f"   SMA windows: {defaults.moving_average.short_window}/{defaults.moving_average.long_window}")
    print(f"   MACD: {defaults.macd.fast}/{defaults.macd.slow}/{defaults.macd.signal}")
    print(f"   Warm-up: {defaults.get_warmup_period()} points")

    loader = ConfigLoader.create()
    solana = loader.build_config("solana")
    print("\n🪙 Solana overrides")
    print(f"   trend_sensitivity: {solana.scoring.trend_sensitivity}")

    tuned = loader.build_config("solana", {"scoring": {"trend_sensitivity": 60.0}})
    print(f"   with per-call override: {tuned.scoring.trend_sensitivity}")

    print("\n🎛️  Flat options")
    config = config_from_options({"shortWindow": 6, "longWindow": 24, "weights": {"trend": 0.6}})
    print(f"   warm-up is now {config.get_warmup_period()} points")

    series = PriceSeries.from_values([100 + i * 0.5 for i in range(60)])
    signal = analyze_series(series, config).signal
    print(f"   {signal.action.value} ({signal.confidence}%): {signal.summary}")

    print("\n🚫 Invalid options fail fast")
    errors = ConfigValidator.validate_config({"macd": {"fast": 30, "slow": 26}})
    for error in errors:
        print(f"   • {error.field}: {error.message}")
    try:
        config_from_options({"macdFast": 30})
    except InvalidArgumentError as e:
        print(f"   raised: {e}")


if __name__ == "__main__":
    main()

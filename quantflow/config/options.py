"""
Flat option mapping for the HTTP boundary.

Callers describe indicator settings with a flat camelCase object
(``shortWindow``, ``macdFast``, ``weights.trend``, ...). This module maps that
object onto the nested configuration sections.
"""

from dataclasses import asdict
from typing import Any, Optional

from ..errors import InvalidArgumentError
from .defaults import DefaultConfig, get_default_config
from .loader import config_from_dict

# option key -> (section, field)
OPTION_FIELDS = {
    "shortWindow": ("moving_average", "short_window"),
    "longWindow": ("moving_average", "long_window"),
    "rsiPeriod": ("rsi", "period"),
    "macdFast": ("macd", "fast"),
    "macdSlow": ("macd", "slow"),
    "macdSignal": ("macd", "signal"),
    "buyThreshold": ("thresholds", "buy"),
    "sellThreshold": ("thresholds", "sell"),
}

WEIGHT_KEYS = ("trend", "momentum", "convergence")


def options_to_overrides(options: dict[str, Any]) -> dict[str, Any]:
    """
    Translate flat options into nested config overrides.

    Raises:
        InvalidArgumentError: On unknown option keys or a malformed weights object
    """
    overrides: dict[str, dict[str, Any]] = {}

    for key, value in options.items():
        if key == "weights":
            if not isinstance(value, dict):
                raise InvalidArgumentError("weights must be an object", argument="weights", value=value)
            unknown = sorted(set(value) - set(WEIGHT_KEYS))
            if unknown:
                raise InvalidArgumentError(f"Unknown weight keys: {unknown}", argument="weights", value=value)
            overrides.setdefault("weights", {}).update(value)
            continue

        if key not in OPTION_FIELDS:
            raise InvalidArgumentError(f"Unknown option: {key}", argument=key, value=value)

        section, field = OPTION_FIELDS[key]
        overrides.setdefault(section, {})[field] = value

    return overrides


def config_from_options(options: Optional[dict[str, Any]] = None,
                        base: Optional[DefaultConfig] = None) -> DefaultConfig:
    """Apply flat options on top of a base config (defaults when omitted)."""
    base = base or get_default_config()
    if not options:
        return base

    merged = asdict(base)
    for section, values in options_to_overrides(options).items():
        merged[section].update(values)

    return config_from_dict(merged)

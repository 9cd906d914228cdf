"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from ..errors import InvalidArgumentError
from .defaults import (
    DefaultConfig,
    LoggingParams,
    MACDParams,
    MovingAverageParams,
    RSIParams,
    ScoringParams,
    ThresholdParams,
    WeightParams,
    get_default_config,
)
from .validation import ConfigValidator

_SECTIONS = {
    "moving_average": MovingAverageParams,
    "rsi": RSIParams,
    "macd": MACDParams,
    "weights": WeightParams,
    "thresholds": ThresholdParams,
    "scoring": ScoringParams,
    "logging": LoggingParams,
}


def config_from_dict(config: dict[str, Any]) -> DefaultConfig:
    """
    Build a validated DefaultConfig from a (possibly partial) nested dict.

    Missing sections and fields fall back to the defaults. Validation runs on
    the merged result so cross-field checks see the effective values.

    Raises:
        InvalidArgumentError: On unknown sections/fields or invalid values
    """
    merged: dict[str, Any] = asdict(get_default_config())
    for name, section in config.items():
        if name in merged and isinstance(section, dict):
            merged[name] = {**merged[name], **section}
        else:
            merged[name] = section

    ConfigValidator.ensure_valid(merged)

    sections = {}
    for name, params_cls in _SECTIONS.items():
        section = merged[name]
        known = {f.name for f in fields(params_cls)}
        unknown = sorted(set(section) - known)
        if unknown:
            raise InvalidArgumentError(
                f"Unknown {name} parameters: {unknown}",
                argument=name,
                value=unknown,
            )
        sections[name] = params_cls(**section)

    return DefaultConfig(**sections)


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Union[str, Path]] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_asset_config(self, asset_id: str) -> dict[str, Any]:
        """Load asset-specific configuration overrides."""
        assets_file = self.config_dir / "assets.yaml"

        if not assets_file.exists():
            return {}

        with open(assets_file) as f:
            assets_config = yaml.safe_load(f) or {}

        return assets_config.get("assets", {}).get(asset_id, {}) or {}  # type: ignore[no-any-return]

    def merge_config(
        self,
        asset_id: Optional[str] = None,
        overrides: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Per-call overrides (highest priority)
        2. Asset-specific overrides
        3. Global defaults (lowest priority)
        """
        # Start with global defaults
        config = asdict(self.defaults)

        # Apply asset-specific overrides
        if asset_id:
            config = self._deep_merge(config, self.load_asset_config(asset_id))

        # Apply per-call overrides
        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def build_config(
        self,
        asset_id: Optional[str] = None,
        overrides: Optional[dict[str, Any]] = None
    ) -> DefaultConfig:
        """Merge all tiers and return a validated DefaultConfig."""
        return config_from_dict(self.merge_config(asset_id, overrides))

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result

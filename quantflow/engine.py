"""
Main analysis engine coordinator.

Boundary used by the market-data HTTP layer: a price series goes in, the
indicator arrays (for charting) and one synthesized signal (for the
recommendation display) come out.

Pipeline:
Price Series → Config Resolution → Indicators → Signal Synthesis → Payload
"""

from dataclasses import dataclass
from typing import Any, Optional, Union

import orjson
import structlog

from .config.defaults import DefaultConfig
from .config.loader import ConfigLoader
from .config.options import options_to_overrides
from .data.models import PriceSeries
from .errors import InsufficientHistoryError, InvalidArgumentError
from .metrics.calculator import IndicatorCalculator
from .models.indicators import IndicatorBundle
from .models.signal import Signal
from .signals.synthesizer import SignalSynthesizer
from .utils.time import range_hours
from .validation.signal_schema import validate_signal

logger = structlog.get_logger(__name__)

DISCLAIMER = (
    "Signals are generated algorithmically. "
    "Past performance does not guarantee future results."
)


@dataclass(frozen=True)
class MarketAnalysis:
    """Indicator streams and the synthesized signal for one price series."""
    series: PriceSeries
    indicators: IndicatorBundle
    signal: Signal
    config: DefaultConfig

    def to_dict(self) -> dict[str, Any]:
        """
        Structural mapping for the caller's serializer.

        Raises:
            SignalValidationError: If the signal payload breaks the schema
        """
        signal_payload = self.signal.to_dict()
        validate_signal(signal_payload)

        return {
            "signal": signal_payload,
            "series": self.series.to_list(),
            "indicators": self.indicators.to_dict(),
            "meta": {
                "points": len(self.series),
                "rangeHours": range_hours(self.series.times),
                "disclaimer": DISCLAIMER,
            },
        }

    def to_json(self) -> bytes:
        """Validated payload encoded as JSON (undefined slots become null)."""
        return orjson.dumps(self.to_dict())


def analyze_series(series: PriceSeries, config: Optional[DefaultConfig] = None) -> MarketAnalysis:
    """
    Compute indicators once and synthesize the signal from them.

    Raises:
        InvalidArgumentError: On malformed configuration
        InsufficientHistoryError: If the series is too short for every indicator
    """
    synthesizer = SignalSynthesizer(config)
    calculator: IndicatorCalculator = synthesizer.calculator

    calculator.ensure_warmed_up(series)
    bundle = calculator.calculate(series)
    signal = synthesizer.synthesize(bundle, series.last_price)

    return MarketAnalysis(
        series=series,
        indicators=bundle,
        signal=signal,
        config=synthesizer.config,
    )


class MarketAnalysisEngine:
    """
    Coordinator resolving per-asset configuration and running the analysis.

    Holds only the config loader; every call is independent, so one engine
    can serve many assets concurrently.
    """

    def __init__(self, config_dir: Optional[str] = None) -> None:
        """Initialize the analysis engine."""
        self.logger = logger
        self.config_loader = ConfigLoader.create(config_dir)

        self.logger.info("Market analysis engine initialized", config_dir=str(self.config_loader.config_dir))

    def resolve_config(
        self,
        asset_id: Optional[str] = None,
        overrides: Optional[dict[str, Any]] = None,
        options: Optional[dict[str, Any]] = None
    ) -> DefaultConfig:
        """
        Resolve configuration for a call.

        Args:
            asset_id: Asset whose YAML overrides apply
            overrides: Nested per-call overrides
            options: Flat camelCase options as sent by the HTTP layer; applied
                after ``overrides``

        Raises:
            InvalidArgumentError: If the merged configuration is invalid
        """
        merged_overrides = dict(overrides or {})
        if options:
            for section, values in options_to_overrides(options).items():
                merged_overrides[section] = {**merged_overrides.get(section, {}), **values}

        return self.config_loader.build_config(asset_id, merged_overrides or None)

    def analyze(
        self,
        series: PriceSeries,
        asset_id: Optional[str] = None,
        overrides: Optional[dict[str, Any]] = None,
        options: Optional[dict[str, Any]] = None
    ) -> MarketAnalysis:
        """
        Analyze one price series.

        Raises:
            InvalidArgumentError: On malformed configuration
            InsufficientHistoryError: If the series is too short; the caller
                decides whether to fetch more history or use fallback data
        """
        try:
            config = self.resolve_config(asset_id, overrides, options)
            analysis = analyze_series(series, config)

        except InsufficientHistoryError as e:
            self.logger.warning(
                "Insufficient price history for analysis",
                asset_id=asset_id,
                required_count=e.required_count,
                available_count=e.available_count
            )
            raise

        except InvalidArgumentError as e:
            self.logger.error(
                "Invalid analysis request",
                asset_id=asset_id,
                error=str(e),
                argument=e.argument
            )
            raise

        self.logger.info(
            "Analyzed price series",
            asset_id=asset_id,
            points=len(series),
            action=analysis.signal.action.value,
            confidence=analysis.signal.confidence
        )
        return analysis

    def analyze_payload(
        self,
        series: Union[PriceSeries, list],
        asset_id: Optional[str] = None,
        options: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        """Analyze a series and return the serializable payload."""
        if not isinstance(series, PriceSeries):
            series = PriceSeries(tuple(series))
        return self.analyze(series, asset_id=asset_id, options=options).to_dict()

"""
Signal synthesis from the latest indicator readings.

Three directional scores in [-1, 1] (trend, momentum, convergence) are
blended by configurable weights into a composite score, which is mapped to
BUY / SELL / HOLD through configurable thresholds. The procedure is fully
deterministic: the same series and config always give the same Signal.
"""

from collections.abc import Sequence
from typing import Optional, Union

from ..config.defaults import DefaultConfig, RSIParams, ScoringParams, get_default_config
from ..config.validation import ConfigValidator
from ..data.models import PricePoint, PriceSeries
from ..errors import InsufficientHistoryError
from ..logging.config import get_signal_logger, log_signal_decision
from ..metrics.calculator import IndicatorCalculator
from ..models.indicators import IndicatorBundle, IndicatorSnapshot
from ..models.signal import Factor, FactorScores, Signal, SignalAction
from .narrative import build_bullet_points, build_summary


# Scores closer to zero than this are floating-point residue
SCORE_EPSILON = 1e-9


def clamp(value: float, lower: float = -1.0, upper: float = 1.0) -> float:
    return max(lower, min(upper, value))


def snap(value: float) -> float:
    """Collapse floating-point residue around zero to exactly 0.0"""
    return 0.0 if abs(value) < SCORE_EPSILON else value


def trend_score(short_sma: float, long_sma: float, sensitivity: float) -> float:
    """
    Relative SMA spread scaled by sensitivity

    score = clamp((short - long) / long * sensitivity)
    """
    if long_sma == 0:
        return 0.0
    return clamp((short_sma - long_sma) / long_sma * sensitivity)


def momentum_score(rsi: float, params: RSIParams) -> float:
    """
    Contrarian RSI read

    oversold maps to +1, overbought to -1 and the midpoint to 0, linear in
    between and saturating outside the bounds.
    """
    midpoint = (params.oversold + params.overbought) / 2
    half_range = (params.overbought - params.oversold) / 2
    return clamp((midpoint - rsi) / half_range)


def convergence_score(
    macd: float,
    histogram: float,
    recent_histogram: Sequence[float],
    price: float,
    params: ScoringParams
) -> float:
    """
    MACD read combining the signal-line crossover and the zero line

    crossover = histogram / max(max |recent histogram|, price * floor_pct)
    zero_line = macd / (price * zero_line_scale_pct)

    Both parts are clamped to [-1, 1] and blended by crossover_weight.
    """
    norm = max(
        max((abs(h) for h in recent_histogram), default=0.0),
        price * params.histogram_floor_pct,
    )
    crossover = clamp(histogram / norm) if norm > 0 else 0.0

    scale = price * params.zero_line_scale_pct
    zero_line = clamp(macd / scale) if scale > 0 else 0.0

    weight = params.crossover_weight
    return clamp(weight * crossover + (1 - weight) * zero_line)


def _resolve_action(composite: float, config: DefaultConfig) -> SignalAction:
    if composite >= config.thresholds.buy:
        return SignalAction.BUY
    if composite <= config.thresholds.sell:
        return SignalAction.SELL
    return SignalAction.HOLD


class SignalSynthesizer:
    """
    Produces one composite recommendation per price series

    The synthesizer holds only its configuration; no state carries over
    between calls.
    """

    def __init__(self, config: Optional[DefaultConfig] = None):
        self.config = config or get_default_config()
        ConfigValidator.ensure_valid(self.config)

        self.calculator = IndicatorCalculator(self.config)
        self.logger = get_signal_logger(__name__)

    def generate(self, series: PriceSeries) -> Signal:
        """
        Compute indicators for a series and synthesize a signal

        Raises:
            InsufficientHistoryError: If any indicator would have no defined value
        """
        self.calculator.ensure_warmed_up(series)
        bundle = self.calculator.calculate(series)
        return self.synthesize(bundle, series.last_price)

    def synthesize(self, bundle: IndicatorBundle, price: float) -> Signal:
        """
        Build a signal from already computed indicator streams

        Args:
            bundle: Indicator streams for one series
            price: Latest price of that series

        Returns:
            Signal

        Raises:
            InsufficientHistoryError: If any stream has no defined value
        """
        if not bundle.is_complete():
            raise InsufficientHistoryError(
                "Indicator streams have no defined value to synthesize from",
                required_count=self.calculator.get_warmup_period(),
                available_count=len(bundle.sma_short),
            )

        snapshot = IndicatorSnapshot(
            short_sma=bundle.sma_short.latest(),
            long_sma=bundle.sma_long.latest(),
            rsi=bundle.rsi.latest(),
            macd=bundle.macd.macd_line.latest(),
            macd_signal=bundle.macd.signal_line.latest(),
            histogram=bundle.macd.histogram.latest(),
            price=price,
        )

        scoring = self.config.scoring
        recent_histogram = bundle.macd.histogram.defined_values()[-scoring.histogram_lookback:]

        trend = snap(trend_score(snapshot.short_sma, snapshot.long_sma, scoring.trend_sensitivity))
        momentum = snap(momentum_score(snapshot.rsi, self.config.rsi))
        convergence = snap(convergence_score(
            snapshot.macd, snapshot.histogram, recent_histogram, price, scoring
        ))

        weights = self.config.weights
        contributions = {
            Factor.TREND: weights.trend * trend,
            Factor.MOMENTUM: weights.momentum * momentum,
            Factor.CONVERGENCE: weights.convergence * convergence,
        }
        composite = snap(clamp(sum(contributions.values()) / weights.total))

        # max() keeps the first factor on ties, preserving narrative order
        dominant = max(contributions, key=lambda factor: abs(contributions[factor]))

        action = _resolve_action(composite, self.config)
        confidence = int(clamp(round(abs(composite) * 100), 0, 100))
        scores = FactorScores(
            trend=trend,
            momentum=momentum,
            convergence=convergence,
            composite=composite,
        )

        signal = Signal(
            action=action,
            confidence=confidence,
            summary=build_summary(action, confidence, dominant, scores),
            bullet_points=build_bullet_points(snapshot, self.config.rsi),
            indicators=snapshot,
            scores=scores,
            dominant_factor=dominant,
        )

        log_signal_decision(
            self.logger,
            action=action.value,
            confidence=confidence,
            composite=composite,
            dominant_factor=dominant.value,
            context=scores.to_dict(),
        )

        return signal


def generate_signal(
    series: Union[PriceSeries, Sequence[PricePoint]],
    config: Optional[DefaultConfig] = None
) -> Signal:
    """
    Convenience function: synthesize a signal for one series

    Raises:
        InvalidArgumentError: If the config or series is malformed
        InsufficientHistoryError: If the series is too short for every indicator
    """
    if not isinstance(series, PriceSeries):
        series = PriceSeries(tuple(series))
    return SignalSynthesizer(config).generate(series)

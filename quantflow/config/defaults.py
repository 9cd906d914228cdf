"""Default configuration parameters for the indicator and signal engine."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MovingAverageParams:
    """SMA windows compared by the trend factor."""
    short_window: int = 12
    long_window: int = 48


@dataclass(frozen=True)
class RSIParams:
    """RSI lookback and momentum interpolation bounds."""
    period: int = 14
    oversold: float = 30.0                          # Maps to momentum +1
    overbought: float = 70.0                        # Maps to momentum -1


@dataclass(frozen=True)
class MACDParams:
    """MACD periods."""
    fast: int = 12
    slow: int = 26
    signal: int = 9


@dataclass(frozen=True)
class WeightParams:
    """Factor weights for the composite score."""
    trend: float = 0.4
    momentum: float = 0.3
    convergence: float = 0.3

    @property
    def total(self) -> float:
        return self.trend + self.momentum + self.convergence


@dataclass(frozen=True)
class ThresholdParams:
    """Composite score thresholds for BUY / SELL."""
    buy: float = 0.2
    sell: float = -0.2


@dataclass(frozen=True)
class ScoringParams:
    """Scaling constants for the factor scores."""
    # Trend: (short - long) / long is multiplied by this before clamping,
    # so a 2% SMA spread saturates the score
    trend_sensitivity: float = 50.0

    # Convergence: histogram normalized by the largest |histogram| seen over
    # this many recent defined values
    histogram_lookback: int = 20
    # Lower bound for the histogram normalizer as a fraction of price
    histogram_floor_pct: float = 0.0005
    # Share of the convergence score taken from the signal-line crossover;
    # the remainder comes from the MACD line's side of zero
    crossover_weight: float = 0.5
    # MACD line at this fraction of price saturates the zero-line component
    zero_line_scale_pct: float = 0.01


@dataclass(frozen=True)
class LoggingParams:
    """Logging output parameters."""
    level: str = "INFO"
    format_json: bool = False
    # UTC ISO-8601 timestamp on every record
    include_timestamp: bool = True
    # Module, function and line of the emitting call
    include_caller: bool = False
    # "stdout" or "stderr"
    stream: str = "stdout"


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    moving_average: MovingAverageParams
    rsi: RSIParams
    macd: MACDParams
    weights: WeightParams
    thresholds: ThresholdParams
    scoring: ScoringParams
    logging: LoggingParams

    def get_warmup_period(self) -> int:
        """Minimum series length before a signal may be synthesized."""
        return max(
            self.moving_average.short_window,
            self.moving_average.long_window,
            self.rsi.period + 1,
            self.macd.slow + self.macd.signal,
        )


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        moving_average=MovingAverageParams(),
        rsi=RSIParams(),
        macd=MACDParams(),
        weights=WeightParams(),
        thresholds=ThresholdParams(),
        scoring=ScoringParams(),
        logging=LoggingParams(),
    )

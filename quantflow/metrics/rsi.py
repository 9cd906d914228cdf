"""RSI (Relative Strength Index) calculations using Wilder smoothing"""

from ..data.models import SeriesInput
from ..data.validators import values_for_calculation
from ..errors import require_positive_int
from ..models.indicators import IndicatorSeries

# Flat market: no gains and no losses over the smoothing window
NEUTRAL_RSI = 50.0


def rsi_from_averages(avg_gain: float, avg_loss: float) -> float:
    """
    Convert Wilder average gain/loss into an RSI value

    RSI = 100 - 100 / (1 + avg_gain / avg_loss)

    Zero average loss yields 100 when there were gains and the neutral 50
    when there was no movement at all.
    """
    if avg_loss == 0:
        return 100.0 if avg_gain > 0 else NEUTRAL_RSI

    rs = avg_gain / avg_loss
    return 100.0 - 100.0 / (1.0 + rs)


def compute_rsi(series: SeriesInput, period: int = 14) -> IndicatorSeries:
    """
    Calculate Wilder's Relative Strength Index

    Averages are seeded with the simple mean gain/loss of the first period
    deltas and then updated as avg = (avg * (period - 1) + current) / period.

    Args:
        series: Price series (chronological order)
        period: RSI lookback (default 14)

    Returns:
        IndicatorSeries with slots 0..period-1 None and every defined value
        in [0, 100]

    Raises:
        InvalidArgumentError: If period is not a positive integer or the
            series is empty
    """
    require_positive_int(period, "period")
    values = values_for_calculation(series)

    result = [None] * len(values)
    if len(values) < period + 1:
        return IndicatorSeries(tuple(result))

    deltas = [values[i] - values[i - 1] for i in range(1, len(values))]
    gains = [d if d > 0 else 0.0 for d in deltas]
    losses = [-d if d < 0 else 0.0 for d in deltas]

    avg_gain = sum(gains[:period]) / period
    avg_loss = sum(losses[:period]) / period
    result[period] = rsi_from_averages(avg_gain, avg_loss)

    # deltas[i] is the move into values[i + 1]
    for i in range(period, len(deltas)):
        avg_gain = (avg_gain * (period - 1) + gains[i]) / period
        avg_loss = (avg_loss * (period - 1) + losses[i]) / period
        result[i + 1] = rsi_from_averages(avg_gain, avg_loss)

    return IndicatorSeries(tuple(result))

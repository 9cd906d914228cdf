"""EMA (Exponential Moving Average) calculations"""

from ..data.models import SeriesInput
from ..data.validators import values_for_calculation
from ..errors import InvalidArgumentError, require_positive_int
from ..models.indicators import IndicatorSeries


def smoothing_factor(period: int) -> float:
    """alpha = 2 / (period + 1)"""
    return 2.0 / (period + 1)


def compute_ema(series: SeriesInput, period: int) -> IndicatorSeries:
    """
    Calculate the Exponential Moving Average seeded with a simple average

    The first period-1 slots are None. Slot period-1 holds the simple mean of
    the first period values; every later slot is
    alpha * value[i] + (1 - alpha) * EMA[i-1].

    Args:
        series: Price series or plain numeric sequence
        period: Smoothing period

    Returns:
        IndicatorSeries the same length as the input

    Raises:
        InvalidArgumentError: If period <= 0 or period > len(series)
    """
    require_positive_int(period, "period")
    values = values_for_calculation(series)

    if period > len(values):
        raise InvalidArgumentError(
            f"EMA period {period} exceeds series length {len(values)}",
            argument="period",
            value=period,
            context={"series_length": len(values)},
        )

    alpha = smoothing_factor(period)
    result = [None] * len(values)

    previous = sum(values[:period]) / period
    result[period - 1] = previous

    for i in range(period, len(values)):
        previous = alpha * values[i] + (1 - alpha) * previous
        result[i] = previous

    return IndicatorSeries(tuple(result))

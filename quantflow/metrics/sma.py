"""SMA (Simple Moving Average) calculations"""

from ..data.models import SeriesInput
from ..data.validators import values_for_calculation
from ..errors import require_positive_int
from ..models.indicators import IndicatorSeries


def compute_sma(series: SeriesInput, window: int) -> IndicatorSeries:
    """
    Calculate the Simple Moving Average for every index of a series

    SMA[i] = mean(value[i-window+1 .. i]), defined only when i >= window-1

    Args:
        series: Price series (chronological order)
        window: Number of samples to average

    Returns:
        IndicatorSeries the same length as the input; leading slots are None.
        A window longer than the series yields an all-None series.

    Raises:
        InvalidArgumentError: If window is not a positive integer or the
            series is empty
    """
    require_positive_int(window, "window")
    values = values_for_calculation(series)

    result = [None] * len(values)
    for i in range(window - 1, len(values)):
        recent = values[i - window + 1:i + 1]
        result[i] = sum(recent) / window

    return IndicatorSeries(tuple(result))

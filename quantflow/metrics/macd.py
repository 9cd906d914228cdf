"""MACD (Moving Average Convergence/Divergence) calculations"""

from ..data.models import SeriesInput
from ..data.validators import values_for_calculation
from ..errors import InvalidArgumentError, require_positive_int
from ..models.indicators import IndicatorSeries, MACDResult
from .ema import compute_ema


def compute_macd(series: SeriesInput, fast: int = 12, slow: int = 26, signal: int = 9) -> MACDResult:
    """
    Calculate MACD line, signal line and histogram

    macd_line[i] = EMA(fast)[i] - EMA(slow)[i] where both are defined.
    The signal line is the EMA of the defined suffix of the MACD line,
    placed back at the original positions. histogram = macd_line - signal_line.

    A series too short for the slow EMA or for the signal EMA produces None
    slots rather than an error.

    Args:
        series: Price series (chronological order)
        fast: Fast EMA period (default 12)
        slow: Slow EMA period (default 26)
        signal: Signal line EMA period (default 9)

    Returns:
        MACDResult with three series the same length as the input

    Raises:
        InvalidArgumentError: If any period is non-positive or fast >= slow
    """
    require_positive_int(fast, "fast")
    require_positive_int(slow, "slow")
    require_positive_int(signal, "signal")
    if fast >= slow:
        raise InvalidArgumentError(
            f"MACD fast period ({fast}) must be shorter than slow period ({slow})",
            argument="fast",
            value=fast,
            context={"slow": slow},
        )

    values = values_for_calculation(series)
    length = len(values)
    macd_line = [None] * length
    signal_line = [None] * length
    histogram = [None] * length

    if length < slow:
        return _build_result(macd_line, signal_line, histogram)

    fast_ema = compute_ema(values, fast)
    slow_ema = compute_ema(values, slow)
    for i in range(length):
        if fast_ema[i] is not None and slow_ema[i] is not None:
            macd_line[i] = fast_ema[i] - slow_ema[i]

    # The slow EMA defines where the MACD line starts
    start = slow - 1
    defined_macd = macd_line[start:]
    if len(defined_macd) < signal:
        return _build_result(macd_line, signal_line, histogram)

    smoothed = compute_ema(defined_macd, signal)
    for offset, value in enumerate(smoothed):
        if value is None:
            continue
        i = start + offset
        signal_line[i] = value
        histogram[i] = macd_line[i] - value

    return _build_result(macd_line, signal_line, histogram)


def _build_result(macd_line: list, signal_line: list, histogram: list) -> MACDResult:
    return MACDResult(
        macd_line=IndicatorSeries(tuple(macd_line)),
        signal_line=IndicatorSeries(tuple(signal_line)),
        histogram=IndicatorSeries(tuple(histogram)),
    )

"""
Plain-language rendering of a synthesized signal.

The summary is one sentence naming the action and the dominant factor; the
bullet points describe each factor's directional read, always in the order
trend, momentum, convergence.
"""

from ..config.defaults import RSIParams
from ..models.indicators import IndicatorSnapshot
from ..models.signal import Factor, FactorScores, SignalAction

# Differences smaller than this fraction of price read as "level"
LEVEL_TOLERANCE = 1e-9

_ACTION_PHRASES = {
    SignalAction.BUY: "Buy signal",
    SignalAction.SELL: "Sell signal",
    SignalAction.HOLD: "Hold",
}

# factor -> (bullish, bearish, neutral)
_FACTOR_PHRASES = {
    Factor.TREND: (
        "an upward trend with the short SMA above the long SMA",
        "a downward trend with the short SMA below the long SMA",
        "a flat trend between the short and long SMAs",
    ),
    Factor.MOMENTUM: (
        "oversold RSI momentum",
        "overbought RSI momentum",
        "neutral RSI momentum",
    ),
    Factor.CONVERGENCE: (
        "bullish MACD convergence",
        "bearish MACD divergence",
        "a flat MACD",
    ),
}


def _directional(score: float, phrases: tuple[str, str, str]) -> str:
    if score > 0:
        return phrases[0]
    if score < 0:
        return phrases[1]
    return phrases[2]


def build_summary(action: SignalAction, confidence: int, dominant: Factor, scores: FactorScores) -> str:
    """Single sentence naming the action and the dominant factor."""
    factor_phrase = _directional(scores.get(dominant), _FACTOR_PHRASES[dominant])
    return f"{_ACTION_PHRASES[action]} with {confidence}% confidence, led by {factor_phrase}."


def _side(value: float, price: float) -> int:
    """Sign of value, treating residue below LEVEL_TOLERANCE * price as level."""
    if abs(value) <= LEVEL_TOLERANCE * max(1.0, abs(price)):
        return 0
    return 1 if value > 0 else -1


def describe_trend(snapshot: IndicatorSnapshot) -> str:
    short, long = snapshot.short_sma, snapshot.long_sma
    side = _side(short - long, snapshot.price)
    if long == 0 or side == 0:
        return f"Trend: short SMA ({short:,.2f}) and long SMA ({long:,.2f}) are level, no trend bias."

    spread_pct = abs(short - long) / long * 100
    if side > 0:
        return (f"Trend: short SMA ({short:,.2f}) is {spread_pct:.2f}% above "
                f"long SMA ({long:,.2f}), upside acceleration.")
    return (f"Trend: short SMA ({short:,.2f}) is {spread_pct:.2f}% below "
            f"long SMA ({long:,.2f}), downside pressure.")


def describe_momentum(snapshot: IndicatorSnapshot, params: RSIParams) -> str:
    rsi = snapshot.rsi
    if rsi <= params.oversold:
        return f"Momentum: RSI at {rsi:.1f} is oversold, favouring a bullish reversal."
    if rsi >= params.overbought:
        return f"Momentum: RSI at {rsi:.1f} is overbought, warning of a bearish pullback."
    return f"Momentum: RSI at {rsi:.1f} sits in the neutral zone."


def describe_convergence(snapshot: IndicatorSnapshot) -> str:
    # Residue would otherwise print as -0.0000
    macd = snapshot.macd if _side(snapshot.macd, snapshot.price) else 0.0
    signal = snapshot.macd_signal if _side(snapshot.macd_signal, snapshot.price) else 0.0
    crossover_side = _side(snapshot.histogram, snapshot.price)
    if crossover_side > 0:
        crossover = f"MACD ({macd:.4f}) is above its signal line ({signal:.4f}), bullish tempo"
    elif crossover_side < 0:
        crossover = f"MACD ({macd:.4f}) is below its signal line ({signal:.4f}), bearish fade"
    else:
        crossover = f"MACD ({macd:.4f}) is level with its signal line ({signal:.4f})"

    zero_side = _side(macd, snapshot.price)
    if zero_side > 0:
        zero_line = "above the zero line"
    elif zero_side < 0:
        zero_line = "below the zero line"
    else:
        zero_line = "on the zero line"

    return f"Convergence: {crossover}, {zero_line}."


def build_bullet_points(snapshot: IndicatorSnapshot, rsi_params: RSIParams) -> tuple[str, str, str]:
    """One line per factor: trend, momentum, convergence."""
    return (
        describe_trend(snapshot),
        describe_momentum(snapshot, rsi_params),
        describe_convergence(snapshot),
    )

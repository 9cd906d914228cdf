"""
Data models and contracts module.

Immutable indicator outputs and the synthesized recommendation.
Follows functional programming principles with frozen dataclasses.
"""

from .indicators import IndicatorBundle, IndicatorSeries, IndicatorSnapshot, MACDResult
from .signal import FactorScores, Signal, SignalAction

__all__ = [
    "IndicatorSeries",
    "MACDResult",
    "IndicatorBundle",
    "IndicatorSnapshot",
    "FactorScores",
    "Signal",
    "SignalAction",
]

"""Indicator calculation engine for technical analysis"""

from .calculator import IndicatorCalculator
from .ema import compute_ema
from .macd import compute_macd
from .rsi import compute_rsi
from .sma import compute_sma

__all__ = [
    "IndicatorCalculator",
    "compute_sma",
    "compute_ema",
    "compute_rsi",
    "compute_macd",
]

"""
QuantFlow - Technical Indicator and Signal Synthesis Engine

Computes moving averages, RSI and MACD over a time-ordered price series and
blends them into a single BUY/SELL/HOLD recommendation with a confidence
score and a plain-language rationale.
"""

__version__ = "0.1.0"
__author__ = "QuantFlow Team"

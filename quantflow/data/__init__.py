"""
Price series data module.

Immutable price samples, the validated series that every indicator reads,
and parsers for the raw shapes market-data providers return.
"""

from .models import PricePoint, PriceSeries, SeriesInput
from .parsers import parse_market_chart, parse_price_pairs, parse_price_points

__all__ = [
    "PricePoint",
    "PriceSeries",
    "SeriesInput",
    "parse_market_chart",
    "parse_price_pairs",
    "parse_price_points",
]

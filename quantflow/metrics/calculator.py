"""Indicator calculator coordinating all indicator streams for one series"""

from typing import Optional

from ..config.defaults import DefaultConfig, get_default_config
from ..data.models import PriceSeries
from ..errors import InsufficientHistoryError
from ..models.indicators import IndicatorBundle
from .macd import compute_macd
from .rsi import compute_rsi
from .sma import compute_sma


class IndicatorCalculator:
    """
    Computes the short SMA, long SMA, RSI and MACD streams for a price series

    Each stream reads only the immutable input series, so they are independent
    of one another and of any previous call.
    """

    def __init__(self, config: Optional[DefaultConfig] = None):
        self.config = config or get_default_config()

    def calculate(self, series: PriceSeries) -> IndicatorBundle:
        """
        Calculate every indicator stream

        Args:
            series: Validated price series

        Returns:
            IndicatorBundle with streams aligned to the series
        """
        ma = self.config.moving_average
        macd = self.config.macd

        return IndicatorBundle(
            sma_short=compute_sma(series, ma.short_window),
            sma_long=compute_sma(series, ma.long_window),
            rsi=compute_rsi(series, self.config.rsi.period),
            macd=compute_macd(series, fast=macd.fast, slow=macd.slow, signal=macd.signal),
        )

    def get_warmup_period(self) -> int:
        """Get the minimum number of samples needed before synthesizing a signal"""
        return self.config.get_warmup_period()

    def is_warmed_up(self, series: PriceSeries) -> bool:
        """Check if a series is long enough for a complete signal"""
        return len(series) >= self.get_warmup_period()

    def ensure_warmed_up(self, series: PriceSeries) -> None:
        """
        Fail when the series is too short for every indicator

        Raises:
            InsufficientHistoryError: With required and available counts
        """
        required = self.get_warmup_period()
        if len(series) < required:
            raise InsufficientHistoryError(
                f"Insufficient price history: {len(series)} points, {required} required",
                required_count=required,
                available_count=len(series),
            )

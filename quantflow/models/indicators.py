"""Data models for indicator outputs"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional, Union, overload


@dataclass(frozen=True)
class IndicatorSeries:
    """
    Indicator values aligned with the input price series.

    Each slot is a float or ``None`` when the indicator has insufficient
    history at that index. ``None`` is a value, not an error.
    """
    values: tuple[Optional[float], ...]

    def __post_init__(self) -> None:
        if not isinstance(self.values, tuple):
            object.__setattr__(self, "values", tuple(self.values))

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[Optional[float]]:
        return iter(self.values)

    @overload
    def __getitem__(self, index: int) -> Optional[float]: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Optional[float], ...]: ...

    def __getitem__(self, index: Union[int, slice]) -> Union[Optional[float], tuple[Optional[float], ...]]:
        return self.values[index]

    @property
    def defined_count(self) -> int:
        """Number of defined slots"""
        return sum(1 for v in self.values if v is not None)

    @property
    def first_defined_index(self) -> Optional[int]:
        """Index of the first defined slot, None if nothing is defined"""
        for i, v in enumerate(self.values):
            if v is not None:
                return i
        return None

    def latest(self) -> Optional[float]:
        """Most recent defined value, None if nothing is defined"""
        for v in reversed(self.values):
            if v is not None:
                return v
        return None

    def defined_values(self) -> list[float]:
        """Defined values in order, undefined slots dropped"""
        return [v for v in self.values if v is not None]

    def to_list(self) -> list[Optional[float]]:
        """Plain list for serialization (undefined slots become None/null)"""
        return list(self.values)


@dataclass(frozen=True)
class MACDResult:
    """MACD line, signal line and histogram, all aligned with the input series"""
    macd_line: IndicatorSeries
    signal_line: IndicatorSeries
    histogram: IndicatorSeries

    def to_dict(self) -> dict[str, list[Optional[float]]]:
        return {
            "macdLine": self.macd_line.to_list(),
            "signalLine": self.signal_line.to_list(),
            "histogram": self.histogram.to_list(),
        }


@dataclass(frozen=True)
class IndicatorBundle:
    """All indicator streams computed for one price series"""
    sma_short: IndicatorSeries
    sma_long: IndicatorSeries
    rsi: IndicatorSeries
    macd: MACDResult

    def is_complete(self) -> bool:
        """Check that every stream has at least one defined value"""
        return all(
            stream.latest() is not None
            for stream in (
                self.sma_short,
                self.sma_long,
                self.rsi,
                self.macd.macd_line,
                self.macd.signal_line,
                self.macd.histogram,
            )
        )

    def to_dict(self) -> dict:
        return {
            "smaShort": self.sma_short.to_list(),
            "smaLong": self.sma_long.to_list(),
            "rsi": self.rsi.to_list(),
            "macd": self.macd.to_dict(),
        }


@dataclass(frozen=True)
class IndicatorSnapshot:
    """Latest defined value of every indicator plus the current price"""
    short_sma: float
    long_sma: float
    rsi: float
    macd: float
    macd_signal: float
    histogram: float
    price: float

    def to_dict(self) -> dict[str, float]:
        return {
            "short": self.short_sma,
            "long": self.long_sma,
            "rsi": self.rsi,
            "macd": self.macd,
            "macdSignal": self.macd_signal,
            "histogram": self.histogram,
            "price": self.price,
        }

"""
Canonical data models for price series.

This module defines the immutable structures every indicator reads: a single
price sample and the validated, time-ascending series built from them.
"""

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import Union, overload

from ..utils.time import ms_to_datetime
from .validators import validate_price_point, validate_series_order


@dataclass(frozen=True)
class PricePoint:
    """Single price sample."""
    time: int          # Epoch milliseconds
    value: float       # Non-negative price

    def __post_init__(self) -> None:
        validate_price_point(self.time, self.value)

    @property
    def timestamp(self) -> datetime:
        """Sample time as a UTC datetime."""
        return ms_to_datetime(self.time)


@dataclass(frozen=True)
class PriceSeries:
    """
    Time-ascending, non-empty sequence of price samples.

    Duplicate timestamps are allowed; index order is treated as chronological
    order by every consumer.
    """
    points: tuple[PricePoint, ...]

    def __post_init__(self) -> None:
        # Accept any iterable but store a tuple so the series cannot be mutated
        if not isinstance(self.points, tuple):
            object.__setattr__(self, "points", tuple(self.points))
        validate_series_order(self.points)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[int, float]]) -> "PriceSeries":
        """Build a series from ``(time_ms, value)`` pairs."""
        return cls(tuple(PricePoint(time=int(t), value=float(v)) for t, v in pairs))

    @classmethod
    def from_values(cls, values: Iterable[float], start_ms: int = 0,
                    step_ms: int = 3_600_000) -> "PriceSeries":
        """Build an evenly spaced series (hourly by default) from bare prices."""
        return cls(tuple(
            PricePoint(time=start_ms + i * step_ms, value=float(v))
            for i, v in enumerate(values)
        ))

    @property
    def values(self) -> list[float]:
        """Price values in chronological order (a fresh list on every call)."""
        return [p.value for p in self.points]

    @property
    def times(self) -> list[int]:
        """Sample times in chronological order."""
        return [p.time for p in self.points]

    @property
    def last_price(self) -> float:
        """Most recent price."""
        return self.points[-1].value

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[PricePoint]:
        return iter(self.points)

    @overload
    def __getitem__(self, index: int) -> PricePoint: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[PricePoint, ...]: ...

    def __getitem__(self, index: Union[int, slice]) -> Union[PricePoint, tuple[PricePoint, ...]]:
        return self.points[index]

    def to_list(self) -> list[dict[str, float]]:
        """Structural mapping used by the charting payload."""
        return [{"time": p.time, "value": p.value} for p in self.points]


# Anything an indicator function accepts as its input series
SeriesInput = Union[PriceSeries, Sequence[PricePoint], Sequence[float]]

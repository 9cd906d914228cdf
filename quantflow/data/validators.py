"""
Data validation for price samples and series.

Checks run once, at construction time, so indicator code can assume a
non-empty, time-ascending series of finite non-negative prices.
"""

import math
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Union

from ..errors import InvalidArgumentError

if TYPE_CHECKING:
    from .models import PricePoint, PriceSeries


def validate_price_point(time: Any, value: Any) -> None:
    """
    Validate a single price sample.

    Raises:
        InvalidArgumentError: If the time is not an integer or the value is
            not a finite, non-negative number
    """
    if isinstance(time, bool) or not isinstance(time, int):
        raise InvalidArgumentError(
            f"Sample time must be integer epoch milliseconds, got {type(time).__name__}",
            argument="time",
            value=time,
        )

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidArgumentError(
            f"Invalid price type: {type(value).__name__}",
            argument="value",
            value=value,
        )
    if math.isnan(value) or math.isinf(value):
        raise InvalidArgumentError(f"Invalid price value: {value}", argument="value", value=value)
    if value < 0:
        raise InvalidArgumentError(f"Negative price: {value}", argument="value", value=value)


def validate_series_order(points: Sequence["PricePoint"]) -> None:
    """
    Validate that a series is non-empty, holds only price points, and is
    ordered by time.

    Equal consecutive timestamps are accepted.
    """
    from .models import PricePoint

    if len(points) == 0:
        raise InvalidArgumentError("Price series must contain at least one point", argument="series")

    for i, point in enumerate(points):
        if not isinstance(point, PricePoint):
            raise InvalidArgumentError(
                f"Price series item {i} is {type(point).__name__}, expected PricePoint",
                argument="series",
                value=point,
                context={"index": i},
            )

    for i in range(1, len(points)):
        if points[i].time < points[i - 1].time:
            raise InvalidArgumentError(
                f"Price series is not time-ascending at index {i}",
                argument="series",
                value=points[i].time,
                context={"index": i, "previous_time": points[i - 1].time},
            )


def values_for_calculation(
    series: Union["PriceSeries", Sequence["PricePoint"], Sequence[float]]
) -> list[float]:
    """
    Extract a fresh list of float values from any accepted series shape.

    Indicators accept a ``PriceSeries``, a sequence of ``PricePoint`` or a
    plain sequence of numbers (used when smoothing a derived line such as
    MACD). The input is never aliased.

    Raises:
        InvalidArgumentError: If the series is empty or holds non-numeric items
    """
    from .models import PricePoint, PriceSeries

    if isinstance(series, PriceSeries):
        return series.values

    if len(series) == 0:
        raise InvalidArgumentError("Cannot calculate an indicator over an empty series", argument="series")

    values = []
    for item in series:
        if isinstance(item, PricePoint):
            values.append(item.value)
        elif isinstance(item, (int, float)) and not isinstance(item, bool):
            if math.isnan(item) or math.isinf(item):
                raise InvalidArgumentError(f"Invalid series value: {item}", argument="series", value=item)
            values.append(float(item))
        else:
            raise InvalidArgumentError(
                f"Unsupported series item type: {type(item).__name__}",
                argument="series",
                value=item,
            )
    return values

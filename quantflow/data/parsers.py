"""
Parsers for raw market-data payload shapes.

Providers hand back either ``[[time_ms, price], ...]`` pairs (the
``prices`` array of a market-chart response) or a list of
``{"time": ..., "value": ...}`` objects. Both are converted into a validated
``PriceSeries`` with the same type checks. Raw response bodies are decoded
with orjson.
"""

from collections.abc import Sequence
from typing import Any, Union

import orjson

from ..errors import InvalidArgumentError
from ..utils.time import coerce_epoch_ms
from .models import PricePoint, PriceSeries


def _parse_value(raw: Any, index: int) -> float:
    """Convert a raw price into a float."""
    if isinstance(raw, bool):
        raise InvalidArgumentError(f"Invalid price at index {index}: {raw!r}", argument="value", value=raw)

    if isinstance(raw, str):
        # Some feeds quote numbers as strings
        try:
            return float(raw)
        except ValueError:
            raise InvalidArgumentError(
                f"Invalid price at index {index}: {raw!r}", argument="value", value=raw
            ) from None

    if not isinstance(raw, (int, float)):
        raise InvalidArgumentError(f"Invalid price at index {index}: {raw!r}", argument="value", value=raw)

    return float(raw)


def parse_price_pairs(pairs: Sequence[Sequence[Any]]) -> PriceSeries:
    """
    Parse ``[[time, price], ...]`` into a PriceSeries.

    Args:
        pairs: Sequence of two-element sequences

    Returns:
        Validated PriceSeries

    Raises:
        InvalidArgumentError: If any pair is malformed or the result is not a
            valid series
    """
    points = []
    for index, pair in enumerate(pairs):
        if isinstance(pair, (str, bytes)) or not isinstance(pair, Sequence) or len(pair) != 2:
            raise InvalidArgumentError(
                f"Expected [time, price] pair at index {index}, got {pair!r}",
                argument="series",
                value=pair,
            )
        raw_time, raw_value = pair
        points.append(PricePoint(time=coerce_epoch_ms(raw_time), value=_parse_value(raw_value, index)))

    return PriceSeries(tuple(points))


def parse_price_points(items: Sequence[dict[str, Any]]) -> PriceSeries:
    """
    Parse ``[{"time": ..., "value": ...}, ...]`` into a PriceSeries.

    Raises:
        InvalidArgumentError: If an item is missing a field or holds bad types
    """
    points = []
    for index, item in enumerate(items):
        if not isinstance(item, dict):
            raise InvalidArgumentError(
                f"Expected object at index {index}, got {type(item).__name__}",
                argument="series",
                value=item,
            )

        missing = [key for key in ("time", "value") if key not in item]
        if missing:
            raise InvalidArgumentError(
                f"Price point at index {index} is missing fields: {missing}",
                argument="series",
                value=item,
            )

        points.append(PricePoint(
            time=coerce_epoch_ms(item["time"]),
            value=_parse_value(item["value"], index),
        ))

    return PriceSeries(tuple(points))


def parse_market_chart(raw_data: Union[str, bytes], key: str = "prices") -> PriceSeries:
    """
    Parse a raw market-chart JSON response into a PriceSeries.

    The response body is an object whose ``prices`` array holds
    ``[time_ms, price]`` pairs; sibling arrays (volumes, market caps) are
    ignored.

    Args:
        raw_data: Raw JSON body from the provider
        key: Name of the array holding the price pairs

    Returns:
        Validated PriceSeries

    Raises:
        InvalidArgumentError: If the body is not valid JSON or lacks the array
    """
    try:
        payload = orjson.loads(raw_data)
    except orjson.JSONDecodeError as e:
        raise InvalidArgumentError(f"Invalid JSON: {e}", argument="raw_data") from e

    if not isinstance(payload, dict) or not isinstance(payload.get(key), list):
        raise InvalidArgumentError(
            f"Market chart response has no '{key}' array",
            argument="raw_data",
            context={"keys": sorted(payload) if isinstance(payload, dict) else []},
        )

    return parse_price_pairs(payload[key])

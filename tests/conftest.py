"""Pytest configuration and shared fixtures."""

import math

import pytest
from datetime import datetime, timezone
from typing import Callable

from quantflow.data.models import PriceSeries

HOUR_MS = 60 * 60 * 1000
START_MS = int(datetime(2024, 1, 1, tzinfo=timezone.utc).timestamp() * 1000)


def build_series(values: list[float]) -> PriceSeries:
    """Hourly series starting 2024-01-01 UTC."""
    return PriceSeries.from_values(values, start_ms=START_MS, step_ms=HOUR_MS)


@pytest.fixture
def make_series() -> Callable[[list[float]], PriceSeries]:
    """Factory fixture building an hourly series from bare prices."""
    return build_series


@pytest.fixture
def rising_series() -> PriceSeries:
    """50 points rising linearly from 100 to 150."""
    return build_series([100 + i * 50 / 49 for i in range(50)])


@pytest.fixture
def falling_series() -> PriceSeries:
    """50 points falling linearly from 150 to 100."""
    return build_series([150 - i * 50 / 49 for i in range(50)])


@pytest.fixture
def flat_series() -> PriceSeries:
    """50 points, every value 100."""
    return build_series([100.0] * 50)


@pytest.fixture
def wave_series() -> PriceSeries:
    """One week of hourly prices oscillating around a slow uptrend."""
    return build_series([
        50000 + math.sin(i / 3) * 120 + math.cos(i / 5) * 80 + i * 5
        for i in range(168)
    ])


@pytest.fixture
def short_series() -> PriceSeries:
    """Five points, far too few for the default windows."""
    return build_series([100.0, 101.0, 102.0, 101.5, 103.0])


@pytest.fixture
def sample_price_pairs() -> list[list[float]]:
    """Provider-style [time_ms, price] pairs."""
    return [
        [START_MS, 42000.5],
        [START_MS + HOUR_MS, 42150.0],
        [START_MS + 2 * HOUR_MS, 41980.25],
    ]

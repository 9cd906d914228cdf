#!/usr/bin/env python3
"""
Basic Usage Example - QuantFlow Signal Engine

Shows how to:
- Build a price series from provider-style [time, price] pairs
- Compute individual indicators
- Run the full analysis and print the recommendation

Run: python examples/basic_usage.py
"""

import json
import math
from datetime import datetime, timezone

from quantflow.data.parsers import parse_price_pairs
from quantflow.engine import MarketAnalysisEngine
from quantflow.errors import InsufficientHistoryError
from quantflow.logging.config import configure_logging
from quantflow.metrics import compute_macd, compute_rsi, compute_sma

HOUR_MS = 60 * 60 * 1000


def build_hourly_pairs(hours: int = 168, start_price: float = 50000.0) -> list[list[float]]:
    """One week of hourly prices with a gentle uptrend and a wave on top."""
    start_ms = int(datetime(2024, 1, 1, tzinfo=timezone.utc).timestamp() * 1000)
    pairs = []
    price = start_price
    for i in range(hours):
        price += math.sin(i / 3) * 120 + math.cos(i / 5) * 80 + 15
        pairs.append([start_ms + i * HOUR_MS, round(price, 2)])
    return pairs


def main():
    configure_logging(level="INFO")

    series = parse_price_pairs(build_hourly_pairs())
    print(f"📈 Loaded {len(series)} hourly prices, last = {series.last_price:,.2f}")

    # Individual indicators
    sma_short = compute_sma(series, 12)
    rsi = compute_rsi(series)
    macd = compute_macd(series)
    print(f"   SMA(12): {sma_short.latest():,.2f}")
    print(f"   RSI(14): {rsi.latest():.1f}")
    print(f"   MACD:    {macd.macd_line.latest():.2f} / signal {macd.signal_line.latest():.2f}")

    # Full analysis
    engine = MarketAnalysisEngine()
    analysis = engine.analyze(series, asset_id="bitcoin")
    signal = analysis.signal

    print(f"\n🧭 {signal.action.value} ({signal.confidence}%)")
    print(f"   {signal.summary}")
    for bullet in signal.bullet_points:
        print(f"   • {bullet}")

    payload = analysis.to_dict()
    print(f"\n📦 Payload keys: {sorted(payload)}")
    print(json.dumps(payload["signal"]["indicators"], indent=2))

    # Too little history is reported, not papered over
    try:
        engine.analyze(parse_price_pairs(build_hourly_pairs(hours=5)))
    except InsufficientHistoryError as e:
        print(f"\n⚠️  Short series rejected: need {e.required_count}, got {e.available_count}")


if __name__ == "__main__":
    main()

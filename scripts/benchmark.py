#!/usr/bin/env python3
"""Performance benchmark script for the QuantFlow signal engine."""

import math
import sys
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from quantflow.data.models import PriceSeries
from quantflow.engine import analyze_series


def generate_sample_series(count: int) -> PriceSeries:
    """Generate an hourly price series with a deterministic wave pattern."""
    start_ms = int(datetime(2024, 1, 1, tzinfo=timezone.utc).timestamp() * 1000)
    values = [50000.0 + math.sin(i / 3) * 120 + math.cos(i / 5) * 80 + i * 2 for i in range(count)]
    return PriceSeries.from_values(values, start_ms=start_ms)


def benchmark_analysis(points: int, rounds: int = 50) -> Dict[str, float]:
    """Benchmark full indicator + signal computation for one series."""
    print(f"🏃 Benchmarking analysis over {points} points ({rounds} rounds)...")
    series = generate_sample_series(points)

    # Warm up
    analyze_series(series)

    start_time = time.perf_counter()
    for _ in range(rounds):
        analyze_series(series)
    total_time = time.perf_counter() - start_time

    return {
        "total_time": total_time,
        "avg_time": total_time / rounds,
        "points": points,
    }


def main():
    """Main benchmark function."""
    print("⚡ QuantFlow Performance Benchmark")
    print("=" * 40)

    # 168 points = one week of hourly data
    for size in [168, 720, 2000, 8760]:
        results = benchmark_analysis(size)
        print(f"\n📊 Results for {size} points:")
        print(f"   Total time: {results['total_time']:.3f}s")
        print(f"   Avg per analysis: {results['avg_time']*1000:.3f}ms")


if __name__ == "__main__":
    main()

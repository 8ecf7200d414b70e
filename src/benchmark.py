# benchmark.py
import statistics
import time
from typing import Dict, Iterable

import config
from nearest_neighbor import nearest_neighbor_tour
from point import Node

def time_tour(cities: Iterable[Node], start_id: int,
              repeats: int = config.BENCHMARK_SETTINGS['repeats']) -> Dict[str, float]:
    if repeats < 1:
        raise ValueError("repeats must be at least 1")
    cities = list(cities)
    times = []
    for _ in range(repeats):
        t0 = time.perf_counter()
        nearest_neighbor_tour(cities, start_id)
        t1 = time.perf_counter()
        times.append((t1 - t0) * 1000)
    times.sort()
    return {
        "mean_ms": statistics.mean(times),
        "median_ms": statistics.median(times),
        "p95_ms": times[max(int(0.95 * len(times)) - 1, 0)],
        "min_ms": times[0],
        "max_ms": times[-1],
    }

if __name__ == "__main__":
    from load_tsp import random_cities

    for n in (100, 200, 400, 800):
        stats = time_tour(random_cities(n), config.DEFAULT_START_ID, repeats=5)
        print(f"n={n:4d}  median={stats['median_ms']:.1f}ms  p95={stats['p95_ms']:.1f}ms")

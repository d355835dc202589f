#!/usr/bin/env python3
"""
Benchmark Script for Entry Store

Measures in-process throughput of EntryStore scalar, batch and list
operations, eviction under capacity pressure, and the expiry sweep.

Usage:
    python scripts/benchmark.py                    # Run all benchmarks
    python scripts/benchmark.py --operations 10000 # Custom operation count
    python scripts/benchmark.py --policy expiring-first
    python scripts/benchmark.py --profile          # Enable cProfile
"""

import argparse
import random
import statistics
import string
import time
from typing import Any, Callable, Dict, List

from entrystore.cache.store import EntryStore


def random_string(length: int) -> str:
    """Generate a random alphanumeric string."""
    return ''.join(random.choices(string.ascii_letters + string.digits, k=length))


def measure_time(func: Callable, iterations: int = 1) -> Dict[str, float]:
    """Measure execution time statistics."""
    times = []

    for _ in range(iterations):
        start = time.perf_counter()
        func()
        times.append((time.perf_counter() - start) * 1000)  # ms

    return {
        "min_ms": min(times),
        "max_ms": max(times),
        "mean_ms": statistics.mean(times),
        "median_ms": statistics.median(times),
        "total_ms": sum(times),
    }


class Benchmark:
    """Collection of benchmarks for EntryStore."""

    def __init__(
            self,
            operations: int = 10000,
            key_size: int = 16,
            value_size: int = 64,
            policy: str = "earliest-timestamp",
    ):
        self.operations = operations
        self.policy = policy

        self.keys = [random_string(key_size) for _ in range(operations)]
        self.values = [random_string(value_size) for _ in range(operations)]

    def _store(self, max_size: int = None) -> EntryStore:
        return EntryStore(max_size=max_size or self.operations * 2, eviction_policy=self.policy)

    def _timed(self, label: str, run: Callable[[], None], count: int = None) -> Dict[str, Any]:
        count = count if count is not None else self.operations
        stats = measure_time(run)
        stats["ops_per_second"] = count / (stats["total_ms"] / 1000) if stats["total_ms"] else 0.0
        stats["operation"] = label
        stats["count"] = count
        return stats

    def benchmark_set(self) -> Dict[str, Any]:
        store = self._store()

        def run():
            for key, value in zip(self.keys, self.values):
                store.set(key, value)

        return self._timed("SET", run)

    def benchmark_set_ttl(self) -> Dict[str, Any]:
        store = self._store()

        def run():
            for key, value in zip(self.keys, self.values):
                store.set(key, value, 60)

        return self._timed("SET (with TTL)", run)

    def benchmark_get(self) -> Dict[str, Any]:
        """Benchmark GET operations (hits)."""
        store = self._store()
        store.mset(zip(self.keys, self.values))

        def run():
            for key in self.keys:
                store.get(key)

        return self._timed("GET (hit)", run)

    def benchmark_get_miss(self) -> Dict[str, Any]:
        store = self._store()
        miss_keys = [random_string(8) for _ in range(self.operations)]

        def run():
            for key in miss_keys:
                store.get(key)

        return self._timed("GET (miss)", run)

    def benchmark_mget(self) -> Dict[str, Any]:
        """Benchmark MGET in batches of 100 keys."""
        store = self._store()
        store.mset(zip(self.keys, self.values))
        batches = [self.keys[i:i + 100] for i in range(0, self.operations, 100)]

        def run():
            for batch in batches:
                store.mget(batch)

        return self._timed("MGET (batch 100)", run)

    def benchmark_eviction(self) -> Dict[str, Any]:
        """Benchmark SET with eviction on every insert past capacity."""
        max_size = max(1, self.operations // 100)
        store = self._store(max_size=max_size)

        def run():
            for key, value in zip(self.keys, self.values):
                store.set(key, value)

        stats = self._timed("SET (with eviction)", run)
        stats["cache_size"] = max_size
        stats["evictions"] = store.get_stats()["evictions"]
        return stats

    def benchmark_push_pop(self) -> Dict[str, Any]:
        """Benchmark RPUSH followed by LPOP on a single list."""
        store = self._store()

        def run():
            for value in self.values:
                store.rpush("bench", value)
            for _ in self.values:
                store.lpop("bench")

        return self._timed("RPUSH + LPOP", run, count=self.operations * 2)

    def benchmark_lrange(self) -> Dict[str, Any]:
        store = self._store()
        for value in self.values[:1000]:
            store.rpush("bench", value)

        def run():
            for i in range(self.operations):
                store.lrange("bench", -10, -1)

        return self._timed("LRANGE (10 items)", run)

    def benchmark_cleanup(self) -> Dict[str, Any]:
        """Benchmark a sweep over a store where half the keys have expired."""
        now = [0.0]
        store = EntryStore(max_size=self.operations * 2, eviction_policy=self.policy, time_fn=lambda: now[0])
        for i, (key, value) in enumerate(zip(self.keys, self.values)):
            store.set(key, value, 1 if i % 2 else 0)
        now[0] = 10.0

        stats = self._timed("CLEANUP_EXPIRED", lambda: store.cleanup_expired())
        stats["removed"] = self.operations - store.size()
        return stats

    def run_all(self) -> List[Dict[str, Any]]:
        """Run all benchmarks."""
        benchmarks = [
            self.benchmark_set,
            self.benchmark_set_ttl,
            self.benchmark_get,
            self.benchmark_get_miss,
            self.benchmark_mget,
            self.benchmark_eviction,
            self.benchmark_push_pop,
            self.benchmark_lrange,
            self.benchmark_cleanup,
        ]

        results = []
        for func in benchmarks:
            result = func()
            print(f"{result['operation']:<24} {result['ops_per_second']:>14,.0f} ops/sec")
            results.append(result)

        return results


def print_results(results: List[Dict[str, Any]]):
    """Print benchmark results in a table."""
    print()
    print("=" * 70)
    print(f"{'Operation':<30} {'Ops/sec':>12} {'Mean (ms)':>12} {'Total (ms)':>12}")
    print("-" * 70)

    for r in results:
        print(f"{r['operation']:<30} {r['ops_per_second']:>12,.0f} "
              f"{r['mean_ms']:>12.3f} {r['total_ms']:>12.1f}")

    print("=" * 70)

    total_ops = sum(r['count'] for r in results)
    total_time = sum(r['total_ms'] for r in results)

    print()
    print(f"Total operations: {total_ops:,}")
    print(f"Total time: {total_time / 1000:.2f} seconds")


def main():
    parser = argparse.ArgumentParser(
        description="Benchmark Entry Store operations",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument("--operations", "-n", type=int, default=10000,
                        help="Number of operations per benchmark")
    parser.add_argument("--key-size", type=int, default=16, help="Size of keys")
    parser.add_argument("--value-size", type=int, default=64, help="Size of values")
    parser.add_argument("--policy", default="earliest-timestamp",
                        choices=["earliest-timestamp", "expiring-first"],
                        help="Eviction policy")
    parser.add_argument("--profile", action="store_true", help="Enable cProfile profiling")

    args = parser.parse_args()

    print(f"Entry Store Benchmark ({args.operations:,} ops, policy={args.policy})")
    print()

    benchmark = Benchmark(
        operations=args.operations,
        key_size=args.key_size,
        value_size=args.value_size,
        policy=args.policy,
    )

    if args.profile:
        import cProfile
        import pstats

        profiler = cProfile.Profile()
        profiler.enable()
        results = benchmark.run_all()
        profiler.disable()

        print_results(results)

        print()
        print("Profiling Results (top 20):")
        stats = pstats.Stats(profiler)
        stats.sort_stats('cumulative')
        stats.print_stats(20)
    else:
        print_results(results=benchmark.run_all())


if __name__ == "__main__":
    main()

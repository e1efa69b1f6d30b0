#!/usr/bin/env python3
"""
Performance Test Script for the red-black tree

Tests:
1. Sequential insert throughput (worst case for an unbalanced BST)
2. Random insert throughput
3. Duplicate insert throughput
4. Random find throughput (hits and misses)
5. Bound query throughput
6. Full and range scan throughput (sync and async)
7. Copy throughput

Metrics:
- Operations per second (ops/sec)
- Latency (p50, p95, p99)
- Tree height after the run
"""

import asyncio
import logging
import os
import random
import statistics
import time
from typing import List

from rbtree import RBTree

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger()


class PerformanceTest:
    def __init__(self, check_invariants: bool | None = None):
        self.check_invariants = check_invariants
        self.tree: RBTree | None = None

    def setup(self):
        """Create an empty tree."""
        self.tree = RBTree(check_invariants=self.check_invariants)
        logger.info(f"Benchmark tree ready, invariant checks: {self.tree.check_invariants}")

    def teardown(self):
        """Release the tree."""
        if self.tree is not None:
            self.tree.clear()
            self.tree = None

    @staticmethod
    def calculate_stats(latencies: List[int]) -> dict:
        """Calculate latency statistics (latencies in nanoseconds)."""
        if not latencies:
            return {}

        sorted_latencies = sorted(latencies)
        return {
            "min_ms": min(latencies) / 1_000_000,
            "max_ms": max(latencies) / 1_000_000,
            "mean_ms": statistics.mean(latencies) / 1_000_000,
            "median_ms": statistics.median(latencies) / 1_000_000,
            "p95_ms": sorted_latencies[int(len(sorted_latencies) * 0.95)] / 1_000_000,
            "p99_ms": sorted_latencies[int(len(sorted_latencies) * 0.99)] / 1_000_000,
        }

    def _timed_inserts(self, title: str, keys: List[int]) -> dict:
        print(f"\n{'='*60}")
        print(f"{title}: {len(keys)} operations")
        print(f"{'='*60}")

        latencies = []
        added = 0
        start_time = time.perf_counter_ns()

        for i, key in enumerate(keys):
            op_start = time.perf_counter_ns()
            _, inserted = self.tree.insert(key)
            latencies.append(time.perf_counter_ns() - op_start)
            added += inserted

            if (i + 1) % 50000 == 0:
                print(f"  Progress: {i + 1}/{len(keys)} operations")

        elapsed = (time.perf_counter_ns() - start_time) / 1_000_000_000

        results = {
            "test": title,
            "count": len(keys),
            "added": added,
            "elapsed_sec": elapsed,
            "ops_per_sec": len(keys) / elapsed,
            "height": self.tree.height(),
            **self.calculate_stats(latencies),
        }
        self.print_results(results)
        return results

    def test_sequential_insert(self, count: int) -> dict:
        """Test ascending-key insert performance."""
        return self._timed_inserts("Sequential Insert Test", list(range(count)))

    def test_random_insert(self, count: int, offset: int = 0) -> dict:
        """Test shuffled-key insert performance."""
        keys = list(range(offset, offset + count))
        random.shuffle(keys)
        return self._timed_inserts("Random Insert Test", keys)

    def test_duplicate_insert(self, count: int) -> dict:
        """Test inserting keys that are already present."""
        keys = [random.randint(0, self.tree.max_key()) for _ in range(count)]
        return self._timed_inserts("Duplicate Insert Test", keys)

    def test_random_find(self, count: int, key_range: int) -> dict:
        """Test random lookups; keys beyond the stored range miss."""
        print(f"\n{'='*60}")
        print(f"Random Find Test: {count} operations, key range {key_range}")
        print(f"{'='*60}")

        latencies = []
        hits = 0
        start_time = time.perf_counter_ns()

        for _ in range(count):
            key = random.randint(0, key_range - 1)
            op_start = time.perf_counter_ns()
            found = self.tree.contains(key)
            latencies.append(time.perf_counter_ns() - op_start)
            hits += found

        elapsed = (time.perf_counter_ns() - start_time) / 1_000_000_000

        results = {
            "test": "Random Find",
            "count": count,
            "elapsed_sec": elapsed,
            "ops_per_sec": count / elapsed,
            "hit_rate": hits / count,
            **self.calculate_stats(latencies),
        }
        self.print_results(results)
        return results

    def test_bounds(self, count: int, key_range: int) -> dict:
        """Test lower_bound/upper_bound pairs."""
        print(f"\n{'='*60}")
        print(f"Bound Query Test: {count} operations")
        print(f"{'='*60}")

        latencies = []
        start_time = time.perf_counter_ns()

        for _ in range(count):
            key = random.randint(0, key_range - 1)
            op_start = time.perf_counter_ns()
            self.tree.lower_bound(key)
            self.tree.upper_bound(key)
            latencies.append(time.perf_counter_ns() - op_start)

        elapsed = (time.perf_counter_ns() - start_time) / 1_000_000_000

        results = {
            "test": "Bound Query",
            "count": count,
            "elapsed_sec": elapsed,
            "ops_per_sec": count / elapsed,
            **self.calculate_stats(latencies),
        }
        self.print_results(results)
        return results

    def test_range_scan(self, num_queries: int, range_size: int, total_keys: int) -> dict:
        """Test bounded range iteration."""
        print(f"\n{'='*60}")
        print(f"Range Scan Test: {num_queries} queries, range size {range_size}")
        print(f"{'='*60}")

        latencies = []
        total_results = 0
        start_time = time.perf_counter_ns()

        for _ in range(num_queries):
            start = random.randint(0, max(total_keys - range_size, 0))
            op_start = time.perf_counter_ns()
            total_results += sum(1 for _ in self.tree.iterator(start, start + range_size))
            latencies.append(time.perf_counter_ns() - op_start)

        elapsed = (time.perf_counter_ns() - start_time) / 1_000_000_000

        results = {
            "test": "Range Scan",
            "count": num_queries,
            "elapsed_sec": elapsed,
            "queries_per_sec": num_queries / elapsed,
            "avg_results_per_query": total_results / num_queries,
            **self.calculate_stats(latencies),
        }
        self.print_results(results)
        return results

    def test_full_scan(self) -> dict:
        """Test forward, reverse and async full scans."""
        print(f"\n{'='*60}")
        print(f"Full Scan Test: {self.tree.size()} keys")
        print(f"{'='*60}")

        async def async_scan() -> int:
            return sum([1 async for _ in self.tree])

        start_time = time.perf_counter_ns()
        forward = sum(1 for _ in self.tree)
        backward = sum(1 for _ in reversed(self.tree))
        asynchronous = asyncio.run(async_scan())
        elapsed = (time.perf_counter_ns() - start_time) / 1_000_000_000

        count = forward + backward + asynchronous
        results = {
            "test": "Full Scan",
            "count": count,
            "elapsed_sec": elapsed,
            "ops_per_sec": count / elapsed,
        }
        self.print_results(results)
        return results

    def test_copy(self, repeats: int) -> dict:
        """Test deep copies of the whole tree."""
        print(f"\n{'='*60}")
        print(f"Copy Test: {repeats} copies of {self.tree.size()} keys")
        print(f"{'='*60}")

        latencies = []
        start_time = time.perf_counter_ns()
        for _ in range(repeats):
            op_start = time.perf_counter_ns()
            self.tree.copy()
            latencies.append(time.perf_counter_ns() - op_start)
        elapsed = (time.perf_counter_ns() - start_time) / 1_000_000_000

        results = {
            "test": "Copy",
            "count": repeats,
            "elapsed_sec": elapsed,
            "ops_per_sec": repeats / elapsed,
            **self.calculate_stats(latencies),
        }
        self.print_results(results)
        return results

    @staticmethod
    def print_results(results: dict):
        """Print test results in a formatted way."""
        print(f"\nResults:")
        print(f"  Operations: {results['count']}")
        print(f"  Elapsed: {results['elapsed_sec']:.2f}s")

        if 'ops_per_sec' in results:
            print(f"  Throughput: {results['ops_per_sec']:.2f} ops/sec")

        if 'added' in results:
            print(f"  New keys: {results['added']}")

        if 'height' in results:
            print(f"  Tree height: {results['height']}")

        if 'hit_rate' in results:
            print(f"  Hit rate: {results['hit_rate']*100:.2f}%")

        if 'queries_per_sec' in results:
            print(f"  Query throughput: {results['queries_per_sec']:.2f} queries/sec")
            print(f"  Avg results per query: {results['avg_results_per_query']:.2f}")

        if 'median_ms' in results:
            print(f"  Latency (p50/p95/p99): {results['median_ms']:.3f}/{results['p95_ms']:.3f}/{results['p99_ms']:.3f} ms")


def run_comprehensive_tests():
    """Run comprehensive performance tests."""
    test = PerformanceTest(check_invariants=False)
    all_results = []

    try:
        print(f"\n{'#'*60}")
        print(f"# Red-Black Tree Performance Test Suite")
        print(f"{'#'*60}")

        test.setup()
        all_results.append(test.test_sequential_insert(count=200000))
        all_results.append(test.test_random_insert(count=200000, offset=200000))
        all_results.append(test.test_duplicate_insert(count=100000))
        all_results.append(test.test_random_find(count=200000, key_range=800000))
        all_results.append(test.test_bounds(count=200000, key_range=400000))
        all_results.append(test.test_range_scan(num_queries=1000, range_size=100, total_keys=400000))
        all_results.append(test.test_full_scan())
        all_results.append(test.test_copy(repeats=5))

        print(f"\n{'#'*60}")
        print(f"# SUMMARY")
        print(f"{'#'*60}")
        for result in all_results:
            print(f"  {result['test']:<25} {result.get('ops_per_sec', result.get('queries_per_sec', 0)):>14.2f} ops/sec")

    finally:
        test.teardown()
        print(f"\n{'#'*60}")
        print(f"# Test Complete!")
        print(f"{'#'*60}\n")


def run_quick_tests():
    """Run quick performance tests for faster feedback."""
    test = PerformanceTest()

    try:
        print(f"\n{'#'*60}")
        print(f"# Quick Performance Test")
        print(f"{'#'*60}")

        test.setup()
        test.test_sequential_insert(count=10000)
        test.test_random_insert(count=10000, offset=10000)
        test.test_random_find(count=10000, key_range=40000)
        test.test_bounds(count=10000, key_range=20000)
        test.test_range_scan(num_queries=100, range_size=100, total_keys=20000)
        test.test_full_scan()

    finally:
        test.teardown()


if __name__ == "__main__":
    import sys

    if len(sys.argv) > 1 and sys.argv[1] == "quick":
        run_quick_tests()
    else:
        run_comprehensive_tests()

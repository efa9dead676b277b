#!/usr/bin/env python3
"""
Performance Benchmark for uuidv7-kit

Measures throughput of the hot paths:

- Monotonic generation: >200K ids/sec with the system clock
- Same-millisecond generation: >200K ids/sec with a frozen clock
- Fixed-timestamp generation: >200K ids/sec
- Base58 encode + decode round trip: >100K ids/sec

Run:
    python scripts/performance_benchmark.py
"""

import time

from uuidv7_kit import FixedTimestampGenerator, MonotonicGenerator, Transcoder
from uuidv7_kit.kernel.time import TestClock


def report(test: str, count: int, elapsed: float, target: float) -> dict:
    per_sec = count / elapsed if elapsed > 0 else 0
    print(f"  Identifiers: {count}")
    print(f"  Time elapsed: {elapsed:.2f}s")
    print(f"  Per second: {per_sec:,.0f}")
    print(f"  Target: >{target:,.0f}/sec")
    print(f"  Status: {'✓ PASS' if per_sec > target else '✗ FAIL'}")
    return {"test": test, "per_sec": per_sec, "pass": per_sec > target}


def benchmark_monotonic() -> dict:
    """Benchmark clock-driven generation"""
    print("\n=== Benchmark: Monotonic Generation ===")
    generator = MonotonicGenerator()
    count = 200_000

    start_time = time.perf_counter()
    ids = generator.generate_many(count)
    elapsed = time.perf_counter() - start_time

    assert ids == sorted(ids)
    return report("monotonic", count, elapsed, 200_000)


def benchmark_same_millisecond() -> dict:
    """Benchmark the counter path with a frozen clock"""
    print("\n=== Benchmark: Same-Millisecond Counter Path ===")
    generator = MonotonicGenerator(clock=TestClock(1_713_815_702_151))
    count = 200_000

    start_time = time.perf_counter()
    generator.generate_many(count)
    elapsed = time.perf_counter() - start_time

    return report("same_millisecond", count, elapsed, 200_000)


def benchmark_fixed_timestamp() -> dict:
    """Benchmark caller-supplied timestamps"""
    print("\n=== Benchmark: Fixed-Timestamp Generation ===")
    generator = FixedTimestampGenerator()
    count = 200_000

    start_time = time.perf_counter()
    for i in range(count):
        generator.generate(1_713_815_702_151 + i // 1000)
    elapsed = time.perf_counter() - start_time

    return report("fixed_timestamp", count, elapsed, 200_000)


def benchmark_transcoding() -> dict:
    """Benchmark Base58 encode followed by decode"""
    print("\n=== Benchmark: Base58 Round Trip ===")
    transcoder = Transcoder()
    ids = MonotonicGenerator().generate_many(50_000)

    start_time = time.perf_counter()
    for identifier in ids:
        assert transcoder.decode(transcoder.encode(identifier)) == identifier
    elapsed = time.perf_counter() - start_time

    return report("base58_round_trip", len(ids), elapsed, 100_000)


def main() -> None:
    """Run all benchmarks"""
    print("\n" + "="*70)
    print("  uuidv7-kit - Performance Benchmark Suite")
    print("="*70)

    results = [
        benchmark_monotonic(),
        benchmark_same_millisecond(),
        benchmark_fixed_timestamp(),
        benchmark_transcoding(),
    ]

    print("\n" + "="*70)
    print("  Summary")
    print("="*70)

    passed = sum(1 for r in results if r["pass"])
    for result in results:
        status = "✓ PASS" if result["pass"] else "✗ FAIL"
        print(f"  {result['test']:30s} {status}")

    print(f"\n  Tests passed: {passed}/{len(results)}")
    if passed < len(results):
        print("\n  ⚠️ Some performance targets not met (see details above)")

    print("\n" + "="*70 + "\n")


if __name__ == "__main__":
    main()

"""
CLI entry point for running the throughput benchmark.

Usage:
    python -m benchmarks.run_benchmark                    # defaults from settings
    python -m benchmarks.run_benchmark --num-jobs 500000  # more jobs
    python -m benchmarks.run_benchmark --seed 7 --max-priority 3
"""

import argparse
import json
import logging

from config.settings import settings
from benchmarks.throughput import ThroughputBenchmark

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def main(argv=None):
    parser = argparse.ArgumentParser(description="Job Scheduler Throughput Benchmark")
    parser.add_argument(
        "--num-jobs", type=positive_int, default=settings.BENCHMARK_NUM_JOBS,
        help=f"Number of jobs to submit (default: {settings.BENCHMARK_NUM_JOBS})",
    )
    parser.add_argument(
        "--seed", type=int, default=settings.BENCHMARK_SEED,
        help=f"Random seed for priorities (default: {settings.BENCHMARK_SEED})",
    )
    parser.add_argument(
        "--max-priority", type=positive_int, default=settings.BENCHMARK_MAX_PRIORITY,
        help=f"Priorities are drawn from 1..N (default: {settings.BENCHMARK_MAX_PRIORITY})",
    )
    args = parser.parse_args(argv)

    print("=== Job Scheduler Throughput Benchmark ===")
    print(f"Jobs: {args.num_jobs} | Seed: {args.seed}\n")

    bench = ThroughputBenchmark(
        num_jobs=args.num_jobs, seed=args.seed, max_priority=args.max_priority,
    )
    result = bench.run()

    print("=== RESULTS ===")
    print(json.dumps(result, indent=2))

    # Summary table
    print("\n{:<10} {:>10} {:>15}".format("Phase", "Time (s)", "Throughput"))
    print("-" * 37)
    for phase in ("submit", "dispatch"):
        rate = result[f"{phase}_jobs_per_sec"] or 0.0
        print("{:<10} {:>10.4f} {:>12.2f} j/s".format(
            phase, result[f"{phase}_sec"], rate
        ))
    return result


if __name__ == "__main__":
    main()

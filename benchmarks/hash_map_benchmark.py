"""Timing harness for HashMap operations.

Runs each operation over exponentially growing inputs and writes one CSV
row per (input size, operation).

Usage:
    python benchmarks/hash_map_benchmark.py --output hash_map_timings.csv
"""

import argparse
import csv
import logging
import random
import statistics
import time

from bucketmap import HashMap

logger = logging.getLogger(__name__)

# ----------------------------
# Helper Functions
# ----------------------------

def generate_random_pairs(size: int):
    """Generate a list of random key-value pairs."""
    return [(random.randint(0, size * 10), random.randint(0, 1000000)) for _ in range(size)]


def build_map(data):
    hm = HashMap()
    for k, v in data:
        hm.place(k, v)
    return hm


def measure_operation_time(operation, input_size: int, iterations: int = 5):
    """Run the operation multiple times and return average + std deviation (ms).

    Only the operation itself is timed; building the map it runs against is not.
    """
    times = []
    for _ in range(iterations):
        data = generate_random_pairs(input_size)
        hm = HashMap() if operation is bench_place else build_map(data)
        start = time.perf_counter()
        operation(hm, data)
        end = time.perf_counter()
        times.append((end - start) * 1000)  # convert to milliseconds

    avg_time = statistics.mean(times)
    std_dev = statistics.stdev(times) if len(times) > 1 else 0.0
    return avg_time, std_dev

# ----------------------------
# Operations to Benchmark
# ----------------------------

def bench_place(hm, data):
    for k, v in data:
        hm.place(k, v)


def bench_get(hm, data):
    for k, _ in data:
        hm.get(k)


def bench_contains(hm, data):
    for k, _ in data:
        hm.contains(k)


def bench_remove(hm, data):
    for k, _ in data:
        hm.remove(k)


def bench_keys(hm, data):
    for _ in hm.keys():
        pass


def bench_values(hm, data):
    for _ in hm.values():
        pass


def bench_entries(hm, data):
    for _ in hm.entries():
        pass


OPERATIONS = {
    "place": bench_place,
    "get": bench_get,
    "contains": bench_contains,
    "remove": bench_remove,
    "keys": bench_keys,
    "values": bench_values,
    "entries": bench_entries,
}

# ----------------------------
# Benchmark Runner
# ----------------------------

def run_benchmarks(output_file: str, base_input: int = 100, steps: int = 12, iterations: int = 5):
    """Run exponential performance tests for HashMap operations."""
    input_sizes = [base_input * (2 ** i) for i in range(steps)]

    with open(output_file, "w", newline="") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(["Input Size", "Operation", "Average Time (ms)", "Standard Deviation (ms)"])

        for op_name, op_func in OPERATIONS.items():
            for size in input_sizes:
                avg_time, std_time = measure_operation_time(op_func, size, iterations)
                writer.writerow([size, op_name, f"{avg_time:.3f}", f"{std_time:.3f}"])
                logger.info("%-10s | Size: %-8d | Avg Time: %.3f ms | Std: %.3f ms",
                            op_name, size, avg_time, std_time)

    logger.info("Benchmark completed. Results saved to %s", output_file)

# ----------------------------
# Main Entry Point
# ----------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Benchmark HashMap operations")
    parser.add_argument("--output", default="hash_map_timings.csv", help="CSV file to write")
    parser.add_argument("--base-input", type=int, default=100, help="Smallest input size")
    parser.add_argument("--steps", type=int, default=12, help="Number of doublings of the input size")
    parser.add_argument("--iterations", type=int, default=5, help="Runs averaged per measurement")
    parser.add_argument("--verbose", action="store_true", help="Also show HashMap debug logging")
    return parser


def main(argv=None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(message)s")
    run_benchmarks(args.output, base_input=args.base_input, steps=args.steps, iterations=args.iterations)


if __name__ == "__main__":
    main()

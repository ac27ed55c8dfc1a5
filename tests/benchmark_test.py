import csv
import os
import sys

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'benchmarks')))

import hash_map_benchmark


def test_run_benchmarks_writes_csv(tmp_path):
    out = tmp_path / "timings.csv"
    hash_map_benchmark.main(["--output", str(out), "--base-input", "8", "--steps", "2", "--iterations", "2"])

    with open(out, newline="") as f:
        rows = list(csv.reader(f))
    assert rows[0] == ["Input Size", "Operation", "Average Time (ms)", "Standard Deviation (ms)"]
    assert len(rows) == 1 + len(hash_map_benchmark.OPERATIONS) * 2
    assert {r[1] for r in rows[1:]} == set(hash_map_benchmark.OPERATIONS)
    assert {r[0] for r in rows[1:]} == {"8", "16"}


def test_bench_remove_empties_map():
    data = hash_map_benchmark.generate_random_pairs(50)
    hm = hash_map_benchmark.build_map(data)
    hash_map_benchmark.bench_remove(hm, data)
    assert hm.count() == 0

"""
Small run of testing/stress_test.py: concurrent callers keep registry invariants.
"""

from __future__ import annotations

from testing.stress_test import generate_calls, generate_vendor_ids, percentile, run_stress


def test_generate_vendor_ids_distinct():
    ids = generate_vendor_ids(200, seed=1)
    assert len(ids) == len(set(ids)) == 200
    assert all(v >= 0 for v in ids)


def test_generate_calls_counts():
    calls = generate_calls([1, 2], repeats=3)
    assert sum(1 for kind, _ in calls if kind == "record") == 6
    assert sum(1 for kind, _ in calls if kind == "status") == 6


def test_percentile():
    assert percentile([], 50) == 0.0
    assert percentile([1.0, 2.0, 3.0], 50) == 2.0


def test_run_stress_small():
    results = run_stress(num_vendors=50, repeats=3, concurrency=8, seed=7)
    assert results["errors"] == 0
    assert results["violations"] == []
    assert results["completed"] == results["num_calls"]

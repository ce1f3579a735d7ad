from __future__ import annotations

from datetime import UTC, datetime

import pytest

from employee_import.models.processing_result import ImportOutcome, ImportReport, InsertStatsAccumulator
from employee_import.services.summary import render_completion, render_summary_line


def _report(**kw) -> ImportReport:
    base = dict(
        file_name="staff.csv",
        total_rows=5,
        valid_rows=4,
        invalid_rows=1,
        outcome=ImportOutcome(success_count=3, failed_count=1),
        start_time=datetime(2024, 1, 1, tzinfo=UTC),
        end_time=datetime(2024, 1, 1, 0, 0, 2, tzinfo=UTC),
        elapsed_seconds=2.5,
        throughput_rows_per_sec=1.6,
    )
    base.update(kw)
    return ImportReport(**base)


def test_summary_line():
    assert render_summary_line(_report()) == (
        "SUMMARY rows=5 valid=4 invalid=1 success=3 failed=1 elapsed_sec=2.5 throughput_rps=1.6"
    )


def test_summary_line_small_numbers_no_scientific_notation():
    line = render_summary_line(_report(elapsed_seconds=0.000123, throughput_rows_per_sec=0))
    assert "elapsed_sec=0.000123" in line
    assert line.endswith("throughput_rps=0")


@pytest.mark.parametrize(
    ("outcome", "expected"),
    [
        (ImportOutcome(3, 0), "3 imported successfully"),
        (ImportOutcome(2, 1), "2 imported successfully, 1 failed"),
        (ImportOutcome(0, 2), "0 imported successfully, 2 failed"),
    ],
)
def test_render_completion(outcome: ImportOutcome, expected: str):
    assert render_completion(outcome) == expected


def test_outcome_attempted():
    assert ImportOutcome(2, 1).attempted == 3


def test_insert_stats_empty():
    stats = InsertStatsAccumulator().get_stats()
    assert stats.total_inserts == 0
    assert stats.avg_insert_seconds == 0.0


def test_insert_stats_single_and_many():
    acc = InsertStatsAccumulator()
    acc.add_insert_time(0.5)
    assert acc.get_stats().p95_insert_seconds == 0.5

    acc = InsertStatsAccumulator()
    for t in range(1, 101):
        acc.add_insert_time(t / 100)
    stats = acc.get_stats()
    assert stats.total_inserts == 100
    assert stats.avg_insert_seconds == pytest.approx(0.505)
    assert 0.9 < stats.p95_insert_seconds <= 1.0

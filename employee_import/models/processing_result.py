from __future__ import annotations

import statistics
from dataclasses import dataclass
from datetime import datetime

"""Result models for the employee CSV importer.

ImportOutcome is the tally produced by the commit stage. ImportReport wraps it
with row counts and timing for the SUMMARY line.
"""


@dataclass(frozen=True)
class ImportOutcome:
    """Final tally of a commit run.

    Covers exactly the rows that were attempted (valid rows); rows rejected by
    validation are never counted here.
    """
    success_count: int  # rows accepted by the store
    failed_count: int  # rows rejected by the store

    @property
    def attempted(self) -> int:
        return self.success_count + self.failed_count


@dataclass(frozen=True)
class InsertStats:
    """Per-insert latency summary for one commit run."""
    total_inserts: int = 0
    avg_insert_seconds: float = 0.0
    p95_insert_seconds: float = 0.0


@dataclass(frozen=True)
class ImportReport:
    """Aggregated results for the SUMMARY output."""
    file_name: str
    total_rows: int  # validated rows in the file
    valid_rows: int
    invalid_rows: int
    outcome: ImportOutcome
    start_time: datetime
    end_time: datetime
    elapsed_seconds: float  # end - start
    throughput_rows_per_sec: float  # attempted / elapsed
    insert_stats: InsertStats | None = None


class InsertStatsAccumulator:
    """Collects single-insert timings and summarizes them as InsertStats."""

    def __init__(self) -> None:
        self.insert_times: list[float] = []

    def add_insert_time(self, elapsed_seconds: float) -> None:
        self.insert_times.append(elapsed_seconds)

    def get_stats(self) -> InsertStats:
        if not self.insert_times:
            return InsertStats()

        total = len(self.insert_times)
        avg = statistics.mean(self.insert_times)

        if total == 1:
            p95 = self.insert_times[0]
        else:
            # 19th of 20 inclusive quantiles
            p95 = statistics.quantiles(self.insert_times, n=20, method="inclusive")[18]

        return InsertStats(total_inserts=total, avg_insert_seconds=avg, p95_insert_seconds=p95)

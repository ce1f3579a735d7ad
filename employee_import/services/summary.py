from __future__ import annotations

from ..models.processing_result import ImportOutcome, ImportReport

"""Summary rendering for the employee CSV importer.

Two renderings of the same result:
- ``render_summary_line``: machine-readable SUMMARY line for logs/CI
- ``render_completion``: the operator-facing completion message
"""


def _format_number(value: float) -> str:
    if value == 0:
        return "0"
    if value == int(value):
        return str(int(value))
    if value < 0.01:
        # avoid scientific notation
        return f"{value:.6f}".rstrip("0").rstrip(".")
    return str(round(value, 3))


def render_summary_line(report: ImportReport) -> str:
    """Render the SUMMARY line.

    Format:
    SUMMARY rows={total} valid={valid} invalid={invalid} success={s} failed={f}
    elapsed_sec={elapsed} throughput_rps={throughput}

    Examples:
        >>> from datetime import datetime, timezone
        >>> start = datetime(2024, 1, 1, 10, 0, 0, tzinfo=timezone.utc)
        >>> end = datetime(2024, 1, 1, 10, 0, 2, tzinfo=timezone.utc)
        >>> report = ImportReport(
        ...     file_name="staff.csv", total_rows=3, valid_rows=2, invalid_rows=1,
        ...     outcome=ImportOutcome(success_count=2, failed_count=0),
        ...     start_time=start, end_time=end,
        ...     elapsed_seconds=2.0, throughput_rows_per_sec=1.0,
        ... )
        >>> render_summary_line(report)
        'SUMMARY rows=3 valid=2 invalid=1 success=2 failed=0 elapsed_sec=2 throughput_rps=1'
    """
    return (
        f"SUMMARY rows={report.total_rows} "
        f"valid={report.valid_rows} "
        f"invalid={report.invalid_rows} "
        f"success={report.outcome.success_count} "
        f"failed={report.outcome.failed_count} "
        f"elapsed_sec={_format_number(report.elapsed_seconds)} "
        f"throughput_rps={_format_number(report.throughput_rows_per_sec)}"
    )


def render_completion(outcome: ImportOutcome) -> str:
    """``N imported successfully``, plus ``M failed`` only when M > 0."""
    parts = [f"{outcome.success_count} imported successfully"]
    if outcome.failed_count > 0:
        parts.append(f"{outcome.failed_count} failed")
    return ", ".join(parts)

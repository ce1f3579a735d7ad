from __future__ import annotations

import logging
from datetime import UTC, datetime
from pathlib import Path

from ..csvfile.reader import read_csv_file
from ..db.employee_store import EmployeeStore
from ..logging.error_log import ErrorLogBuffer
from ..models.config_models import ImportConfig
from ..models.import_session import ImportSession
from ..models.processing_result import ImportReport, InsertStatsAccumulator
from .committer import commit_rows, ensure_committable

"""Import orchestration.

Drives one ImportSession through its steps:

1. ``prepare_import``: read + tokenize + validate the file (upload → preview)
2. operator review (CLI)
3. ``run_import``: commit valid rows and build the report (preview → importing → complete)

Structural file errors raised by the reader propagate unchanged; nothing is
loaded into the session in that case.
"""

logger = logging.getLogger(__name__)


def prepare_import(path: Path, session: ImportSession | None = None) -> ImportSession:
    """Parse ``path`` into a session waiting for review."""
    session = session if session is not None else ImportSession()
    parsed = read_csv_file(path)
    session.load(parsed)
    logger.info(
        "parsed file=%s rows=%d valid=%d invalid=%d",
        parsed.file_name,
        len(parsed.rows),
        len(parsed.valid_rows),
        len(parsed.invalid_rows),
    )
    return session


def _flush_error_log(error_log: ErrorLogBuffer) -> None:
    try:
        log_path = error_log.flush()
    except OSError as e:
        logger.warning("could not write error log: %s", e)
    else:
        if log_path is not None:
            logger.info("error log written: %s", log_path)


def run_import(
    session: ImportSession,
    store: EmployeeStore,
    config: ImportConfig,
    *,
    error_log: ErrorLogBuffer | None = None,
) -> ImportReport:
    """Commit the reviewed rows of ``session`` and return the import report.

    Refusals (frozen tenant, nothing to import) are raised before the session
    leaves preview, so the operator can still go back.
    """
    if session.parsed is None:
        raise ValueError("no file loaded for import")
    ensure_committable(session.parsed.rows, config.tenant)

    if error_log is None:
        error_log = ErrorLogBuffer(Path(config.logs_directory))
    stats = InsertStatsAccumulator()

    start_time = datetime.now(UTC)
    parsed = session.start_import()
    try:
        outcome = commit_rows(
            parsed.rows,
            store,
            config.tenant,
            file_name=parsed.file_name,
            error_log=error_log,
            stats=stats,
        )
    finally:
        _flush_error_log(error_log)
    session.complete(outcome)
    end_time = datetime.now(UTC)

    elapsed_seconds = (end_time - start_time).total_seconds()
    throughput = outcome.attempted / elapsed_seconds if elapsed_seconds > 0 else 0.0

    return ImportReport(
        file_name=parsed.file_name,
        total_rows=len(parsed.rows),
        valid_rows=len(parsed.valid_rows),
        invalid_rows=len(parsed.invalid_rows),
        outcome=outcome,
        start_time=start_time,
        end_time=end_time,
        elapsed_seconds=elapsed_seconds,
        throughput_rows_per_sec=throughput,
        insert_stats=stats.get_stats(),
    )

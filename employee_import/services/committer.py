from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from typing import Any

from ..db.employee_store import EmployeeStore
from ..db.insert import InsertError
from ..logging.error_log import ErrorLogBuffer, ErrorRecord
from ..models.config_models import TenantContext
from ..models.processing_result import ImportOutcome, InsertStatsAccumulator
from ..models.row_data import ValidatedRow
from ..validation.row_validator import apply_defaults
from .progress import CommitProgress

"""Commit stage: write valid rows to the employee store, one at a time.

Best effort and non-transactional. Rows are attempted in file order; a
rejected row is counted in ``failed_count``, recorded in the error log, and the
loop moves on. Nothing already written is rolled back. Invalid rows are never
attempted and are not counted.
"""

logger = logging.getLogger(__name__)

OPTIONAL_TEXT_FIELDS = ("job_title", "phone", "personal_email", "work_location")


class CommitError(Exception):
    """Raised when the commit stage refuses to start."""


class NothingToImportError(CommitError):
    pass


class TenantWriteBlockedError(CommitError):
    pass


def build_insert_record(row: ValidatedRow, tenant: TenantContext) -> dict[str, Any]:
    """Turn a validated row into the store payload.

    Optional text fields become None when absent; employment_type and
    employment_status fall back to their schema defaults.
    """
    data = apply_defaults(row.data)
    record: dict[str, Any] = {
        "company_id": tenant.company_id,
        "first_name": data["first_name"],
        "last_name": data["last_name"],
        "email": data["email"],
        "employee_number": data["employee_number"],
        "hire_date": data["hire_date"],
        "employment_type": data["employment_type"],
        "employment_status": data["employment_status"],
    }
    for name in OPTIONAL_TEXT_FIELDS:
        record[name] = data.get(name) or None
    return record


def ensure_committable(rows: Sequence[ValidatedRow], tenant: TenantContext) -> list[ValidatedRow]:
    """Return the valid rows, or raise if the commit stage must not start."""
    if not tenant.can_write:
        reason = "tenant is frozen" if tenant.is_frozen else "no company selected"
        raise TenantWriteBlockedError(f"import not allowed: {reason}")

    valid_rows = [r for r in rows if r.is_valid]
    if not valid_rows:
        raise NothingToImportError("No valid rows to import")
    return valid_rows


def commit_rows(
    rows: Sequence[ValidatedRow],
    store: EmployeeStore,
    tenant: TenantContext,
    *,
    file_name: str = "<memory>",
    error_log: ErrorLogBuffer | None = None,
    stats: InsertStatsAccumulator | None = None,
) -> ImportOutcome:
    """Submit the valid rows of ``rows`` and return the success/failure tally.

    Raises:
        TenantWriteBlockedError: no company id, or the tenant is frozen
        NothingToImportError: no row passed validation
    """
    valid_rows = ensure_committable(rows, tenant)

    def _record_failure(row: ValidatedRow, error_type: str, message: str) -> None:
        progress.row_done(ok=False)
        if error_log is not None:
            error_log.append(
                ErrorRecord.create(
                    file=file_name,
                    row=row.row_number,
                    error_type=error_type,
                    message=message,
                )
            )

    with CommitProgress(len(valid_rows)) as progress:
        for row in valid_rows:
            record = build_insert_record(row, tenant)
            started = time.perf_counter()
            try:
                store.insert(record)
            except InsertError as e:
                if e.pgcode:
                    logger.warning("row=%d insert failed (sqlstate=%s): %s", row.row_number, e.pgcode, e)
                else:
                    logger.warning("row=%d insert failed: %s", row.row_number, e)
                _record_failure(row, "DATABASE_INSERT_ERROR", str(e))
            except Exception as e:
                # a store outside the protocol; the row still counts as failed
                logger.warning("row=%d unexpected error: %s: %s", row.row_number, type(e).__name__, e)
                _record_failure(row, "UNEXPECTED_ERROR", f"{type(e).__name__}: {e}")
            else:
                progress.row_done(ok=True)
                logger.debug("row=%d inserted employee_number=%s", row.row_number, record["employee_number"])
            finally:
                if stats is not None:
                    stats.add_insert_time(time.perf_counter() - started)

    return ImportOutcome(success_count=progress.succeeded, failed_count=progress.failed)

from __future__ import annotations

import json
from pathlib import Path

import pytest

from employee_import.db.insert import InsertError
from employee_import.models.config_models import DatabaseConfig, ImportConfig, TenantContext
from employee_import.models.import_session import ImportSession, ImportStep
from employee_import.services.committer import NothingToImportError, TenantWriteBlockedError
from employee_import.services.importer import prepare_import, run_import

HEADER = "first_name,last_name,email,employee_number,hire_date"
NO_DB = DatabaseConfig(host=None, port=None, user=None, password=None, database=None, dsn=None)


def _config(tmp_path: Path, frozen: bool = False) -> ImportConfig:
    return ImportConfig(
        tenant=TenantContext("c-1", is_frozen=frozen),
        database=NO_DB,
        logs_directory=str(tmp_path / "logs"),
    )


def _csv(tmp_path: Path, *rows: str) -> Path:
    p = tmp_path / "staff.csv"
    p.write_text("\n".join([HEADER, *rows]), encoding="utf-8")
    return p


def test_prepare_import_moves_to_preview(tmp_path: Path):
    session = prepare_import(_csv(tmp_path, "John,Doe,john@x.com,E1,2024-01-15", "Jane,,jane@x.com,E2,2024-01-15"))
    assert session.step is ImportStep.PREVIEW
    assert session.parsed is not None
    assert len(session.parsed.valid_rows) == 1
    assert len(session.parsed.invalid_rows) == 1


def test_run_import_report(tmp_path: Path, fake_store_cls):
    session = prepare_import(
        _csv(
            tmp_path,
            "John,Doe,john@x.com,E1,2024-01-15",
            "Jane,Smith,jane@x.com,E2,2024-01-15",
            "Bad,,bad@x.com,E3,2024-01-15",
        )
    )
    store = fake_store_cls(reject={"E2"})
    report = run_import(session, store, _config(tmp_path))

    assert session.step is ImportStep.COMPLETE
    assert session.outcome == report.outcome
    assert (report.total_rows, report.valid_rows, report.invalid_rows) == (3, 2, 1)
    assert (report.outcome.success_count, report.outcome.failed_count) == (1, 1)
    assert report.file_name == "staff.csv"
    assert report.insert_stats is not None
    assert report.insert_stats.total_inserts == 2

    logs = list((tmp_path / "logs").glob("errors-*.log"))
    assert len(logs) == 1
    assert json.loads(logs[0].read_text(encoding="utf-8").splitlines()[0])["row"] == 3


def test_run_import_without_failures_writes_no_log(tmp_path: Path, fake_store_cls):
    session = prepare_import(_csv(tmp_path, "John,Doe,john@x.com,E1,2024-01-15"))
    run_import(session, fake_store_cls(), _config(tmp_path))
    assert not (tmp_path / "logs").exists()


def test_refusal_keeps_session_in_preview(tmp_path: Path, fake_store_cls):
    session = prepare_import(_csv(tmp_path, "John,Doe,john@x.com,E1,2024-01-15"))
    with pytest.raises(TenantWriteBlockedError):
        run_import(session, fake_store_cls(), _config(tmp_path, frozen=True))
    assert session.step is ImportStep.PREVIEW
    # operator can still go back
    session.reset()
    assert session.step is ImportStep.UPLOAD


def test_nothing_to_import(tmp_path: Path, fake_store_cls):
    session = prepare_import(_csv(tmp_path, "Jane,,jane@x.com,E2,2024-01-15"))
    with pytest.raises(NothingToImportError):
        run_import(session, fake_store_cls(), _config(tmp_path))


def test_run_import_requires_loaded_session(tmp_path: Path, fake_store_cls):
    with pytest.raises(ValueError, match="no file loaded"):
        run_import(ImportSession(), fake_store_cls(), _config(tmp_path))


class _InterruptedStore:
    """Rejects the first row, then the run is interrupted."""

    def __init__(self) -> None:
        self.calls = 0

    def insert(self, record):
        self.calls += 1
        if self.calls == 1:
            raise InsertError("duplicate key value violates unique constraint")
        raise KeyboardInterrupt


def test_error_log_flushed_when_commit_interrupted(tmp_path: Path):
    session = prepare_import(
        _csv(tmp_path, "John,Doe,john@x.com,E1,2024-01-15", "Jane,Smith,jane@x.com,E2,2024-01-15")
    )
    with pytest.raises(KeyboardInterrupt):
        run_import(session, _InterruptedStore(), _config(tmp_path))

    assert session.step is ImportStep.IMPORTING
    logs = list((tmp_path / "logs").glob("errors-*.log"))
    assert len(logs) == 1
    entries = [json.loads(line) for line in logs[0].read_text(encoding="utf-8").splitlines()]
    assert [e["row"] for e in entries] == [2]

# Shared pytest fixtures
from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Any

import pytest

from employee_import.db.insert import InsertError
from employee_import.logging.init import reset_logging


@pytest.fixture(autouse=True)
def _fresh_logging():
    # handlers bind sys.stdout at setup time; capsys swaps it per test
    reset_logging()
    yield
    reset_logging()


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        (p / "logs").mkdir()
        monkeypatch.chdir(p)
        yield p


@pytest.fixture()
def sample_config_yaml() -> str:
    return """company_id: 11111111-2222-3333-4444-555555555555
tenant_frozen: false
table: employees
logs_directory: ./logs
database:
  host: localhost
  port: 5432
  user: appuser
  password: secret
  database: appdb
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "import.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture()
def write_csv(temp_workdir: Path):
    def _write(lines: list[str], name: str = "employees.csv") -> Path:
        path = temp_workdir / "data" / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path
    return _write


class FakeStore:
    """EmployeeStore double: rejects records whose employee_number is in ``reject``."""

    def __init__(self, reject: set[str] | None = None, reject_all: bool = False) -> None:
        self.reject = reject or set()
        self.reject_all = reject_all
        self.attempts: list[dict[str, Any]] = []
        self.inserted: list[dict[str, Any]] = []

    def insert(self, record: dict[str, Any]) -> None:
        self.attempts.append(record)
        if self.reject_all or record["employee_number"] in self.reject:
            raise InsertError(
                'duplicate key value violates unique constraint "employees_company_id_employee_number_key"'
            )
        self.inserted.append(record)


@pytest.fixture()
def fake_store_cls():
    return FakeStore

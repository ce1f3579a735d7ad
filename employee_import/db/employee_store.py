from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, Protocol

import psycopg2

from ..models.config_models import DatabaseConfig
from .insert import InsertError, insert_row

"""Employee store: the remote side of the commit stage.

The committer only sees ``EmployeeStore.insert``; success is a normal return
and any store-level rejection is an InsertError. Error codes are not
interpreted beyond pass/fail.
"""

__all__ = [
    "DryRunEmployeeStore",
    "EMPLOYEE_COLUMNS",
    "EmployeeStore",
    "InsertError",
    "PostgresEmployeeStore",
    "db_cursor",
    "resolve_dsn",
]

logger = logging.getLogger(__name__)

EMPLOYEE_COLUMNS = [
    "company_id",
    "first_name",
    "last_name",
    "email",
    "employee_number",
    "hire_date",
    "job_title",
    "employment_type",
    "employment_status",
    "phone",
    "personal_email",
    "work_location",
]


class EmployeeStore(Protocol):
    def insert(self, record: dict[str, Any]) -> None:
        """Insert one employee record or raise InsertError."""


class PostgresEmployeeStore:
    """Writes employee records through a psycopg2 cursor, one INSERT per record."""

    def __init__(self, cursor: Any, table: str = "employees") -> None:
        self.cursor = cursor
        self.table = table

    def insert(self, record: dict[str, Any]) -> None:
        values = [record.get(col) for col in EMPLOYEE_COLUMNS]
        insert_row(self.cursor, self.table, EMPLOYEE_COLUMNS, values)


class DryRunEmployeeStore:
    """Accepts every record without writing. Used when DB access is disabled."""

    def __init__(self) -> None:
        self.records: list[dict[str, Any]] = []

    def insert(self, record: dict[str, Any]) -> None:
        self.records.append(record)


def resolve_dsn(db_cfg: DatabaseConfig) -> str:
    """Build the libpq connection string.

    Precedence:
        1. DATABASE_URL / PGDSN environment variables (whole DSN)
        2. individual PGHOST / PGPORT / PGUSER / PGPASSWORD / PGDATABASE
        3. the ``database`` section of the config file
    """
    dsn_env = os.getenv("DATABASE_URL") or os.getenv("PGDSN") or db_cfg.dsn
    if dsn_env:
        return dsn_env

    host = os.getenv("PGHOST", db_cfg.host or "localhost")
    port = os.getenv("PGPORT", str(db_cfg.port) if db_cfg.port else "5432")
    user = os.getenv("PGUSER", db_cfg.user or "postgres")
    password = os.getenv("PGPASSWORD", db_cfg.password or "")
    database = os.getenv("PGDATABASE", db_cfg.database or "postgres")
    dsn = f"host={host} port={port} user={user} dbname={database}"
    if password:
        dsn += f" password={password}"
    return dsn


@contextmanager
def db_cursor(db_cfg: DatabaseConfig) -> Iterator[Any]:  # pragma: no cover (thin wrapper; tested via integration)
    """Yield a cursor on an autocommit connection.

    Each INSERT commits on its own; there is no import-wide transaction.
    """
    dsn = resolve_dsn(db_cfg)
    logger.debug("connecting host=%s database=%s", db_cfg.host, db_cfg.database)
    conn = psycopg2.connect(dsn)
    try:
        conn.autocommit = True
        cur = conn.cursor()
        try:
            yield cur
        finally:
            cur.close()
    finally:
        conn.close()


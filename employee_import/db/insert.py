from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import psycopg2

"""Single-row INSERT helper.

Rows are written one statement at a time on an autocommit connection, so a
rejected row (unique violation, check constraint, ...) never affects rows that
were already written or rows that come after it.
"""


class InsertError(Exception):
    """A single row was rejected by the database."""

    def __init__(self, message: str, pgcode: str | None = None) -> None:
        super().__init__(message)
        self.pgcode = pgcode


def build_insert_sql(table: str, columns: Sequence[str]) -> str:
    cols_sql = ",".join(f'"{c}"' for c in columns)
    placeholders = ",".join("%s" for _ in columns)
    return f"INSERT INTO {table} ({cols_sql}) VALUES ({placeholders})"


def insert_row(cursor: Any, table: str, columns: Sequence[str], values: Sequence[Any]) -> None:
    """Execute one parameterized INSERT.

    Parameters
    ----------
    cursor: psycopg2 cursor (autocommit connection)
    table: target table name (validated by the config schema)
    columns: column names, same order as ``values``
    values: row values; None is written as NULL
    """
    if len(columns) != len(values):
        raise ValueError(f"column/value count mismatch: {len(columns)} != {len(values)}")

    sql = build_insert_sql(table, columns)
    try:
        cursor.execute(sql, tuple(values))
    except psycopg2.Error as e:
        message = (getattr(e, "pgerror", None) or str(e)).strip()
        raise InsertError(message, pgcode=getattr(e, "pgcode", None)) from e

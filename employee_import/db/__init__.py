from .employee_store import (
    EMPLOYEE_COLUMNS,
    DryRunEmployeeStore,
    EmployeeStore,
    PostgresEmployeeStore,
    db_cursor,
    resolve_dsn,
)
from .insert import InsertError, build_insert_sql, insert_row

__all__ = [
    "DryRunEmployeeStore",
    "EMPLOYEE_COLUMNS",
    "EmployeeStore",
    "InsertError",
    "PostgresEmployeeStore",
    "build_insert_sql",
    "db_cursor",
    "insert_row",
    "resolve_dsn",
]

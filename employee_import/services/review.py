from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pandas as pd

from ..models.row_data import ValidatedRow

"""Pre-commit review table.

One line per parsed row: file row number, validity mark, name, email,
employee number and the row's errors joined with "; ".
"""

REVIEW_COLUMNS = ["row", "status", "name", "email", "employee_number", "errors"]
VALID_MARK = "✓"
INVALID_MARK = "✗"


def build_review_table(rows: Sequence[ValidatedRow]) -> pd.DataFrame:
    records = [
        {
            "row": r.row_number,
            "status": VALID_MARK if r.is_valid else INVALID_MARK,
            "name": r.display_name,
            "email": r.data.get("email", ""),
            "employee_number": r.data.get("employee_number", ""),
            "errors": "; ".join(r.errors),
        }
        for r in rows
    ]
    return pd.DataFrame.from_records(records, columns=REVIEW_COLUMNS)


def render_review_table(table: pd.DataFrame) -> str:
    if table.empty:
        return "(no rows)"
    return table.to_string(index=False)


def render_counts(rows: Sequence[ValidatedRow]) -> str:
    """``N valid``, plus ``M with errors`` only when M > 0."""
    valid = sum(1 for r in rows if r.is_valid)
    invalid = len(rows) - valid
    text = f"{valid} valid"
    if invalid > 0:
        text += f", {invalid} with errors"
    return text


def write_review_table(table: pd.DataFrame, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    table.to_csv(path, index=False, encoding="utf-8")
    return path

#!/usr/bin/env python3
"""Synthetic employee CSV generator.

Produces files in the employee import format (header + data rows, all eleven
recognized columns) for manual testing and load testing of the importer. A
configurable share of rows is deliberately broken (bad email, bad hire date,
unknown employment type, missing last name) so the review table has something
to show.
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

import numpy as np
import pandas as pd

COLUMNS = [
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

FIRST_NAMES = ["John", "Jane", "Bob", "Alice", "Maria", "Chen", "Fatima", "Lars", "Priya", "Kwame"]
LAST_NAMES = ["Doe", "Smith", "Johnson", "Garcia", "Nguyen", "Okafor", "Berg", "Patel", "Kim", "Rossi"]
JOB_TITLES = ["Software Engineer", "Product Manager", "Designer", "Accountant", "HR Generalist", "", ""]
EMPLOYMENT_TYPES = ["full_time", "full_time", "full_time", "part_time", "contract", "intern", "temporary"]
EMPLOYMENT_STATUSES = ["active", "active", "active", "on_leave", "suspended"]
LOCATIONS = ["New York", "Remote", "Los Angeles", "Austin, TX", "Berlin", ""]

BREAKAGES = ["email", "hire_date", "employment_type", "last_name"]


def generate_employees(rows: int, invalid_ratio: float = 0.05, seed: int = 42) -> pd.DataFrame:
    """Build a DataFrame of synthetic employees.

    Args:
        rows: number of data rows
        invalid_ratio: share of rows that get exactly one broken field
        seed: random seed for reproducible data
    """
    np.random.seed(seed)

    first = np.random.choice(FIRST_NAMES, rows)
    last = np.random.choice(LAST_NAMES, rows)
    hire_dates = pd.date_range("2015-01-01", "2024-12-31", periods=500)

    data: dict[str, list[str]] = {
        "first_name": first.tolist(),
        "last_name": last.tolist(),
        "email": [f"{f.lower()}.{l.lower()}.{i}@company.com" for i, (f, l) in enumerate(zip(first, last), start=1)],
        "employee_number": [f"EMP-{i:05d}" for i in range(1, rows + 1)],
        "hire_date": [d.strftime("%Y-%m-%d") for d in np.random.choice(hire_dates, rows)],
        "job_title": np.random.choice(JOB_TITLES, rows).tolist(),
        "employment_type": np.random.choice(EMPLOYMENT_TYPES, rows).tolist(),
        "employment_status": np.random.choice(EMPLOYMENT_STATUSES, rows).tolist(),
        "phone": [f"+1{n}" if n % 4 else "" for n in np.random.randint(2_000_000_000, 9_999_999_999, rows)],
        "personal_email": [f"{f.lower()}{i}@personal.com" if i % 3 else "" for i, f in enumerate(first)],
        "work_location": np.random.choice(LOCATIONS, rows).tolist(),
    }
    df = pd.DataFrame(data, columns=COLUMNS)

    broken = np.random.rand(rows) < invalid_ratio
    for idx in np.flatnonzero(broken):
        field = BREAKAGES[idx % len(BREAKAGES)]
        if field == "email":
            df.at[idx, "email"] = "not-an-email"
        elif field == "hire_date":
            df.at[idx, "hire_date"] = pd.Timestamp(df.at[idx, "hire_date"]).strftime("%d-%m-%Y")
        elif field == "employment_type":
            df.at[idx, "employment_type"] = "seasonal"
        else:
            df.at[idx, "last_name"] = ""
    return df


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Generate synthetic employee CSV files for the importer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # 200 rows, ~5% invalid
  %(prog)s employees.csv

  # 5000 rows, no invalid rows
  %(prog)s big.csv --rows 5000 --invalid-ratio 0
        """,
    )
    parser.add_argument("output", type=Path, help="Output CSV file path")
    parser.add_argument("--rows", type=int, default=200, help="Number of data rows (default: 200)")
    parser.add_argument(
        "--invalid-ratio",
        type=float,
        default=0.05,
        help="Share of rows with one broken field (default: 0.05)",
    )
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    args = parser.parse_args()

    if args.rows <= 0:
        print("Error: --rows must be positive", file=sys.stderr)
        return 1
    if not 0 <= args.invalid_ratio <= 1:
        print("Error: --invalid-ratio must be between 0 and 1", file=sys.stderr)
        return 1

    df = generate_employees(args.rows, args.invalid_ratio, args.seed)
    args.output.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(args.output, index=False, encoding="utf-8")
    print(f"Created {args.output}: {len(df):,} rows, {len(df.columns)} columns")
    return 0


if __name__ == "__main__":
    sys.exit(main())

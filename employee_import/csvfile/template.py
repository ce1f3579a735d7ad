from __future__ import annotations

from pathlib import Path

from ..validation.row_validator import ALL_COLUMNS

"""Downloadable import template with the full column set and three sample rows."""

TEMPLATE_FILE_NAME = "employee-import-template.csv"

SAMPLE_ROWS = [
    "John,Doe,john.doe@company.com,EMP-001,2024-01-15,Software Engineer,full_time,active,+1234567890,john@personal.com,New York",
    "Jane,Smith,jane.smith@company.com,EMP-002,2024-02-01,Product Manager,full_time,active,,jane@personal.com,Remote",
    "Bob,Johnson,bob.johnson@company.com,EMP-003,2024-03-10,Designer,part_time,active,+0987654321,,Los Angeles",
]


def template_content() -> str:
    return "\n".join([",".join(ALL_COLUMNS), *SAMPLE_ROWS])


def write_template(directory: Path) -> Path:
    """Write the template into ``directory`` and return its path."""
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / TEMPLATE_FILE_NAME
    path.write_text(template_content(), encoding="utf-8")
    return path

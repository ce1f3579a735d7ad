from __future__ import annotations

import logging
from pathlib import Path

from ..models.parse_result import ParsedFile
from ..models.row_data import ValidatedRow
from ..validation.row_validator import ALL_COLUMNS, REQUIRED_COLUMNS, validate_record

"""Employee CSV reader.

Line 1 is the header, lines 2+ are data rows. Header names are matched
case-insensitively. A missing required column is a file error and no rows are
produced. Data lines are tokenized with a quote toggle, so a quoted cell may
contain commas. Each row is validated as soon as it is tokenized.
"""

logger = logging.getLogger(__name__)

QUOTE = '"'
DELIMITER = ","


class StructuralError(Exception):
    """File-level defect that prevents any row from being processed."""


class UnsupportedFileError(StructuralError):
    """Raised when the uploaded file is not a .csv file."""


class EmptyFileError(StructuralError):
    """Raised when the file has no header or no data line."""


class MissingColumnsError(StructuralError):
    """Raised when required columns are missing from the header."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = missing
        super().__init__(f"Missing required columns: {', '.join(missing)}")


def tokenize_line(line: str) -> list[str]:
    """Split one data line on commas that are not inside double quotes.

    Quote characters toggle the quoted state and are dropped from the cell.
    Cells are whitespace-trimmed.
    """
    cells: list[str] = []
    current: list[str] = []
    in_quotes = False
    for char in line:
        if char == QUOTE:
            in_quotes = not in_quotes
        elif char == DELIMITER and not in_quotes:
            cells.append("".join(current).strip())
            current = []
        else:
            current.append(char)
    cells.append("".join(current).strip())
    return cells


def parse_header(line: str) -> dict[str, int]:
    """Map lower-cased header names to their cell index.

    Raises MissingColumnsError naming every absent required column.
    """
    names = [c.strip().replace(QUOTE, "").lower() for c in line.split(DELIMITER)]
    header_map: dict[str, int] = {}
    for index, name in enumerate(names):
        header_map.setdefault(name, index)

    missing = [col for col in REQUIRED_COLUMNS if col not in header_map]
    if missing:
        raise MissingColumnsError(missing)
    return header_map


def extract_record(header_map: dict[str, int], cells: list[str]) -> dict[str, str]:
    """Build a candidate record from tokenized cells.

    Unrecognized columns are ignored and blank cells are left out entirely.
    """
    record: dict[str, str] = {}
    for name, index in header_map.items():
        if name not in ALL_COLUMNS or index >= len(cells):
            continue
        value = cells[index].strip().strip(QUOTE)
        if value:
            record[name] = value
    return record


def _strip_bom(content: str) -> str:
    if content.startswith("\ufeff"):
        return content[1:]
    return content


def parse_employee_csv(content: str, file_name: str = "<memory>") -> ParsedFile:
    """Parse and validate the full content of an employee CSV file."""
    lines = _strip_bom(content).strip().split("\n")
    if len(lines) < 2:
        raise EmptyFileError(f"'{file_name}' has no data rows")

    header_map = parse_header(lines[0])
    width = len(lines[0].split(DELIMITER))

    rows: list[ValidatedRow] = []
    for line_index, line in enumerate(lines[1:], start=2):
        cells = tokenize_line(line)
        if len(cells) != width:
            logger.warning(
                "file=%s row=%d has %d cells, header has %d",
                file_name,
                line_index,
                len(cells),
                width,
            )
        record = extract_record(header_map, cells)
        rows.append(
            ValidatedRow(row_number=line_index, data=record, errors=validate_record(record))
        )

    logger.debug(
        "file=%s parsed rows=%d valid=%d",
        file_name,
        len(rows),
        sum(1 for r in rows if r.is_valid),
    )
    return ParsedFile(file_name=file_name, header_map=header_map, rows=rows)


def read_csv_file(path: Path) -> ParsedFile:
    """Read a .csv file from disk and parse it.

    Only files with a ``.csv`` suffix are accepted; content is decoded as UTF-8.
    """
    if path.suffix.lower() != ".csv":
        raise UnsupportedFileError(f"Please upload a CSV file: {path.name}")
    try:
        content = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise StructuralError(f"'{path.name}' is not valid UTF-8: {e}") from e
    return parse_employee_csv(content, file_name=path.name)

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError

"""Row validation against the employee JSON schema.

Every rule of a row is evaluated (``iter_errors``), so one row can carry several
field errors at once. Errors are rendered as ``"<field>: <message>"`` and
ordered by the schema's property order, which is also the column order of the
import template.

validate_record never raises for a well-formed mapping: problems come back as
the error list.
"""

__all__ = [
    "ALL_COLUMNS",
    "REQUIRED_COLUMNS",
    "apply_defaults",
    "validate_record",
]

SCHEMA_PATH = Path(__file__).with_name("employee_schema.json")

_SCHEMA: dict[str, Any] = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))

REQUIRED_COLUMNS: list[str] = list(_SCHEMA["required"])
ALL_COLUMNS: list[str] = list(_SCHEMA["properties"].keys())

# (field, failing keyword) -> message shown in the review table
_MESSAGES: dict[tuple[str, str], str] = {
    ("first_name", "minLength"): "First name is required",
    ("first_name", "pattern"): "First name is required",
    ("last_name", "minLength"): "Last name is required",
    ("last_name", "pattern"): "Last name is required",
    ("employee_number", "minLength"): "Employee number is required",
    ("employee_number", "pattern"): "Employee number is required",
    ("email", "pattern"): "Invalid email",
    ("hire_date", "pattern"): "Invalid date format (YYYY-MM-DD)",
    ("hire_date", "maxLength"): "Invalid date format (YYYY-MM-DD)",
    ("personal_email", "anyOf"): "Invalid email",
}


@lru_cache(maxsize=1)
def _validator() -> Draft202012Validator:
    Draft202012Validator.check_schema(_SCHEMA)
    return Draft202012Validator(_SCHEMA)


def _field_order(field: str) -> int:
    try:
        return ALL_COLUMNS.index(field)
    except ValueError:
        return len(ALL_COLUMNS)


def _message_for(field: str, error: ValidationError) -> str:
    keyword = str(error.validator)
    if (field, keyword) in _MESSAGES:
        return _MESSAGES[(field, keyword)]
    if keyword == "enum":
        expected = " | ".join(f"'{v}'" for v in error.validator_value)
        return f"Invalid enum value. Expected {expected}, received '{error.instance}'"
    if keyword == "type":
        return f"Expected {error.validator_value}, received {type(error.instance).__name__}"
    return error.message


def validate_record(record: dict[str, Any]) -> tuple[str, ...]:
    """Validate one candidate record and return its ordered field errors.

    An empty tuple means the record is valid.
    """
    found: list[tuple[str, str]] = []
    missing: set[str] = set()

    for error in _validator().iter_errors(record):
        if error.validator == "required":
            # one error per missing property, each carrying the full list
            missing.update(f for f in error.validator_value if f not in error.instance)
            continue
        field = str(error.path[0]) if error.path else "row"
        found.append((field, _message_for(field, error)))

    found.extend((f, "Required") for f in missing)
    found.sort(key=lambda item: _field_order(item[0]))
    # several keywords of one field can map to the same message
    return tuple(dict.fromkeys(f"{field}: {message}" for field, message in found))


def apply_defaults(record: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of ``record`` with schema defaults filled for absent fields."""
    filled = dict(record)
    for name, prop in _SCHEMA["properties"].items():
        if "default" in prop and not filled.get(name):
            filled[name] = prop["default"]
    return filled

from __future__ import annotations

from dataclasses import dataclass

"""ValidatedRow model for the employee CSV importer.

A ValidatedRow is the only artifact that flows from the parse/validate stage
into review and commit. It is frozen: once validated, a row never changes.
"""

__all__ = [
    "ValidatedRow",
]


@dataclass(frozen=True)
class ValidatedRow:
    """One data line of the uploaded file after field validation.

    The row_number is the 1-based line number in the file (header = 1), so the
    first data row is 2. Validity is derived from ``errors`` only.
    """
    row_number: int  # file line number (header excluded from data, first data row = 2)
    data: dict[str, str]  # recognized field -> non-blank cell value
    errors: tuple[str, ...] = ()  # "field: message", in schema field order

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def display_name(self) -> str:
        parts = [self.data.get("first_name", ""), self.data.get("last_name", "")]
        return " ".join(p for p in parts if p)

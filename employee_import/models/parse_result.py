from __future__ import annotations

from dataclasses import dataclass, field

from .row_data import ValidatedRow

"""ParsedFile model: the output of the parse/validate stage for one CSV file."""

__all__ = [
    "ParsedFile",
]


@dataclass(frozen=True)
class ParsedFile:
    """Header mapping plus validated rows for one uploaded file."""
    file_name: str
    header_map: dict[str, int]  # lower-cased header name -> cell index
    rows: list[ValidatedRow] = field(default_factory=list)

    @property
    def valid_rows(self) -> list[ValidatedRow]:
        return [r for r in self.rows if r.is_valid]

    @property
    def invalid_rows(self) -> list[ValidatedRow]:
        return [r for r in self.rows if not r.is_valid]

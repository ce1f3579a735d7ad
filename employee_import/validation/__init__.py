from .row_validator import ALL_COLUMNS, REQUIRED_COLUMNS, apply_defaults, validate_record

__all__ = [
    "ALL_COLUMNS",
    "REQUIRED_COLUMNS",
    "apply_defaults",
    "validate_record",
]

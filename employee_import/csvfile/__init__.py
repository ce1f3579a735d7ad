from .reader import (
    EmptyFileError,
    MissingColumnsError,
    StructuralError,
    UnsupportedFileError,
    parse_employee_csv,
    read_csv_file,
    tokenize_line,
)
from .template import TEMPLATE_FILE_NAME, template_content, write_template

__all__ = [
    "EmptyFileError",
    "MissingColumnsError",
    "StructuralError",
    "TEMPLATE_FILE_NAME",
    "UnsupportedFileError",
    "parse_employee_csv",
    "read_csv_file",
    "template_content",
    "tokenize_line",
    "write_template",
]

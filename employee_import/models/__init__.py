"""Domain models for the employee CSV importer.

This package contains the domain model classes shared by the parser, the
validator, the committer and the CLI.
"""

from .config_models import DatabaseConfig, ImportConfig, TenantContext
from .error_record import ErrorRecord
from .import_session import ImportSession, ImportStep, SessionStateError
from .parse_result import ParsedFile
from .processing_result import ImportOutcome, ImportReport, InsertStats
from .row_data import ValidatedRow

__all__ = [
    # Configuration models
    "DatabaseConfig",
    "ImportConfig",
    "TenantContext",
    # Processing models
    "ErrorRecord",
    "ImportOutcome",
    "ImportReport",
    "ImportSession",
    "ImportStep",
    "InsertStats",
    "ParsedFile",
    "SessionStateError",
    "ValidatedRow",
]

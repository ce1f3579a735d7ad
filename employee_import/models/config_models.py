from __future__ import annotations

from dataclasses import dataclass

"""Config dataclasses for the employee CSV importer.

These are the typed results of ``employee_import.config.loader.load_config``.
The tenant is carried as an explicit TenantContext rather than ambient state,
so the import pipeline can be exercised in isolation.
"""

DEFAULT_TABLE = "employees"
DEFAULT_LOGS_DIRECTORY = "./logs"


@dataclass(frozen=True)
class DatabaseConfig:
    """Database connection configuration.

    Used as fallback when environment variables are not set.
    Environment variables take precedence over these values.
    """
    host: str | None
    port: int | None
    user: str | None
    password: str | None
    database: str | None
    dsn: str | None


@dataclass(frozen=True)
class TenantContext:
    """The company an import runs for.

    ``is_frozen`` mirrors a read-only subscription state: a frozen tenant can
    still preview a file but may not write rows.
    """
    company_id: str | None
    is_frozen: bool = False

    @property
    def can_write(self) -> bool:
        return bool(self.company_id) and not self.is_frozen


@dataclass(frozen=True)
class ImportConfig:
    """Root configuration object for an import run."""
    tenant: TenantContext
    database: DatabaseConfig  # Database connection fallback configuration
    table: str = DEFAULT_TABLE  # Target table for employee inserts
    logs_directory: str = DEFAULT_LOGS_DIRECTORY  # Where JSON Lines error logs go

"""Bulk employee import from CSV into a tenant's employee table."""

__version__ = "0.1.0"

"""Database access for clinic-management."""

from .connection import DatabaseManager, validate_schema_name

__all__ = ["DatabaseManager", "validate_schema_name"]

"""Database-related exceptions for clinic-management."""

from .base import ClinicError


class DatabaseError(ClinicError):
    """Base class for database-related errors."""
    pass


class ConnectionError(DatabaseError):
    """Raised when the database pool cannot be created or reached."""
    pass


class InvalidSchemaError(DatabaseError):
    """Raised when a schema name is invalid or unsafe."""
    
    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        super().__init__(f"Invalid schema name '{schema_name}'")

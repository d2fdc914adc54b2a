"""
Database connection management using asyncpg for clinic-management.
"""
import logging
import re
from contextlib import asynccontextmanager
from typing import Any, List, Optional

import asyncpg
from asyncpg import Pool, Record

from ..config.settings import AppSettings
from ..core.exceptions import ConnectionError, InvalidSchemaError

logger = logging.getLogger(__name__)

_SCHEMA_PATTERN = re.compile(r"^[a-z_][a-z0-9_]{0,62}$")


def validate_schema_name(schema_name: str) -> str:
    """Validate a schema name before it is interpolated into SQL.
    
    Raises:
        InvalidSchemaError: If the name is not a plain lowercase identifier
    """
    if not schema_name or not _SCHEMA_PATTERN.match(schema_name):
        raise InvalidSchemaError(schema_name)
    return schema_name


class DatabaseManager:
    """Manages the asyncpg connection pool."""
    
    def __init__(self, database_url: str, application_name: str = "clinic-management", **pool_config):
        """Initialize DatabaseManager.
        
        Args:
            database_url: Database URL (a ``+asyncpg`` driver suffix is accepted)
            application_name: Name reported to PostgreSQL
            **pool_config: Additional pool configuration options
        """
        self.pool: Optional[Pool] = None
        self.dsn = database_url.replace("+asyncpg", "")
        self.application_name = application_name
        
        self.pool_config = {
            "min_size": 1,
            "max_size": 10,
            "max_inactive_connection_lifetime": 300,
            "command_timeout": 60,
            **pool_config
        }
    
    @classmethod
    def from_settings(cls, settings: AppSettings) -> "DatabaseManager":
        """Build a manager from application settings."""
        return cls(
            settings.database_url,
            application_name=settings.app_name,
            min_size=settings.db_pool_min_size,
            max_size=settings.db_pool_max_size,
            command_timeout=settings.db_command_timeout,
        )
    
    async def create_pool(self) -> Pool:
        """Create and return a connection pool."""
        if self.pool is None:
            logger.info(f"Creating database pool with size {self.pool_config['max_size']}")
            try:
                self.pool = await asyncpg.create_pool(
                    self.dsn,
                    server_settings={"application_name": self.application_name},
                    **self.pool_config
                )
            except (OSError, asyncpg.PostgresError) as e:
                logger.error(f"Failed to create database pool: {e}")
                raise ConnectionError(f"Failed to connect to database: {e}") from e
            logger.info("Database pool created successfully")
        return self.pool
    
    async def close_pool(self) -> None:
        """Close the connection pool."""
        if self.pool:
            await self.pool.close()
            self.pool = None
            logger.info("Database pool closed")
    
    @asynccontextmanager
    async def acquire(self):
        """Acquire a connection from the pool."""
        if not self.pool:
            await self.create_pool()
        
        async with self.pool.acquire() as connection:
            yield connection
    
    @asynccontextmanager
    async def transaction(self, **options):
        """Create a transaction context.
        
        Args:
            **options: Passed to ``Connection.transaction`` (``isolation``, ``readonly``)
        """
        async with self.acquire() as connection:
            async with connection.transaction(**options):
                yield connection
    
    async def execute(self, query: str, *args, timeout: float = None) -> str:
        """Execute a query without returning results."""
        async with self.acquire() as connection:
            return await connection.execute(query, *args, timeout=timeout)
    
    async def fetch(self, query: str, *args, timeout: float = None) -> List[Record]:
        """Fetch multiple rows."""
        async with self.acquire() as connection:
            return await connection.fetch(query, *args, timeout=timeout)
    
    async def fetchrow(self, query: str, *args, timeout: float = None) -> Optional[Record]:
        """Fetch a single row."""
        async with self.acquire() as connection:
            return await connection.fetchrow(query, *args, timeout=timeout)
    
    async def fetchval(self, query: str, *args, column: int = 0, timeout: float = None) -> Any:
        """Fetch a single value."""
        async with self.acquire() as connection:
            return await connection.fetchval(query, *args, column=column, timeout=timeout)
    
    async def health_check(self) -> bool:
        """Check database health."""
        try:
            async with self.acquire() as connection:
                result = await connection.fetchval("SELECT 1")
                return result == 1
        except (ConnectionError, OSError, asyncpg.PostgresError) as e:
            logger.error(f"Database health check failed: {e}")
            return False

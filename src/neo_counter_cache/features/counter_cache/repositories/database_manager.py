"""
Database connection management using asyncpg for count queries.
"""
import os
from contextlib import asynccontextmanager
from typing import Any, Optional
import logging

import asyncpg
from asyncpg import Pool

from ..utils.queries import BASIC_HEALTH_CHECK

logger = logging.getLogger(__name__)


class DatabaseManager:
    """Manages the asyncpg pool used by count repositories."""
    
    def __init__(self, database_url: Optional[str] = None, **pool_config):
        """Initialize DatabaseManager.
        
        Args:
            database_url: Database URL (defaults to DATABASE_URL env var)
            **pool_config: Additional pool configuration options
        """
        self.pool: Optional[Pool] = None
        self.dsn = database_url or os.getenv("DATABASE_URL", "")
        if "+asyncpg" in self.dsn:
            self.dsn = self.dsn.replace("+asyncpg", "")
        
        self.pool_config = {
            "min_size": 1,
            "max_size": 10,
            "max_inactive_connection_lifetime": 300,
            "command_timeout": 30,
            **pool_config
        }
    
    async def create_pool(self) -> Pool:
        """Create and return a connection pool."""
        if self.pool is None:
            logger.info(f"Creating database pool with size {self.pool_config['max_size']}")
            
            app_name = os.getenv("APP_NAME", "neo-counter-cache")
            self.pool = await asyncpg.create_pool(
                self.dsn,
                server_settings={"application_name": app_name},
                **self.pool_config
            )
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
    
    async def fetchval(self, query: str, *args, column: int = 0, timeout: float = None) -> Any:
        """Fetch a single value."""
        async with self.acquire() as connection:
            return await connection.fetchval(query, *args, column=column, timeout=timeout)
    
    async def health_check(self) -> bool:
        """Check database health."""
        try:
            async with self.acquire() as connection:
                result = await connection.fetchval(BASIC_HEALTH_CHECK)
                return result == 1
        except (asyncpg.PostgresError, OSError) as e:
            logger.error(f"Database health check failed: {e}")
            return False

"""
Database connection and pool management
"""

import asyncpg
import logging
from fastapi import Request
from config.settings import DATABASE_URL, DB_POOL_MIN_SIZE, DB_POOL_MAX_SIZE, DB_COMMAND_TIMEOUT

logger = logging.getLogger(__name__)


async def init_database(dsn: str = DATABASE_URL) -> asyncpg.Pool:
    """Create the connection pool shared by all request handlers"""
    db_pool = await asyncpg.create_pool(
        dsn,
        min_size=DB_POOL_MIN_SIZE,
        max_size=DB_POOL_MAX_SIZE,
        command_timeout=DB_COMMAND_TIMEOUT,
        statement_cache_size=0  # Fix for pgbouncer compatibility
    )
    
    # Test connection
    async with db_pool.acquire() as conn:
        await conn.fetchval("SELECT 1")
    
    logger.info("Database pool initialized successfully")
    return db_pool


async def close_database(db_pool) -> None:
    """Close database connection pool"""
    if db_pool:
        await db_pool.close()
    logger.info("Database connections closed")


def get_db_pool(request: Request):
    """FastAPI dependency returning the pool created during application startup"""
    return request.app.state.db_pool

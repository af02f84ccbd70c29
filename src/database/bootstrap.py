"""
Database bootstrap - ensures the target database, Products table and index exist.

Every step is idempotent and safe to run on each process start.
"""

import asyncpg
import logging
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlsplit, urlunsplit

logger = logging.getLogger(__name__)

CHECK_DATABASE_SQL = "SELECT 1 FROM pg_database WHERE datname = $1"

CREATE_PRODUCTS_TABLE_SQL = """
    CREATE TABLE IF NOT EXISTS Products (
        Id SERIAL PRIMARY KEY,
        Name VARCHAR(255) NOT NULL,
        Description TEXT,
        Price DECIMAL(10,2) NOT NULL,
        CreatedAt TIMESTAMP WITH TIME ZONE DEFAULT CURRENT_TIMESTAMP
    )
"""

CREATE_CREATED_AT_INDEX_SQL = "CREATE INDEX IF NOT EXISTS IX_Products_CreatedAt ON Products(CreatedAt)"


@dataclass
class BootstrapResult:
    """Outcome of a bootstrap run"""
    success: bool
    database: Optional[str] = None
    database_created: bool = False
    error: Optional[str] = None


def get_database_name(dsn: str) -> str:
    """Extract the database name from a postgres:// DSN"""
    db_name = urlsplit(dsn).path.lstrip("/")
    if not db_name:
        raise ValueError("DATABASE_URL does not name a database")
    return db_name


def build_admin_dsn(dsn: str, admin_database: str = "postgres") -> str:
    """Point the DSN at the administrative database on the same server"""
    parts = urlsplit(dsn)
    return urlunsplit(parts._replace(path=f"/{admin_database}"))


def quote_identifier(name: str) -> str:
    return '"' + name.replace('"', '""') + '"'


async def ensure_database(dsn: str, db_name: str, admin_database: str = "postgres") -> bool:
    """
    Create the target database if the server does not have it yet

    Args:
        dsn: Connection URL of the target database
        db_name: Name of the database to ensure
        admin_database: Database used to run the catalog check and CREATE DATABASE

    Returns:
        True if the database was created, False if it already existed
    """
    try:
        connection = await asyncpg.connect(build_admin_dsn(dsn, admin_database))
        try:
            exists = await connection.fetchval(CHECK_DATABASE_SQL, db_name)

            if exists is None:
                logger.info(f"Creating database: {db_name}")
                # CREATE DATABASE cannot take bind parameters or run inside a transaction
                await connection.execute(f"CREATE DATABASE {quote_identifier(db_name)}")
                logger.info(f"Database {db_name} created successfully")
                return True

            logger.info(f"Database {db_name} already exists")
            return False
        finally:
            await connection.close()

    except Exception as e:
        logger.error(f"Error creating database {db_name}: {e}", exc_info=True)
        raise


async def ensure_schema(dsn: str) -> None:
    """Create the Products table and its CreatedAt index if missing"""
    try:
        connection = await asyncpg.connect(dsn)
        try:
            await connection.execute(CREATE_PRODUCTS_TABLE_SQL)
            await connection.execute(CREATE_CREATED_AT_INDEX_SQL)
        finally:
            await connection.close()

        logger.info("Products table and index created successfully")

    except Exception as e:
        logger.error(f"Error creating Products table: {e}", exc_info=True)
        raise


async def run_bootstrap(dsn: str, admin_database: str = "postgres") -> BootstrapResult:
    """
    Run the full bootstrap sequence and report the outcome instead of raising.

    The schema step is skipped when the database step fails.
    """
    logger.info("Starting database initialization...")
    db_name = None

    try:
        db_name = get_database_name(dsn)
        created = await ensure_database(dsn, db_name, admin_database)
        await ensure_schema(dsn)
    except Exception as e:
        logger.error(f"Error during database initialization: {e}")
        return BootstrapResult(success=False, database=db_name, error=str(e))

    logger.info("Database initialization completed successfully")
    return BootstrapResult(success=True, database=db_name, database_created=created)

"""
Configuration settings for the Products Backend
"""

import os
import logging

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def _env_flag(name: str, default: bool) -> bool:
    """Read a boolean flag from the environment"""
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# Database configuration
DATABASE_URL = os.getenv("DATABASE_URL")
ADMIN_DATABASE = os.getenv("ADMIN_DATABASE", "postgres")
DB_POOL_MIN_SIZE = int(os.getenv("DB_POOL_MIN_SIZE", 2))
DB_POOL_MAX_SIZE = int(os.getenv("DB_POOL_MAX_SIZE", 10))
DB_COMMAND_TIMEOUT = float(os.getenv("DB_COMMAND_TIMEOUT", 60))

# Startup bootstrap behaviour
BOOTSTRAP_ON_STARTUP = _env_flag("BOOTSTRAP_ON_STARTUP", True)
BOOTSTRAP_REQUIRED = _env_flag("BOOTSTRAP_REQUIRED", False)

PORT = int(os.getenv("PORT", 8080))

# CORS settings
ALLOWED_ORIGINS = [origin.strip() for origin in os.getenv("ALLOWED_ORIGINS", "*").split(",") if origin.strip()]

# Validate required environment variables
if not DATABASE_URL:
    raise ValueError("DATABASE_URL environment variable is required")

if DB_POOL_MIN_SIZE > DB_POOL_MAX_SIZE:
    logger.warning(f"DB_POOL_MIN_SIZE ({DB_POOL_MIN_SIZE}) exceeds DB_POOL_MAX_SIZE ({DB_POOL_MAX_SIZE}) - clamping")
    DB_POOL_MIN_SIZE = DB_POOL_MAX_SIZE

logger.info(f"Bootstrap on startup: {BOOTSTRAP_ON_STARTUP}, required: {BOOTSTRAP_REQUIRED}")

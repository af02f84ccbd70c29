"""
Products Backend API Server
Core functionality: Product CRUD over a PostgreSQL connection pool
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.settings import ALLOWED_ORIGINS, DATABASE_URL, ADMIN_DATABASE, BOOTSTRAP_ON_STARTUP, BOOTSTRAP_REQUIRED
from database.bootstrap import run_bootstrap
from database.connection import init_database, close_database
from api.routes import health, products
from utils.error_handling import setup_error_handling

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    if BOOTSTRAP_ON_STARTUP:
        result = await run_bootstrap(DATABASE_URL, ADMIN_DATABASE)
        if not result.success:
            if BOOTSTRAP_REQUIRED:
                raise RuntimeError(f"Database bootstrap failed: {result.error}")
            logger.warning("Database bootstrap failed - starting anyway, requests may fail until the schema exists")
    
    app.state.db_pool = await init_database(DATABASE_URL)
    yield
    await close_database(app.state.db_pool)

# FastAPI app initialization
app = FastAPI(
    title="Products Backend",
    description="CRUD API for products backed by PostgreSQL",
    version="1.0.0",
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

# Setup centralized error handling
setup_error_handling(app)

# Include API routes
app.include_router(health.router, tags=["Health"])
app.include_router(products.router, prefix="/products", tags=["Products"])

# FastAPI app instance is exported for use by uvicorn
# Server startup is handled by main.py at the project root

"""
UserDirectory Backend - FastAPI Application

Create, read, update and delete users stored in a MongoDB collection.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pymongo.errors import PyMongoError

from app.config import get_settings
from app.core.logging_config import setup_logging
from app.database.connections import get_database, close_connections
from app.database.indexes import create_indexes
from app.errors import register_exception_handlers
from app.routers import health, users

settings = get_settings()
setup_logging(settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup:
    - Initialize the database connection
    - Create indexes

    Shutdown:
    - Close the database connection
    """
    logger.info("Starting up UserDirectory Backend...")

    try:
        db = await get_database()
        await create_indexes(db)
    except PyMongoError as e:
        logger.warning("Database initialization warning: %s", e)

    yield

    logger.info("Shutting down UserDirectory Backend...")
    await close_connections()
    logger.info("Database connection closed")


# Create FastAPI application
app = FastAPI(
    title="UserDirectory API",
    description="""
## User Directory API

Create, read, update and delete users by name.

### Endpoints
- `POST /signUp` with `{"name", "email"}`
- `GET /getUser?name=...`
- `PUT /updateUser?name=...` with the fields to change
- `DELETE /deleteUser?name=...` (users younger than 1 minute cannot be deleted)

Errors are returned as `{"error": "..."}`; a missing user is
`{"message": "User not found"}`.
    """,
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include routers
app.include_router(health.router)
app.include_router(users.router)


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint with API information."""
    return {
        "name": "UserDirectory API",
        "version": "0.1.0",
        "docs": "/docs",
        "health": "/health",
    }

"""
FastAPI Application Entry Point.

This is the main application file for the Parcelly Backend.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Depends, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError
from parcelly.app.core.config import settings
from parcelly.app.core.logging_config import setup_logging
from parcelly.app.core.observability import ObservabilityMiddleware
from parcelly.app.api.router import router as api_router
from parcelly.app.db.mongo import mongo, get_db
from parcelly.app.core.exceptions import (
    AppException,
    app_exception_handler,
    http_exception_handler,
    validation_exception_handler,
    database_exception_handler,
    generic_exception_handler
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for application startup/shutdown.

    1. Configures logging.
    2. Connects the shared MongoDB client on startup.
    3. Closes it on shutdown.
    """
    setup_logging()
    try:
        await mongo.connect()
    except PyMongoError as exc:
        # Keep serving; requests touching the store will report the failure
        logger.error("Could not reach MongoDB on startup: %s", exc)
    logger.info("%s is running on port %s", settings.app_name, settings.port)
    yield
    await mongo.close()


# Initialize FastAPI application
app = FastAPI(
    title=settings.app_name,
    version=settings.api_version,
    debug=settings.debug,
    description="Parcel delivery tracking backend",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(ObservabilityMiddleware)

# Register global exception handlers
app.add_exception_handler(AppException, app_exception_handler)
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(PyMongoError, database_exception_handler)
app.add_exception_handler(Exception, generic_exception_handler)


@app.get("/", tags=["Root"], response_class=PlainTextResponse)
async def root():
    """Liveness check."""
    return "server is running"


@app.get("/health", tags=["Health"])
async def health_check(db: AsyncDatabase = Depends(get_db)):
    """
    Health check endpoint.

    Returns:
        dict: Status, application information and database reachability
    """
    try:
        await db.command("ping")
        database = "ok"
    except PyMongoError as exc:
        logger.warning("Health check ping failed: %s", exc)
        database = "unreachable"

    return {
        "status": "healthy",
        "app_name": settings.app_name,
        "version": settings.api_version,
        "database": database,
    }


# Include API router
app.include_router(api_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("parcelly.app.main:app", host=settings.host, port=settings.port)

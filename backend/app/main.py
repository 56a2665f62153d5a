"""
Main FastAPI Application
Entry point for the Subscription Service API.

This module creates and configures the FastAPI application instance,
sets up middleware and error handling, and defines the health check endpoint.

Run with:
    uvicorn app.main:app --host 0.0.0.0 --port 8000
"""

import logging

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from app.core.config import settings
from app.middleware.cors import setup_cors
from app.middleware.error_handler import ErrorHandlerMiddleware, register_exception_handlers
from app.db.session import engine
from app.models import Base
from app.services.error_logging import configure_logging


logger = logging.getLogger(__name__)

API_VERSION_NUMBER = "1.0.0"


# Create FastAPI application instance
#
# Configuration:
# - title: Displayed in auto-generated API documentation
# - version: API version for documentation and versioning
# - docs_url: Swagger UI endpoint (interactive API documentation)
# - redoc_url: ReDoc endpoint (alternative documentation style)
# - description: Detailed info shown in docs
app = FastAPI(
    title=settings.PROJECT_NAME,
    version=API_VERSION_NUMBER,
    docs_url="/docs",  # Swagger UI at http://localhost:8000/docs
    redoc_url="/redoc",  # ReDoc at http://localhost:8000/redoc
    description="""
    Subscription Service REST API.

    Features:
    - User management (create, read, update, delete, list)
    - Service subscriptions per user, one per service name
    - Top subscriptions ranking by number of subscribers

    Errors are returned as {"status", "message", "timestamp"}.
    """
)


# Setup CORS middleware
setup_cors(app)

# Setup error handling
# Domain and validation errors are handled by exception handlers,
# everything else is caught, logged and turned into a 500 by the middleware
register_exception_handlers(app)
app.add_middleware(ErrorHandlerMiddleware)


@app.on_event("startup")
async def startup_event():
    """
    Application startup handler.

    Tasks performed:
    - Configure logging (console + optional rotating files)
    - Create all database tables if they don't exist

    Note: In production, manage the schema with migrations instead of
    Base.metadata.create_all().
    """
    configure_logging()

    # Only creates tables that don't already exist (safe to run multiple times)
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created/verified")
    logger.info("API documentation available at /docs")


@app.on_event("shutdown")
async def shutdown_event():
    """
    Application shutdown handler.

    Releases pooled database connections.
    """
    engine.dispose()
    logger.info("Application shutdown complete")


@app.get(
    "/health",
    tags=["Health"],
    summary="Health Check",
    description="Verify the API is running and the database is reachable"
)
def health_check():
    """
    Health check endpoint.

    Used by monitoring tools and container orchestrators.

    Example Response:
        {
            "status": "ok",
            "version": "1.0.0",
            "api": "Subscription Service API",
            "database": "ok"
        }

    Returns 503 with "database": "unavailable" when the store cannot be reached.
    """
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        database = "ok"
    except SQLAlchemyError as e:
        logger.error("Health check: database unavailable: %s", e)
        database = "unavailable"

    healthy = database == "ok"
    return JSONResponse(
        status_code=200 if healthy else 503,
        content={
            "status": "ok" if healthy else "degraded",
            "version": API_VERSION_NUMBER,
            "api": settings.PROJECT_NAME,
            "database": database
        }
    )


@app.get(
    "/",
    tags=["Root"],
    summary="API Root",
    description="Root endpoint with API information"
)
async def root():
    """
    API root endpoint.

    Provides basic information about the API and links to documentation.
    """
    return {
        "message": "Welcome to the Subscription Service API",
        "version": API_VERSION_NUMBER,
        "docs": "/docs",
        "redoc": "/redoc",
        "health": "/health"
    }


# Include API v1 router
# All v1 endpoints are prefixed with /api/v1
from app.api.v1.router import api_router

app.include_router(
    api_router,
    prefix=f"/api/{settings.API_VERSION}",
)

# Available endpoints:
# - POST   /api/v1/users
# - GET    /api/v1/users
# - GET    /api/v1/users/{user_id}
# - PUT    /api/v1/users/{user_id}
# - DELETE /api/v1/users/{user_id}
# - POST   /api/v1/users/{user_id}/subscriptions
# - GET    /api/v1/users/{user_id}/subscriptions
# - DELETE /api/v1/users/{user_id}/subscriptions/{sub_id}
# - GET    /api/v1/subscriptions/top

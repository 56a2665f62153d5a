"""
CORS Middleware Configuration
Enables Cross-Origin Resource Sharing for browser clients of the API.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings


def setup_cors(app: FastAPI) -> None:
    """
    Configure CORS middleware for the FastAPI application.

    Args:
        app: FastAPI application instance

    Allowed origins come from settings.CORS_ORIGINS (env var
    CORS_ORIGINS, JSON list). In production restrict it to the
    actual frontend domain.
    """
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,  # List of allowed origins
        allow_credentials=True,  # Allow cookies and auth headers
        allow_methods=["*"],  # Allow all HTTP methods (GET, POST, PUT, DELETE, etc.)
        allow_headers=["*"],  # Allow all headers
    )

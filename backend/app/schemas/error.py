"""
Error Response Schema
Body returned for every failed request.
"""

from datetime import datetime

from pydantic import BaseModel, Field


TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def _now() -> str:
    return datetime.now().strftime(TIMESTAMP_FORMAT)


class ErrorResponse(BaseModel):
    """
    Error body.

    Example:
        {
            "status": 404,
            "message": "User with id: 999 not found",
            "timestamp": "2024-01-13 10:30:00"
        }
    """
    status: int = Field(..., description="HTTP status code")
    message: str = Field(..., description="Human-readable error message")
    timestamp: str = Field(
        default_factory=_now,
        description="Time of the error (yyyy-MM-dd HH:mm:ss)"
    )

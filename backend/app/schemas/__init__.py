"""
Pydantic Schemas Module
Contains request/response schemas for API validation and serialization.

Pydantic schemas are used for:
- Validating incoming request data
- Serializing database models to JSON responses
- Auto-generating OpenAPI documentation
"""

from app.schemas.user import (
    UserCreate,
    UserUpdate,
    UserResponse,
)
from app.schemas.subscription import (
    SubscriptionCreate,
    SubscriptionResponse,
    SubscriptionTopResponse,
)
from app.schemas.error import ErrorResponse

__all__ = [
    "UserCreate",
    "UserUpdate",
    "UserResponse",
    "SubscriptionCreate",
    "SubscriptionResponse",
    "SubscriptionTopResponse",
    "ErrorResponse",
]

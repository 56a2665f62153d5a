"""
User Pydantic Schemas
Request and response models for user-related endpoints.

These schemas define the structure of data sent to and received from the API.
They provide automatic validation, serialization, and documentation.
"""

from pydantic import AfterValidator, BaseModel, EmailStr, Field, ConfigDict
from pydantic_core import PydanticCustomError
from typing import Annotated, Optional


def _reject_blank(value: str) -> str:
    if not value.strip():
        raise PydanticCustomError("blank", "Name must not be blank")
    return value


# Display name: 2-50 characters, not only whitespace
UserName = Annotated[
    str,
    Field(min_length=2, max_length=50),
    AfterValidator(_reject_blank),
]


# ============================================================================
# Request Schemas
# ============================================================================

class UserCreate(BaseModel):
    """
    Schema for user creation request.

    Used in POST /api/v1/users endpoint.

    Example:
        {
            "name": "Ivan Ivanov",
            "email": "ivan@example.com"
        }
    """
    name: UserName = Field(
        ...,
        description="User's display name (2-50 characters)",
        examples=["Ivan Ivanov"]
    )
    email: EmailStr = Field(
        ...,
        description="Valid email address",
        examples=["ivan@example.com"]
    )


class UserUpdate(BaseModel):
    """
    Schema for user update request.

    Used in PUT /api/v1/users/{id} endpoint.
    All fields are optional - only provided, non-null fields are updated.

    Example:
        {
            "name": "Petr Petrov"
        }
    """
    name: Optional[UserName] = Field(
        None,
        description="Updated display name"
    )
    email: Optional[EmailStr] = Field(
        None,
        description="Updated email address"
    )


# ============================================================================
# Response Schemas
# ============================================================================

class UserResponse(BaseModel):
    """
    Schema for user response.

    Example:
        {
            "id": 1,
            "name": "Ivan Ivanov",
            "email": "ivan@example.com"
        }
    """
    id: int = Field(
        ...,
        description="Unique user identifier"
    )
    name: str = Field(
        ...,
        description="User's display name"
    )
    email: str = Field(
        ...,
        description="User's email address"
    )

    # Pydantic v2 configuration
    model_config = ConfigDict(from_attributes=True)

"""
Subscription Schemas
Request/response models for subscription endpoints.

JSON field names are camelCase (serviceName, notificationEnabled).
Requests are also accepted with snake_case names.
"""

from pydantic import BaseModel, Field, ConfigDict, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError
from typing import Optional
from datetime import datetime


SERVICE_NAME_MAX_LENGTH = 100


class SubscriptionCreate(BaseModel):
    """
    Schema for subscribing a user to a service.

    Example:
        {
            "serviceName": "Yandex Plus",
            "notificationEnabled": true
        }
    """
    service_name: str = Field(
        ...,
        min_length=1,
        max_length=SERVICE_NAME_MAX_LENGTH,
        description="Service name",
        examples=["Yandex Plus"]
    )
    notification_enabled: bool = Field(
        False,
        description="Whether notifications are enabled",
        examples=[True]
    )

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @field_validator("service_name")
    @classmethod
    def service_name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise PydanticCustomError("blank", "Service name must not be blank")
        return value


class SubscriptionResponse(BaseModel):
    """
    Schema for subscription response.

    Example:
        {
            "id": 10,
            "userId": 1,
            "serviceName": "Yandex Plus",
            "notificationEnabled": true,
            "createdAt": "2024-01-13T10:30:00Z"
        }
    """
    id: int
    user_id: int
    service_name: str
    notification_enabled: bool
    created_at: Optional[datetime] = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True
    )


class SubscriptionTopResponse(BaseModel):
    """
    One entry of the top subscriptions ranking.

    Example:
        {"serviceName": "Yandex Plus", "count": 5}
    """
    service_name: str = Field(..., description="Service name")
    count: int = Field(..., description="Number of subscribers")

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

"""
Subscription Endpoints
Subscribe/list/unsubscribe for a user, plus the global top ranking.

Endpoints:
- POST /users/{user_id}/subscriptions - Subscribe user to a service
- GET /users/{user_id}/subscriptions - List user's subscriptions
- DELETE /users/{user_id}/subscriptions/{sub_id} - Unsubscribe
- GET /subscriptions/top - Most popular services
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from app.api.v1.deps import get_subscription_service
from app.core.config import settings
from app.schemas.error import ErrorResponse
from app.schemas.subscription import (
    SubscriptionCreate,
    SubscriptionResponse,
    SubscriptionTopResponse,
)
from app.services.subscription_service import SubscriptionService


logger = logging.getLogger(__name__)

router = APIRouter(tags=["Subscriptions"])


@router.post(
    "/users/{user_id}/subscriptions",
    response_model=SubscriptionResponse,
    status_code=status.HTTP_200_OK,
    summary="Subscribe user to a service",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid request data"},
        404: {"model": ErrorResponse, "description": "User not found"},
        409: {"model": ErrorResponse, "description": "User is already subscribed to this service"},
    }
)
def subscribe(
    user_id: int,
    subscription_data: SubscriptionCreate,
    service: SubscriptionService = Depends(get_subscription_service)
):
    """
    Create a subscription for the user.

    Request Body:
    - serviceName: Service name, not blank, up to 100 characters
    - notificationEnabled: Whether notifications are on (default false)

    Example:
        POST /api/v1/users/1/subscriptions
        {"serviceName": "Yandex Plus", "notificationEnabled": true}

        Response 200:
        {
            "id": 10,
            "userId": 1,
            "serviceName": "Yandex Plus",
            "notificationEnabled": true,
            "createdAt": "2024-01-13T10:30:00"
        }
    """
    logger.info("POST /users/%s/subscriptions: %s", user_id, subscription_data.service_name)
    return service.subscribe(user_id, subscription_data)


@router.get(
    "/users/{user_id}/subscriptions",
    response_model=List[SubscriptionResponse],
    summary="List user's subscriptions",
    responses={404: {"model": ErrorResponse, "description": "User not found"}}
)
def list_subscriptions(
    user_id: int,
    service: SubscriptionService = Depends(get_subscription_service)
):
    logger.info("GET /users/%s/subscriptions", user_id)
    return service.list_subscriptions(user_id)


@router.delete(
    "/users/{user_id}/subscriptions/{sub_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Unsubscribe",
    description="Deletes the subscription if it belongs to the user",
    responses={
        403: {"model": ErrorResponse, "description": "Subscription belongs to another user"},
        404: {"model": ErrorResponse, "description": "Subscription not found"},
    }
)
def unsubscribe(
    user_id: int,
    sub_id: int,
    service: SubscriptionService = Depends(get_subscription_service)
) -> Response:
    logger.info("DELETE /users/%s/subscriptions/%s", user_id, sub_id)
    service.unsubscribe(user_id, sub_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/subscriptions/top",
    response_model=List[SubscriptionTopResponse],
    summary="Top subscriptions",
    description="Most popular services, ranked by number of subscribers"
)
def top_subscriptions(
    limit: Optional[int] = Query(
        None, ge=1, le=100,
        description="Number of services to return (default: TOP_SUBSCRIPTIONS_LIMIT)"
    ),
    service: SubscriptionService = Depends(get_subscription_service)
):
    """
    Example:
        GET /api/v1/subscriptions/top

        Response 200:
        [
            {"serviceName": "Yandex Plus", "count": 5},
            {"serviceName": "Netflix", "count": 3},
            {"serviceName": "Spotify", "count": 2}
        ]
    """
    limit = limit or settings.TOP_SUBSCRIPTIONS_LIMIT
    logger.info("GET /subscriptions/top (limit=%s)", limit)
    return service.top_subscriptions(limit)

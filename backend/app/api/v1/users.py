"""
User Endpoints
CRUD operations for users.

Endpoints:
- POST /users - Create user
- GET /users - List all users
- GET /users/{user_id} - Get user by id
- PUT /users/{user_id} - Partially update user
- DELETE /users/{user_id} - Delete user (and their subscriptions)
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response, status

from app.api.v1.deps import get_user_service
from app.core.config import settings
from app.schemas.error import ErrorResponse
from app.schemas.user import UserCreate, UserResponse, UserUpdate
from app.services.user_service import UserService


logger = logging.getLogger(__name__)

# Create router for user endpoints
# This router will be included in the main app with prefix /api/v1/users
router = APIRouter()


USER_NOT_FOUND_RESPONSE = {
    "model": ErrorResponse,
    "description": "User not found",
    "content": {
        "application/json": {
            "example": {
                "status": 404,
                "message": "User with id: 999 not found",
                "timestamp": "2024-01-13 10:30:00"
            }
        }
    }
}

VALIDATION_ERROR_RESPONSE = {
    "model": ErrorResponse,
    "description": "Invalid request data",
    "content": {
        "application/json": {
            "example": {
                "status": 400,
                "message": "Field 'name': String should have at least 2 characters, "
                           "Field 'email': value is not a valid email address",
                "timestamp": "2024-01-13 10:30:00"
            }
        }
    }
}


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create user",
    description="Creates a new user",
    responses={400: VALIDATION_ERROR_RESPONSE}
)
def create_user(
    user_data: UserCreate,
    response: Response,
    service: UserService = Depends(get_user_service)
) -> UserResponse:
    """
    Create a new user.

    Request Body:
    - name: Display name, 2-50 characters, not blank
    - email: Valid email address

    Returns:
    - Created user with its assigned id
    - Location header pointing at the new resource

    Example:
        POST /api/v1/users
        {"name": "Ivan Ivanov", "email": "ivan@example.com"}

        Response 201:
        {"id": 1, "name": "Ivan Ivanov", "email": "ivan@example.com"}
    """
    logger.info("POST /users: %s", user_data.model_dump())
    user = service.create_user(user_data)
    response.headers["Location"] = f"/api/{settings.API_VERSION}/users/{user.id}"
    return user


@router.get(
    "",
    response_model=List[UserResponse],
    summary="List users",
    description="Returns all registered users"
)
def list_users(
    service: UserService = Depends(get_user_service)
) -> List[UserResponse]:
    logger.info("GET /users")
    return service.list_users()


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    summary="Get user by id",
    responses={404: USER_NOT_FOUND_RESPONSE}
)
def get_user(
    user_id: int,
    service: UserService = Depends(get_user_service)
) -> UserResponse:
    logger.info("GET /users/%s", user_id)
    return service.get_user(user_id)


@router.put(
    "/{user_id}",
    response_model=UserResponse,
    summary="Update user",
    description="Updates only the fields present in the request body",
    responses={
        400: VALIDATION_ERROR_RESPONSE,
        404: USER_NOT_FOUND_RESPONSE
    }
)
def update_user(
    user_id: int,
    user_data: UserUpdate,
    service: UserService = Depends(get_user_service)
) -> UserResponse:
    """
    Update a user.

    Only provided, non-null fields are updated (merge, not replace).

    Example:
        PUT /api/v1/users/1
        {"name": "Petr Petrov"}

        Response 200:
        {"id": 1, "name": "Petr Petrov", "email": "ivan@example.com"}
    """
    logger.info("PUT /users/%s: %s", user_id, user_data.model_dump(exclude_unset=True))
    return service.update_user(user_id, user_data)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete user",
    responses={404: USER_NOT_FOUND_RESPONSE}
)
def delete_user(
    user_id: int,
    service: UserService = Depends(get_user_service)
) -> Response:
    logger.info("DELETE /users/%s", user_id)
    service.delete_user(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

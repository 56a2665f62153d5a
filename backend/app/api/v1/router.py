"""
API v1 Main Router
Aggregates all v1 API endpoints into a single router.

This file combines the individual routers into a single APIRouter that
is included in the main FastAPI application.

Structure:
- /users/* - User CRUD endpoints
- /users/{user_id}/subscriptions/* - Subscriptions of one user
- /subscriptions/top - Global subscription ranking
"""

from fastapi import APIRouter

from app.api.v1 import users, subscriptions


# Create main v1 router
# This router will be included in main.py with prefix /api/v1
api_router = APIRouter()


# Include user endpoints
# Endpoints: POST/GET /users, GET/PUT/DELETE /users/{user_id}
api_router.include_router(
    users.router,
    prefix="/users",
    tags=["Users"],
)


# Include subscription endpoints
# Endpoints: POST/GET /users/{user_id}/subscriptions,
# DELETE /users/{user_id}/subscriptions/{sub_id}, GET /subscriptions/top
api_router.include_router(subscriptions.router)

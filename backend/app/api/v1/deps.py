"""
API Dependencies
Common dependencies used across API endpoints.

This module wires the service layer for each request:
- One database session per request (get_db)
- Repositories built on that session
- Services built from those repositories, passed in explicitly

Dependencies are injected into FastAPI endpoints using Depends().
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.repositories.user_repository import UserRepository
from app.repositories.subscription_repository import SubscriptionRepository
from app.services.user_service import UserService
from app.services.subscription_service import SubscriptionService


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    """
    Provide a UserService bound to the request's session.

    Usage in endpoint:
        @router.get("/users")
        def list_users(service: UserService = Depends(get_user_service)):
            return service.list_users()
    """
    return UserService(UserRepository(db))


def get_subscription_service(
    db: Session = Depends(get_db),
    user_service: UserService = Depends(get_user_service)
) -> SubscriptionService:
    """
    Provide a SubscriptionService bound to the request's session.

    FastAPI caches get_db per request, so the user service and the
    subscription repository share one session (one transaction).
    """
    return SubscriptionService(SubscriptionRepository(db), user_service)

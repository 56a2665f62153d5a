"""
Data Access Module
Repositories wrap a SQLAlchemy session and expose the queries the
service layer needs. They hold no business rules.
"""

from app.repositories.user_repository import UserRepository
from app.repositories.subscription_repository import SubscriptionRepository

__all__ = ["UserRepository", "SubscriptionRepository"]

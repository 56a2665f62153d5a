"""
Database Models Module
Contains SQLAlchemy ORM models for all database tables.

This module serves as the central import point for all models.
Import Base from here to access all registered models.

All models must be imported here to be registered with SQLAlchemy
and created during Base.metadata.create_all().
"""

from app.db.base import Base
from app.models.base import BaseModel
from app.models.user import User
from app.models.subscription import Subscription

# Export all models so they can be imported from app.models
# This also ensures they are registered with SQLAlchemy Base
__all__ = [
    "Base",
    "BaseModel",
    "User",
    "Subscription",
]

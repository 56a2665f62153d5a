"""
User Model
Represents users of the subscription service.

Each user has:
- A store-assigned numeric id
- A display name (2-50 characters)
- An email address (no uniqueness enforced)

A user owns zero or more subscriptions (see app.models.subscription).
"""

from sqlalchemy import Column, String

from app.models.base import BaseModel


class User(BaseModel):
    """
    User model.

    Fields:
        id (int): Primary key, inherited from BaseModel
        name (str): Display name
        email (str): Contact email address

    Subscriptions reference users through subscriptions.user_id.
    There is no ORM relationship: owned subscriptions are loaded
    explicitly through SubscriptionRepository.find_by_user_id().

    Example usage:
        user = User(name="Ivan Ivanov", email="ivan@example.com")
        db.add(user)
        db.commit()
    """

    __tablename__ = "users"

    name = Column(
        String(50),
        nullable=False,
        comment="User's display name"
    )

    email = Column(
        String(255),
        nullable=False,
        comment="User's email address"
    )

    def __repr__(self):
        """String representation for debugging."""
        return f"<User(id={self.id}, name={self.name}, email={self.email})>"

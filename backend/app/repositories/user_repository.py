"""
User Repository
Lookups and persistence of User records.
"""

from sqlalchemy.orm import Session
from typing import List, Optional

from app.models.user import User
from app.models.subscription import Subscription


class UserRepository:
    """
    Data access for the users table.

    Write methods commit the session: each call is one transaction.
    """

    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, user_id: int) -> Optional[User]:
        return self.db.query(User).filter(User.id == user_id).first()

    def exists_by_id(self, user_id: int) -> bool:
        return self.db.query(User.id).filter(User.id == user_id).first() is not None

    def find_all(self) -> List[User]:
        """All users in insertion order."""
        return self.db.query(User).order_by(User.id).all()

    def save(self, user: User) -> User:
        """
        Insert or update a user and commit.

        Returns the refreshed instance, so store-generated values (id)
        are populated.
        """
        self.db.add(user)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(user)
        return user

    def delete_by_id(self, user_id: int) -> None:
        """
        Delete a user together with all subscriptions they own.

        Subscriptions are removed explicitly, in the same transaction,
        so the result does not depend on the store enforcing
        ON DELETE CASCADE.
        """
        try:
            self.db.query(Subscription).filter(
                Subscription.user_id == user_id
            ).delete(synchronize_session=False)
            self.db.query(User).filter(User.id == user_id).delete(synchronize_session=False)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

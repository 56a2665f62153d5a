"""
Subscription Repository
Lookups, persistence and the name-frequency aggregate for Subscription records.
"""

from sqlalchemy import and_, func
from sqlalchemy.orm import Session
from typing import List, Sequence

from app.models.subscription import Subscription


class SubscriptionRepository:
    """
    Data access for the subscriptions table.

    Write methods commit the session: each call is one transaction.
    """

    def __init__(self, db: Session):
        self.db = db

    def exists_by_id(self, subscription_id: int) -> bool:
        return self.db.query(Subscription.id).filter(
            Subscription.id == subscription_id
        ).first() is not None

    def exists_by_id_and_user_id(self, subscription_id: int, user_id: int) -> bool:
        return self.db.query(Subscription.id).filter(
            and_(
                Subscription.id == subscription_id,
                Subscription.user_id == user_id
            )
        ).first() is not None

    def exists_by_user_and_service_name(self, user_id: int, service_name: str) -> bool:
        return self.db.query(Subscription.id).filter(
            and_(
                Subscription.user_id == user_id,
                Subscription.service_name == service_name
            )
        ).first() is not None

    def find_by_user_id(self, user_id: int) -> List[Subscription]:
        return self.db.query(Subscription).filter(
            Subscription.user_id == user_id
        ).order_by(Subscription.id).all()

    def find_by_service_names(self, service_names: Sequence[str]) -> List[Subscription]:
        if not service_names:
            return []
        return self.db.query(Subscription).filter(
            Subscription.service_name.in_(list(service_names))
        ).all()

    def find_top_service_names(self, limit: int) -> List[str]:
        """
        Distinct service names ranked by subscriber count.

        Grouped and ordered in the store: count descending, then name
        ascending so equal counts come back in a stable order.

        Equivalent SQL:
            SELECT service_name FROM subscriptions
            GROUP BY service_name
            ORDER BY COUNT(id) DESC, service_name ASC
            LIMIT :limit
        """
        subscriber_count = func.count(Subscription.id)
        rows = self.db.query(Subscription.service_name).group_by(
            Subscription.service_name
        ).order_by(
            subscriber_count.desc(),
            Subscription.service_name.asc()
        ).limit(limit).all()
        return [row[0] for row in rows]

    def save(self, subscription: Subscription) -> Subscription:
        """
        Insert a subscription and commit.

        On failure the transaction is rolled back and the error re-raised;
        a (user_id, service_name) unique violation surfaces as
        sqlalchemy.exc.IntegrityError.
        """
        self.db.add(subscription)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(subscription)
        return subscription

    def delete_by_id(self, subscription_id: int) -> None:
        try:
            self.db.query(Subscription).filter(
                Subscription.id == subscription_id
            ).delete(synchronize_session=False)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

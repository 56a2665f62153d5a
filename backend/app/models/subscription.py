"""
Subscription Model
Links one user to one named service with a notification preference.
"""

from sqlalchemy import Column, String, Boolean, Integer, DateTime, ForeignKey, UniqueConstraint
from datetime import datetime, timezone

from app.models.base import BaseModel


class Subscription(BaseModel):
    """
    Subscription Model

    A user can hold at most one subscription per service name. The
    (user_id, service_name) unique constraint is the final authority for
    that rule: two concurrent subscribe requests for the same pair cannot
    both be committed.

    The owner (user_id) is fixed at creation time.
    """
    __tablename__ = "subscriptions"
    __table_args__ = (
        UniqueConstraint("user_id", "service_name", name="uq_subscriptions_user_service"),
    )

    # Owning user
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    # Service / plan label (e.g. "Yandex Plus")
    service_name = Column(String(100), nullable=False, index=True)

    notification_enabled = Column(Boolean, default=False, nullable=False)

    # Set once, when the record is created
    created_at = Column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False
    )

    def __repr__(self):
        return f"<Subscription(id={self.id}, user_id={self.user_id}, service={self.service_name})>"

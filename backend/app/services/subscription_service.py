"""
Subscription Service - Business Logic Layer
Handles subscribe/list/unsubscribe for a user and the top subscriptions ranking.

Key responsibilities:
- Duplicate prevention: one subscription per (user, service name)
- Ownership checks on unsubscribe (existence first, then owner)
- Top-N aggregation of service names by subscriber count
"""

import logging
from collections import Counter
from typing import List

from sqlalchemy.exc import IntegrityError

from app.core.exceptions import (
    DuplicateSubscriptionError,
    SubscriptionNotFoundError,
    SubscriptionNotOwnedError,
)
from app.models.subscription import Subscription
from app.repositories.subscription_repository import SubscriptionRepository
from app.schemas.subscription import SubscriptionCreate, SubscriptionTopResponse
from app.services.user_service import UserService


logger = logging.getLogger(__name__)

DEFAULT_TOP_LIMIT = 3


class SubscriptionService:
    """
    Service class for subscription business logic.

    Depends on the subscription repository and on UserService, which is
    the only place that decides whether a user exists.
    """

    def __init__(self, subscriptions: SubscriptionRepository, user_service: UserService):
        self.subscriptions = subscriptions
        self.user_service = user_service

    def subscribe(self, user_id: int, subscription_data: SubscriptionCreate) -> Subscription:
        """
        Subscribe a user to a service.

        Steps:
        1. Resolve the user (UserNotFoundError if absent)
        2. Reject an existing (user, service name) pair
        3. Persist the subscription, timestamped now

        The check in step 2 and the insert share one transaction, but two
        concurrent requests can both pass the check. The unique constraint
        then rejects the second insert, which is reported the same way.

        Raises:
            UserNotFoundError: If the user does not exist
            DuplicateSubscriptionError: If the user already has this service
        """
        logger.info("Adding subscription '%s' to user %s", subscription_data.service_name, user_id)

        user = self.user_service.resolve_user(user_id)

        if self.subscriptions.exists_by_user_and_service_name(user.id, subscription_data.service_name):
            logger.warning(
                "User %s is already subscribed to '%s'", user.id, subscription_data.service_name
            )
            raise DuplicateSubscriptionError()

        subscription = Subscription(
            user_id=user.id,
            service_name=subscription_data.service_name,
            notification_enabled=subscription_data.notification_enabled,
        )
        try:
            subscription = self.subscriptions.save(subscription)
        except IntegrityError as e:
            logger.warning(
                "Store rejected subscription '%s' for user %s: %s",
                subscription_data.service_name, user_id, e.orig
            )
            raise DuplicateSubscriptionError() from e

        logger.info("Subscription %s created for user %s", subscription.id, user.id)
        return subscription

    def list_subscriptions(self, user_id: int) -> List[Subscription]:
        """
        All subscriptions owned by a user.

        Raises:
            UserNotFoundError: If the user does not exist
        """
        logger.info("Fetching subscriptions of user %s", user_id)
        user = self.user_service.resolve_user(user_id)
        return self.subscriptions.find_by_user_id(user.id)

    def unsubscribe(self, user_id: int, subscription_id: int) -> None:
        """
        Delete a subscription owned by the given user.

        Existence is checked before ownership: an unknown id is always
        SubscriptionNotFoundError, whoever asks for it.

        Raises:
            SubscriptionNotFoundError: If the subscription does not exist
            SubscriptionNotOwnedError: If it belongs to another user
        """
        logger.info("Removing subscription %s of user %s", subscription_id, user_id)

        if not self.subscriptions.exists_by_id(subscription_id):
            logger.warning("Subscription %s does not exist", subscription_id)
            raise SubscriptionNotFoundError(subscription_id)

        if not self.subscriptions.exists_by_id_and_user_id(subscription_id, user_id):
            logger.warning(
                "Subscription %s does not belong to user %s", subscription_id, user_id
            )
            raise SubscriptionNotOwnedError(user_id, subscription_id)

        self.subscriptions.delete_by_id(subscription_id)
        logger.info("Subscription %s removed from user %s", subscription_id, user_id)

    def top_subscriptions(self, limit: int = DEFAULT_TOP_LIMIT) -> List[SubscriptionTopResponse]:
        """
        Most popular services by subscriber count.

        Two passes:
        1. The store ranks distinct service names and returns the first
           `limit` of them
        2. Only the subscriptions with those names are loaded and counted
           here, grouped by service name

        Result is sorted by count descending. Equal counts are ordered by
        service name; callers should not rely on that order.

        Example:
            A has 5 subscribers, B 3, C 2, D 1:
            top_subscriptions(3) -> [A: 5, B: 3, C: 2]
        """
        logger.info("Computing top %d subscriptions", limit)

        service_names = self.subscriptions.find_top_service_names(limit)
        rows = self.subscriptions.find_by_service_names(service_names)

        counts = Counter(row.service_name for row in rows)
        ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))

        return [
            SubscriptionTopResponse(service_name=name, count=count)
            for name, count in ranked
        ]

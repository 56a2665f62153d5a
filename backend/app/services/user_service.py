"""
User Service - Business Logic Layer
Handles user CRUD on top of the user repository.

Key responsibilities:
- Create, read, update (partial merge), delete and list users
- Translate a missing record into UserNotFoundError
- Be the single source of truth for "does this user exist"
  (resolve_user, used by SubscriptionService)
"""

import logging
from typing import List

from app.core.exceptions import UserNotFoundError
from app.models.user import User
from app.repositories.user_repository import UserRepository
from app.schemas.user import UserCreate, UserUpdate


logger = logging.getLogger(__name__)


class UserService:
    """
    Service class for user-related business logic.

    The repository is passed in by the caller (see app.api.v1.deps);
    the service never looks up its own collaborators.
    """

    def __init__(self, users: UserRepository):
        self.users = users

    def create_user(self, user_data: UserCreate) -> User:
        """
        Create a new user.

        Field validation (name length, email syntax) has already happened
        at the API boundary. Email uniqueness is not enforced.

        Args:
            user_data: Validated creation payload

        Returns:
            Created User with its store-assigned id
        """
        logger.info("Creating user: name=%s email=%s", user_data.name, user_data.email)
        user = User(name=user_data.name, email=user_data.email)
        user = self.users.save(user)
        logger.info("User %s created", user.id)
        return user

    def get_user(self, user_id: int) -> User:
        """
        Get user by ID.

        Raises:
            UserNotFoundError: If no user has this id
        """
        logger.info("Fetching user %s", user_id)
        return self.resolve_user(user_id)

    def update_user(self, user_id: int, user_data: UserUpdate) -> User:
        """
        Update a user with merge semantics.

        Only fields present and non-null in user_data overwrite the stored
        values; everything else is left untouched.

        Example:
            service.update_user(1, UserUpdate(name="Petr Petrov"))
            # email is unchanged

        Raises:
            UserNotFoundError: If no user has this id
        """
        logger.info("Updating user %s", user_id)
        user = self.users.find_by_id(user_id)
        if user is None:
            logger.warning("Attempt to update missing user %s", user_id)
            raise UserNotFoundError(user_id)

        update_data = user_data.model_dump(exclude_unset=True, exclude_none=True)
        for field, value in update_data.items():
            setattr(user, field, value)

        user = self.users.save(user)
        logger.info("User %s updated (fields: %s)", user_id, ", ".join(update_data) or "none")
        return user

    def delete_user(self, user_id: int) -> None:
        """
        Delete a user and the subscriptions they own.

        Raises:
            UserNotFoundError: If no user has this id
        """
        logger.info("Deleting user %s", user_id)
        if not self.users.exists_by_id(user_id):
            logger.warning("Attempt to delete missing user %s", user_id)
            raise UserNotFoundError(user_id)

        self.users.delete_by_id(user_id)
        logger.info("User %s deleted", user_id)

    def list_users(self) -> List[User]:
        """All users, in insertion order."""
        users = self.users.find_all()
        logger.info("Found %d users", len(users))
        return users

    def resolve_user(self, user_id: int) -> User:
        """
        Load a user or fail.

        Raises:
            UserNotFoundError: If no user has this id
        """
        user = self.users.find_by_id(user_id)
        if user is None:
            logger.warning("User %s not found", user_id)
            raise UserNotFoundError(user_id)
        return user

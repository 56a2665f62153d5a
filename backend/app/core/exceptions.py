"""
Domain Exceptions
Named failures raised by the service layer and mapped to HTTP responses
at the API boundary.

Services raise these and never catch them; they travel unchanged up to
the exception handlers registered in app.middleware.error_handler, which
turn them into responses through resolve_error().

Taxonomy:
- NotFoundError (UserNotFoundError, SubscriptionNotFoundError) -> 404
- SubscriptionNotOwnedError -> 403
- DuplicateSubscriptionError -> 409
- ValidationFailedError -> 400
"""

from typing import Dict, List, Tuple, Type

from fastapi import status


class DomainError(Exception):
    """Base class for all domain failures. Carries a user-facing message."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(DomainError):
    """A requested entity does not exist."""


class UserNotFoundError(NotFoundError):
    def __init__(self, user_id: int):
        super().__init__(f"User with id: {user_id} not found")
        self.user_id = user_id


class SubscriptionNotFoundError(NotFoundError):
    def __init__(self, subscription_id: int):
        super().__init__(f"Subscription with id: {subscription_id} not found")
        self.subscription_id = subscription_id


class SubscriptionNotOwnedError(DomainError):
    """The subscription exists but belongs to another user."""

    def __init__(self, user_id: int, subscription_id: int):
        super().__init__(
            f"Subscription {subscription_id} does not belong to user {user_id}"
        )
        self.user_id = user_id
        self.subscription_id = subscription_id


class DuplicateSubscriptionError(DomainError):
    """The user already has a subscription for this service name."""

    MESSAGE = "User is already subscribed to this service"

    def __init__(self):
        super().__init__(self.MESSAGE)


class ValidationFailedError(DomainError):
    """
    One or more request fields failed validation.

    Holds every failing field, not just the first one, as
    (field, reason) pairs.
    """

    def __init__(self, field_errors: List[Tuple[str, str]]):
        self.field_errors = list(field_errors)
        super().__init__(format_field_errors(self.field_errors))


def format_field_errors(field_errors: List[Tuple[str, str]]) -> str:
    """Render (field, reason) pairs as "Field 'x': reason, Field 'y': reason"."""
    return ", ".join(f"Field '{field}': {reason}" for field, reason in field_errors)


# Error kind -> HTTP status code
# Lookup walks the exception's MRO, so the most specific class wins.
ERROR_STATUS_MAP: Dict[Type[Exception], int] = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    SubscriptionNotOwnedError: status.HTTP_403_FORBIDDEN,
    DuplicateSubscriptionError: status.HTTP_409_CONFLICT,
    ValidationFailedError: status.HTTP_400_BAD_REQUEST,
}

INTERNAL_ERROR_MESSAGE = "Internal server error"


def resolve_error(exc: Exception) -> Tuple[int, str]:
    """
    Map an exception to (status_code, message).

    Domain errors keep their own message. Anything not in ERROR_STATUS_MAP
    is an infrastructure failure: 500 with a generic message, so store
    details never leak to the client.

    Example:
        >>> resolve_error(UserNotFoundError(999))
        (404, 'User with id: 999 not found')
    """
    for klass in type(exc).__mro__:
        status_code = ERROR_STATUS_MAP.get(klass)
        if status_code is not None:
            return status_code, str(exc)
    return status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE

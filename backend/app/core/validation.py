"""
Request Validation Helpers

Pydantic schemas declare the field constraints; this module turns the
resulting error list into the (field, reason) pairs used by
ValidationFailedError.
"""

from typing import Any, Dict, Iterable, List, Tuple

from app.core.exceptions import ValidationFailedError


# Leading location segments FastAPI adds to say where a value came from
REQUEST_LOCATIONS = {"body", "path", "query", "header", "cookie"}


def collect_field_errors(errors: Iterable[Dict[str, Any]]) -> List[Tuple[str, str]]:
    """
    Convert pydantic/FastAPI error dicts into (field, reason) pairs.

    Every error is kept, in the order pydantic reported them.

    Example:
        >>> collect_field_errors([{"loc": ("body", "name"), "msg": "too short"}])
        [('name', 'too short')]
    """
    field_errors = []
    for error in errors:
        loc = list(error.get("loc", ()))
        if len(loc) > 1 and loc[0] in REQUEST_LOCATIONS:
            loc = loc[1:]
        field = ".".join(str(part) for part in loc) or "request"
        field_errors.append((field, error.get("msg", "invalid value")))
    return field_errors


def validation_error_from(errors: Iterable[Dict[str, Any]]) -> ValidationFailedError:
    """Build the domain validation error for a failed request."""
    return ValidationFailedError(collect_field_errors(errors))

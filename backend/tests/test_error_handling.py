"""
Error mapping and error response tests.

resolve_error and collect_field_errors are pure functions and are tested
without HTTP; the rest goes through the app.
"""

import logging

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from app.api.v1.deps import get_user_service
from app.core.exceptions import (
    DomainError,
    DuplicateSubscriptionError,
    SubscriptionNotFoundError,
    SubscriptionNotOwnedError,
    UserNotFoundError,
    ValidationFailedError,
    format_field_errors,
    resolve_error,
)
from app.core.validation import collect_field_errors
from app.main import app
from app.services.error_logging import configure_logging, error_logger, truncate_string


class TestResolveError:

    @pytest.mark.parametrize("exc, expected_status", [
        (UserNotFoundError(1), 404),
        (SubscriptionNotFoundError(2), 404),
        (SubscriptionNotOwnedError(1, 2), 403),
        (DuplicateSubscriptionError(), 409),
        (ValidationFailedError([("name", "too short")]), 400),
    ])
    def test_status_codes(self, exc, expected_status):
        status_code, message = resolve_error(exc)
        assert status_code == expected_status
        assert message == exc.message

    def test_user_not_found_message_has_id(self):
        assert resolve_error(UserNotFoundError(999)) == (404, "User with id: 999 not found")

    def test_not_owned_message_has_both_ids(self):
        _, message = resolve_error(SubscriptionNotOwnedError(user_id=3, subscription_id=17))
        assert "3" in message
        assert "17" in message

    def test_duplicate_message_is_fixed(self):
        assert resolve_error(DuplicateSubscriptionError()) == (
            409, "User is already subscribed to this service"
        )

    def test_unknown_exception_is_generic_500(self):
        status_code, message = resolve_error(RuntimeError("connection refused to 10.0.0.5"))
        assert status_code == 500
        assert "10.0.0.5" not in message

    def test_plain_domain_error_is_500(self):
        assert resolve_error(DomainError("odd"))[0] == 500


class TestFieldErrors:

    def test_collect_strips_request_location(self):
        errors = [
            {"loc": ("body", "name"), "msg": "String should have at least 2 characters"},
            {"loc": ("path", "user_id"), "msg": "Input should be a valid integer"},
            {"loc": ("body", "address", "city"), "msg": "Field required"},
        ]

        assert collect_field_errors(errors) == [
            ("name", "String should have at least 2 characters"),
            ("user_id", "Input should be a valid integer"),
            ("address.city", "Field required"),
        ]

    def test_collect_whole_body(self):
        assert collect_field_errors([{"loc": ("body",), "msg": "Field required"}]) == [
            ("body", "Field required")
        ]

    def test_format_joins_all_fields(self):
        message = format_field_errors([("name", "too short"), ("email", "invalid")])
        assert message == "Field 'name': too short, Field 'email': invalid"

    def test_validation_error_keeps_every_field(self):
        exc = ValidationFailedError([("name", "too short"), ("email", "invalid")])
        assert exc.field_errors == [("name", "too short"), ("email", "invalid")]
        assert str(exc) == "Field 'name': too short, Field 'email': invalid"


class _BrokenUserService:
    def list_users(self):
        raise OperationalError("SELECT 1", {}, Exception("database is gone"))


def test_unhandled_error_becomes_500():
    app.dependency_overrides[get_user_service] = lambda: _BrokenUserService()
    try:
        resp = TestClient(app).get("/api/v1/users")
    finally:
        app.dependency_overrides.pop(get_user_service, None)

    assert resp.status_code == 500
    body = resp.json()
    assert body["status"] == 500
    assert body["message"] == "Internal server error"
    assert "database is gone" not in resp.text
    assert resp.headers["x-error-id"]


def test_unknown_route_uses_error_body(client):
    resp = client.get("/api/v1/nothing-here")

    assert resp.status_code == 404
    assert resp.json()["status"] == 404
    assert set(resp.json()) == {"status", "message", "timestamp"}


def test_health(client):
    resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"
    assert resp.json()["database"] == "ok"


def test_root(client):
    resp = client.get("/")

    assert resp.status_code == 200
    assert resp.json()["docs"] == "/docs"


class TestLogging:

    @pytest.fixture
    def root_logger(self):
        root = logging.getLogger()
        handlers = list(root.handlers)
        level = root.level
        yield root
        for handler in list(root.handlers):
            if handler not in handlers:
                handler.close()
                root.removeHandler(handler)
        root.setLevel(level)

    def test_console_only_without_log_dir(self, root_logger):
        assert configure_logging(log_dir="", level="warning") is None
        assert root_logger.level == logging.WARNING

    def test_error_report_lands_in_errors_log(self, root_logger, tmp_path):
        assert configure_logging(log_dir=str(tmp_path), level="DEBUG") == tmp_path

        error_id = error_logger.log_error(ValueError("boom"), context={"user_id": 7})
        for handler in root_logger.handlers:
            handler.flush()

        errors_log = (tmp_path / "errors.log").read_text(encoding="utf-8")
        assert str(error_id) in errors_log
        assert "ValueError: boom" in errors_log
        assert "=== CONTEXT ===" in (tmp_path / "app_detailed.log").read_text(encoding="utf-8")

    def test_configure_twice_keeps_one_console_handler(self, root_logger):
        configure_logging(log_dir="")
        configure_logging(log_dir="")

        ours = [h for h in root_logger.handlers if getattr(h, "_subscription_service", False)]
        assert len(ours) == 1

    def test_truncate_string(self):
        assert truncate_string("abc", 5) == "abc"
        assert truncate_string("abcdefgh", 3).startswith("abc... [TRUNCATED, total 8 chars]")

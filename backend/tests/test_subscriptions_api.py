"""End-to-end tests for the subscription endpoints."""

USERS_URL = "/api/v1/users"
TOP_URL = "/api/v1/subscriptions/top"


def _subscriptions_url(user_id):
    return f"{USERS_URL}/{user_id}/subscriptions"


def _create_user(client, name="Ivan Ivanov", email="ivan@example.com"):
    resp = client.post(USERS_URL, json={"name": name, "email": email})
    assert resp.status_code == 201, resp.text
    return resp.json()["id"]


def _subscribe(client, user_id, service_name, notification_enabled=False):
    return client.post(
        _subscriptions_url(user_id),
        json={"serviceName": service_name, "notificationEnabled": notification_enabled},
    )


def test_subscribe_returns_created_subscription(client):
    user_id = _create_user(client)

    resp = _subscribe(client, user_id, "Yandex Plus", True)

    assert resp.status_code == 200
    body = resp.json()
    assert isinstance(body["id"], int)
    assert body["userId"] == user_id
    assert body["serviceName"] == "Yandex Plus"
    assert body["notificationEnabled"] is True
    assert body["createdAt"]


def test_subscribe_accepts_snake_case_and_defaults_notifications(client):
    user_id = _create_user(client)

    resp = client.post(_subscriptions_url(user_id), json={"service_name": "Netflix"})

    assert resp.status_code == 200
    assert resp.json()["serviceName"] == "Netflix"
    assert resp.json()["notificationEnabled"] is False


def test_subscribe_unknown_user(client):
    resp = _subscribe(client, 999, "Netflix")

    assert resp.status_code == 404
    assert resp.json()["status"] == 404
    assert "999" in resp.json()["message"]


def test_duplicate_subscription_is_conflict(client):
    user_id = _create_user(client)

    first = _subscribe(client, user_id, "Netflix")
    second = _subscribe(client, user_id, "Netflix")

    assert first.status_code == 200
    assert second.status_code == 409
    assert second.json() == {
        "status": 409,
        "message": "User is already subscribed to this service",
        "timestamp": second.json()["timestamp"],
    }


def test_same_service_for_two_users(client):
    first_user = _create_user(client, name="First")
    second_user = _create_user(client, name="Second")

    assert _subscribe(client, first_user, "Netflix").status_code == 200
    assert _subscribe(client, second_user, "Netflix").status_code == 200


def test_subscribe_validation(client):
    user_id = _create_user(client)

    resp = client.post(_subscriptions_url(user_id), json={"serviceName": "  ", "notificationEnabled": "maybe"})

    assert resp.status_code == 400
    message = resp.json()["message"]
    assert "Field 'serviceName'" in message
    assert "Field 'notificationEnabled'" in message


def test_subscribe_missing_service_name(client):
    user_id = _create_user(client)

    resp = client.post(_subscriptions_url(user_id), json={"notificationEnabled": True})

    assert resp.status_code == 400
    assert "Field 'serviceName'" in resp.json()["message"]


def test_list_subscriptions(client):
    user_id = _create_user(client)
    other_id = _create_user(client, name="Other")
    a = _subscribe(client, user_id, "Netflix").json()
    b = _subscribe(client, user_id, "Spotify", True).json()
    _subscribe(client, other_id, "Netflix")

    resp = client.get(_subscriptions_url(user_id))

    assert resp.status_code == 200
    assert sorted(resp.json(), key=lambda s: s["id"]) == sorted([a, b], key=lambda s: s["id"])


def test_list_subscriptions_unknown_user(client):
    resp = client.get(_subscriptions_url(999))

    assert resp.status_code == 404
    assert "999" in resp.json()["message"]


def test_unsubscribe(client):
    user_id = _create_user(client)
    sub = _subscribe(client, user_id, "Netflix").json()

    resp = client.delete(f"{_subscriptions_url(user_id)}/{sub['id']}")

    assert resp.status_code == 204
    assert client.get(_subscriptions_url(user_id)).json() == []


def test_unsubscribe_missing_subscription(client):
    user_id = _create_user(client)

    resp = client.delete(f"{_subscriptions_url(user_id)}/555")

    assert resp.status_code == 404
    assert "555" in resp.json()["message"]


def test_unsubscribe_foreign_subscription(client):
    owner_id = _create_user(client, name="Owner")
    intruder_id = _create_user(client, name="Intruder")
    sub = _subscribe(client, owner_id, "Netflix").json()

    resp = client.delete(f"{_subscriptions_url(intruder_id)}/{sub['id']}")

    assert resp.status_code == 403
    assert resp.json()["status"] == 403
    assert str(sub["id"]) in resp.json()["message"]
    assert str(intruder_id) in resp.json()["message"]
    # Still there for its owner
    assert len(client.get(_subscriptions_url(owner_id)).json()) == 1


def test_unsubscribe_missing_takes_precedence_over_ownership(client):
    owner_id = _create_user(client, name="Owner")
    _subscribe(client, owner_id, "Netflix")

    resp = client.delete(f"{_subscriptions_url(owner_id + 100)}/999")

    assert resp.status_code == 404


def test_deleting_user_removes_subscriptions(client):
    user_id = _create_user(client)
    _subscribe(client, user_id, "Netflix")

    assert client.delete(f"{USERS_URL}/{user_id}").status_code == 204
    assert client.get(TOP_URL).json() == []


def test_top_subscriptions(client):
    user_ids = [_create_user(client, name=f"User {i}") for i in range(5)]
    for service_name, count in {"A": 5, "B": 3, "C": 2, "D": 1}.items():
        for user_id in user_ids[:count]:
            assert _subscribe(client, user_id, service_name).status_code == 200

    resp = client.get(TOP_URL)

    assert resp.status_code == 200
    assert resp.json() == [
        {"serviceName": "A", "count": 5},
        {"serviceName": "B", "count": 3},
        {"serviceName": "C", "count": 2},
    ]

    limited = client.get(TOP_URL, params={"limit": 1})
    assert limited.json() == [{"serviceName": "A", "count": 5}]


def test_top_subscriptions_rejects_bad_limit(client):
    resp = client.get(TOP_URL, params={"limit": 0})

    assert resp.status_code == 400
    assert "Field 'limit'" in resp.json()["message"]


def test_round_trip_of_create_fields(client):
    user_payload = {"name": "Ivan Ivanov", "email": "ivan@example.com"}
    user = client.post(USERS_URL, json=user_payload).json()
    assert {k: user[k] for k in user_payload} == user_payload

    sub_payload = {"serviceName": "Yandex Plus", "notificationEnabled": True}
    sub = client.post(_subscriptions_url(user["id"]), json=sub_payload).json()
    assert {k: sub[k] for k in sub_payload} == sub_payload
    assert set(sub) == {"id", "userId", "serviceName", "notificationEnabled", "createdAt"}

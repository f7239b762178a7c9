from unittest.mock import patch

from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Query


def test_users_listed_oldest_first(logged_in, register):
    register("bob", "pw-bob")
    register("carol", "pw-carol")

    response = logged_in.get("/users")

    assert response.status_code == 200
    users = response.json()
    assert [u["username"] for u in users] == ["alice", "bob", "carol"]
    for user in users:
        assert set(user) == {"id", "username", "created_at"}


def test_users_store_error_is_500_without_details(logged_in):
    error = OperationalError("SELECT users", {}, Exception("connection refused"))
    with patch.object(Query, "all", side_effect=error):
        response = logged_in.get("/users")

    assert response.status_code == 500
    assert response.json() == {"message": "Could not fetch users"}


def test_health_needs_no_session(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_unknown_route_uses_message_body(client):
    response = client.get("/nope")

    assert response.status_code == 404
    assert "message" in response.json()

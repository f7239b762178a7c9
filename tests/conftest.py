from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from gamevault.config import Settings
from gamevault.core.catalog import CatalogClient
from gamevault.main import create_app


def make_response(status_code=200, payload=None, json_error=None):
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 400
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def settings():
    return Settings(
        jwt_secret="test-secret",
        rawg_api_key="test-key",
        rawg_base_url="https://rawg.test/api",
        database_url="sqlite://",
        bcrypt_rounds=4,
    )


@pytest.fixture
def http_session():
    return MagicMock()


@pytest.fixture
def catalog(settings, http_session):
    return CatalogClient.from_settings(settings, session=http_session)


@pytest.fixture
def app(settings, catalog):
    return create_app(settings, catalog=catalog)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def register(client):
    def _register(username="alice", password="s3cret"):
        return client.post("/register", json={"username": username, "password": password})
    return _register


@pytest.fixture
def logged_in(client, register):
    register()
    response = client.post("/login", json={"username": "alice", "password": "s3cret"})
    assert response.status_code == 200
    return client

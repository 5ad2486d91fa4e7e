"""Test configuration and fixtures for the User Management API."""

import mongomock
import pytest
from fastapi.testclient import TestClient

from user_management_api.app.core.config import Settings
from user_management_api.app.core.db import ensure_indexes, get_collection
from user_management_api.app.main import create_app
from user_management_api.app.services.user_service import UserService


@pytest.fixture
def app_settings():
    """Settings pointing at the default database and collection names."""
    return Settings(mongodb_uri="mongodb://test", request_timeout=5.0)


@pytest.fixture
def mongo_client():
    """An in-memory MongoDB client."""
    return mongomock.MongoClient()


@pytest.fixture
def collection(mongo_client, app_settings):
    """The users collection with its unique username index in place."""
    users = get_collection(mongo_client, app_settings)
    ensure_indexes(users)
    return users


@pytest.fixture
def service(collection):
    return UserService(collection, timeout=5.0)


@pytest.fixture
def app(app_settings, mongo_client):
    return create_app(app_settings, client=mongo_client)


@pytest.fixture(name="client")
def client_fixture(app):
    """Test client with startup hooks run against the in-memory store."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def user_payload():
    return {
        "username": "jdoe",
        "fullName": "John Doe",
        "email": "john@example.com",
        "gender": "male",
        "birthDate": "1990-01-31",
        "phoneNumber": "+1 555 0100",
    }

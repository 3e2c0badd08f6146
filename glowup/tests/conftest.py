import pytest
from fastapi.testclient import TestClient

from glowup.api.app import create_application
from glowup.auth import DatabaseAuthProvider
from glowup.config.session import SessionConfig
from glowup.db import Database, DatabaseConfig

ADMIN_EMAIL = "admin@glowupdiaries.com"
ADMIN_PASSWORD = "correct horse battery staple"
MEMBER_EMAIL = "member@example.com"
MEMBER_PASSWORD = "member-password"

@pytest.fixture
def database():
    """Fresh in-memory database per test."""
    database = Database(DatabaseConfig(url="sqlite://"))
    database.init_db()
    yield database
    database.engine.dispose()

@pytest.fixture
def session_config():
    return SessionConfig(cookie_name="glowup_session", ttl_hours=24, secure=False)

@pytest.fixture
def auth_provider(database, session_config):
    provider = DatabaseAuthProvider(database, session_config)
    provider.create_user(ADMIN_EMAIL, ADMIN_PASSWORD, is_admin=True, full_name="Ada Admin")
    provider.create_user(MEMBER_EMAIL, MEMBER_PASSWORD)
    return provider

@pytest.fixture
def app(database, auth_provider, session_config):
    return create_application(database, auth_provider, session_config)

@pytest.fixture
def client(app):
    return TestClient(app, follow_redirects=False)

@pytest.fixture
def admin_client(client):
    response = client.post("/admin/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert response.status_code == 200
    return client

@pytest.fixture
def member_client(client):
    response = client.post("/admin/login", json={"email": MEMBER_EMAIL, "password": MEMBER_PASSWORD})
    assert response.status_code == 200
    return client

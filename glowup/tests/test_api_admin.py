"""Admin login, gate and content management over HTTP."""

from fastapi.testclient import TestClient

from glowup.api.app import create_application
from glowup.auth import AuthProvider

from .conftest import ADMIN_EMAIL, ADMIN_PASSWORD, MEMBER_EMAIL, MEMBER_PASSWORD

def test_anonymous_dashboard_redirects_to_login(client):
    response = client.get("/admin/dashboard")
    assert response.status_code == 307
    assert response.headers["location"] == "/admin/login"

def test_login_page_is_never_redirected(client):
    response = client.get("/admin/login")
    assert response.status_code == 200
    assert response.json() == {"page": "login", "authenticated": False}

    client.post("/admin/login", json={"email": MEMBER_EMAIL, "password": MEMBER_PASSWORD})
    response = client.get("/admin/login")
    assert response.status_code == 200
    assert response.json()["authenticated"] is True

def test_failed_login_shows_error(client):
    response = client.post("/admin/login", json={"email": ADMIN_EMAIL, "password": "nope"})
    assert response.status_code == 401
    assert response.json() == {"error": "Invalid login credentials"}
    assert "glowup_session" not in response.cookies

def test_admin_login_reaches_dashboard(admin_client):
    response = admin_client.get("/admin/dashboard")
    assert response.status_code == 200
    body = response.json()
    assert body["user"]["email"] == ADMIN_EMAIL
    assert body["counts"] == {
        "events": 0, "opportunities": 0, "jobs": 0, "resources": 0, "feedback": 0
    }

def test_login_returns_dashboard_target(client):
    response = client.post("/admin/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert response.json() == {"redirect": "/admin/dashboard"}
    assert response.cookies.get("glowup_session")

def test_non_admin_is_signed_out_and_redirected(member_client, auth_provider):
    token = member_client.cookies.get("glowup_session")
    assert auth_provider.get_session(token) is not None

    response = member_client.get("/admin/dashboard")
    assert response.status_code == 307
    assert response.headers["location"] == "/admin/login"
    assert auth_provider.get_session(token) is None

def test_logout(admin_client, auth_provider):
    token = admin_client.cookies.get("glowup_session")
    response = admin_client.post("/admin/logout")
    assert response.status_code == 200
    assert response.json() == {"redirect": "/admin/login"}
    assert auth_provider.get_session(token) is None

    admin_client.cookies.set("glowup_session", token)
    assert admin_client.get("/admin/dashboard").status_code == 307

def test_admin_root_redirects_to_dashboard(admin_client):
    response = admin_client.get("/admin")
    assert response.status_code == 307
    assert response.headers["location"] == "/admin/dashboard"

def test_auth_backend_failure_redirects(database, session_config):
    class BrokenProvider(AuthProvider):
        def sign_in(self, email, password):
            raise RuntimeError("down")

        def get_session(self, token):
            raise RuntimeError("down")

        def sign_out(self, token):
            raise RuntimeError("down")

        def get_admin_user(self, user_id):
            raise RuntimeError("down")

    app = create_application(database, BrokenProvider(), session_config)
    client = TestClient(app, follow_redirects=False)
    client.cookies.set("glowup_session", "anything")
    response = client.get("/admin/dashboard")
    assert response.status_code == 307
    assert response.headers["location"] == "/admin/login"

    response = client.post("/admin/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert response.status_code == 500
    assert response.json() == {"error": "Login failed. Please try again."}

def test_create_list_and_delete_event(admin_client):
    response = admin_client.post("/admin/content/events", json={
        "title": "Resume Clinic",
        "date": "2025-03-14",
        "time": "10:00:00",
        "location": "Online",
        "location_type": "online",
        "is_free": True,
    })
    assert response.status_code == 201
    event_id = response.json()["id"]

    listing = admin_client.get("/api/events", params={"q": "resume"}).json()
    assert [event["id"] for event in listing] == [event_id]

    response = admin_client.delete(f"/admin/content/events/{event_id}")
    assert response.status_code == 200
    assert admin_client.get("/api/events").json() == []
    assert admin_client.delete(f"/admin/content/events/{event_id}").status_code == 404

def test_create_rejects_invalid_category(admin_client):
    response = admin_client.post("/admin/content/resources", json={
        "title": "Mystery",
        "category": "podcasts",
        "file_url": "https://cdn.example.com/m.mp3",
    })
    assert response.status_code == 422

def test_create_unknown_content_type(admin_client):
    assert admin_client.post("/admin/content/webinars", json={"title": "x"}).status_code == 404

def test_content_management_requires_admin(client):
    response = client.post("/admin/content/events", json={"title": "Sneaky", "date": "2025-01-01"})
    assert response.status_code == 307
    assert client.get("/api/events").json() == []

def test_feedback_list(admin_client):
    admin_client.post("/api/feedback", json={
        "name": "Ngozi", "email": "ngozi@example.com", "message": "Love the site",
    })
    response = admin_client.get("/admin/feedback")
    assert response.status_code == 200
    assert [item["name"] for item in response.json()] == ["Ngozi"]

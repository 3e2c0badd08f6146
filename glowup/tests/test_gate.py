"""Admin gate decisions."""

from types import SimpleNamespace

import pytest

from glowup.api.dependencies import AdminRedirect, require_admin
from glowup.auth import AuthProvider, GateDecision, SessionState, decide, evaluate_admin_gate, is_gated

class FakeProvider(AuthProvider):
    """In-memory provider with one admin and one plain user."""

    def __init__(self, fail=False):
        self.sessions = {"admin-token": "admin-id", "member-token": "member-id"}
        self.admins = {"admin-id": {"id": "admin-id", "email": "admin@example.com"}}
        self.fail = fail
        self.lookups = 0

    def sign_in(self, email, password):
        raise NotImplementedError

    def get_session(self, token):
        self.lookups += 1
        if self.fail:
            raise RuntimeError("auth backend unavailable")
        user_id = self.sessions.get(token)
        return {"token": token, "user_id": user_id} if user_id else None

    def sign_out(self, token):
        self.sessions.pop(token, None)

    def get_admin_user(self, user_id):
        return self.admins.get(user_id)

@pytest.mark.parametrize("path,gated", [
    ("/admin", True),
    ("/admin/dashboard", True),
    ("/admin/content/events", True),
    ("/admin/login", False),
    ("/admin/login/", False),
    ("/administrator", False),
    ("/api/events", False),
])
def test_is_gated(path, gated):
    assert is_gated(path) is gated

def test_decisions():
    assert decide("/admin/dashboard", SessionState.ANONYMOUS) is GateDecision.REDIRECT
    assert decide("/admin/dashboard", SessionState.AUTHENTICATED) is GateDecision.SIGN_OUT_AND_REDIRECT
    assert decide("/admin/dashboard", SessionState.ADMIN) is GateDecision.ALLOW
    for state in SessionState:
        assert decide("/admin/login", state) is GateDecision.ALLOW

def test_anonymous_is_redirected():
    result = evaluate_admin_gate(FakeProvider(), "/admin/dashboard", None)
    assert result.state is SessionState.ANONYMOUS
    assert result.decision is GateDecision.REDIRECT

def test_non_admin_is_signed_out():
    provider = FakeProvider()
    result = evaluate_admin_gate(provider, "/admin/dashboard", "member-token")
    assert result.decision is GateDecision.SIGN_OUT_AND_REDIRECT
    assert "member-token" not in provider.sessions

def test_admin_is_allowed():
    result = evaluate_admin_gate(FakeProvider(), "/admin/dashboard", "admin-token")
    assert result.allowed
    assert result.admin_user["email"] == "admin@example.com"

def test_lookup_errors_count_as_anonymous():
    result = evaluate_admin_gate(FakeProvider(fail=True), "/admin/dashboard", "admin-token")
    assert result.state is SessionState.ANONYMOUS
    assert result.decision is GateDecision.REDIRECT

def test_login_page_skips_the_lookup():
    provider = FakeProvider()
    assert evaluate_admin_gate(provider, "/admin/login", "member-token").allowed
    assert provider.lookups == 0
    assert "member-token" in provider.sessions

def _request(provider, token=None, state=None):
    app_state = SimpleNamespace(
        auth_provider=provider,
        session_config=SimpleNamespace(cookie_name="glowup_session"),
    )
    return SimpleNamespace(
        app=SimpleNamespace(state=app_state),
        url=SimpleNamespace(path="/admin/dashboard"),
        cookies={"glowup_session": token} if token else {},
        state=state or SimpleNamespace(),
    )

def test_layout_reuses_the_middleware_result():
    provider = FakeProvider()
    admin_user = {"id": "admin-id", "email": "admin@example.com"}
    request = _request(provider, state=SimpleNamespace(admin_gate_checked=True, admin_user=admin_user))
    assert require_admin(request) == admin_user
    assert provider.lookups == 0

def test_layout_checks_on_its_own_without_the_middleware():
    provider = FakeProvider()
    assert require_admin(_request(provider, token="admin-token"))["id"] == "admin-id"
    assert provider.lookups == 1

    with pytest.raises(AdminRedirect) as excinfo:
        require_admin(_request(provider, token="member-token"))
    assert excinfo.value.location == "/admin/login"
    assert excinfo.value.clear_session

    with pytest.raises(AdminRedirect) as excinfo:
        require_admin(_request(provider))
    assert not excinfo.value.clear_session

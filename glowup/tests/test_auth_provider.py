"""Database-backed sessions and admin membership."""

from datetime import timedelta

import pytest
from werkzeug.security import check_password_hash

from glowup.auth import AuthError, INVALID_CREDENTIALS_MESSAGE
from glowup.db import DatabaseError
from glowup.models import AuthSession, User
from glowup.utils.dates import now_local

from .conftest import ADMIN_EMAIL, ADMIN_PASSWORD, MEMBER_EMAIL, MEMBER_PASSWORD

def test_passwords_are_stored_hashed(auth_provider, database):
    with database.session() as session:
        stored = session.query(User).filter(User.email == ADMIN_EMAIL).one().password_hash
    assert ADMIN_PASSWORD not in stored
    assert check_password_hash(stored, ADMIN_PASSWORD)
    assert not check_password_hash(stored, ADMIN_PASSWORD.upper())

def test_sign_in_and_session_lookup(auth_provider):
    session = auth_provider.sign_in(ADMIN_EMAIL.upper(), ADMIN_PASSWORD)
    assert session["token"]
    assert session["expires_at"] > now_local()
    assert auth_provider.get_session(session["token"])["user_id"] == session["user_id"]

def test_wrong_password(auth_provider):
    with pytest.raises(AuthError, match=INVALID_CREDENTIALS_MESSAGE):
        auth_provider.sign_in(ADMIN_EMAIL, "wrong")

def test_unknown_email(auth_provider):
    with pytest.raises(AuthError):
        auth_provider.sign_in("nobody@example.com", "whatever")

def test_sign_out(auth_provider):
    session = auth_provider.sign_in(MEMBER_EMAIL, MEMBER_PASSWORD)
    auth_provider.sign_out(session["token"])
    assert auth_provider.get_session(session["token"]) is None
    auth_provider.sign_out(None)
    auth_provider.sign_out("never-issued")

def test_expired_session_is_removed(auth_provider, database):
    session = auth_provider.sign_in(MEMBER_EMAIL, MEMBER_PASSWORD)
    with database.session() as db_session:
        row = db_session.get(AuthSession, session["token"])
        row.expires_at = now_local() - timedelta(minutes=1)

    assert auth_provider.get_session(session["token"]) is None
    with database.session() as db_session:
        assert db_session.get(AuthSession, session["token"]) is None

def test_admin_membership(auth_provider):
    admin = auth_provider.sign_in(ADMIN_EMAIL, ADMIN_PASSWORD)
    member = auth_provider.sign_in(MEMBER_EMAIL, MEMBER_PASSWORD)
    assert auth_provider.get_admin_user(admin["user_id"])["full_name"] == "Ada Admin"
    assert auth_provider.get_admin_user(member["user_id"]) is None

def test_duplicate_email_is_rejected(auth_provider):
    with pytest.raises(DatabaseError):
        auth_provider.create_user(MEMBER_EMAIL, "another")

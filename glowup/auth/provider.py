"""Session and admin-membership capability.

The API only talks to an ``AuthProvider``. ``DatabaseAuthProvider`` keeps
users, sessions and the admin list in the application database; another
provider can be dropped in without touching the routes or the gate.
"""

import logging
import secrets
from abc import ABC, abstractmethod
from datetime import timedelta
from typing import Any, Dict, Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..config.session import SessionConfig
from ..db import Database
from ..models import AdminUser, AuthSession, User
from ..utils.dates import now_local

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid login credentials"

class AuthError(Exception):
    """Raised when signing in fails."""
    pass

class AuthProvider(ABC):
    """
    Base interface for session providers.
    
    Sessions are plain dicts with ``token``, ``user_id`` and ``expires_at``.
    """
    
    @abstractmethod
    def sign_in(self, email: str, password: str) -> Dict[str, Any]:
        """
        Establish a session for valid credentials.
        
        Raises:
            AuthError: If the credentials are wrong
        """
        pass
    
    @abstractmethod
    def get_session(self, token: Optional[str]) -> Optional[Dict[str, Any]]:
        """Current session for ``token``, or None if absent or expired."""
        pass
    
    @abstractmethod
    def sign_out(self, token: Optional[str]) -> None:
        """Invalidate the session. Unknown tokens are ignored."""
        pass
    
    @abstractmethod
    def get_admin_user(self, user_id: str) -> Optional[Dict[str, Any]]:
        """Admin membership row for ``user_id``, or None if not an admin."""
        pass

class DatabaseAuthProvider(AuthProvider):
    """Auth provider backed by the users, auth_sessions and admin_users tables."""
    
    def __init__(self, database: Database, config: Optional[SessionConfig] = None):
        self.database = database
        self.config = config or SessionConfig()
        self.config.validate()
    
    def create_user(
        self,
        email: str,
        password: str,
        is_admin: bool = False,
        full_name: Optional[str] = None
    ) -> str:
        """Create an account, optionally on the admin list. Returns the user id."""
        email = email.strip().lower()
        with self.database.session() as session:
            user = User(email=email, password_hash=generate_password_hash(password))
            session.add(user)
            session.flush()
            if is_admin:
                session.add(AdminUser(id=user.id, email=email, full_name=full_name))
            logger.info(f"Created user {email} (admin={is_admin})")
            return user.id
    
    def sign_in(self, email: str, password: str) -> Dict[str, Any]:
        email = (email or '').strip().lower()
        with self.database.session() as session:
            user = session.query(User).filter(User.email == email).first()
            if user is None or not check_password_hash(user.password_hash, password or ''):
                raise AuthError(INVALID_CREDENTIALS_MESSAGE)
            
            auth_session = AuthSession(
                token=secrets.token_urlsafe(32),
                user_id=user.id,
                expires_at=now_local() + timedelta(hours=self.config.ttl_hours)
            )
            session.add(auth_session)
            session.flush()
            return auth_session.to_dict()
    
    def get_session(self, token: Optional[str]) -> Optional[Dict[str, Any]]:
        if not token:
            return None
        with self.database.session() as session:
            auth_session = session.get(AuthSession, token)
            if auth_session is None:
                return None
            if auth_session.expires_at < now_local():
                session.delete(auth_session)
                return None
            return auth_session.to_dict()
    
    def sign_out(self, token: Optional[str]) -> None:
        if not token:
            return
        with self.database.session() as session:
            session.query(AuthSession).filter(AuthSession.token == token).delete()
    
    def get_admin_user(self, user_id: str) -> Optional[Dict[str, Any]]:
        with self.database.session() as session:
            admin = session.get(AdminUser, user_id)
            return admin.to_dict() if admin else None

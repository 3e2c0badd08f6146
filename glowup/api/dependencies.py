"""FastAPI dependencies shared by the routers.

The database and auth provider live on ``app.state`` so tests can build
an application around an in-memory database.
"""

from typing import Any, Dict, Optional

from fastapi import Request

from ..auth import AuthProvider, SessionState, evaluate_admin_gate
from ..config.session import ADMIN_LOGIN_PATH, SessionConfig
from ..db import Database

class AdminRedirect(Exception):
    """Raised by the admin layout dependency to send the caller to the login page."""
    
    def __init__(self, location: str = ADMIN_LOGIN_PATH, clear_session: bool = False):
        super().__init__(location)
        self.location = location
        self.clear_session = clear_session

def get_database(request: Request) -> Database:
    return request.app.state.database

def get_auth_provider(request: Request) -> AuthProvider:
    return request.app.state.auth_provider

def get_session_config(request: Request) -> SessionConfig:
    return request.app.state.session_config

def get_session_token(request: Request) -> Optional[str]:
    return request.cookies.get(get_session_config(request).cookie_name)

def require_admin(request: Request) -> Dict[str, Any]:
    """
    Admin layout check.
    
    Reuses the middleware's result for this request when there is one, so
    both boundaries agree. Otherwise performs its own lookup.
    
    Raises:
        AdminRedirect: If the caller is not a signed-in admin
    """
    if getattr(request.state, 'admin_gate_checked', False):
        admin_user = request.state.admin_user
        if admin_user is None:
            raise AdminRedirect()
        return admin_user
    
    result = evaluate_admin_gate(
        get_auth_provider(request),
        request.url.path,
        get_session_token(request)
    )
    if not result.allowed or result.admin_user is None:
        raise AdminRedirect(clear_session=result.state is SessionState.AUTHENTICATED)
    return result.admin_user

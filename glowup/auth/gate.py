"""Admin route gate.

Decides, for a request path and the caller's session, whether the request
may proceed to an admin page. The same evaluation backs both the request
middleware and the admin router dependency.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from ..config.session import ADMIN_LOGIN_PATH, ADMIN_PREFIX
from .provider import AuthProvider

logger = logging.getLogger(__name__)

class SessionState(Enum):
    ANONYMOUS = 'anonymous'
    AUTHENTICATED = 'authenticated'
    ADMIN = 'admin'

class GateDecision(Enum):
    ALLOW = 'allow'
    REDIRECT = 'redirect'
    SIGN_OUT_AND_REDIRECT = 'sign-out-and-redirect'

@dataclass(frozen=True)
class GateResult:
    state: SessionState
    decision: GateDecision
    admin_user: Optional[Dict[str, Any]] = None

    @property
    def allowed(self) -> bool:
        return self.decision is GateDecision.ALLOW

def is_admin_route(path: str) -> bool:
    return path == ADMIN_PREFIX or path.startswith(ADMIN_PREFIX + '/')

def is_gated(path: str) -> bool:
    """Admin routes other than the login page."""
    return is_admin_route(path) and path.rstrip('/') != ADMIN_LOGIN_PATH

def decide(path: str, state: SessionState) -> GateDecision:
    if not is_gated(path) or state is SessionState.ADMIN:
        return GateDecision.ALLOW
    if state is SessionState.AUTHENTICATED:
        return GateDecision.SIGN_OUT_AND_REDIRECT
    return GateDecision.REDIRECT

def resolve_session_state(provider: AuthProvider, token: Optional[str]):
    """
    Look up the session and admin membership behind ``token``.
    
    Returns:
        Tuple of (SessionState, admin user dict or None). Any lookup failure
        is reported as an anonymous session.
    """
    try:
        session = provider.get_session(token)
        if session is None:
            return SessionState.ANONYMOUS, None
        admin_user = provider.get_admin_user(session['user_id'])
        if admin_user is None:
            return SessionState.AUTHENTICATED, None
        return SessionState.ADMIN, admin_user
    except Exception as e:
        logger.error(f"Auth error: {e}")
        return SessionState.ANONYMOUS, None

def evaluate_admin_gate(provider: AuthProvider, path: str, token: Optional[str]) -> GateResult:
    """
    Run the gate for one request.
    
    Paths outside the gate are allowed without a session lookup. A signed-in
    user who is not an admin has their session invalidated here.
    """
    if not is_gated(path):
        return GateResult(state=SessionState.ANONYMOUS, decision=GateDecision.ALLOW)
    
    state, admin_user = resolve_session_state(provider, token)
    decision = decide(path, state)
    
    if decision is GateDecision.SIGN_OUT_AND_REDIRECT:
        logger.info("User is not an admin, signing out and redirecting to login page")
        try:
            provider.sign_out(token)
        except Exception as e:
            logger.error(f"Failed to sign out non-admin session: {e}")
    elif decision is GateDecision.REDIRECT:
        logger.info("No session found, redirecting to login page")
    
    return GateResult(state=state, decision=decision, admin_user=admin_user)

"""Request interceptor guarding the admin routes."""

import logging

from fastapi import Request
from fastapi.responses import RedirectResponse
from starlette.middleware.base import BaseHTTPMiddleware

from ..auth import GateDecision, evaluate_admin_gate, is_gated
from ..config.session import ADMIN_LOGIN_PATH
from .dependencies import get_auth_provider, get_session_config, get_session_token

logger = logging.getLogger(__name__)

class AdminGateMiddleware(BaseHTTPMiddleware):
    """
    Redirect anonymous and non-admin callers away from /admin pages.
    
    The login page is never gated. The resolved admin user is cached on
    ``request.state`` for the rest of the request.
    """
    
    async def dispatch(self, request: Request, call_next):
        path = request.url.path
        if not is_gated(path):
            return await call_next(request)
        
        result = evaluate_admin_gate(
            get_auth_provider(request),
            path,
            get_session_token(request)
        )
        
        if not result.allowed:
            response = RedirectResponse(ADMIN_LOGIN_PATH, status_code=307)
            if result.decision is GateDecision.SIGN_OUT_AND_REDIRECT:
                response.delete_cookie(get_session_config(request).cookie_name, path="/")
            return response
        
        request.state.admin_gate_checked = True
        request.state.admin_user = result.admin_user
        return await call_next(request)

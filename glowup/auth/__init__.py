"""Authentication and admin gating."""

from .provider import AuthError, AuthProvider, DatabaseAuthProvider, INVALID_CREDENTIALS_MESSAGE
from .gate import (
    GateDecision,
    GateResult,
    SessionState,
    decide,
    evaluate_admin_gate,
    is_admin_route,
    is_gated
)

__all__ = [
    'AuthError',
    'AuthProvider',
    'DatabaseAuthProvider',
    'INVALID_CREDENTIALS_MESSAGE',
    'GateDecision',
    'GateResult',
    'SessionState',
    'decide',
    'evaluate_admin_gate',
    'is_admin_route',
    'is_gated'
]

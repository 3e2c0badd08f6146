"""External service configurations."""

from .resend import (
    ResendConfig,
    api_key_presence
)

__all__ = [
    'ResendConfig',
    'api_key_presence'
]

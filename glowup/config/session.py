"""Admin session and routing configuration."""

import os
from dataclasses import dataclass

from .environment import IS_PRODUCTION_ENVIRONMENT

ADMIN_PREFIX = "/admin"
ADMIN_LOGIN_PATH = "/admin/login"
ADMIN_HOME_PATH = "/admin/dashboard"

@dataclass
class SessionConfig:
    """Session cookie settings."""
    
    cookie_name: str = ""
    ttl_hours: int = 0
    secure: bool = IS_PRODUCTION_ENVIRONMENT
    same_site: str = "lax"
    
    def __post_init__(self):
        """Load settings from environment if not provided."""
        if not self.cookie_name:
            self.cookie_name = os.environ.get('SESSION_COOKIE_NAME', 'glowup_session')
        if not self.ttl_hours:
            self.ttl_hours = int(os.environ.get('SESSION_TTL_HOURS', '24'))
    
    def validate(self) -> bool:
        """Validate the configuration."""
        if self.ttl_hours <= 0:
            raise ValueError("SESSION_TTL_HOURS must be a positive number of hours")
        return True

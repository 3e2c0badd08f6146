"""Resend (email delivery) service configuration."""

import os
from dataclasses import dataclass

@dataclass
class ResendConfig:
    """Resend configuration settings."""
    
    # API configuration
    base_url: str = "https://api.resend.com"
    sender: str = "Glow Up Diaries <support@glowupdiaries.com>"
    timeout: float = 30.0
    
    # Authentication
    api_key: str = ""
    
    def __post_init__(self):
        """Load API key from environment if not provided."""
        if not self.api_key:
            self.api_key = os.environ.get('RESEND_API_KEY', '')
    
    def validate(self) -> bool:
        """Validate the configuration."""
        if not self.api_key:
            raise ValueError("Resend API key is not configured")
        return True

def api_key_presence(config: ResendConfig) -> str:
    """Loggable indicator of whether the key is set. Never the key itself."""
    return 'Present' if config.api_key else 'Missing'

"""Outbound email through Resend."""

import logging
from typing import Any, Dict, Optional

import requests

from ..config.external_services import ResendConfig, api_key_presence

logger = logging.getLogger(__name__)

class EmailError(Exception):
    """Raised when an email could not be handed to the provider."""
    pass

def send_email(
    to: str,
    subject: str,
    content: str,
    config: Optional[ResendConfig] = None
) -> Dict[str, Any]:
    """
    Send an HTML email.
    
    Args:
        to: Recipient address
        subject: Subject line
        content: HTML body
        config: Resend settings. If not provided, loaded from the environment
    
    Returns:
        The provider's JSON response (contains the message id)
    
    Raises:
        EmailError: If the key is missing or the provider rejects the request
    """
    config = config or ResendConfig()
    
    logger.info(f"Attempting to send email to {to} with subject {subject!r}")
    logger.info(f"Using Resend API Key: {api_key_presence(config)}")
    
    try:
        config.validate()
    except ValueError as e:
        raise EmailError(str(e)) from e
    
    try:
        response = requests.post(
            f"{config.base_url}/emails",
            headers={
                "Authorization": f"Bearer {config.api_key}",
                "Content-Type": "application/json"
            },
            json={
                "from": config.sender,
                "to": [to],
                "subject": subject,
                "html": content
            },
            timeout=config.timeout
        )
    except requests.RequestException as e:
        logger.error(f"Failed to send email: {e}")
        raise EmailError(f"Failed to send email: {e}") from e
    
    if not response.ok:
        try:
            body = response.json()
        except ValueError:
            body = None
        message = body.get('message') if isinstance(body, dict) else None
        message = message or f"Email provider returned status {response.status_code}"
        logger.error(f"Failed to send email: {message}")
        raise EmailError(message)
    
    data = response.json()
    logger.info(f"Email sent successfully: {data}")
    return data

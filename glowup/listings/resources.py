"""What happens when a visitor clicks a resource.

Premium resources are opened in a new context at their URL; free ones are
downloaded as an attachment.
"""

import logging
import re
from dataclasses import dataclass
from typing import Any, Mapping, Optional
from urllib.parse import quote, urlparse

import requests

logger = logging.getLogger(__name__)

OPEN = 'open'
DOWNLOAD = 'download'

DOWNLOAD_FAILED_MESSAGE = "Failed to download the resource. Please try again."

class ResourceDownloadError(Exception):
    """Raised when a free resource cannot be fetched for download."""
    pass

@dataclass(frozen=True)
class ResourceAction:
    kind: str
    url: str

@dataclass(frozen=True)
class DownloadedFile:
    content: bytes
    media_type: str
    filename: str

def resource_action(resource: Mapping[str, Any]) -> ResourceAction:
    """Pick the action for ``resource`` from its premium flag."""
    kind = OPEN if resource.get('is_premium') else DOWNLOAD
    return ResourceAction(kind=kind, url=resource['file_url'])

def download_filename(resource: Mapping[str, Any], media_type: Optional[str] = None) -> str:
    """
    Name for the downloaded file.
    
    Uses the last path segment of the file URL. Falls back to the title with
    an extension taken from the media subtype (``application/pdf`` -> ``pdf``).
    """
    name = urlparse(resource['file_url']).path.split('/')[-1]
    if name:
        return name
    subtype = (media_type or 'application/octet-stream').split(';')[0].split('/')[-1]
    return f"{resource['title']}.{subtype}"

def content_disposition(filename: str) -> str:
    """
    ``Content-Disposition`` value for an attachment named ``filename``.

    Titles can carry any characters, so the name is sent twice: a plain ASCII
    ``filename`` with quotes, backslashes and non-printable characters replaced,
    and the exact name as an RFC 5987 ``filename*``.
    """
    fallback = re.sub(r'[^\x20-\x7e]|["\\]', '_', filename)
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename, safe='')}"

def fetch_download(resource: Mapping[str, Any], timeout: int = 30) -> DownloadedFile:
    """
    Fetch a free resource's file.
    
    Raises:
        ResourceDownloadError: If the file cannot be fetched
    """
    try:
        response = requests.get(resource['file_url'], timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        logger.error(f"Failed to download resource {resource.get('id')}: {e}")
        raise ResourceDownloadError(DOWNLOAD_FAILED_MESSAGE) from e
    
    media_type = response.headers.get('Content-Type', 'application/octet-stream')
    return DownloadedFile(
        content=response.content,
        media_type=media_type,
        filename=download_filename(resource, media_type)
    )

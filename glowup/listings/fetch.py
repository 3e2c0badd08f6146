"""Fetch-and-hold for the listing pages."""

import logging
from typing import Any, Dict, List

from ..db import Database, fetch_collection, fetch_featured
from .catalogs import CONTENT_TYPES
from .filters import ContentType

logger = logging.getLogger(__name__)

def load_listing(database: Database, content_type: ContentType) -> List[Dict[str, Any]]:
    """
    Fetch every row of ``content_type`` in its listing order.
    
    A failed fetch is logged and yields an empty list. There is no retry and
    no partial result.
    """
    try:
        return fetch_collection(
            database,
            content_type.model,
            content_type.order_field,
            descending=content_type.descending
        )
    except Exception as e:
        logger.error(f"Error fetching {content_type.name}: {e}")
        return []

def load_featured(database: Database) -> Dict[str, List[Dict[str, Any]]]:
    """Featured rows of every content type, newest first, keyed by collection name."""
    featured = {}
    for name, content_type in CONTENT_TYPES.items():
        try:
            featured[name] = fetch_featured(database, content_type.model)
        except Exception as e:
            logger.error(f"Error fetching featured {name}: {e}")
            featured[name] = []
    return featured

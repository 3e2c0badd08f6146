"""Database package initialization.

This module exposes the public interface of the database package.
"""

from .db_core import (
    Database,
    DatabaseConfig,
    DatabaseError,
    db
)
from .operations import (
    fetch_collection,
    fetch_featured,
    fetch_one,
    insert_record,
    delete_record,
    count_records
)

__all__ = [
    # Core database classes
    'Database',
    'DatabaseConfig',
    
    # Exceptions
    'DatabaseError',
    
    # Default instance
    'db',
    
    # Storage capability
    'fetch_collection',
    'fetch_featured',
    'fetch_one',
    'insert_record',
    'delete_record',
    'count_records',
]

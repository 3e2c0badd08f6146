"""Routes package initialization."""

from . import (
    admin,
    contact,
    health,
    listings
)

__all__ = [
    'admin',
    'contact',
    'health',
    'listings'
]

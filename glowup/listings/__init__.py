"""Listing engine: content type catalogs, search and filters."""

from .catalogs import CONTENT_TYPES, EVENTS, OPPORTUNITIES, JOBS, RESOURCES, get_content_type
from .filters import (
    ContentType,
    FilterOption,
    filter_records,
    matches_filter,
    matches_filters,
    matches_search,
    toggle_filter,
    unknown_filters
)

__all__ = [
    'CONTENT_TYPES',
    'EVENTS',
    'OPPORTUNITIES',
    'JOBS',
    'RESOURCES',
    'get_content_type',
    'ContentType',
    'FilterOption',
    'filter_records',
    'matches_filter',
    'matches_filters',
    'matches_search',
    'toggle_filter',
    'unknown_filters'
]

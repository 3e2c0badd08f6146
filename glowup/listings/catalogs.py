"""Per content type search fields, filter menus and filter rules."""

from types import MappingProxyType
from typing import Mapping

from ..models import Event, Opportunity, Job, Resource
from .filters import (
    ContentType,
    FilterOption,
    after_now,
    contains,
    contains_none,
    ending_within,
    equals_any,
    flag_is,
    in_current_month,
    in_next_month,
)

LOCATION_TYPES = ('physical', 'online', 'hybrid')

OPPORTUNITY_CATEGORIES = (
    'scholarship',
    'fellowship',
    'internship',
    'grant',
    'competition',
    'mentorship',
)

JOB_TYPES = (
    'full-time',
    'part-time',
    'contract',
    'internship',
    'remote',
    'graduate-trainee',
)

RESOURCE_CATEGORIES = (
    'career development',
    'study materials',
    'templates',
    'guides',
    'worksheets',
    'courses',
)

EVENTS = ContentType(
    name='events',
    model=Event,
    order_field='date',
    descending=False,
    search_fields=('title', 'description', 'location', 'location_type'),
    date_field='date',
    cost_field='is_free',
    options=(
        FilterOption('this-month', 'This Month', 'this-month', 'Time'),
        FilterOption('next-month', 'Next Month', 'next-month', 'Time'),
        FilterOption('future', 'Future Events', 'future', 'Time'),
        FilterOption('free', 'Free', True, 'Cost'),
        FilterOption('paid', 'Paid', False, 'Cost'),
        FilterOption('in-person', 'In Person', 'in-person', 'Location'),
        FilterOption('virtual', 'Virtual', 'virtual', 'Location'),
    ),
    rules={
        'this-month': in_current_month('date'),
        'next-month': in_next_month('date'),
        'future': after_now('date'),
        'free': flag_is('is_free', True),
        'paid': flag_is('is_free', False),
        'in-person': equals_any('location_type', 'physical'),
        'virtual': equals_any('location_type', 'online', 'hybrid'),
    },
)

OPPORTUNITIES = ContentType(
    name='opportunities',
    model=Opportunity,
    order_field='deadline',
    descending=False,
    search_fields=('title', 'description', 'category', 'eligibility'),
    date_field='deadline',
    options=(
        FilterOption('ending-soon', 'Ending Soon', 'ending-soon', 'Time'),
        FilterOption('this-month', 'Deadline This Month', 'this-month', 'Time'),
        FilterOption('next-month', 'Deadline Next Month', 'next-month', 'Time'),
        FilterOption('free', 'Free', True, 'Cost'),
        FilterOption('paid', 'Paid', False, 'Cost'),
    ) + tuple(
        FilterOption(category, category.title(), category, 'Type')
        for category in OPPORTUNITY_CATEGORIES
    ),
    rules=dict(
        {
            'ending-soon': ending_within('deadline'),
            'this-month': in_current_month('deadline'),
            'next-month': in_next_month('deadline'),
            'free': flag_is('is_free', True),
            'paid': flag_is('is_free', False),
        },
        **{category: equals_any('category', category) for category in OPPORTUNITY_CATEGORIES}
    ),
)

JOBS = ContentType(
    name='jobs',
    model=Job,
    order_field='deadline',
    descending=False,
    search_fields=(
        'title',
        'description',
        'company',
        'location',
        'job_type',
        'requirements',
        'salary_range',
    ),
    date_field='deadline',
    type_field='job_type',
    type_choices=JOB_TYPES,
    options=(
        FilterOption('ending-soon', 'Ending Soon', 'ending-soon', 'Time'),
        FilterOption('this-month', 'Deadline This Month', 'this-month', 'Time'),
        FilterOption('next-month', 'Deadline Next Month', 'next-month', 'Time'),
        FilterOption('remote', 'Remote', 'remote', 'Location'),
        FilterOption('hybrid', 'Hybrid', 'hybrid', 'Location'),
        FilterOption('on-site', 'On-site', 'on-site', 'Location'),
    ),
    # Job locations are free text, so location filters look for substrings
    rules={
        'ending-soon': ending_within('deadline'),
        'this-month': in_current_month('deadline'),
        'next-month': in_next_month('deadline'),
        'remote': contains('location', 'remote'),
        'hybrid': contains('location', 'hybrid'),
        'on-site': contains_none('location', 'remote', 'hybrid'),
    },
)

RESOURCES = ContentType(
    name='resources',
    model=Resource,
    order_field='created_at',
    descending=True,
    search_fields=('title', 'description', 'category'),
    options=tuple(
        FilterOption(category.replace(' ', '-'), category.title(), category, 'Type')
        for category in RESOURCE_CATEGORIES
    ) + (
        FilterOption('free', 'Free', True, 'Access'),
        FilterOption('premium', 'Premium', False, 'Access'),
        FilterOption('featured', 'Featured', True, 'Featured'),
    ),
    rules=dict(
        {
            'free': flag_is('is_premium', False),
            'premium': flag_is('is_premium', True),
            'featured': flag_is('featured', True),
        },
        **{category.replace(' ', '-'): equals_any('category', category) for category in RESOURCE_CATEGORIES}
    ),
)

CONTENT_TYPES: Mapping[str, ContentType] = MappingProxyType({
    content_type.name: content_type
    for content_type in (EVENTS, OPPORTUNITIES, JOBS, RESOURCES)
})

def get_content_type(name: str) -> ContentType:
    """
    Look up a content type by collection name.
    
    Raises:
        KeyError: If there is no such content type
    """
    return CONTENT_TYPES[name]

"""Date helpers shared by the models and the listing filters.

Listing dates arrive either as ``date``/``datetime`` objects straight from the
database or as ISO strings (``'2025-01-10'``, ``'2025-01-10T09:00:00Z'``) from
JSON payloads. Everything is normalised to a naive local ``datetime`` before
comparing.
"""

from datetime import date, datetime, time
from typing import Optional, Tuple, Union

DateLike = Union[date, datetime, str, None]

def now_local() -> datetime:
    """Current wall-clock time as a naive local datetime."""
    return datetime.now()

def as_datetime(value: DateLike) -> Optional[datetime]:
    """
    Normalise a date-like value to a naive local datetime.
    
    Plain dates become midnight of that day. Timezone-aware datetimes are
    converted to local time and stripped of their tzinfo.
    
    Returns:
        datetime or None if the value is empty
        
    Raises:
        ValueError: If a string is not in ISO format
    """
    if value is None or value == '':
        return None
    
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace('Z', '+00:00'))
    
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone().replace(tzinfo=None)
        return value
    
    return datetime.combine(value, time.min)

def format_full_date(value: DateLike) -> str:
    """Render a date the long way, e.g. 'Friday, January 10, 2025'."""
    moment = as_datetime(value)
    if moment is None:
        return ''
    return f"{moment:%A}, {moment:%B} {moment.day}, {moment.year}"

def month_key(moment: datetime) -> Tuple[int, int]:
    """(year, month) of a datetime."""
    return moment.year, moment.month

def next_month_key(moment: datetime) -> Tuple[int, int]:
    """(year, month) of the calendar month after ``moment``, rolling over December."""
    if moment.month == 12:
        return moment.year + 1, 1
    return moment.year, moment.month + 1

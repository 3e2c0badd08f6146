"""Search and filter predicates for the listing pages.

Every content type is described by a ``ContentType`` table: which fields
are searchable, which field holds its date, and one rule per filter id.
The functions here are pure and shared by all four listings; only the
tables in ``catalogs`` differ.

A record passes a listing when it matches the search query AND every
active filter. An empty query or an empty filter set passes everything.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from types import MappingProxyType
from typing import Any, Callable, Dict, FrozenSet, Iterable, List, Mapping, Optional, Tuple, Type

from ..utils.dates import as_datetime, format_full_date, month_key, next_month_key, now_local

Record = Mapping[str, Any]
Rule = Callable[[Record, datetime], bool]

# Partial words are accepted so the cost match kicks in while the user types
FREE_TOKENS = frozenset({'free', 'fre', 'fr'})
PAID_TOKENS = frozenset({'paid', 'pai', 'pa'})

ENDING_SOON_WINDOW = timedelta(days=7)

@dataclass(frozen=True)
class FilterOption:
    """One entry of a filter menu."""
    id: str
    label: str
    value: Any
    group: str

    def to_dict(self) -> Dict[str, Any]:
        return {'id': self.id, 'label': self.label, 'value': self.value, 'group': self.group}

@dataclass(frozen=True, eq=False)
class ContentType:
    """
    Everything the listing engine needs to know about one kind of record.

    Fields:
        name: Collection name ('events', 'jobs', ...)
        model: SQLAlchemy model holding the rows
        order_field: Column the listing is ordered by
        descending: Whether ``order_field`` is sorted newest/largest first
        search_fields: Text fields the search query is matched against
        date_field: Field rendered as a full date for search and used by time filters
        cost_field: Boolean field that is true for free records; enables the
                    free/paid search tokens
        type_field: Field compared against the single-select type picker
        type_choices: Accepted values for the type picker
        options: Filter menu entries, in display order
        rules: Filter id -> predicate
    """
    name: str
    model: Type
    order_field: str
    descending: bool
    search_fields: Tuple[str, ...]
    options: Tuple[FilterOption, ...]
    rules: Mapping[str, Rule]
    date_field: Optional[str] = None
    cost_field: Optional[str] = None
    type_field: Optional[str] = None
    type_choices: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Freeze the rule table so a catalog cannot be mutated after import
        object.__setattr__(self, 'rules', MappingProxyType(dict(self.rules)))

    @property
    def option_ids(self) -> FrozenSet[str]:
        return frozenset(option.id for option in self.options)

# Rule builders

def _text(record: Record, name: str) -> str:
    return str(record.get(name) or '').lower()

def _moment(record: Record, name: str) -> Optional[datetime]:
    try:
        return as_datetime(record.get(name))
    except (TypeError, ValueError):
        return None

def in_current_month(date_field: str) -> Rule:
    """Same calendar month and year as now. The day is ignored."""
    def rule(record: Record, now: datetime) -> bool:
        moment = _moment(record, date_field)
        return moment is not None and month_key(moment) == month_key(now)
    return rule

def in_next_month(date_field: str) -> Rule:
    """The calendar month after now; December rolls over to January."""
    def rule(record: Record, now: datetime) -> bool:
        moment = _moment(record, date_field)
        return moment is not None and month_key(moment) == next_month_key(now)
    return rule

def after_now(date_field: str) -> Rule:
    def rule(record: Record, now: datetime) -> bool:
        moment = _moment(record, date_field)
        return moment is not None and moment > now
    return rule

def ending_within(date_field: str, window: timedelta = ENDING_SOON_WINDOW) -> Rule:
    """Not yet passed and due within ``window``. Both ends inclusive."""
    def rule(record: Record, now: datetime) -> bool:
        moment = _moment(record, date_field)
        return moment is not None and now <= moment <= now + window
    return rule

def flag_is(flag_field: str, expected: bool) -> Rule:
    def rule(record: Record, now: datetime) -> bool:
        return bool(record.get(flag_field)) is expected
    return rule

def equals_any(text_field: str, *values: str) -> Rule:
    """Case-insensitive equality against any of ``values``."""
    wanted = frozenset(value.lower() for value in values)
    def rule(record: Record, now: datetime) -> bool:
        return _text(record, text_field) in wanted
    return rule

def contains(text_field: str, needle: str) -> Rule:
    needle = needle.lower()
    def rule(record: Record, now: datetime) -> bool:
        return needle in _text(record, text_field)
    return rule

def contains_none(text_field: str, *needles: str) -> Rule:
    lowered = tuple(needle.lower() for needle in needles)
    def rule(record: Record, now: datetime) -> bool:
        text = _text(record, text_field)
        return not any(needle in text for needle in lowered)
    return rule

# Predicates

def matches_search(record: Record, query: str, content_type: ContentType) -> bool:
    """
    Whether ``record`` matches the free-text ``query``.

    The query is lower-cased and matched as a substring of each searchable
    field, of the record's date rendered as a full date ("friday, january 10,
    2025"), or, for types with a cost flag, interpreted as a free/paid token.
    """
    needle = (query or '').lower()
    if not needle:
        return True

    if any(needle in _text(record, name) for name in content_type.search_fields):
        return True

    if content_type.cost_field:
        is_free = bool(record.get(content_type.cost_field))
        if (needle in FREE_TOKENS and is_free) or (needle in PAID_TOKENS and not is_free):
            return True

    if content_type.date_field:
        moment = _moment(record, content_type.date_field)
        if moment is not None and needle in format_full_date(moment).lower():
            return True

    return False

def matches_filter(
    record: Record,
    filter_id: str,
    content_type: ContentType,
    now: Optional[datetime] = None
) -> bool:
    """
    Evaluate a single filter.

    An id with no rule passes every record. Callers that take filter ids from
    user input should reject them first with ``unknown_filters``.
    """
    rule = content_type.rules.get(filter_id)
    if rule is None:
        return True
    return rule(record, now or now_local())

def matches_filters(
    record: Record,
    active: Iterable[str],
    content_type: ContentType,
    now: Optional[datetime] = None
) -> bool:
    """All active filters must hold. An empty set always holds."""
    now = now or now_local()
    return all(matches_filter(record, filter_id, content_type, now) for filter_id in active)

def matches_type(record: Record, selected_type: Optional[str], content_type: ContentType) -> bool:
    if not selected_type or not content_type.type_field:
        return True
    return _text(record, content_type.type_field) == selected_type.lower()

def filter_records(
    records: Iterable[Record],
    content_type: ContentType,
    query: str = '',
    active: Iterable[str] = (),
    now: Optional[datetime] = None,
    selected_type: Optional[str] = None
) -> List[Record]:
    """
    Apply search, type picker and filters to ``records``, keeping their order.

    ``now`` is evaluated once so every record sees the same clock.
    """
    now = now or now_local()
    active = frozenset(active)
    return [
        record for record in records
        if matches_search(record, query, content_type)
        and matches_type(record, selected_type, content_type)
        and matches_filters(record, active, content_type, now)
    ]

def toggle_filter(active: Iterable[str], filter_id: str) -> FrozenSet[str]:
    """Return ``active`` with ``filter_id`` added, or removed if it was there."""
    current = frozenset(active)
    if filter_id in current:
        return current - {filter_id}
    return current | {filter_id}

def unknown_filters(content_type: ContentType, filter_ids: Iterable[str]) -> List[str]:
    """Ids that have no rule for this content type, sorted."""
    return sorted(set(filter_ids) - set(content_type.rules))

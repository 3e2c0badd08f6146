"""Search and filter behaviour of the listing engine."""

from datetime import date, datetime, timedelta
from itertools import combinations

import pytest

from glowup.listings import (
    EVENTS,
    JOBS,
    OPPORTUNITIES,
    RESOURCES,
    filter_records,
    matches_filter,
    matches_filters,
    matches_search,
    toggle_filter,
    unknown_filters,
)
from glowup.utils.dates import format_full_date, next_month_key

EVENT_RECORDS = [
    {"id": "1", "title": "Tech Talk", "is_free": True, "date": "2025-01-10"},
    {"id": "2", "title": "Career Fair", "is_free": False, "date": "2025-02-05"},
]

def titles(records):
    return [record["title"] for record in records]

def test_free_query_returns_only_free_event():
    assert titles(filter_records(EVENT_RECORDS, EVENTS, query="free")) == ["Tech Talk"]

def test_this_month_filter_uses_calendar_month():
    now = datetime(2025, 1, 15, 12, 0)
    result = filter_records(EVENT_RECORDS, EVENTS, query="", active={"this-month"}, now=now)
    assert titles(result) == ["Tech Talk"]

def test_empty_query_matches_everything():
    records = EVENT_RECORDS + [{"id": "3", "title": "", "description": None}]
    assert all(matches_search(record, "", EVENTS) for record in records)

@pytest.mark.parametrize("query", ["tech", "FREE", "Paid", "january", "Fr", "xyz", "2025", "pa"])
def test_search_is_case_insensitive(query):
    for record in EVENT_RECORDS:
        expected = matches_search(record, query, EVENTS)
        assert matches_search(record, query.upper(), EVENTS) == expected
        assert matches_search(record, query.lower(), EVENTS) == expected

@pytest.mark.parametrize("query,expected", [
    ("fr", ["Tech Talk"]),
    ("fre", ["Tech Talk"]),
    ("pa", ["Career Fair"]),
    ("pai", ["Career Fair"]),
    ("paid", ["Career Fair"]),
])
def test_cost_tokens(query, expected):
    assert titles(filter_records(EVENT_RECORDS, EVENTS, query=query)) == expected

def test_search_matches_full_date_string():
    assert format_full_date("2025-01-10") == "Friday, January 10, 2025"
    assert titles(filter_records(EVENT_RECORDS, EVENTS, query="friday, january")) == ["Tech Talk"]
    assert titles(filter_records(EVENT_RECORDS, EVENTS, query="february 5")) == ["Career Fair"]

def test_search_accepts_date_objects():
    record = {"title": "Meetup", "date": date(2025, 3, 3)}
    assert matches_search(record, "monday", EVENTS)

def test_cost_tokens_only_apply_to_types_with_a_cost_flag():
    job = {"title": "Analyst", "company": "Acme", "deadline": "2025-01-10T09:00:00"}
    assert not matches_search(job, "free", JOBS)

def test_resources_have_no_date_search():
    resource = {"title": "CV Template", "category": "templates", "created_at": "2025-01-10T00:00:00"}
    assert not matches_search(resource, "january", RESOURCES)
    assert matches_search(resource, "TEMPL", RESOURCES)

def test_job_search_covers_optional_salary_range():
    job = {"title": "Analyst", "company": "Acme", "salary_range": None, "requirements": "SQL"}
    assert matches_search(job, "sql", JOBS)
    assert not matches_search(job, "₦", JOBS)
    assert matches_search(dict(job, salary_range="₦200k - ₦300k"), "₦200k", JOBS)

def test_empty_filter_set_passes_everything():
    for record in EVENT_RECORDS:
        assert matches_filters(record, set(), EVENTS, now=datetime(2030, 1, 1))

def test_filters_combine_with_and():
    now = datetime(2025, 1, 15)
    records = [
        {"title": "A", "date": "2025-01-20", "is_free": True, "location_type": "online"},
        {"title": "B", "date": "2025-01-20", "is_free": False, "location_type": "online"},
        {"title": "C", "date": "2025-01-20", "is_free": True, "location_type": "physical"},
    ]
    result = filter_records(records, EVENTS, active={"free", "virtual"}, now=now)
    assert titles(result) == ["A"]

def test_filter_set_is_conjunction_of_single_filters():
    now = datetime(2025, 1, 15)
    records = [
        {"title": "A", "date": "2025-01-20", "is_free": True, "location_type": "hybrid"},
        {"title": "B", "date": "2025-02-02", "is_free": False, "location_type": "physical"},
        {"title": "C", "date": "2024-12-31", "is_free": True, "location_type": "online"},
    ]
    ids = sorted(EVENTS.option_ids)
    for size in range(1, 4):
        for active in combinations(ids, size):
            for record in records:
                expected = all(matches_filter(record, f, EVENTS, now) for f in active)
                assert matches_filters(record, active, EVENTS, now) == expected

def test_toggle_twice_restores_filters_and_results():
    now = datetime(2025, 1, 15)
    original = frozenset({"free"})
    before = filter_records(EVENT_RECORDS, EVENTS, active=original, now=now)
    toggled = toggle_filter(original, "this-month")
    assert toggled == {"free", "this-month"}
    restored = toggle_filter(toggled, "this-month")
    assert restored == original
    assert filter_records(EVENT_RECORDS, EVENTS, active=restored, now=now) == before

def test_ending_soon_boundary():
    now = datetime(2025, 3, 1, 12, 0, 0)
    on_boundary = {"deadline": now + timedelta(days=7)}
    past_boundary = {"deadline": now + timedelta(days=7, seconds=1)}
    already_passed = {"deadline": now - timedelta(seconds=1)}
    due_now = {"deadline": now}
    assert matches_filter(on_boundary, "ending-soon", JOBS, now)
    assert not matches_filter(past_boundary, "ending-soon", JOBS, now)
    assert not matches_filter(already_passed, "ending-soon", JOBS, now)
    assert matches_filter(due_now, "ending-soon", JOBS, now)

def test_next_month_rolls_over_year():
    now = datetime(2025, 12, 20)
    assert next_month_key(now) == (2026, 1)
    assert matches_filter({"deadline": "2026-01-03T00:00:00"}, "next-month", OPPORTUNITIES, now)
    assert not matches_filter({"deadline": "2025-01-03T00:00:00"}, "next-month", OPPORTUNITIES, now)

def test_future_filter_is_strictly_after_now():
    now = datetime(2025, 1, 15, 9, 30)
    assert matches_filter({"date": "2025-01-16"}, "future", EVENTS, now)
    assert not matches_filter({"date": "2025-01-15"}, "future", EVENTS, now)

def test_event_location_filters():
    assert matches_filter({"location_type": "physical"}, "in-person", EVENTS)
    assert matches_filter({"location_type": "Hybrid"}, "virtual", EVENTS)
    assert matches_filter({"location_type": "online"}, "virtual", EVENTS)
    assert not matches_filter({"location_type": "online"}, "in-person", EVENTS)

@pytest.mark.parametrize("location,remote,hybrid,on_site", [
    ("Remote - Worldwide", True, False, False),
    ("Lagos (Hybrid)", False, True, False),
    ("Abuja", False, False, True),
    ("", False, False, True),
])
def test_job_location_filters_use_substrings(location, remote, hybrid, on_site):
    job = {"location": location}
    assert matches_filter(job, "remote", JOBS) is remote
    assert matches_filter(job, "hybrid", JOBS) is hybrid
    assert matches_filter(job, "on-site", JOBS) is on_site

def test_job_type_picker_is_case_insensitive():
    jobs = [
        {"title": "Intern", "job_type": "internship"},
        {"title": "Engineer", "job_type": "full-time"},
    ]
    assert titles(filter_records(jobs, JOBS, selected_type="Internship")) == ["Intern"]
    assert titles(filter_records(jobs, JOBS, selected_type=None)) == ["Intern", "Engineer"]

@pytest.mark.parametrize("category", ["scholarship", "competition", "mentorship"])
def test_opportunity_category_filters(category):
    assert matches_filter({"category": category.title()}, category, OPPORTUNITIES)
    assert not matches_filter({"category": "grant"}, category, OPPORTUNITIES)

def test_resource_filters():
    guide = {"category": "Study Materials", "is_premium": False, "featured": True}
    course = {"category": "courses", "is_premium": True, "featured": False}
    assert matches_filter(guide, "study-materials", RESOURCES)
    assert matches_filter(guide, "free", RESOURCES)
    assert matches_filter(guide, "featured", RESOURCES)
    assert matches_filter(course, "premium", RESOURCES)
    assert not matches_filter(course, "free", RESOURCES)
    assert not matches_filter(course, "study-materials", RESOURCES)

def test_unknown_filter_fails_open_but_is_reported():
    record = EVENT_RECORDS[0]
    assert matches_filter(record, "bogus", EVENTS)
    assert unknown_filters(EVENTS, ["free", "bogus", "ending-soon"]) == ["bogus", "ending-soon"]

def test_records_without_a_date_fail_time_filters():
    assert not matches_filter({"title": "TBA"}, "this-month", EVENTS)
    assert not matches_filter({"deadline": "not a date"}, "ending-soon", JOBS)

def test_catalogs_are_immutable():
    with pytest.raises(TypeError):
        EVENTS.rules["free"] = None
    with pytest.raises(AttributeError):
        EVENTS.name = "other"

def test_filter_records_keeps_order():
    records = [{"title": str(n), "is_free": True} for n in range(5)]
    assert titles(filter_records(records, EVENTS, active={"free"})) == ["0", "1", "2", "3", "4"]

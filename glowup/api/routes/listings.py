"""Listing routes: one collection per content type, searched and filtered in memory."""

import logging
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from fastapi.responses import RedirectResponse

from ...db import Database, fetch_one
from ...listings import CONTENT_TYPES, EVENTS, RESOURCES, ContentType, filter_records, unknown_filters
from ...listings.fetch import load_featured, load_listing
from ...listings.ical import build_events_calendar
from ...listings.resources import (
    OPEN,
    ResourceDownloadError,
    content_disposition,
    fetch_download,
    resource_action
)
from ..dependencies import get_database

logger = logging.getLogger(__name__)

router = APIRouter(tags=["listings"])

def _content_type(name: str) -> ContentType:
    content_type = CONTENT_TYPES.get(name)
    if content_type is None:
        raise HTTPException(status_code=404, detail=f"Unknown content type: {name}")
    return content_type

@router.get("/featured", response_model=Dict[str, List[Dict]])
async def get_featured(database: Database = Depends(get_database)):
    """Featured events, opportunities, jobs and resources for the landing page."""
    return load_featured(database)

@router.get("/events/calendar.ics")
async def get_events_calendar(database: Database = Depends(get_database)):
    """iCalendar feed of all listed events."""
    events = load_listing(database, EVENTS)
    return Response(
        content=build_events_calendar(events),
        media_type="text/calendar; charset=utf-8",
        headers={"Content-Disposition": "attachment; filename=calendar.ics"}
    )

@router.get("/resources/{resource_id}/access")
def access_resource(resource_id: str, database: Database = Depends(get_database)):
    """
    Open or download a resource.
    
    Premium resources redirect to their URL; free ones are served as an
    attachment.
    """
    resource = fetch_one(database, RESOURCES.model, resource_id)
    if resource is None:
        raise HTTPException(status_code=404, detail="Resource not found")
    
    action = resource_action(resource)
    if action.kind == OPEN:
        return RedirectResponse(action.url, status_code=307)
    
    try:
        downloaded = fetch_download(resource)
    except ResourceDownloadError as e:
        raise HTTPException(status_code=502, detail=str(e))
    
    return Response(
        content=downloaded.content,
        media_type=downloaded.media_type,
        headers={"Content-Disposition": content_disposition(downloaded.filename)}
    )

@router.get("/{content_type_name}", response_model=List[Dict])
async def list_content(
    content_type_name: str,
    q: str = "",
    filters: List[str] = Query(default=[], alias="filter"),
    selected_type: Optional[str] = Query(default=None, alias="type"),
    database: Database = Depends(get_database)
):
    """
    List one content type.
    
    ``q`` is the search text, each ``filter`` adds an active filter (all must
    hold) and ``type`` picks a single job type.
    """
    content_type = _content_type(content_type_name)
    
    unknown = unknown_filters(content_type, filters)
    if unknown:
        raise HTTPException(
            status_code=400,
            detail=f"Unknown filter(s) for {content_type.name}: {', '.join(unknown)}"
        )
    
    if selected_type:
        if not content_type.type_field:
            raise HTTPException(status_code=400, detail=f"{content_type.name} has no type picker")
        if selected_type.lower() not in content_type.type_choices:
            raise HTTPException(status_code=400, detail=f"Unknown type: {selected_type}")
    
    records = load_listing(database, content_type)
    return filter_records(
        records,
        content_type,
        query=q,
        active=filters,
        selected_type=selected_type
    )

@router.get("/{content_type_name}/filters", response_model=List[Dict])
async def list_filter_options(content_type_name: str):
    """Filter menu entries for one content type."""
    content_type = _content_type(content_type_name)
    return [option.to_dict() for option in content_type.options]

@router.get("/{content_type_name}/{record_id}", response_model=Dict)
async def get_content(
    content_type_name: str,
    record_id: str,
    database: Database = Depends(get_database)
):
    """Get a single record by ID."""
    content_type = _content_type(content_type_name)
    try:
        record = fetch_one(database, content_type.model, record_id)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Database error: {str(e)}")
    if record is None:
        raise HTTPException(status_code=404, detail=f"{content_type.model.__name__} not found")
    return record

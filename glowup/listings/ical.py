"""iCalendar feed of listed events."""

from datetime import datetime
from typing import Any, Iterable, Mapping

from icalendar import Calendar, Event as ICalEvent

from ..utils.dates import as_datetime

def build_events_calendar(events: Iterable[Mapping[str, Any]]) -> bytes:
    """Generate an iCalendar document with one VEVENT per event."""
    cal = Calendar()
    cal.add('prodid', '-//Glow Up Diaries//glowupdiaries.com//')
    cal.add('version', '2.0')
    cal.add('x-wr-calname', 'Glow Up Diaries Events')
    
    for event in events:
        cal_event = ICalEvent()
        cal_event.add('uid', f"{event['id']}@glowupdiaries.com")
        cal_event.add('summary', event['title'])
        
        # Events without a time are all-day entries
        if event.get('time'):
            start = datetime.combine(as_datetime(event['date']).date(), event['time'])
            cal_event.add('dtstart', start)
        else:
            cal_event.add('dtstart', as_datetime(event['date']).date())
        
        if event.get('description'):
            cal_event.add('description', event['description'])
            
        if event.get('location'):
            cal_event.add('location', event['location'])
            
        if event.get('link'):
            cal_event.add('url', event['link'])
            
        cal.add_component(cal_event)
    
    return cal.to_ical()

"""Event model definition."""

from typing import Dict, Any
from sqlalchemy import Column, String, Text, Date, Time, Boolean, DateTime

from .base import Base, new_id
from ..utils.dates import now_local

class Event(Base):
    """
    Event listed on the events page.
    
    Fields:
        id: Unique identifier
        title: Event title
        description: Event description
        date: Day the event takes place
        time: Start time of the event (optional)
        location: Where the event takes place
        location_type: One of 'physical', 'online' or 'hybrid'
        is_free: Whether attendance is free
        featured: Whether the event is promoted on the landing page
        link: Registration or info URL (optional)
        created_at: When the event was added
    """
    __tablename__ = 'events'
    
    id = Column(String(36), primary_key=True, default=new_id)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False, default='')
    date = Column(Date, nullable=False)
    time = Column(Time)
    location = Column(String, nullable=False, default='')
    location_type = Column(String, nullable=False, default='physical')
    is_free = Column(Boolean, nullable=False, default=True)
    featured = Column(Boolean, nullable=False, default=False)
    link = Column(String)
    created_at = Column(DateTime, default=now_local)
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'id': self.id,
            'title': self.title,
            'description': self.description,
            'date': self.date,
            'time': self.time,
            'location': self.location,
            'location_type': self.location_type,
            'is_free': self.is_free,
            'featured': self.featured,
            'link': self.link,
            'created_at': self.created_at
        }
    
    def __str__(self) -> str:
        """String representation."""
        return f"Event(id={self.id}, title={self.title}, date={self.date})"

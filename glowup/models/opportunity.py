"""Opportunity model definition."""

from typing import Dict, Any
from sqlalchemy import Column, String, Text, Boolean, DateTime

from .base import Base, new_id
from ..utils.dates import now_local

class Opportunity(Base):
    """
    Scholarship, fellowship, internship, grant, competition or mentorship.
    
    Fields:
        deadline: Last moment to apply
        eligibility: Who may apply
        category: One of the opportunity categories (lower-case)
        is_free: Whether applying costs nothing
    """
    __tablename__ = 'opportunities'
    
    id = Column(String(36), primary_key=True, default=new_id)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False, default='')
    deadline = Column(DateTime, nullable=False)
    eligibility = Column(Text, nullable=False, default='')
    category = Column(String, nullable=False)
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
            'deadline': self.deadline,
            'eligibility': self.eligibility,
            'category': self.category,
            'is_free': self.is_free,
            'featured': self.featured,
            'link': self.link,
            'created_at': self.created_at
        }
    
    def __str__(self) -> str:
        return f"Opportunity(id={self.id}, title={self.title}, category={self.category})"

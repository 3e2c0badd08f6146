"""Job model definition."""

from typing import Dict, Any
from sqlalchemy import Column, String, Text, Boolean, DateTime

from .base import Base, new_id
from ..utils.dates import now_local

class Job(Base):
    """
    Job posting listed on the jobs page.
    
    The location is free text ("Lagos (Hybrid)", "Remote", ...), which is why
    the location filters for jobs look for substrings instead of an enum.
    """
    __tablename__ = 'jobs'
    
    id = Column(String(36), primary_key=True, default=new_id)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False, default='')
    company = Column(String, nullable=False)
    location = Column(String, nullable=False, default='')
    job_type = Column(String, nullable=False)
    salary_range = Column(String)
    deadline = Column(DateTime, nullable=False)
    requirements = Column(Text, nullable=False, default='')
    link = Column(String, nullable=False)
    featured = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, default=now_local)
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'id': self.id,
            'title': self.title,
            'description': self.description,
            'company': self.company,
            'location': self.location,
            'job_type': self.job_type,
            'salary_range': self.salary_range,
            'deadline': self.deadline,
            'requirements': self.requirements,
            'link': self.link,
            'featured': self.featured,
            'created_at': self.created_at
        }
    
    def __str__(self) -> str:
        return f"Job(id={self.id}, title={self.title}, company={self.company})"

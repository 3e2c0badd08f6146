"""Resource model definition."""

from typing import Dict, Any
from sqlalchemy import Column, String, Text, Boolean, DateTime

from .base import Base, new_id
from ..utils.dates import now_local

class Resource(Base):
    """Downloadable or premium learning resource."""
    __tablename__ = 'resources'
    
    id = Column(String(36), primary_key=True, default=new_id)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False, default='')
    category = Column(String, nullable=False)
    is_premium = Column(Boolean, nullable=False, default=False)
    featured = Column(Boolean, nullable=False, default=False)
    file_url = Column(String, nullable=False)
    created_at = Column(DateTime, default=now_local)
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'title': self.title,
            'description': self.description,
            'category': self.category,
            'is_premium': self.is_premium,
            'featured': self.featured,
            'file_url': self.file_url,
            'created_at': self.created_at
        }

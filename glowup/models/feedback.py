"""Model for messages sent through the contact form."""

from typing import Dict, Any
from sqlalchemy import Column, String, Text, DateTime

from .base import Base, new_id
from ..utils.dates import now_local

class Feedback(Base):
    __tablename__ = 'feedback'
    
    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    message = Column(Text, nullable=False)
    created_at = Column(DateTime, default=now_local)
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'message': self.message,
            'created_at': self.created_at
        }

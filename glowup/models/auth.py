"""Models backing sign-in, sessions and admin membership."""

from typing import Dict, Any
from sqlalchemy import Column, String, DateTime, ForeignKey

from .base import Base, new_id
from ..utils.dates import now_local

class User(Base):
    """Account that can sign in. Being a user does not make someone an admin."""
    __tablename__ = 'users'
    
    id = Column(String(36), primary_key=True, default=new_id)
    email = Column(String, nullable=False, unique=True)
    password_hash = Column(String, nullable=False)
    created_at = Column(DateTime, default=now_local)

class AdminUser(Base):
    """
    Admin membership list.
    
    A row here, keyed by the user's id, is what grants access to /admin.
    """
    __tablename__ = 'admin_users'
    
    id = Column(String(36), ForeignKey('users.id', ondelete='CASCADE'), primary_key=True)
    email = Column(String, nullable=False)
    full_name = Column(String)
    avatar_url = Column(String)
    created_at = Column(DateTime, default=now_local)
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'email': self.email,
            'full_name': self.full_name,
            'avatar_url': self.avatar_url
        }

class AuthSession(Base):
    """Session issued on sign-in and referenced by the session cookie."""
    __tablename__ = 'auth_sessions'
    
    token = Column(String(64), primary_key=True)
    user_id = Column(String(36), ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    expires_at = Column(DateTime, nullable=False)
    created_at = Column(DateTime, default=now_local)
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            'token': self.token,
            'user_id': self.user_id,
            'expires_at': self.expires_at
        }

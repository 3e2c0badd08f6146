"""Models package initialization."""

from .base import Base
from .event import Event
from .opportunity import Opportunity
from .job import Job
from .resource import Resource
from .feedback import Feedback
from .auth import User, AdminUser, AuthSession

__all__ = [
    'Base',
    'Event',
    'Opportunity',
    'Job',
    'Resource',
    'Feedback',
    'User',
    'AdminUser',
    'AuthSession'
]

"""Request bodies accepted by the API."""

import datetime as dt
from typing import Literal, Optional

from pydantic import BaseModel, EmailStr, Field

class LoginRequest(BaseModel):
    email: str
    password: str

class FeedbackRequest(BaseModel):
    name: str = Field(..., min_length=1)
    email: EmailStr
    message: str = Field(..., min_length=1)

class EmailRequest(BaseModel):
    to: EmailStr
    subject: str
    content: str

class EventCreate(BaseModel):
    title: str
    description: str = ''
    date: dt.date
    time: Optional[dt.time] = None
    location: str = ''
    location_type: Literal['physical', 'online', 'hybrid'] = 'physical'
    is_free: bool = True
    featured: bool = False
    link: Optional[str] = None

class OpportunityCreate(BaseModel):
    title: str
    description: str = ''
    deadline: dt.datetime
    eligibility: str = ''
    category: Literal['scholarship', 'fellowship', 'internship', 'grant', 'competition', 'mentorship']
    is_free: bool = True
    featured: bool = False
    link: Optional[str] = None

class JobCreate(BaseModel):
    title: str
    description: str = ''
    company: str
    location: str = ''
    job_type: Literal['full-time', 'part-time', 'contract', 'internship', 'remote', 'graduate-trainee']
    salary_range: Optional[str] = None
    deadline: dt.datetime
    requirements: str = ''
    link: str
    featured: bool = False

class ResourceCreate(BaseModel):
    title: str
    description: str = ''
    category: Literal[
        'career development',
        'study materials',
        'templates',
        'guides',
        'worksheets',
        'courses'
    ]
    is_premium: bool = False
    featured: bool = False
    file_url: str

# Collection name -> body accepted when an admin creates a record
CREATE_SCHEMAS = {
    'events': EventCreate,
    'opportunities': OpportunityCreate,
    'jobs': JobCreate,
    'resources': ResourceCreate,
}

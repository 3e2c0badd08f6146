"""Declarative base shared by all models."""

import uuid

from sqlalchemy.orm import declarative_base

Base = declarative_base()

def new_id() -> str:
    """Generate a stable unique identifier for a new row."""
    return str(uuid.uuid4())

"""Storage capability used by the routes.

These functions are the only way the API reads or writes content. They
return plain dicts so nothing outside a session scope touches ORM state.
Nothing here retries: a failure propagates to the caller, which decides
whether it is fatal to the request.
"""

import logging
from typing import Any, Dict, List, Optional, Type

from sqlalchemy.exc import IntegrityError

from .db_core import Database, DatabaseError

logger = logging.getLogger(__name__)

def fetch_collection(
    database: Database,
    model: Type,
    order_field: str,
    descending: bool = False
) -> List[Dict[str, Any]]:
    """Select every row of ``model`` ordered by ``order_field``."""
    column = getattr(model, order_field)
    with database.session() as session:
        rows = session.query(model).order_by(
            column.desc() if descending else column.asc()
        ).all()
        return [row.to_dict() for row in rows]

def fetch_featured(database: Database, model: Type) -> List[Dict[str, Any]]:
    """Featured rows of ``model``, newest first."""
    with database.session() as session:
        rows = session.query(model).filter(
            model.featured.is_(True)
        ).order_by(model.created_at.desc()).all()
        return [row.to_dict() for row in rows]

def fetch_one(database: Database, model: Type, record_id: str) -> Optional[Dict[str, Any]]:
    """Single row by primary key, or None."""
    with database.session() as session:
        row = session.get(model, record_id)
        return row.to_dict() if row else None

def insert_record(database: Database, model: Type, values: Dict[str, Any]) -> Dict[str, Any]:
    """
    Insert one row and return it as stored.
    
    Raises:
        DatabaseError: If the row violates a constraint
        SessionError: For any other database failure
    """
    try:
        with database.session() as session:
            row = model(**values)
            session.add(row)
            session.flush()
            return row.to_dict()
    except DatabaseError as e:
        if isinstance(e.__cause__, IntegrityError):
            raise DatabaseError(f"Integrity error inserting into {model.__tablename__}: {e.__cause__}") from e
        raise

def delete_record(database: Database, model: Type, record_id: str) -> bool:
    """Delete a row by primary key. Returns False if it did not exist."""
    with database.session() as session:
        row = session.get(model, record_id)
        if row is None:
            return False
        session.delete(row)
        logger.info(f"Deleted {model.__tablename__} row {record_id}")
        return True

def count_records(database: Database, model: Type) -> int:
    with database.session() as session:
        return session.query(model).count()

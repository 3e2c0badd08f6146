"""Admin routes.

``auth_router`` holds the login and logout endpoints. ``router`` holds the
admin pages; every one of them goes through ``require_admin`` in addition
to the request middleware.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, HTTPException
from fastapi.responses import JSONResponse, RedirectResponse
from pydantic import ValidationError

from ...auth import AuthError, AuthProvider
from ...config.session import ADMIN_HOME_PATH, ADMIN_LOGIN_PATH, SessionConfig
from ...db import Database, count_records, delete_record, fetch_collection, insert_record
from ...listings import CONTENT_TYPES
from ...models import Feedback
from ..dependencies import (
    get_auth_provider,
    get_database,
    get_session_config,
    get_session_token,
    require_admin
)
from ..schemas import CREATE_SCHEMAS, LoginRequest

logger = logging.getLogger(__name__)

LOGIN_FALLBACK_MESSAGE = "Login failed. Please try again."

auth_router = APIRouter(prefix="/admin", tags=["admin"])
router = APIRouter(prefix="/admin", tags=["admin"], dependencies=[Depends(require_admin)])

@auth_router.get("/login")
async def login_page(
    token: Optional[str] = Depends(get_session_token),
    provider: AuthProvider = Depends(get_auth_provider)
):
    """Login page state. Never redirected, whatever the session."""
    try:
        authenticated = provider.get_session(token) is not None
    except Exception as e:
        logger.error(f"Auth error: {e}")
        authenticated = False
    return {"page": "login", "authenticated": authenticated}

@auth_router.post("/login")
async def login(
    credentials: LoginRequest,
    provider: AuthProvider = Depends(get_auth_provider),
    config: SessionConfig = Depends(get_session_config)
):
    """Sign in and set the session cookie."""
    try:
        session = provider.sign_in(credentials.email, credentials.password)
    except AuthError as e:
        return JSONResponse(status_code=401, content={"error": str(e) or LOGIN_FALLBACK_MESSAGE})
    except Exception as e:
        logger.error(f"Login error: {e}")
        return JSONResponse(status_code=500, content={"error": LOGIN_FALLBACK_MESSAGE})
    
    response = JSONResponse(content={"redirect": ADMIN_HOME_PATH})
    response.set_cookie(
        config.cookie_name,
        session['token'],
        max_age=config.ttl_hours * 3600,
        httponly=True,
        secure=config.secure,
        samesite=config.same_site,
        path="/"
    )
    return response

@router.post("/logout")
async def logout(
    token: Optional[str] = Depends(get_session_token),
    provider: AuthProvider = Depends(get_auth_provider),
    config: SessionConfig = Depends(get_session_config)
):
    """Invalidate the session and clear the cookie."""
    provider.sign_out(token)
    response = JSONResponse(content={"redirect": ADMIN_LOGIN_PATH})
    response.delete_cookie(config.cookie_name, path="/")
    return response

@router.get("")
async def admin_root():
    return RedirectResponse(ADMIN_HOME_PATH, status_code=307)

@router.get("/dashboard")
async def dashboard(
    admin_user: Dict[str, Any] = Depends(require_admin),
    database: Database = Depends(get_database)
):
    """Signed-in admin and how many records each collection holds."""
    counts = {
        name: count_records(database, content_type.model)
        for name, content_type in CONTENT_TYPES.items()
    }
    counts['feedback'] = count_records(database, Feedback)
    return {"user": admin_user, "counts": counts}

@router.get("/feedback")
async def list_feedback(database: Database = Depends(get_database)):
    """Contact form messages, newest first."""
    return fetch_collection(database, Feedback, 'created_at', descending=True)

@router.post("/content/{content_type_name}", status_code=201)
async def create_content(
    content_type_name: str,
    payload: Dict[str, Any] = Body(...),
    database: Database = Depends(get_database)
):
    """Create a record in one of the listed collections."""
    content_type = CONTENT_TYPES.get(content_type_name)
    if content_type is None:
        raise HTTPException(status_code=404, detail=f"Unknown content type: {content_type_name}")
    
    try:
        values = CREATE_SCHEMAS[content_type.name].model_validate(payload).model_dump()
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.errors(include_url=False, include_context=False, include_input=False))
    
    try:
        record = insert_record(database, content_type.model, values)
    except Exception as e:
        logger.error(f"Error creating {content_type.name} record: {e}")
        raise HTTPException(status_code=500, detail=f"Database error: {str(e)}")
    
    logger.info(f"Created {content_type.name} record {record['id']}")
    return record

@router.delete("/content/{content_type_name}/{record_id}")
async def delete_content(
    content_type_name: str,
    record_id: str,
    database: Database = Depends(get_database)
):
    content_type = CONTENT_TYPES.get(content_type_name)
    if content_type is None:
        raise HTTPException(status_code=404, detail=f"Unknown content type: {content_type_name}")
    
    if not delete_record(database, content_type.model, record_id):
        raise HTTPException(status_code=404, detail=f"{content_type.model.__name__} not found")
    
    return {"status": "success", "message": f"{content_type.model.__name__} deleted"}

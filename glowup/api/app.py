"""FastAPI application configuration module."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

# Internal imports
from ..config.environment import IS_PRODUCTION_ENVIRONMENT # Environment must be imported first
from ..config.cors import CORS_CONFIG
from ..config.session import SessionConfig
from ..utils.logging_config import setup_logging
from ..auth import AuthProvider, DatabaseAuthProvider
from ..db import Database
from .dependencies import AdminRedirect
from .middleware import AdminGateMiddleware
from .routes import admin, contact, health, listings
from .. import __version__

# Set up logging
setup_logging()
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    # Startup
    try:
        app.state.database.ensure_tables_exist()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Startup failed: {e}")
        raise
    yield

def create_application(
    database: Optional[Database] = None,
    auth_provider: Optional[AuthProvider] = None,
    session_config: Optional[SessionConfig] = None
) -> FastAPI:
    """
    Create and configure the FastAPI application.
    
    Args:
        database: Database to serve from. Defaults to the environment's database
        auth_provider: Session provider. Defaults to one backed by ``database``
        session_config: Cookie settings. Defaults to the environment's settings
    """
    if database is None:
        from ..db import db as database
    session_config = session_config or SessionConfig()
    
    app = FastAPI(
        title="Glow Up Diaries API",
        description="Events, opportunities, jobs and resources, with an admin area to manage them",
        version=__version__,
        docs_url=None if IS_PRODUCTION_ENVIRONMENT else '/api/docs',
        redoc_url=None if IS_PRODUCTION_ENVIRONMENT else '/api/redoc',
        lifespan=lifespan
    )
    
    app.state.database = database
    app.state.session_config = session_config
    app.state.auth_provider = auth_provider or DatabaseAuthProvider(database, session_config)
    
    # Middleware added last runs first: CORS wraps the admin gate
    app.add_middleware(AdminGateMiddleware)
    app.add_middleware(CORSMiddleware, **CORS_CONFIG)
    
    @app.exception_handler(AdminRedirect)
    async def admin_redirect_handler(request: Request, exc: AdminRedirect):
        response = RedirectResponse(exc.location, status_code=307)
        if exc.clear_session:
            response.delete_cookie(request.app.state.session_config.cookie_name, path="/")
        return response
    
    # Include health check router without prefix
    app.include_router(health.router)
    
    # Include routers with prefix
    app.include_router(listings.router, prefix="/api")
    app.include_router(contact.router, prefix="/api")
    app.include_router(admin.auth_router)
    app.include_router(admin.router)
    
    return app

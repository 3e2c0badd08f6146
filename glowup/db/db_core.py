"""Engine and session management for the application database.

Development runs on a SQLite file under ``data/``; production connects to
PostgreSQL through ``DATABASE_URL`` using the psycopg 3 driver.
"""

from contextlib import contextmanager
import logging
from pathlib import Path
from typing import Optional, Dict, Any, Generator
import os

from sqlalchemy import create_engine, Engine, inspect
from sqlalchemy.orm import scoped_session, sessionmaker, Session
from sqlalchemy.pool import StaticPool

from ..models import Base
from ..config.environment import IS_PRODUCTION_ENVIRONMENT

logger = logging.getLogger(__name__)

DEFAULT_SQLITE_PATH = Path(__file__).parent.parent.parent / 'data' / 'glowup.db'

# Bare PostgreSQL schemes resolve to psycopg2 on SQLAlchemy 2.0; only psycopg 3 is installed
POSTGRES_SCHEMES = ('postgres://', 'postgresql://')
POSTGRES_DRIVER_SCHEME = 'postgresql+psycopg://'

def with_psycopg_driver(url: str) -> str:
    """Point a bare ``postgres://`` or ``postgresql://`` URL at the psycopg 3 driver."""
    for scheme in POSTGRES_SCHEMES:
        if url.startswith(scheme):
            return POSTGRES_DRIVER_SCHEME + url[len(scheme):]
    return url

class DatabaseConfig:
    """
    Where to connect and how to pool.

    ``url`` wins when given (tests pass ``'sqlite://'``). Otherwise production
    requires ``postgres_url`` or ``DATABASE_URL`` and development uses
    ``sqlite_path``.
    """
    
    def __init__(
        self,
        url: Optional[str] = None,
        sqlite_path: Optional[Path] = None,
        postgres_url: Optional[str] = None,
        echo: bool = False,
        pool_size: int = 3,
        max_overflow: int = 4,
        pool_timeout: int = 30,
        pool_recycle: int = 3600,
        pool_pre_ping: bool = True
    ):
        self.url = url
        self.postgres_url = None
        self.sqlite_path = None
        
        if url:
            pass
        elif IS_PRODUCTION_ENVIRONMENT:
            self.postgres_url = postgres_url or os.environ.get('DATABASE_URL')
            if not self.postgres_url:
                raise ValueError("DATABASE_URL must be set in production")
        else:
            self.sqlite_path = sqlite_path or DEFAULT_SQLITE_PATH
        
        self.echo = echo
        self.pool_size = pool_size
        self.max_overflow = max_overflow
        self.pool_timeout = pool_timeout
        self.pool_recycle = pool_recycle
        self.pool_pre_ping = pool_pre_ping
    
    @property
    def connection_url(self) -> str:
        if self.url:
            return with_psycopg_driver(self.url)
        if self.sqlite_path:
            return f"sqlite:///{self.sqlite_path}"
        if not self.postgres_url:
            raise ValueError("PostgreSQL URL not configured")
        return with_psycopg_driver(self.postgres_url)
    
    @property
    def is_sqlite(self) -> bool:
        return self.connection_url.startswith('sqlite')
    
    def get_engine_args(self) -> Dict[str, Any]:
        args = {"echo": self.echo}
        
        # One shared connection so in-memory databases survive across sessions
        if self.is_sqlite:
            args["connect_args"] = {"check_same_thread": False}
            args["poolclass"] = StaticPool
        else:
            args.update({
                "pool_size": self.pool_size,
                "max_overflow": self.max_overflow,
                "pool_timeout": self.pool_timeout,
                "pool_recycle": self.pool_recycle,
                "pool_pre_ping": self.pool_pre_ping
            })
        
        return args

class DatabaseError(Exception):
    """Base exception for database-related errors."""
    pass

class ConnectionError(DatabaseError):
    """Raised when the engine cannot be created."""
    pass

class SessionError(DatabaseError):
    """Raised when work inside ``Database.session()`` fails."""
    pass

class Database:
    """Owns the engine and session factory for one database."""
    
    def __init__(self, config: Optional[DatabaseConfig] = None):
        self.config = config or DatabaseConfig()
        self.engine: Optional[Engine] = None
        self._session_factory = sessionmaker()
        self._scoped_session = scoped_session(self._session_factory)
        self._tables_checked = False
        self._setup_engine()
    
    def _setup_engine(self) -> None:
        try:
            if self.config.sqlite_path:
                Path(self.config.sqlite_path).parent.mkdir(parents=True, exist_ok=True)
            self.engine = create_engine(self.config.connection_url, **self.config.get_engine_args())
            self._session_factory.configure(bind=self.engine)
        except Exception as e:
            raise ConnectionError(f"Failed to create database engine: {e}") from e
    
    def init_db(self) -> None:
        """Create every table the models declare."""
        if not self.engine:
            raise ConnectionError("Database engine not initialized")
        
        try:
            Base.metadata.create_all(self.engine)
            self._tables_checked = True
            logger.info("Database schema initialized successfully")
        except Exception as e:
            raise DatabaseError(f"Failed to initialize database schema: {e}") from e
    
    def ensure_tables_exist(self) -> None:
        """Create missing tables once per process; later calls are no-ops."""
        if self._tables_checked:
            return
        if not self.engine:
            raise ConnectionError("Database engine not initialized")
        
        try:
            existing_tables = set(inspect(self.engine).get_table_names())
            if not set(Base.metadata.tables) <= existing_tables:
                logger.info("Some tables missing, initializing database schema")
                Base.metadata.create_all(self.engine)
            self._tables_checked = True
        except Exception as e:
            raise DatabaseError(f"Failed to verify/create database schema: {e}") from e
    
    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """
        Transactional scope: commits on success, rolls back on error.
        
        Raises:
            SessionError: Wrapping whatever failed inside the block
        """
        self.ensure_tables_exist()
        
        session = self._scoped_session()
        try:
            yield session
            session.commit()
        except Exception as e:
            session.rollback()
            raise SessionError(f"Database session error: {e}") from e
        finally:
            session.close()
            self._scoped_session.remove()

# Default database for the running application
db = Database()

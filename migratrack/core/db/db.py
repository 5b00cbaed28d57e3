"""Database connection and session management for MigraTrack.

A session obtained from ``DatabaseManager.get_session()`` is one unit of
work: it commits when the block exits normally and rolls back when the
block raises, so every service call that runs inside a single
``with`` block is atomic.
"""

import logging
import time
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from .models import Base

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class DatabaseManager:
    """Owns the SQLAlchemy engine and hands out transactional sessions."""

    def __init__(self, database_url: str, echo: bool = False):
        self.database_url = database_url
        self.is_sqlite = database_url.startswith("sqlite")

        engine_kwargs = {"echo": echo}
        if self.is_sqlite:
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            # In-memory databases live and die with their connection
            if ":memory:" in database_url or database_url in ("sqlite://", "sqlite:///"):
                engine_kwargs["poolclass"] = StaticPool
        else:
            engine_kwargs["pool_pre_ping"] = True

        self.engine: Engine = create_engine(database_url, **engine_kwargs)
        if self.is_sqlite:
            event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)

        self.SessionLocal = sessionmaker(
            bind=self.engine,
            autoflush=True,
            expire_on_commit=False,
        )
        logger.info(f"DatabaseManager initialized ({self.engine.dialect.name})")

    def init_db(self) -> None:
        """Create all tables that do not exist yet."""
        Base.metadata.create_all(self.engine)
        logger.info("Database tables created")

    @contextmanager
    def get_session(self) -> Iterator[Session]:
        """Yield a session bound to one transaction.

        Commits on normal exit, rolls back and re-raises on any exception.
        """
        session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def ping(self) -> bool:
        """Return True when the database answers a trivial query."""
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except OperationalError as e:
            logger.warning(f"Database ping failed: {e}")
            return False

    def dispose(self) -> None:
        self.engine.dispose()




def wait_for_db(db_manager: DatabaseManager, retries: int = 10, delay: float = 2.0) -> bool:
    """Poll the database until it answers or retries run out."""
    for attempt in range(1, retries + 1):
        if db_manager.ping():
            logger.info(f"Database available (attempt {attempt})")
            return True
        logger.info(f"Waiting for database ({attempt}/{retries})...")
        time.sleep(delay)
    logger.error("Database did not become available")
    return False

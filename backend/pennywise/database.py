"""
Database store client.
"""

import logging
from typing import Generator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from pennywise.config import settings
from pennywise.exceptions import DataUnavailable

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Declarative base for all models."""


class Database:
    """
    Explicitly constructed handle on the relational store.

    A Database without a URL, or whose engine could not be created, stays in
    the unavailable state: ``is_available`` is False and ``session()`` raises
    DataUnavailable instead of handing out a session.
    """

    def __init__(self, url: Optional[str] = None, **engine_kwargs):
        self.url = url
        self.engine: Optional[Engine] = None
        self._sessionmaker: Optional[sessionmaker] = None
        if url:
            self.connect(url, **engine_kwargs)

    def connect(self, url: str, **engine_kwargs) -> None:
        if url.startswith("sqlite"):
            engine_kwargs.setdefault("connect_args", {"check_same_thread": False})
        try:
            self.engine = create_engine(url, **engine_kwargs)
        except (SQLAlchemyError, ImportError) as e:
            logger.warning(f"Failed to initialize database connection: {e}")
            self.engine = None
            self._sessionmaker = None
            return
        self.url = url
        self._sessionmaker = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    @property
    def is_available(self) -> bool:
        return self._sessionmaker is not None

    def session(self) -> Session:
        if self._sessionmaker is None:
            raise DataUnavailable("Database connection not available")
        return self._sessionmaker()

    def create_all(self) -> None:
        if self.engine is None:
            raise DataUnavailable("Database connection not available")
        Base.metadata.create_all(bind=self.engine)

    def dispose(self) -> None:
        if self.engine is not None:
            self.engine.dispose()


database = Database(settings.database_url)


def get_db() -> Generator[Session, None, None]:
    """
    Dependency for getting database sessions.
    """
    db = database.session()
    try:
        yield db
    finally:
        db.close()


def commit(db: Session) -> None:
    """Commit the session, rolling back and raising DataUnavailable on failure."""
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to commit changes: {e}")
        raise DataUnavailable("Failed to save changes") from e

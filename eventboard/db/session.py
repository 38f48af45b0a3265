# eventboard/db/session.py
import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from eventboard.core.config import settings
from eventboard.core.exceptions import StorageError

logger = logging.getLogger(__name__)


def _engine_kwargs(url: str) -> dict:
    # SQLite connections are bound to their creating thread unless told
    # otherwise, and FastAPI runs sync endpoints in a threadpool.
    if url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True}


# The engine owns the connection pool.
engine = create_engine(settings.DATABASE_URL, **_engine_kwargs(settings.DATABASE_URL))

# One Session per request; it checks a pooled connection out on first use and
# returns it on close.
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Iterator[Session]:
    db = SessionLocal()
    try:
        yield db
    finally:
        # Runs after the endpoint, on success or error.
        db.close()


@contextmanager
def storage_errors(db: Session) -> Iterator[None]:
    """
    Rolls back and re-raises any SQLAlchemy failure inside the block as
    StorageError, keeping the driver's message.
    """
    try:
        yield
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Storage error: {e}")
        raise StorageError(str(e)) from e

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine, text
from sqlalchemy.orm import Session, sessionmaker
from app.core.config import settings

logger = logging.getLogger(__name__)

_db_url = str(settings.DATABASE_URL)
logger.info("Using DATABASE_URL: %s...", _db_url[:30])

_connect_args = {"check_same_thread": False} if _db_url.startswith("sqlite") else {}

engine = create_engine(
    _db_url,
    pool_pre_ping=True,
    pool_recycle=1800,
    echo=False,
    connect_args=_connect_args,
)

SessionLocal = sessionmaker(engine, expire_on_commit=False, class_=Session)


def get_db() -> Iterator[Session]:
    """
    Dependency that provides one database session per request.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def transaction(db: Session) -> Iterator[Session]:
    """
    Run the enclosed statements as one unit: commit on success,
    roll back and re-raise on any error.
    """
    try:
        yield db
        db.commit()
    except Exception:
        logger.warning("Rolling back transaction")
        db.rollback()
        raise


def ping(db: Session) -> bool:
    """
    Connectivity probe for health checks. Returns False instead of raising.
    """
    try:
        db.execute(text("SELECT 1")).scalar()
        return True
    except Exception as e:
        logger.error("Database connection test failed: %s", e)
        return False

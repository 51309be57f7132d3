import logging
from sqlalchemy.engine import Engine
from sqlalchemy.exc import OperationalError
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_fixed
from app.db.models import Base

logger = logging.getLogger(__name__)

@retry(
    retry=retry_if_exception_type(OperationalError),
    stop=stop_after_attempt(3),
    wait=wait_fixed(1),
    reraise=True,
)
def init_db(engine: Engine) -> None:
    """Create missing tables. Retries while the database is still coming up."""
    try:
        Base.metadata.create_all(engine)
        logger.info("Database tables initialized successfully")
    except OperationalError as e:
        logger.error("Failed to initialize database: %s", e)
        raise

if __name__ == "__main__":
    from app.db.session import engine
    init_db(engine)

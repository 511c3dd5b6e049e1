import logging

from sqlalchemy import text
from sqlalchemy.engine import Engine
from tenacity import retry, stop_after_attempt, wait_fixed

from database.models import Base

logger = logging.getLogger(__name__)


@retry(stop=stop_after_attempt(5), wait=wait_fixed(2), reraise=True)
def init_db(engine: Engine) -> None:
    """Create the matching tables, waiting for the database to come up."""
    logger.info("Initializing database...")
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))

        Base.metadata.create_all(bind=engine)
        logger.info("Tables created or verified.")

    except Exception as e:
        logger.error(f"Error initializing DB: {e}")
        raise

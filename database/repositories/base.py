import contextlib

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.exceptions import RepositoryException


class BaseRepository:
    def __init__(self, db: Session):
        self.db = db

    @property
    def dialect(self) -> str:
        return self.db.get_bind().dialect.name

    @contextlib.contextmanager
    def storage_errors(self, action: str):
        """Re-raise SQLAlchemy errors inside the block as RepositoryException."""
        try:
            yield
        except SQLAlchemyError as e:
            raise RepositoryException(f"Failed to {action}: {e}") from e

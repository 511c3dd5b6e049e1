import contextlib
import logging
from dataclasses import dataclass

from sqlalchemy.orm import Session, sessionmaker

from database.repositories import UserRepository, JobPostRepository, MatchRepository

logger = logging.getLogger(__name__)


@dataclass
class MatchingRepositories:
    """Repositories bound to one session."""
    session: Session
    profiles: UserRepository
    jobs: JobPostRepository
    matches: MatchRepository

    @classmethod
    def for_session(cls, session: Session) -> "MatchingRepositories":
        return cls(
            session=session,
            profiles=UserRepository(session),
            jobs=JobPostRepository(session),
            matches=MatchRepository(session),
        )


@contextlib.contextmanager
def matching_uow(session_factory: sessionmaker):
    """Per-unit-of-work transaction scope.

    Yields MatchingRepositories bound to a fresh Session. Commits on success,
    rolls back on exception, always closes.

    Usage:
        with matching_uow(SessionLocal) as repos:
            context = AppContext.build(config, repos.profiles, repos.jobs, repos.matches)
            context.recommend(user_id)
        # commit happens automatically on successful exit
    """
    session = session_factory()
    try:
        yield MatchingRepositories.for_session(session)
        session.commit()
    except Exception:
        logger.debug("Rolling back matching unit of work")
        session.rollback()
        raise
    finally:
        session.close()

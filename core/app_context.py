import contextlib
import logging
from dataclasses import dataclass
from typing import List, Optional, Union

from core.config_loader import AppConfig, LoggingConfig, get_matching_config, load_config
from core.interfaces import ProfileRepository, JobPostingRepository, MatchRecordRepository
from core.matcher.models import MatchFeedback
from core.recommender import RecommendationService, FeedbackService
from core.scorer import MatchScoringService, MatchScores, ScoredJob
from core.scout import CandidateScoutService, CandidateMatch

logger = logging.getLogger(__name__)


def configure_logging(config: Optional[LoggingConfig] = None) -> None:
    config = config or LoggingConfig()
    logging.basicConfig(
        level=getattr(logging, config.level.upper(), logging.INFO),
        format=config.format
    )


@dataclass
class AppContext:
    """Application context container that holds all wired services.

    Repositories are passed in, so the same wiring serves a SQLAlchemy
    unit of work (database.uow.matching_uow) or in-memory fakes in tests.
    """
    config: AppConfig
    scoring_service: MatchScoringService
    recommendation_service: RecommendationService
    feedback_service: FeedbackService
    scout_service: CandidateScoutService

    @classmethod
    def build(
        cls,
        config: AppConfig,
        profiles: ProfileRepository,
        jobs: JobPostingRepository,
        matches: MatchRecordRepository
    ) -> "AppContext":
        """Build an AppContext from config and repositories.

        Args:
            config: Loaded application configuration
            profiles: Job seeker profile storage
            jobs: Job posting storage
            matches: Match record storage

        Returns:
            Fully wired AppContext instance
        """
        matching = get_matching_config(config)

        return cls(
            config=config,
            scoring_service=MatchScoringService(profiles, jobs, matching.scorer),
            recommendation_service=RecommendationService(
                profiles,
                jobs,
                matches,
                scorer_config=matching.scorer,
                config=matching.recommendation
            ),
            feedback_service=FeedbackService(matches),
            scout_service=CandidateScoutService(profiles, matching.scout),
        )

    def compute_match(self, user_id: int, job_id: int) -> MatchScores:
        return self.scoring_service.compute_match(user_id, job_id)

    def recommend(self, user_id: int, limit: Optional[int] = None) -> List[ScoredJob]:
        return self.recommendation_service.recommend(user_id, limit=limit)

    def record_feedback(self, user_id: int, job_id: int, feedback: Union[MatchFeedback, str]) -> bool:
        return self.feedback_service.record_feedback(user_id, job_id, feedback)

    def scout(
        self,
        skills: List[str],
        experience_level: Optional[str] = None,
        location: Optional[str] = None
    ) -> List[CandidateMatch]:
        return self.scout_service.scout(skills, experience_level=experience_level, location=location)


def bootstrap(config_path: str = "config.yaml"):
    """Load config, configure logging and prepare the database.

    Returns:
        (AppConfig, sessionmaker) for use with matching_context()
    """
    from database.database import create_db_engine, create_session_factory
    from database.init_db import init_db

    config = load_config(config_path)
    configure_logging(config.logging)

    engine = create_db_engine(config.database.url)
    init_db(engine)
    return config, create_session_factory(engine)


@contextlib.contextmanager
def matching_context(config: AppConfig, session_factory):
    """Yield an AppContext bound to one database unit of work.

    Usage:
        config, session_factory = bootstrap()
        with matching_context(config, session_factory) as ctx:
            ctx.recommend(user_id)
    """
    from database.uow import matching_uow

    with matching_uow(session_factory) as repos:
        yield AppContext.build(config, repos.profiles, repos.jobs, repos.matches)

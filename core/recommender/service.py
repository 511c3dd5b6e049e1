#!/usr/bin/env python3
"""
Recommendation Service - ranks active job postings for a job seeker.

Scores the profile against every active posting, drops low-confidence
matches, sorts by match score and caches the kept scores as match records.
Caching is best-effort: a failed write is logged and the computed
recommendations are still returned.
"""

from datetime import datetime, timezone
from typing import List, Optional
import logging

from core.config_loader import RecommendationConfig, ScorerConfig
from core.exceptions import ValidationException
from core.interfaces import ProfileRepository, JobPostingRepository, MatchRecordRepository
from core.matcher.models import JobSeekerProfile, JobPosting, MatchRecord
from core.scorer.models import ScoredJob, MatchScores
from core.scorer.match_score import score_profile_against_job
from core.scorer.persistence import save_matches_best_effort

logger = logging.getLogger(__name__)

_OLDEST = datetime.min.replace(tzinfo=timezone.utc)


def _posted_at_key(job: JobPosting) -> datetime:
    posted_at = job.posted_at
    if posted_at is None:
        return _OLDEST
    if posted_at.tzinfo is None:
        return posted_at.replace(tzinfo=timezone.utc)
    return posted_at


def _apply_recommendation_policy(
    results: List[ScoredJob],
    policy: RecommendationConfig,
    limit: int
) -> List[ScoredJob]:
    """Keep scores above the floor, sort highest first, truncate to limit.

    The sort is stable, so equal scores keep the repository order.
    """
    kept = [r for r in results if r.match_score > policy.min_match_score]
    kept.sort(key=lambda r: r.match_score, reverse=True)
    return kept[:limit]


class RecommendationService:
    """
    Service for job recommendations.

    - recommend(): filtered, ranked, persisted recommendations
    - rank_jobs(): every posting scored and ranked, nothing persisted
    - get_saved_matches(): previously persisted records for a user
    """

    def __init__(
        self,
        profiles: ProfileRepository,
        jobs: JobPostingRepository,
        matches: MatchRecordRepository,
        scorer_config: Optional[ScorerConfig] = None,
        config: Optional[RecommendationConfig] = None
    ):
        self.profiles = profiles
        self.jobs = jobs
        self.matches = matches
        self.scorer_config = scorer_config or ScorerConfig()
        self.config = config or RecommendationConfig()

    def _get_jobseeker(self, user_id: int) -> Optional[JobSeekerProfile]:
        profile = self.profiles.get_profile(user_id)
        if profile is None:
            logger.info(f"No profile for user {user_id}")
            return None
        if not profile.is_jobseeker:
            logger.info(f"User {user_id} has role '{profile.role}', not a job seeker")
            return None
        return profile

    def _profile_ready(self, profile: JobSeekerProfile) -> bool:
        if self.config.require_complete_profile and not profile.is_complete():
            logger.info(f"User {profile.id} profile incomplete, skipping scoring")
            return False
        return True

    def score_jobs(self, profile: JobSeekerProfile, jobs: List[JobPosting]) -> List[ScoredJob]:
        return [
            ScoredJob(job=job, scores=score_profile_against_job(profile, job, self.scorer_config))
            for job in jobs
        ]

    def recommend(self, user_id: int, limit: Optional[int] = None) -> List[ScoredJob]:
        """
        Recommend active jobs for a job seeker.

        Args:
            user_id: Job seeker to recommend for
            limit: Maximum number of results (defaults to config.default_limit)

        Returns:
            ScoredJob list sorted by match_score, highest first. Empty when the
            user is unknown, not a job seeker, or (if configured) has an
            incomplete profile.

        Raises:
            ValidationException: If limit is not a positive integer
        """
        if limit is None:
            limit = self.config.default_limit
        if not isinstance(limit, int) or limit < 1:
            raise ValidationException(f"limit must be a positive integer, got {limit!r}")

        profile = self._get_jobseeker(user_id)
        if profile is None or not self._profile_ready(profile):
            return []

        active_jobs = self.jobs.get_active_jobs()
        if not active_jobs:
            logger.info("No active jobs found for recommendations")
            return []

        logger.info(f"Found {len(active_jobs)} active jobs for recommendations")

        scored = self.score_jobs(profile, active_jobs)
        recommendations = _apply_recommendation_policy(scored, self.config, limit)

        logger.info(
            f"Filtered to {len(recommendations)} recommendations "
            f"with score > {self.config.min_match_score:g}"
        )

        saved = save_matches_best_effort(user_id, recommendations, self.matches)
        if saved < len(recommendations):
            logger.warning(f"Cached {saved}/{len(recommendations)} matches for user {user_id}")

        return recommendations

    def rank_jobs(self, user_id: int, jobs: Optional[List[JobPosting]] = None) -> List[ScoredJob]:
        """
        Score every posting for a user without filtering or persisting.

        Equal scores are ordered newest first. When the user is not a job
        seeker, or (if configured) has an incomplete profile, the postings are
        returned with zero scores in their given order.
        """
        if jobs is None:
            jobs = self.jobs.get_active_jobs()

        profile = self._get_jobseeker(user_id)
        if profile is None or not self._profile_ready(profile):
            return [ScoredJob(job=job, scores=MatchScores.zero()) for job in jobs]

        scored = self.score_jobs(profile, jobs)
        scored.sort(key=lambda r: _posted_at_key(r.job), reverse=True)
        scored.sort(key=lambda r: r.match_score, reverse=True)
        return scored

    def get_saved_matches(self, user_id: int) -> List[MatchRecord]:
        return self.matches.get_matches_for_user(user_id)

#!/usr/bin/env python3
"""
Scoring Service - pairwise match scores looked up by user and job id.
"""

from typing import Optional
import logging

from core.config_loader import ScorerConfig
from core.interfaces import ProfileRepository, JobPostingRepository
from core.matcher.models import JobSeekerProfile, JobPosting
from core.scorer.models import MatchScores
from core.scorer.match_score import score_profile_against_job

logger = logging.getLogger(__name__)


class MatchScoringService:
    """
    Resolves a profile and a posting from storage and scores them.

    Missing records never raise: the caller gets an all-zero score.
    """

    def __init__(
        self,
        profiles: ProfileRepository,
        jobs: JobPostingRepository,
        config: Optional[ScorerConfig] = None
    ):
        self.profiles = profiles
        self.jobs = jobs
        self.config = config or ScorerConfig()

    def compute_match(self, user_id: int, job_id: int) -> MatchScores:
        profile = self.profiles.get_profile(user_id)
        job = self.jobs.get_job(job_id)

        if profile is None or job is None:
            logger.debug(f"Cannot score user {user_id} against job {job_id}: record not found")
            return MatchScores.zero()

        return self.score(profile, job)

    def score(self, profile: JobSeekerProfile, job: JobPosting) -> MatchScores:
        return score_profile_against_job(profile, job, self.config)

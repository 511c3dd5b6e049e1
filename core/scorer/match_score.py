#!/usr/bin/env python3
"""
Pairwise Match Score - job seeker profile vs. job posting.

    skill_match    = overlap(profile.skills, job text)
    role_match     = overlap(profile.desired_roles, title + category + job text)
    location_match = 0 (all postings share one service area)
    match_score    = round(skill_weight * skill_match + role_weight * role_match)
"""

import logging

from core.config_loader import ScorerConfig
from core.matcher.models import JobSeekerProfile, JobPosting
from core.matcher.tokenizer import tokenize
from core.scorer.models import MatchScores
from core.scorer.overlap import (
    build_job_text,
    build_role_text,
    calculate_overlap_score,
)
from core.utils import round_half_up, clamp_score

logger = logging.getLogger(__name__)


def calculate_match_score(skill_match: int, role_match: int, config: ScorerConfig) -> int:
    blended = config.skill_weight * skill_match + config.role_weight * role_match
    return int(clamp_score(round_half_up(blended), config.max_score))


def score_profile_against_job(
    profile: JobSeekerProfile,
    job: JobPosting,
    config: ScorerConfig
) -> MatchScores:
    """Compute the four sub-scores for one profile and one posting."""
    job_text = build_job_text(job)

    skill_match = calculate_overlap_score(tokenize(profile.skills), job_text, config)
    role_match = calculate_overlap_score(
        tokenize(profile.desired_roles),
        build_role_text(job, job_text),
        config
    )

    scores = MatchScores(
        match_score=calculate_match_score(skill_match, role_match, config),
        skill_match=skill_match,
        location_match=0,
        role_match=role_match,
    )
    logger.debug(
        f"User {profile.id} / job {job.id}: skill={skill_match}, "
        f"role={role_match}, overall={scores.match_score}"
    )
    return scores

#!/usr/bin/env python3
"""
Persistence Operations - caching computed scores as match records.

Writes go through MatchRecordRepository.upsert_match, so re-running a
recommendation overwrites the score fields of an existing (user_id, job_id)
record instead of creating a second one.
"""

import logging
from typing import Iterable

from core.interfaces import MatchRecordRepository
from core.matcher.models import MatchRecord
from core.scorer.models import ScoredJob

logger = logging.getLogger(__name__)


def save_match(user_id: int, scored: ScoredJob, repo: MatchRecordRepository) -> MatchRecord:
    """
    Upsert the match record for one scored job.

    Args:
        user_id: Job seeker the scores were computed for
        scored: ScoredJob carrying the posting and its scores
        repo: MatchRecordRepository to write through

    Returns:
        MatchRecord as stored
    """
    record = repo.upsert_match(scored.scores.to_record(user_id, scored.job_id))
    logger.debug(
        f"Saved match for user {user_id}, job {scored.job_id}: "
        f"skill={record.skill_match:.0f}, role={record.role_match:.0f}, overall={record.match_score:.0f}"
    )
    return record


def save_matches_best_effort(
    user_id: int,
    scored_jobs: Iterable[ScoredJob],
    repo: MatchRecordRepository
) -> int:
    """
    Upsert a record for every scored job, logging and skipping failures.

    Returns:
        Number of records written
    """
    saved = 0
    for scored in scored_jobs:
        try:
            save_match(user_id, scored, repo)
            saved += 1
        except Exception as e:
            logger.error(f"Error storing match for user {user_id}, job {scored.job_id}: {e}", exc_info=True)
    return saved

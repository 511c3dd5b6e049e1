#!/usr/bin/env python3
"""
Scoring Module - Pairwise profile/job scoring.

Public API:
- MatchScoringService: resolves records by id and scores them
- score_profile_against_job: pure scoring function
- MatchScores, ScoredJob: dataclasses for score results

Layout:

- models.py: Data structures (MatchScores, ScoredJob)
- overlap.py: Phrase/word overlap between profile text and job text
- match_score.py: Skill, role and blended match score
- persistence.py: Upserting scores as match records
- service.py: MatchScoringService
"""

from core.scorer.models import MatchScores, ScoredJob
from core.scorer.match_score import score_profile_against_job
from core.scorer.service import MatchScoringService

__all__ = ['MatchScoringService', 'MatchScores', 'ScoredJob', 'score_profile_against_job']

#!/usr/bin/env python3
"""
Scoring Models - Data structures for scoring results.
"""

from typing import Dict, Any
from dataclasses import dataclass, field

from core.matcher.models import JobPosting, MatchRecord


@dataclass(frozen=True)
class MatchScores:
    """Pairwise profile/job scores, each in [0, 100]."""
    match_score: int = 0
    skill_match: int = 0
    location_match: int = 0  # kept for the persisted shape; never computed
    role_match: int = 0

    @classmethod
    def zero(cls) -> "MatchScores":
        return cls()

    def to_record(self, user_id: int, job_id: int) -> MatchRecord:
        return MatchRecord(
            user_id=user_id,
            job_id=job_id,
            match_score=self.match_score,
            skill_match=self.skill_match,
            location_match=self.location_match,
            role_match=self.role_match,
        )

    def to_dict(self) -> Dict[str, int]:
        return {
            'matchScore': self.match_score,
            'skillMatch': self.skill_match,
            'locationMatch': self.location_match,
            'roleMatch': self.role_match,
        }


@dataclass
class ScoredJob:
    """A job posting with the scores computed for one user."""
    job: JobPosting
    scores: MatchScores = field(default_factory=MatchScores)

    @property
    def job_id(self) -> int:
        return self.job.id

    @property
    def match_score(self) -> int:
        return self.scores.match_score

    def to_dict(self) -> Dict[str, Any]:
        """Posting fields with the scores attached, for display."""
        data = self.job.to_dict()
        data.update(self.scores.to_dict())
        return data

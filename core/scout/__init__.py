"""
Scout Module - employer-facing candidate search.

Public API:
- CandidateScoutService: ranks job seekers against a requested skill set
- CandidateMatch, ScoutRequest: result and request types
"""

from core.scout.models import CandidateMatch, ScoutRequest
from core.scout.scoring import score_candidate
from core.scout.service import CandidateScoutService

__all__ = ['CandidateScoutService', 'CandidateMatch', 'ScoutRequest', 'score_candidate']

#!/usr/bin/env python3
"""
Candidate Scout Service - ranks job seekers for an employer's skill search.
"""

import logging
from typing import List, Optional

from pydantic import ValidationError

from core.config_loader import ScoutConfig
from core.exceptions import InvalidScoutRequestError
from core.interfaces import ProfileRepository
from core.scout.models import ScoutRequest, CandidateMatch
from core.scout.scoring import score_candidate

logger = logging.getLogger(__name__)


def _validation_message(error: ValidationError) -> str:
    messages = []
    for detail in error.errors():
        field = ".".join(str(part) for part in detail.get('loc', ()))
        messages.append(f"{field}: {detail.get('msg')}" if field else detail.get('msg', ''))
    return "; ".join(messages)


class CandidateScoutService:
    """Scores every active job seeker against a requested skill set."""

    def __init__(self, profiles: ProfileRepository, config: Optional[ScoutConfig] = None):
        self.profiles = profiles
        self.config = config or ScoutConfig()

    def build_request(
        self,
        skills,
        experience_level: Optional[str] = None,
        location: Optional[str] = None
    ) -> ScoutRequest:
        """Validate raw scout input.

        Raises:
            InvalidScoutRequestError: If skills is not a non-empty list of strings
        """
        try:
            return ScoutRequest(skills=skills, experience_level=experience_level, location=location)
        except ValidationError as e:
            raise InvalidScoutRequestError(_validation_message(e)) from e

    def scout(
        self,
        skills: List[str],
        experience_level: Optional[str] = None,
        location: Optional[str] = None
    ) -> List[CandidateMatch]:
        """
        Find job seekers matching the requested skills.

        Args:
            skills: Non-empty list of skills to search for
            experience_level: Optional level that earns a bonus on exact match
            location: Accepted for compatibility; not used in scoring

        Returns:
            Candidates with at least one matched phrase, highest match_score first

        Raises:
            InvalidScoutRequestError: If skills is empty or not a list of strings
        """
        request = self.build_request(skills, experience_level, location)
        return self.scout_request(request)

    def scout_request(self, request: ScoutRequest) -> List[CandidateMatch]:
        candidates = self.profiles.get_active_jobseekers_with_skills()
        logger.info(f"Scouting {len(candidates)} candidates for skills: {', '.join(request.skills)}")

        results = []
        for profile in candidates:
            match = score_candidate(
                profile,
                request.skills,
                self.config,
                experience_level=request.experience_level
            )
            if match.matching_skills:
                results.append(match)

        results.sort(key=lambda m: m.match_score, reverse=True)
        logger.info(f"Found {len(results)} matching candidates")
        return results

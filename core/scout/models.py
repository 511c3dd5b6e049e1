#!/usr/bin/env python3
"""
Scout Models - request and result types for candidate scouting.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any

from pydantic import BaseModel, field_validator

from core.matcher.models import JobSeekerProfile


class ScoutRequest(BaseModel):
    """Employer search for candidates with a set of skills."""
    skills: List[str]
    experience_level: Optional[str] = None
    location: Optional[str] = None  # accepted, not used in scoring

    @field_validator('skills')
    @classmethod
    def normalize_skills(cls, value: List[str]) -> List[str]:
        if not value:
            raise ValueError("At least one skill is required")
        # Blank entries are kept so they still count towards the requested total
        return [skill.strip().lower() for skill in value]

    @field_validator('experience_level')
    @classmethod
    def blank_experience_is_none(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            return None
        return value


@dataclass
class CandidateMatch:
    """A scouted job seeker with the evidence that matched the search."""
    profile: JobSeekerProfile
    match_score: int = 0
    matching_skills: List[str] = field(default_factory=list)
    skill_match_score: int = 0
    experience_bonus: int = 0

    @property
    def user_id(self) -> int:
        return self.profile.id

    def to_dict(self) -> Dict[str, Any]:
        profile = self.profile
        return {
            'id': profile.id,
            'firstName': profile.first_name,
            'lastName': profile.last_name,
            'email': profile.email,
            'phone': profile.phone,
            'address': profile.address,
            'skills': profile.skills,
            'desiredRoles': profile.desired_roles,
            'experienceLevel': profile.experience_level,
            'preferredLocation': profile.preferred_location,
            'matchScore': self.match_score,
            'matchingSkills': list(self.matching_skills),
        }

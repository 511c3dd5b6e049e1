#!/usr/bin/env python3
"""
Matcher Models - Data structures for matching.

Plain value types handed between the repositories and the scoring services,
so that scoring never touches ORM objects or an open session.
"""

from dataclasses import dataclass, asdict
from datetime import datetime
from enum import Enum
from typing import Optional, Dict, Any

JOBSEEKER_ROLE = "jobseeker"


class MatchFeedback(str, Enum):
    """User reaction to a recommended job."""
    THUMBS_UP = "thumbs_up"
    THUMBS_DOWN = "thumbs_down"


@dataclass
class JobSeekerProfile:
    """Job seeker attributes read by the matching engine."""
    id: int
    role: str = JOBSEEKER_ROLE
    skills: Optional[str] = None  # comma-separated phrases
    desired_roles: Optional[str] = None  # comma-separated phrases
    experience_level: Optional[str] = None  # e.g. Entry / Mid / Senior
    preferred_location: Optional[str] = None
    is_active: bool = True

    # Contact details, only used when presenting scouted candidates
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: Optional[str] = None
    address: Optional[str] = None

    @property
    def is_jobseeker(self) -> bool:
        return self.role == JOBSEEKER_ROLE

    def is_complete(self) -> bool:
        """True when every attribute used for recommendations is filled in."""
        return all([
            self.skills,
            self.desired_roles,
            self.experience_level,
            self.preferred_location,
        ])


@dataclass
class JobPosting:
    """Job posting attributes read by the matching engine."""
    id: int
    title: str
    company: str = ""
    description: str = ""
    requirements: Optional[str] = None
    category: str = ""
    required_skills: Optional[str] = None
    benefits: Optional[str] = None
    location: str = ""
    is_active: bool = True
    is_featured: bool = False
    posted_at: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['posted_at'] = self.posted_at.isoformat() if self.posted_at else None
        return data


@dataclass
class MatchRecord:
    """Persisted score cache for one (user_id, job_id) pair."""
    user_id: int
    job_id: int
    match_score: float = 0.0
    skill_match: float = 0.0
    location_match: float = 0.0
    role_match: float = 0.0
    user_feedback: Optional[MatchFeedback] = None
    created_at: Optional[datetime] = None

    @property
    def key(self):
        return (self.user_id, self.job_id)

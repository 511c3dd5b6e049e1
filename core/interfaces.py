"""
Repository Interfaces - Abstract storage contracts used by the matching services.

The services receive these through their constructors. The SQLAlchemy
implementations live in database/repositories/; tests use in-memory fakes.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from core.matcher.models import JobSeekerProfile, JobPosting, MatchRecord, MatchFeedback


class ProfileRepository(ABC):
    """Read access to job seeker profiles."""

    @abstractmethod
    def get_profile(self, user_id: int) -> Optional[JobSeekerProfile]:
        """Return the profile for ``user_id`` or None if it does not exist."""
        pass

    @abstractmethod
    def get_active_jobseekers_with_skills(self) -> List[JobSeekerProfile]:
        """Return active job seekers whose skills field is not empty."""
        pass


class JobPostingRepository(ABC):
    """Read access to job postings."""

    @abstractmethod
    def get_job(self, job_id: int) -> Optional[JobPosting]:
        pass

    @abstractmethod
    def get_active_jobs(self) -> List[JobPosting]:
        """Return active postings, featured first, then newest first."""
        pass


class MatchRecordRepository(ABC):
    """Read and upsert access to persisted match records."""

    @abstractmethod
    def get_match(self, user_id: int, job_id: int) -> Optional[MatchRecord]:
        pass

    @abstractmethod
    def upsert_match(self, record: MatchRecord) -> MatchRecord:
        """
        Insert ``record`` or overwrite the score fields of the existing
        record with the same (user_id, job_id).

        user_feedback on an existing record is left untouched.
        """
        pass

    @abstractmethod
    def update_feedback(self, user_id: int, job_id: int, feedback: MatchFeedback) -> bool:
        """
        Set user_feedback on an existing record.

        Returns False without writing anything when no record exists.
        """
        pass

    @abstractmethod
    def get_matches_for_user(self, user_id: int) -> List[MatchRecord]:
        """Return the user's records ordered by match_score, highest first."""
        pass

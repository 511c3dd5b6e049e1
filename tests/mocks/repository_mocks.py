#!/usr/bin/env python3
"""
Test Mock Implementations - in-memory repositories for testing.

These fakes implement the interfaces in core/interfaces.py with plain dicts,
so the services can be exercised without a database.
"""
from dataclasses import replace
from typing import Dict, List, Optional, Set, Tuple

from core.interfaces import ProfileRepository, JobPostingRepository, MatchRecordRepository
from core.matcher.models import JOBSEEKER_ROLE, JobSeekerProfile, JobPosting, MatchRecord, MatchFeedback


class InMemoryProfileRepository(ProfileRepository):
    def __init__(self, profiles: Optional[List[JobSeekerProfile]] = None):
        self.profiles: Dict[int, JobSeekerProfile] = {p.id: p for p in profiles or []}

    def add(self, profile: JobSeekerProfile) -> JobSeekerProfile:
        self.profiles[profile.id] = profile
        return profile

    def get_profile(self, user_id: int) -> Optional[JobSeekerProfile]:
        return self.profiles.get(user_id)

    def get_active_jobseekers_with_skills(self) -> List[JobSeekerProfile]:
        return [
            p for p in self.profiles.values()
            if p.role == JOBSEEKER_ROLE and p.is_active and p.skills
        ]


class InMemoryJobPostingRepository(JobPostingRepository):
    def __init__(self, jobs: Optional[List[JobPosting]] = None):
        self.jobs: Dict[int, JobPosting] = {j.id: j for j in jobs or []}

    def add(self, job: JobPosting) -> JobPosting:
        self.jobs[job.id] = job
        return job

    def get_job(self, job_id: int) -> Optional[JobPosting]:
        return self.jobs.get(job_id)

    def get_active_jobs(self) -> List[JobPosting]:
        # Insertion order stands in for "featured first, newest first"
        return [j for j in self.jobs.values() if j.is_active]


class InMemoryMatchRecordRepository(MatchRecordRepository):
    """
    Match store keyed by (user_id, job_id).

    ``fail_on`` holds keys whose upsert raises, to simulate storage errors.
    ``calls`` records every method invoked, in order.
    """

    def __init__(self, fail_on: Optional[Set[Tuple[int, int]]] = None):
        self.records: Dict[Tuple[int, int], MatchRecord] = {}
        self.fail_on = fail_on or set()
        self.calls: List[str] = []

    def get_match(self, user_id: int, job_id: int) -> Optional[MatchRecord]:
        self.calls.append('get_match')
        record = self.records.get((user_id, job_id))
        return replace(record) if record else None

    def upsert_match(self, record: MatchRecord) -> MatchRecord:
        self.calls.append('upsert_match')
        if record.key in self.fail_on:
            raise RuntimeError(f"simulated write failure for {record.key}")

        existing = self.records.get(record.key)
        if existing is None:
            stored = replace(record, user_feedback=None)
        else:
            stored = replace(
                existing,
                match_score=record.match_score,
                skill_match=record.skill_match,
                location_match=record.location_match,
                role_match=record.role_match,
            )
        self.records[record.key] = stored
        return replace(stored)

    def update_feedback(self, user_id: int, job_id: int, feedback: MatchFeedback) -> bool:
        self.calls.append('update_feedback')
        existing = self.records.get((user_id, job_id))
        if existing is None:
            return False
        existing.user_feedback = MatchFeedback(feedback)
        return True

    def get_matches_for_user(self, user_id: int) -> List[MatchRecord]:
        self.calls.append('get_matches_for_user')
        records = [replace(r) for r in self.records.values() if r.user_id == user_id]
        records.sort(key=lambda r: (-r.match_score, r.job_id))
        return records

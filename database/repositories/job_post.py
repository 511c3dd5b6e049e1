import logging
from typing import List, Optional

from sqlalchemy import select

from core.interfaces import JobPostingRepository
from core.matcher.models import JobPosting
from database.models import JobPost
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


def to_posting(job: JobPost) -> JobPosting:
    return JobPosting(
        id=job.id,
        title=job.title,
        company=job.company or "",
        description=job.description or "",
        requirements=job.requirements,
        category=job.category or "",
        required_skills=job.required_skills,
        benefits=job.benefits,
        location=job.location or "",
        is_active=bool(job.is_active),
        is_featured=bool(job.is_featured),
        posted_at=job.posted_at,
    )


class JobPostRepository(BaseRepository, JobPostingRepository):
    def get_by_id(self, job_id: int) -> Optional[JobPost]:
        stmt = select(JobPost).where(JobPost.id == job_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def get_job(self, job_id: int) -> Optional[JobPosting]:
        job = self.get_by_id(job_id)
        if job is None:
            return None
        return to_posting(job)

    def get_active_jobs(self) -> List[JobPosting]:
        stmt = select(JobPost).where(
            JobPost.is_active.is_(True)
        ).order_by(
            JobPost.is_featured.desc(),
            JobPost.posted_at.desc(),
            JobPost.id.desc()
        )
        jobs = self.db.execute(stmt).scalars().all()
        return [to_posting(j) for j in jobs]

"""
Row factories for database tests.
"""

from datetime import datetime

from database.models import User, JobPost


def add_user(session, user_id: int, **overrides) -> User:
    fields = dict(
        id=user_id,
        email=f"user{user_id}@example.com",
        first_name="Maria",
        last_name="Santos",
        role="jobseeker",
        skills="Web Development, JavaScript, React",
        desired_roles="Frontend Developer",
        experience_level="Mid",
        preferred_location="Any Location",
        is_active=True,
    )
    fields.update(overrides)
    user = User(**fields)
    session.add(user)
    session.flush()
    return user


def add_job(session, job_id: int, **overrides) -> JobPost:
    fields = dict(
        id=job_id,
        title="Frontend Developer",
        company="Acme",
        location="Pili",
        category="Information Technology",
        description="Build customer facing web pages.",
        required_skills="Web Development, JavaScript, React, HTML, CSS",
        is_active=True,
        is_featured=False,
        posted_at=datetime(2024, 1, job_id % 28 + 1),
    )
    fields.update(overrides)
    job = JobPost(**fields)
    session.add(job)
    session.flush()
    return job

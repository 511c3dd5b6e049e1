from sqlalchemy import Column, Text, TIMESTAMP, ForeignKey, Integer, Float, UniqueConstraint, Index, CheckConstraint, func
from sqlalchemy.orm import relationship

from .base import Base


class JobMatch(Base):
    """
    Stores the cached match scores between a job seeker and a job post.

    Tracks:
    - Overall match score (50/50 blend of skill and role match)
    - Sub-scores (skill, role; location is kept but always 0)
    - Optional thumbs up / thumbs down feedback from the job seeker
    """
    __tablename__ = 'job_match'

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    job_id = Column(Integer, ForeignKey('job_post.id', ondelete='CASCADE'), nullable=False)

    match_score = Column(Float, nullable=False)
    skill_match = Column(Float, nullable=False, default=0)
    location_match = Column(Float, nullable=False, default=0)
    role_match = Column(Float, nullable=False, default=0)

    user_feedback = Column(Text, nullable=True)  # thumbs_up|thumbs_down
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())

    job_post = relationship("JobPost", back_populates="matches")

    __table_args__ = (
        UniqueConstraint('user_id', 'job_id', name='uq_job_match_user_job'),
        CheckConstraint(
            "user_feedback IS NULL OR user_feedback IN ('thumbs_up', 'thumbs_down')",
            name='ck_job_match_feedback'
        ),
        Index('idx_job_match_user', 'user_id'),
        Index('idx_job_match_score', 'match_score'),
    )

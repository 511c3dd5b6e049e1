from sqlalchemy import Column, Integer, Text, TIMESTAMP, Boolean, Index, func
from sqlalchemy.orm import relationship

from .base import Base


class JobPost(Base):
    __tablename__ = 'job_post'

    id = Column(Integer, primary_key=True, autoincrement=True)

    # Core Identity
    title = Column(Text, nullable=False)
    company = Column(Text, nullable=False)
    location = Column(Text, nullable=False, default='')
    category = Column(Text, nullable=False, default='')

    # === Content Fields ===
    description = Column(Text, nullable=False, default='')
    requirements = Column(Text)
    required_skills = Column(Text)  # CSV or raw string
    benefits = Column(Text)

    # State Flags
    is_active = Column(Boolean, nullable=False, default=True)
    is_featured = Column(Boolean, nullable=False, default=False)

    posted_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    matches = relationship("JobMatch", back_populates="job_post", cascade="all, delete-orphan", passive_deletes=True)

    __table_args__ = (
        Index('idx_job_post_active', 'is_active'),
        Index('idx_job_post_posted', 'posted_at'),
    )

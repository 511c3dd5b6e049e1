from sqlalchemy import Column, Text, Boolean, Integer, TIMESTAMP, func, Index

from .base import Base


class User(Base):
    """
    User account with the profile fields read by the matching engine.
    """
    __tablename__ = 'users'

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(Text, nullable=False, unique=True)
    first_name = Column(Text, nullable=False, default='')
    last_name = Column(Text, nullable=False, default='')
    role = Column(Text, nullable=False, default='jobseeker')  # jobseeker|employer|admin
    phone = Column(Text)
    address = Column(Text)

    # Job seeker profile (free text, comma-separated)
    skills = Column(Text)
    desired_roles = Column(Text)
    experience_level = Column(Text)
    preferred_location = Column(Text)

    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    __table_args__ = (
        Index('idx_users_role_active', 'role', 'is_active'),
    )

import logging
from typing import List, Optional

from sqlalchemy import select

from core.interfaces import ProfileRepository
from core.matcher.models import JOBSEEKER_ROLE, JobSeekerProfile
from database.models import User
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


def to_profile(user: User) -> JobSeekerProfile:
    return JobSeekerProfile(
        id=user.id,
        role=user.role,
        skills=user.skills,
        desired_roles=user.desired_roles,
        experience_level=user.experience_level,
        preferred_location=user.preferred_location,
        is_active=bool(user.is_active),
        first_name=user.first_name or "",
        last_name=user.last_name or "",
        email=user.email or "",
        phone=user.phone,
        address=user.address,
    )


class UserRepository(BaseRepository, ProfileRepository):
    def get_by_id(self, user_id: int) -> Optional[User]:
        stmt = select(User).where(User.id == user_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def get_profile(self, user_id: int) -> Optional[JobSeekerProfile]:
        user = self.get_by_id(user_id)
        if user is None:
            return None
        return to_profile(user)

    def get_active_jobseekers_with_skills(self) -> List[JobSeekerProfile]:
        stmt = select(User).where(
            User.role == JOBSEEKER_ROLE,
            User.is_active.is_(True),
            User.skills.isnot(None),
            User.skills != ''
        ).order_by(User.id)
        users = self.db.execute(stmt).scalars().all()
        return [to_profile(u) for u in users]

from database.repositories.base import BaseRepository
from database.repositories.user import UserRepository
from database.repositories.job_post import JobPostRepository
from database.repositories.match import MatchRepository

__all__ = [
    'BaseRepository',
    'UserRepository',
    'JobPostRepository',
    'MatchRepository',
]

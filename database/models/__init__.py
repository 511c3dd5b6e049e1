from .base import Base
from .user import User
from .job import JobPost
from .match import JobMatch

__all__ = [
    'Base',
    'User',
    'JobPost',
    'JobMatch',
]

"""Repository layer - data access abstraction."""

from src.cobrew.repositories.base import BaseRepository
from src.cobrew.repositories.project import (
    ApplicationRepository,
    MessageRepository,
    ProjectFilters,
    ProjectRepository,
    ThreadActivity,
)
from src.cobrew.repositories.user import ProfileRepository, UserRepository

__all__ = [
    "ApplicationRepository",
    "BaseRepository",
    "MessageRepository",
    "ProfileRepository",
    "ProjectFilters",
    "ProjectRepository",
    "ThreadActivity",
    "UserRepository",
]

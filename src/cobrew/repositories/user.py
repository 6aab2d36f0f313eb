"""Repositories for User and Profile entities."""

from collections.abc import Iterable
from uuid import UUID

from sqlmodel import select

from src.cobrew.models import Profile, User
from src.cobrew.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for User entity."""

    model = User

    async def get_by_email(self, email: str) -> User | None:
        """Get user by email address."""
        result = await self.session.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()


class ProfileRepository(BaseRepository[Profile]):
    """Repository for Profile entity (one per user)."""

    model = Profile

    async def get_by_user_id(self, user_id: UUID) -> Profile | None:
        result = await self.session.execute(select(Profile).where(Profile.user_id == user_id))
        return result.scalar_one_or_none()

    async def get_many_by_user_ids(self, user_ids: Iterable[UUID]) -> dict[UUID, Profile]:
        """Profiles keyed by user id."""
        unique_ids = set(user_ids)
        if not unique_ids:
            return {}
        result = await self.session.execute(
            select(Profile).where(Profile.user_id.in_(unique_ids))  # type: ignore[attr-defined]
        )
        return {profile.user_id: profile for profile in result.scalars().all()}

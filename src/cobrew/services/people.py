"""Display-name lookup used to decorate project, application and message views."""

from collections.abc import Iterable
from uuid import UUID

from src.cobrew.models import Profile, User
from src.cobrew.repositories import ProfileRepository, UserRepository
from src.cobrew.schemas.user import PersonSummary

UNKNOWN_USER_NAME = "Unknown User"


def build_summary(user_id: UUID, user: User | None, profile: Profile | None) -> PersonSummary:
    """Profile name, falling back to email, falling back to a placeholder."""
    if user is None:
        return PersonSummary(id=user_id, name=UNKNOWN_USER_NAME, avatar_url="")

    name = (profile.display_name if profile else None) or user.email or UNKNOWN_USER_NAME
    return PersonSummary(id=user.id, name=name, avatar_url=user.avatar_url or "")


class PeopleDirectory:
    """Batched account + profile lookups (two queries per call)."""

    def __init__(self, user_repo: UserRepository, profile_repo: ProfileRepository):
        self.user_repo = user_repo
        self.profile_repo = profile_repo

    async def summaries(self, user_ids: Iterable[UUID]) -> dict[UUID, PersonSummary]:
        ids = set(user_ids)
        users = await self.user_repo.get_many(ids)
        profiles = await self.profile_repo.get_many_by_user_ids(users.keys())
        return {
            user_id: build_summary(user_id, users.get(user_id), profiles.get(user_id))
            for user_id in ids
        }

    async def summary(self, user_id: UUID) -> PersonSummary:
        return (await self.summaries([user_id]))[user_id]

"""Profile reads and upserts."""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.cobrew.core.exceptions import NotFoundError
from src.cobrew.core.logging import get_logger
from src.cobrew.models import Profile, User
from src.cobrew.models.base import utc_now
from src.cobrew.repositories import ProfileRepository, UserRepository
from src.cobrew.schemas.profile import ProfileRead, ProfileUpdate

logger = get_logger(__name__)

# Fields of ProfileUpdate that live on the account rather than the profile
_ACCOUNT_FIELDS = {"avatar_url"}


def build_profile_read(user: User, profile: Profile) -> ProfileRead:
    return ProfileRead(
        id=user.id,
        email=user.email,
        avatar_url=user.avatar_url,
        first_name=profile.first_name,
        last_name=profile.last_name,
        title=profile.title,
        bio=profile.bio,
        location=profile.location,
        education=profile.education,
        experience=profile.experience,
        skills=list(profile.skills or []),
        industry=profile.industry,
        github_url=profile.github_url,
        linkedin_url=profile.linkedin_url,
        created_at=user.created_at,
    )


class ProfileService:
    def __init__(
        self,
        user_repo: UserRepository,
        profile_repo: ProfileRepository,
        session: AsyncSession,
    ):
        self.user_repo = user_repo
        self.profile_repo = profile_repo
        self.session = session

    async def get(self, user_id: UUID) -> ProfileRead:
        """Account and profile fields of ``user_id``.

        Raises:
            NotFoundError: If the account or its profile does not exist.
        """
        user = await self.user_repo.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")

        profile = await self.profile_repo.get_by_user_id(user_id)
        if profile is None:
            raise NotFoundError("Profile not found")

        return build_profile_read(user, profile)

    async def upsert(self, user_id: UUID, data: ProfileUpdate) -> ProfileRead:
        """Apply the fields present in ``data``, creating the profile if needed."""
        user = await self.user_repo.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")

        now = utc_now()
        update_data = data.model_dump(exclude_unset=True)

        if "avatar_url" in update_data:
            user.avatar_url = update_data["avatar_url"]
            user.updated_at = now

        profile = await self.profile_repo.get_by_user_id(user_id)
        if profile is None:
            profile = Profile(user_id=user_id)
            self.profile_repo.add(profile)

        for field, value in update_data.items():
            if field in _ACCOUNT_FIELDS:
                continue
            if field == "skills" and value is None:
                value = []
            setattr(profile, field, value)
        profile.updated_at = now

        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info("profile updated", user_id=str(user_id))
        return build_profile_read(user, profile)

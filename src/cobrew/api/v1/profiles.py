"""Profile endpoints."""

from uuid import UUID

from fastapi import APIRouter

from src.cobrew.api.dependencies import CurrentCaller, ProfileServiceDep
from src.cobrew.schemas.profile import ProfileRead, ProfileUpdate

router = APIRouter(prefix="/profiles", tags=["profiles"])


@router.get(
    "/me",
    response_model=ProfileRead,
    summary="Get own profile",
    responses={404: {"description": "Profile not found"}},
)
async def get_my_profile(caller: CurrentCaller, service: ProfileServiceDep) -> ProfileRead:
    return await service.get(caller.user_id)


@router.get(
    "/{user_id}",
    response_model=ProfileRead,
    summary="Get profile",
    description="Public profile of any account.",
    responses={404: {"description": "User or profile not found"}},
)
async def get_profile(user_id: UUID, service: ProfileServiceDep) -> ProfileRead:
    return await service.get(user_id)


@router.put(
    "",
    response_model=ProfileRead,
    summary="Create or update own profile",
    description="Fields omitted from the body keep their stored value. "
    "`avatarUrl` updates the account avatar.",
)
async def upsert_profile(
    data: ProfileUpdate, caller: CurrentCaller, service: ProfileServiceDep
) -> ProfileRead:
    return await service.upsert(caller.user_id, data)

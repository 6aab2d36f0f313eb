"""Repository factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.cobrew.api.dependencies.db import DBSession
from src.cobrew.repositories import (
    ApplicationRepository,
    MessageRepository,
    ProfileRepository,
    ProjectRepository,
    UserRepository,
)


def get_user_repository(session: DBSession) -> UserRepository:
    return UserRepository(session)


def get_profile_repository(session: DBSession) -> ProfileRepository:
    return ProfileRepository(session)


def get_project_repository(session: DBSession) -> ProjectRepository:
    return ProjectRepository(session)


def get_application_repository(session: DBSession) -> ApplicationRepository:
    return ApplicationRepository(session)


def get_message_repository(session: DBSession) -> MessageRepository:
    return MessageRepository(session)


UserRepo = Annotated[UserRepository, Depends(get_user_repository)]
ProfileRepo = Annotated[ProfileRepository, Depends(get_profile_repository)]
ProjectRepo = Annotated[ProjectRepository, Depends(get_project_repository)]
ApplicationRepo = Annotated[ApplicationRepository, Depends(get_application_repository)]
MessageRepo = Annotated[MessageRepository, Depends(get_message_repository)]

"""Service factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.cobrew.api.dependencies.db import DBSession
from src.cobrew.api.dependencies.repositories import (
    ApplicationRepo,
    MessageRepo,
    ProfileRepo,
    ProjectRepo,
    UserRepo,
)
from src.cobrew.core.config import get_settings
from src.cobrew.services import (
    ApplicationService,
    AuthService,
    MessagingService,
    PeopleDirectory,
    ProfileService,
    ProjectService,
)


def get_people_directory(user_repo: UserRepo, profile_repo: ProfileRepo) -> PeopleDirectory:
    return PeopleDirectory(user_repo, profile_repo)


People = Annotated[PeopleDirectory, Depends(get_people_directory)]


def get_auth_service(
    user_repo: UserRepo, profile_repo: ProfileRepo, session: DBSession
) -> AuthService:
    return AuthService(user_repo, profile_repo, session)


def get_profile_service(
    user_repo: UserRepo, profile_repo: ProfileRepo, session: DBSession
) -> ProfileService:
    return ProfileService(user_repo, profile_repo, session)


def get_project_service(
    project_repo: ProjectRepo,
    application_repo: ApplicationRepo,
    message_repo: MessageRepo,
    people: People,
    session: DBSession,
) -> ProjectService:
    return ProjectService(project_repo, application_repo, message_repo, people, session)


def get_application_service(
    application_repo: ApplicationRepo,
    project_repo: ProjectRepo,
    people: People,
    session: DBSession,
) -> ApplicationService:
    """Get application service; stranger access mode comes from settings."""
    return ApplicationService(
        application_repo,
        project_repo,
        people,
        session,
        opaque_access=get_settings().opaque_application_access,
    )


def get_messaging_service(
    project_repo: ProjectRepo,
    application_repo: ApplicationRepo,
    message_repo: MessageRepo,
    people: People,
    session: DBSession,
) -> MessagingService:
    return MessagingService(project_repo, application_repo, message_repo, people, session)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
ProfileServiceDep = Annotated[ProfileService, Depends(get_profile_service)]
ProjectServiceDep = Annotated[ProjectService, Depends(get_project_service)]
ApplicationServiceDep = Annotated[ApplicationService, Depends(get_application_service)]
MessagingServiceDep = Annotated[MessagingService, Depends(get_messaging_service)]

"""Test helper functions for common data creation patterns."""

from sqlalchemy.ext.asyncio import AsyncSession

from src.cobrew.core.security import create_access_token
from src.cobrew.models import Message, Profile, Project, ProjectApplication, User
from tests.factories import (
    ApplicationFactory,
    MessageFactory,
    ProfileFactory,
    ProjectFactory,
    UserFactory,
)


def auth_headers(user: User) -> dict[str, str]:
    """Bearer header for ``user``."""
    return {"Authorization": f"Bearer {create_access_token(user.id)}"}


async def create_user(
    session: AsyncSession,
    first_name: str | None = None,
    last_name: str | None = None,
    **user_kwargs,
) -> tuple[User, Profile]:
    """Create an account with its profile, as registration does.

    Args:
        session: Database session
        first_name: Optional profile first name
        last_name: Optional profile last name
        **user_kwargs: Additional args passed to UserFactory

    Returns:
        Tuple of (user, profile)
    """
    user = UserFactory.build(**user_kwargs)
    session.add(user)
    await session.flush()

    profile = ProfileFactory.build(user_id=user.id, first_name=first_name, last_name=last_name)
    session.add(profile)
    await session.commit()
    return user, profile


async def create_project(session: AsyncSession, owner: User, **project_kwargs) -> Project:
    project = ProjectFactory.build(creator_id=owner.id, **project_kwargs)
    session.add(project)
    await session.commit()
    return project


async def create_application(
    session: AsyncSession,
    project: Project,
    applicant: User,
    **application_kwargs,
) -> ProjectApplication:
    application = ApplicationFactory.build(
        project_id=project.id, applicant_id=applicant.id, **application_kwargs
    )
    session.add(application)
    await session.commit()
    return application


async def create_message(
    session: AsyncSession, project: Project, sender: User, **message_kwargs
) -> Message:
    message = MessageFactory.build(project_id=project.id, sender_id=sender.id, **message_kwargs)
    session.add(message)
    await session.commit()
    return message


async def create_collaboration(session: AsyncSession) -> dict:
    """Create an owner, a project and an approved collaborator.

    Returns:
        Dict with keys: owner, collaborator, project, application
    """
    owner, _ = await create_user(session, first_name="Olive", last_name="Owner")
    collaborator, _ = await create_user(session, first_name="Cole", last_name="Laborator")
    project = await create_project(session, owner, title="Campus Coffee Exchange")
    application = await create_application(
        session, project, collaborator, status="approved"
    )
    return {
        "owner": owner,
        "collaborator": collaborator,
        "project": project,
        "application": application,
    }

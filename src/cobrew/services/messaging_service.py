"""Project-scoped chat between a project owner and approved applicants."""

from collections.abc import Callable
from datetime import datetime
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.cobrew.core.exceptions import NotFoundError, PermissionDeniedError
from src.cobrew.core.logging import get_logger
from src.cobrew.models import Message, Project, ProjectApplication
from src.cobrew.repositories import (
    ApplicationRepository,
    MessageRepository,
    ProjectRepository,
)
from src.cobrew.schemas.message import ConversationRead, LastMessage, MessageRead
from src.cobrew.schemas.user import PersonSummary
from src.cobrew.services.authorization import (
    Caller,
    can_post_messages,
    can_read_messages,
    is_owner,
)
from src.cobrew.services.people import PeopleDirectory

logger = get_logger(__name__)


def build_message_read(message: Message, sender: PersonSummary, caller: Caller) -> MessageRead:
    return MessageRead(
        id=message.id,
        content=message.content,
        created_at=message.created_at,
        sender=sender,
        is_own=message.sender_id == caller.user_id,
    )


class MessagingService:
    """Message threads gated on ownership or an approved application.

    The gate is evaluated on every call against current application state,
    so a collaborator loses access as soon as their approval no longer holds.
    """

    def __init__(
        self,
        project_repo: ProjectRepository,
        application_repo: ApplicationRepository,
        message_repo: MessageRepository,
        people: PeopleDirectory,
        session: AsyncSession,
    ):
        self.project_repo = project_repo
        self.application_repo = application_repo
        self.message_repo = message_repo
        self.people = people
        self.session = session

    async def _authorize(
        self,
        caller: Caller,
        project_id: UUID,
        allowed: Callable[[UUID, Project, ProjectApplication | None], bool],
    ) -> Project:
        project = await self.project_repo.get_by_id(project_id)
        if project is None:
            raise NotFoundError("Project not found")

        application = None
        if not is_owner(caller.user_id, project):
            application = await self.application_repo.get_for_applicant(
                project.id, caller.user_id
            )

        if not allowed(caller.user_id, project, application):
            raise PermissionDeniedError("User not authorized to access project messages")
        return project

    async def list_messages(self, caller: Caller, project_id: UUID) -> list[MessageRead]:
        """Every message of the project, oldest first."""
        project = await self._authorize(caller, project_id, can_read_messages)
        messages = await self.message_repo.list_by_project(project.id)
        senders = await self.people.summaries(m.sender_id for m in messages)
        return [build_message_read(m, senders[m.sender_id], caller) for m in messages]

    async def post(self, caller: Caller, project_id: UUID, content: str) -> MessageRead:
        """Append a message to the project thread.

        ``content`` arrives trimmed and non-empty from the request schema.
        """
        project = await self._authorize(caller, project_id, can_post_messages)

        message = Message(project_id=project.id, sender_id=caller.user_id, content=content)
        self.message_repo.add(message)

        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info("message posted", message_id=str(message.id), project_id=str(project.id))
        sender = await self.people.summary(caller.user_id)
        return build_message_read(message, sender, caller)

    async def conversations(self, caller: Caller) -> list[ConversationRead]:
        """Threads the caller may read, most recently active first."""
        owned = await self.project_repo.list_by_creator(caller.user_id)
        joined_ids = await self.application_repo.approved_project_ids(caller.user_id)
        joined = await self.project_repo.get_many(joined_ids)

        projects = {p.id: p for p in owned}
        projects.update(joined)
        if not projects:
            return []

        project_ids = list(projects)
        activity = await self.message_repo.activity_by_project(project_ids)
        members = await self.application_repo.approved_applicants(project_ids)

        participant_ids: dict[UUID, list[UUID]] = {}
        for project_id, project in projects.items():
            ids = [project.creator_id, *members[project_id]]
            participant_ids[project_id] = [i for i in ids if i != caller.user_id]

        people = await self.people.summaries(
            user_id for ids in participant_ids.values() for user_id in ids
        )

        def last_activity(project: Project) -> datetime:
            return activity[project.id].last_activity_at or project.created_at

        conversations = []
        for project in sorted(projects.values(), key=last_activity, reverse=True):
            thread = activity[project.id]
            last = thread.last_message
            conversations.append(
                ConversationRead(
                    project_id=project.id,
                    project_title=project.title,
                    participants=[people[i] for i in participant_ids[project.id]],
                    is_owner=is_owner(caller.user_id, project),
                    message_count=thread.message_count,
                    last_message=(
                        LastMessage(
                            content=last.content,
                            created_at=last.created_at,
                            sender_id=last.sender_id,
                        )
                        if last
                        else None
                    ),
                )
            )
        return conversations

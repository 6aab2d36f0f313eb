"""Project directory and owner-only project management."""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.cobrew.core.exceptions import NotFoundError, PermissionDeniedError
from src.cobrew.core.logging import get_logger
from src.cobrew.models import Project
from src.cobrew.models.base import utc_now
from src.cobrew.repositories import (
    ApplicationRepository,
    MessageRepository,
    ProjectFilters,
    ProjectRepository,
)
from src.cobrew.schemas.pagination import PaginatedResponse
from src.cobrew.schemas.project import ProjectCreate, ProjectRead, ProjectUpdate
from src.cobrew.schemas.user import PersonSummary
from src.cobrew.services.authorization import Caller, caller_id, is_owner
from src.cobrew.services.people import PeopleDirectory

logger = get_logger(__name__)


def build_project_read(
    project: Project, owner: PersonSummary, caller: Caller | None
) -> ProjectRead:
    return ProjectRead(
        id=project.id,
        title=project.title,
        description=project.description,
        stage=project.stage,
        category=project.category,
        roles_needed=list(project.roles_needed or []),
        tags=list(project.tags or []),
        premium_features=project.premium_features,
        created_at=project.created_at,
        updated_at=project.updated_at,
        owner=owner,
        is_owner=is_owner(caller_id(caller), project),
    )


class ProjectService:
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

    async def require_project(self, project_id: UUID) -> Project:
        project = await self.project_repo.get_by_id(project_id)
        if project is None:
            raise NotFoundError("Project not found")
        return project

    async def _require_owned(self, caller: Caller, project_id: UUID) -> Project:
        project = await self.require_project(project_id)
        if not is_owner(caller.user_id, project):
            raise PermissionDeniedError()
        return project

    async def search(
        self,
        caller: Caller | None,
        filters: ProjectFilters,
        cursor: str | None,
        limit: int,
    ) -> PaginatedResponse[ProjectRead]:
        projects, next_cursor, has_more = await self.project_repo.search(
            filters, cursor=cursor, limit=limit
        )
        owners = await self.people.summaries(p.creator_id for p in projects)
        return PaginatedResponse(
            items=[build_project_read(p, owners[p.creator_id], caller) for p in projects],
            next_cursor=next_cursor,
            has_more=has_more,
        )

    async def get(self, caller: Caller | None, project_id: UUID) -> ProjectRead:
        project = await self.require_project(project_id)
        owner = await self.people.summary(project.creator_id)
        return build_project_read(project, owner, caller)

    async def create(self, caller: Caller, data: ProjectCreate) -> ProjectRead:
        project = Project(
            title=data.title,
            description=data.description,
            stage=data.stage.value,
            category=data.category,
            roles_needed=data.roles_needed,
            tags=data.tags,
            creator_id=caller.user_id,
        )
        self.project_repo.add(project)

        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info("project created", project_id=str(project.id))
        owner = await self.people.summary(project.creator_id)
        return build_project_read(project, owner, caller)

    async def update(self, caller: Caller, project_id: UUID, data: ProjectUpdate) -> ProjectRead:
        """Replace the editable fields of an owned project."""
        project = await self._require_owned(caller, project_id)

        project.title = data.title
        project.description = data.description
        project.stage = data.stage.value
        project.category = data.category
        project.roles_needed = data.roles_needed
        project.tags = data.tags
        project.updated_at = utc_now()

        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info("project updated", project_id=str(project.id), stage=project.stage)
        owner = await self.people.summary(project.creator_id)
        return build_project_read(project, owner, caller)

    async def delete(self, caller: Caller, project_id: UUID) -> None:
        """Delete an owned project with its messages and applications."""
        project = await self._require_owned(caller, project_id)

        try:
            messages = await self.message_repo.delete_by_project(project.id)
            applications = await self.application_repo.delete_by_project(project.id)
            await self.project_repo.delete(project)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info(
            "project deleted",
            project_id=str(project_id),
            messages_deleted=messages,
            applications_deleted=applications,
        )

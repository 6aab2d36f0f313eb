"""Applications to join projects: submit, decide, list and fetch."""

from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.cobrew.core.exceptions import (
    ConflictError,
    DomainValidationError,
    NotFoundError,
    PermissionDeniedError,
)
from src.cobrew.core.logging import get_logger
from src.cobrew.models import ApplicationStatus, ProjectApplication
from src.cobrew.models.base import utc_now
from src.cobrew.repositories import ApplicationRepository, ProjectRepository
from src.cobrew.schemas.application import (
    ApplicationCreate,
    ApplicationDetail,
    ApplicationProject,
    ReceivedApplication,
    SubmittedApplication,
)
from src.cobrew.schemas.project import ProjectSummary
from src.cobrew.services.application_state import transition
from src.cobrew.services.authorization import (
    Caller,
    can_apply,
    can_decide_application,
    can_view_application,
    is_owner,
)
from src.cobrew.services.people import PeopleDirectory

logger = get_logger(__name__)


class ApplicationService:
    """Application engine.

    Checks run in a fixed order: input validation (done by the request
    schemas), then target loading (404), then the authorization predicate
    (403), then the state machine (409).

    Args:
        opaque_access: When True, a caller who may not view an application
            gets the same 404 as for a missing one instead of a 403.
    """

    def __init__(
        self,
        application_repo: ApplicationRepository,
        project_repo: ProjectRepository,
        people: PeopleDirectory,
        session: AsyncSession,
        opaque_access: bool = False,
    ):
        self.application_repo = application_repo
        self.project_repo = project_repo
        self.people = people
        self.session = session
        self.opaque_access = opaque_access

    async def submit(self, caller: Caller, data: ApplicationCreate) -> ProjectApplication:
        """Create a pending application.

        ``can_apply`` is evaluated with no existing application: whether the
        caller already applied is decided by the unique constraint on
        (project_id, applicant_id) at commit, so two concurrent submissions
        cannot both succeed.

        Raises:
            NotFoundError: If the project does not exist, including when it
                is deleted before the application is committed.
            DomainValidationError: If the caller owns the project.
            ConflictError: If the caller already applied to the project.
        """
        project = await self.project_repo.get_by_id(data.project_id)
        if project is None:
            raise NotFoundError("Project not found")

        if not can_apply(caller.user_id, project, None):
            raise DomainValidationError("You cannot apply to your own project")

        # Instances expire on rollback
        project_id = project.id
        application = ProjectApplication(
            project_id=project_id,
            applicant_id=caller.user_id,
            introduction=data.introduction,
            experience=data.experience,
            motivation=data.motivation,
        )
        self.application_repo.add(application)

        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            await self._raise_for_rejected_insert(project_id, caller.user_id, e)
            raise
        except Exception:
            await self.session.rollback()
            raise

        logger.info(
            "application submitted",
            application_id=str(application.id),
            project_id=str(project_id),
        )
        return application

    async def _raise_for_rejected_insert(
        self, project_id: UUID, applicant_id: UUID, error: IntegrityError
    ) -> None:
        """Map a rejected insert to the domain error for the violated constraint.

        Returns without raising when neither a duplicate nor a missing
        project explains the violation.
        """
        existing = await self.application_repo.get_for_applicant(project_id, applicant_id)
        if existing is not None:
            raise ConflictError("You have already applied to this project") from error
        if await self.project_repo.get_by_id(project_id) is None:
            raise NotFoundError("Project not found") from error

    async def decide(
        self, caller: Caller, application_id: UUID, status: ApplicationStatus
    ) -> ProjectApplication:
        """Approve or reject an application as the project owner."""
        application = await self.application_repo.get_by_id(application_id)
        if application is None:
            raise NotFoundError("Application not found")

        project = await self.project_repo.get_by_id(application.project_id)
        if project is None:
            raise NotFoundError("Project not found")

        if not can_decide_application(caller.user_id, project):
            raise PermissionDeniedError()

        current = ApplicationStatus(application.status)
        new_status = transition(current, status)
        if new_status == current:
            return application

        application.status = new_status.value
        application.updated_at = utc_now()

        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info(
            "application status changed",
            application_id=str(application.id),
            project_id=str(project.id),
            old_status=current.value,
            new_status=new_status.value,
        )
        return application

    async def list_submitted(self, caller: Caller) -> list[SubmittedApplication]:
        """The caller's applications with project and owner, newest first."""
        applications = await self.application_repo.list_submitted(caller.user_id)
        projects = await self.project_repo.get_many(a.project_id for a in applications)
        # Applications whose project is gone have nothing to show
        applications = [a for a in applications if a.project_id in projects]
        owners = await self.people.summaries(p.creator_id for p in projects.values())

        items = []
        for application in applications:
            project = projects[application.project_id]
            items.append(
                SubmittedApplication(
                    id=application.id,
                    project=ProjectSummary(
                        id=project.id,
                        title=project.title,
                        description=project.description,
                        stage=project.stage,
                    ),
                    owner=owners[project.creator_id],
                    status=application.status,
                    created_at=application.created_at,
                )
            )
        return items

    async def list_received(self, caller: Caller) -> list[ReceivedApplication]:
        """Applications to the caller's projects with applicant, newest first."""
        applications = await self.application_repo.list_received(caller.user_id)
        projects = await self.project_repo.get_many(a.project_id for a in applications)
        applicants = await self.people.summaries(a.applicant_id for a in applications)

        return [
            ReceivedApplication(
                id=application.id,
                project=ProjectSummary(
                    id=application.project_id,
                    title=projects[application.project_id].title,
                ),
                applicant=applicants[application.applicant_id],
                status=application.status,
                created_at=application.created_at,
            )
            for application in applications
        ]

    async def get(self, caller: Caller, application_id: UUID) -> ApplicationDetail:
        """Full application view for its applicant or the project owner."""
        application = await self.application_repo.get_by_id(application_id)
        if application is None:
            raise NotFoundError("Application not found")

        project = await self.project_repo.get_by_id(application.project_id)
        if project is None:
            raise NotFoundError("Project not found")

        if not can_view_application(caller.user_id, application, project):
            if self.opaque_access:
                raise NotFoundError("Application not found")
            raise PermissionDeniedError()

        people = await self.people.summaries([project.creator_id, application.applicant_id])
        return ApplicationDetail(
            id=application.id,
            project=ApplicationProject(
                id=project.id,
                title=project.title,
                description=project.description,
                stage=project.stage,
                owner=people[project.creator_id],
            ),
            applicant=people[application.applicant_id],
            introduction=application.introduction,
            experience=application.experience,
            motivation=application.motivation,
            status=application.status,
            created_at=application.created_at,
            updated_at=application.updated_at,
            is_owner=is_owner(caller.user_id, project),
            is_applicant=application.applicant_id == caller.user_id,
        )

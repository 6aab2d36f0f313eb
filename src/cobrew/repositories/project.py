"""Repositories for projects and the records a project owns."""

import json
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from sqlalchemy import String, cast, delete, func, or_
from sqlalchemy.orm import aliased
from sqlmodel import select

from src.cobrew.models import ApplicationStatus, Message, Project, ProjectApplication
from src.cobrew.repositories.base import BaseRepository

_TEXT_FIELDS = (
    Project.title,
    Project.description,
    Project.category,
)

_JSON_ARRAY_FIELDS = (
    Project.tags,
    Project.roles_needed,
)

# Characters that appear unescaped in a serialized string array outside its values
_ARRAY_PUNCTUATION = frozenset("[],")


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _json_fragment(value: str) -> str:
    """``value`` as it is written inside a JSON string, without the quotes."""
    return json.dumps(value, ensure_ascii=False)[1:-1]


def _term_conditions(term: str) -> list:
    conditions = [
        cast(field, String).ilike(f"%{_escape_like(term)}%", escape="\\")
        for field in _TEXT_FIELDS
    ]
    # A term of bare array punctuation would match the array syntax, not a value
    if not set(term) <= _ARRAY_PUNCTUATION:
        fragment = _escape_like(_json_fragment(term))
        conditions.extend(
            cast(field, String).ilike(f"%{fragment}%", escape="\\")
            for field in _JSON_ARRAY_FIELDS
        )
    return conditions


@dataclass(frozen=True)
class ProjectFilters:
    """Directory filters. Unset filters impose no constraint; set ones are ANDed."""

    search: str | None = None
    stage: str | None = None
    roles: Sequence[str] = ()

    @property
    def search_terms(self) -> list[str]:
        return self.search.split() if self.search else []


class ProjectRepository(BaseRepository[Project]):
    """Repository for Project entity."""

    model = Project

    async def search(
        self,
        filters: ProjectFilters,
        cursor: str | None = None,
        limit: int = 50,
    ) -> tuple[list[Project], str | None, bool]:
        """List projects matching ``filters``, newest first.

        Text search matches when any term occurs case-insensitively in the
        title, description, category, tags or roles. Tags and roles are JSON
        arrays, matched against their serialized text with the term escaped
        the way a value is, so quotes, backslashes and bare brackets or commas
        in a term never match the array syntax. The role filter matches when
        any requested role is an element of ``roles_needed``.
        """
        query = select(Project)

        if filters.stage:
            query = query.where(Project.stage == filters.stage)

        if filters.roles:
            roles_text = cast(Project.roles_needed, String)
            query = query.where(
                or_(
                    *(
                        roles_text.like(
                            f'%"{_escape_like(_json_fragment(role))}"%', escape="\\"
                        )
                        for role in filters.roles
                    )
                )
            )

        terms = filters.search_terms
        if terms:
            query = query.where(
                or_(*(condition for term in terms for condition in _term_conditions(term)))
            )

        return await self.paginate(query, cursor, limit, Project.created_at)

    async def list_by_creator(self, creator_id: UUID) -> list[Project]:
        result = await self.session.execute(
            select(Project)
            .where(Project.creator_id == creator_id)
            .order_by(Project.created_at.desc())  # type: ignore[attr-defined]
        )
        return list(result.scalars().all())


class ApplicationRepository(BaseRepository[ProjectApplication]):
    """Repository for ProjectApplication entity."""

    model = ProjectApplication

    async def get_for_applicant(
        self, project_id: UUID, applicant_id: UUID
    ) -> ProjectApplication | None:
        """The applicant's application to a project, if any (at most one exists)."""
        result = await self.session.execute(
            select(ProjectApplication).where(
                ProjectApplication.project_id == project_id,
                ProjectApplication.applicant_id == applicant_id,
            )
        )
        return result.scalar_one_or_none()

    async def list_submitted(self, applicant_id: UUID) -> list[ProjectApplication]:
        """Applications the user submitted, newest first."""
        result = await self.session.execute(
            select(ProjectApplication)
            .where(ProjectApplication.applicant_id == applicant_id)
            .order_by(ProjectApplication.created_at.desc())  # type: ignore[attr-defined]
        )
        return list(result.scalars().all())

    async def list_received(self, owner_id: UUID) -> list[ProjectApplication]:
        """Applications to projects the user owns, newest first."""
        result = await self.session.execute(
            select(ProjectApplication)
            .join(Project, Project.id == ProjectApplication.project_id)  # type: ignore[arg-type]
            .where(Project.creator_id == owner_id)
            .order_by(ProjectApplication.created_at.desc())  # type: ignore[attr-defined]
        )
        return list(result.scalars().all())

    async def approved_project_ids(self, applicant_id: UUID) -> list[UUID]:
        result = await self.session.execute(
            select(ProjectApplication.project_id).where(
                ProjectApplication.applicant_id == applicant_id,
                ProjectApplication.status == ApplicationStatus.APPROVED.value,
            )
        )
        return list(result.scalars().all())

    async def approved_applicants(self, project_ids: Sequence[UUID]) -> dict[UUID, list[UUID]]:
        """Approved applicant ids per project, in approval-record order."""
        members: dict[UUID, list[UUID]] = {project_id: [] for project_id in project_ids}
        if not project_ids:
            return members
        result = await self.session.execute(
            select(ProjectApplication.project_id, ProjectApplication.applicant_id)
            .where(
                ProjectApplication.project_id.in_(project_ids),  # type: ignore[attr-defined]
                ProjectApplication.status == ApplicationStatus.APPROVED.value,
            )
            .order_by(ProjectApplication.created_at.asc())  # type: ignore[attr-defined]
        )
        for project_id, applicant_id in result.all():
            members[project_id].append(applicant_id)
        return members

    async def delete_by_project(self, project_id: UUID) -> int:
        """Delete all applications of a project (no commit). Returns count."""
        result = await self.session.execute(
            delete(ProjectApplication).where(ProjectApplication.project_id == project_id)  # type: ignore[arg-type]
        )
        return result.rowcount or 0  # type: ignore[attr-defined]


@dataclass(frozen=True)
class ThreadActivity:
    """Message count and latest message of one project's thread."""

    message_count: int
    last_message: Message | None

    @property
    def last_activity_at(self) -> datetime | None:
        return self.last_message.created_at if self.last_message else None


class MessageRepository(BaseRepository[Message]):
    """Repository for Message entity."""

    model = Message

    async def list_by_project(self, project_id: UUID) -> list[Message]:
        """All messages of a project, oldest first (ties broken by id)."""
        result = await self.session.execute(
            select(Message)
            .where(Message.project_id == project_id)
            .order_by(Message.created_at.asc(), Message.id.asc())  # type: ignore[attr-defined]
        )
        return list(result.scalars().all())

    async def activity_by_project(self, project_ids: Sequence[UUID]) -> dict[UUID, ThreadActivity]:
        """Thread activity for each project id (projects with no messages included)."""
        if not project_ids:
            return {}

        counts_result = await self.session.execute(
            select(Message.project_id, func.count())
            .where(Message.project_id.in_(project_ids))  # type: ignore[attr-defined]
            .group_by(Message.project_id)
        )
        counts: dict[UUID, int] = {row[0]: row[1] for row in counts_result.all()}

        # One row per thread: the newest message by (created_at, id)
        ranked = (
            select(
                Message,
                func.row_number()
                .over(
                    partition_by=Message.project_id,
                    order_by=(Message.created_at.desc(), Message.id.desc()),  # type: ignore[attr-defined]
                )
                .label("row_rank"),
            )
            .where(Message.project_id.in_(project_ids))  # type: ignore[attr-defined]
            .subquery()
        )
        latest_message = aliased(Message, ranked)
        latest_result = await self.session.execute(
            select(latest_message).where(ranked.c.row_rank == 1)
        )
        latest: dict[UUID, Message] = {m.project_id: m for m in latest_result.scalars().all()}

        return {
            project_id: ThreadActivity(
                message_count=counts.get(project_id, 0),
                last_message=latest.get(project_id),
            )
            for project_id in project_ids
        }

    async def delete_by_project(self, project_id: UUID) -> int:
        """Delete all messages of a project (no commit). Returns count."""
        result = await self.session.execute(
            delete(Message).where(Message.project_id == project_id)  # type: ignore[arg-type]
        )
        return result.rowcount or 0  # type: ignore[attr-defined]

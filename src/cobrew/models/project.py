"""Project, application and message models."""

from datetime import datetime
from uuid import UUID, uuid7

from sqlalchemy import JSON, Column, Text, UniqueConstraint
from sqlmodel import Field, SQLModel

from src.cobrew.models.base import utc_now
from src.cobrew.models.enums import ApplicationStatus


class Project(SQLModel, table=True):
    """A collaboration opportunity owned by exactly one user."""

    __tablename__ = "projects"

    id: UUID = Field(default_factory=uuid7, primary_key=True)
    title: str = Field(max_length=200)
    description: str = Field(sa_column=Column(Text, nullable=False))
    stage: str = Field(max_length=20, index=True)
    category: str = Field(max_length=100)
    roles_needed: list[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    tags: list[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    creator_id: UUID = Field(foreign_key="users.id", index=True)
    premium_features: bool = Field(default=False)
    created_at: datetime = Field(default_factory=utc_now, index=True)
    updated_at: datetime = Field(default_factory=utc_now)


class ProjectApplication(SQLModel, table=True):
    """A request by one user to join another user's project.

    The (project_id, applicant_id) unique constraint is the source of truth
    for "already applied"; services translate its violation into a conflict.
    """

    __tablename__ = "project_applications"
    __table_args__ = (
        UniqueConstraint("project_id", "applicant_id", name="uq_application_project_applicant"),
    )

    id: UUID = Field(default_factory=uuid7, primary_key=True)
    project_id: UUID = Field(foreign_key="projects.id", index=True)
    applicant_id: UUID = Field(foreign_key="users.id", index=True)
    introduction: str = Field(sa_column=Column(Text, nullable=False))
    experience: str = Field(sa_column=Column(Text, nullable=False))
    motivation: str = Field(sa_column=Column(Text, nullable=False))
    status: str = Field(default=ApplicationStatus.PENDING.value, max_length=20)
    created_at: datetime = Field(default_factory=utc_now, index=True)
    updated_at: datetime = Field(default_factory=utc_now)


class Message(SQLModel, table=True):
    """Immutable chat entry scoped to a project."""

    __tablename__ = "messages"

    id: UUID = Field(default_factory=uuid7, primary_key=True)
    project_id: UUID = Field(foreign_key="projects.id", index=True)
    sender_id: UUID = Field(foreign_key="users.id", index=True)
    content: str = Field(sa_column=Column(Text, nullable=False))
    created_at: datetime = Field(default_factory=utc_now, index=True)

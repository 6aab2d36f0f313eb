"""Application schemas for API request/response."""

from datetime import datetime
from uuid import UUID

from pydantic import Field, ValidationInfo, field_validator

from src.cobrew.models.enums import ApplicationStatus, ProjectStage
from src.cobrew.schemas.base import CamelModel
from src.cobrew.schemas.project import ProjectSummary
from src.cobrew.schemas.user import PersonSummary
from src.cobrew.schemas.validators import require_text


class ApplicationCreate(CamelModel):
    project_id: UUID
    introduction: str = Field(min_length=1, max_length=5000)
    experience: str = Field(min_length=1, max_length=5000)
    motivation: str = Field(min_length=1, max_length=5000)

    @field_validator("introduction", "experience", "motivation")
    @classmethod
    def validate_text(cls, v: str, info: ValidationInfo) -> str:
        return require_text(v, info.field_name.capitalize())


class ApplicationStatusUpdate(CamelModel):
    status: ApplicationStatus


class ApplicationRead(CamelModel):
    """The stored application record."""

    id: UUID
    project_id: UUID
    applicant_id: UUID
    introduction: str
    experience: str
    motivation: str
    status: ApplicationStatus
    created_at: datetime
    updated_at: datetime


class SubmittedApplication(CamelModel):
    """An application the caller submitted, with the project's owner."""

    id: UUID
    project: ProjectSummary
    owner: PersonSummary
    status: ApplicationStatus
    created_at: datetime


class ReceivedApplication(CamelModel):
    """An application to one of the caller's projects, with the applicant."""

    id: UUID
    project: ProjectSummary
    applicant: PersonSummary
    status: ApplicationStatus
    created_at: datetime


class ApplicationProject(CamelModel):
    id: UUID
    title: str
    description: str
    stage: ProjectStage
    owner: PersonSummary


class ApplicationDetail(CamelModel):
    """Full application view with caller-relative role flags."""

    id: UUID
    project: ApplicationProject
    applicant: PersonSummary
    introduction: str
    experience: str
    motivation: str
    status: ApplicationStatus
    created_at: datetime
    updated_at: datetime
    is_owner: bool
    is_applicant: bool

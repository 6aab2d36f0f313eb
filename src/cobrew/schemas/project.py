"""Project schemas for API request/response."""

from datetime import datetime
from uuid import UUID

from pydantic import Field, ValidationInfo, field_validator

from src.cobrew.models.enums import ProjectStage
from src.cobrew.schemas.base import CamelModel
from src.cobrew.schemas.user import PersonSummary
from src.cobrew.schemas.validators import clean_string_list, require_text


class ProjectWrite(CamelModel):
    """Schema for creating a project or replacing its editable fields."""

    title: str = Field(min_length=1, max_length=200)
    description: str = Field(min_length=1, max_length=10000)
    stage: ProjectStage
    category: str = Field(min_length=1, max_length=100)
    roles_needed: list[str] = Field(default_factory=list, max_length=50)
    tags: list[str] = Field(default_factory=list, max_length=50)

    @field_validator("title", "description", "category")
    @classmethod
    def validate_required_text(cls, v: str, info: ValidationInfo) -> str:
        return require_text(v, info.field_name.capitalize())

    @field_validator("roles_needed", "tags")
    @classmethod
    def validate_lists(cls, v: list[str]) -> list[str]:
        return clean_string_list(v)


class ProjectCreate(ProjectWrite):
    pass


class ProjectUpdate(ProjectWrite):
    pass


class ProjectRead(CamelModel):
    """A project joined with its owner, relative to the caller."""

    id: UUID
    title: str
    description: str
    stage: ProjectStage
    category: str
    roles_needed: list[str]
    tags: list[str]
    premium_features: bool
    created_at: datetime
    updated_at: datetime
    owner: PersonSummary
    is_owner: bool


class ProjectSummary(CamelModel):
    """Compact project fields embedded in application listings."""

    id: UUID
    title: str
    description: str | None = None
    stage: ProjectStage | None = None

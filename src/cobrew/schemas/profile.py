"""Profile schemas for API request/response."""

from datetime import datetime
from uuid import UUID

from pydantic import EmailStr, Field, field_validator

from src.cobrew.schemas.base import CamelModel
from src.cobrew.schemas.validators import clean_string_list, optional_text


class ProfileUpdate(CamelModel):
    """Upsert body. Omitted fields keep their stored value."""

    first_name: str | None = Field(default=None, max_length=100)
    last_name: str | None = Field(default=None, max_length=100)
    title: str | None = Field(default=None, max_length=200)
    bio: str | None = Field(default=None, max_length=5000)
    location: str | None = Field(default=None, max_length=200)
    education: str | None = Field(default=None, max_length=5000)
    experience: str | None = Field(default=None, max_length=5000)
    skills: list[str] | None = Field(default=None, max_length=50)
    industry: str | None = Field(default=None, max_length=200)
    github_url: str | None = Field(default=None, max_length=2048)
    linkedin_url: str | None = Field(default=None, max_length=2048)
    avatar_url: str | None = Field(default=None, max_length=2048)

    @field_validator(
        "first_name",
        "last_name",
        "title",
        "bio",
        "location",
        "education",
        "experience",
        "industry",
        "github_url",
        "linkedin_url",
        "avatar_url",
    )
    @classmethod
    def strip_text(cls, v: str | None) -> str | None:
        return optional_text(v)

    @field_validator("skills")
    @classmethod
    def clean_skills(cls, v: list[str] | None) -> list[str] | None:
        return clean_string_list(v) if v is not None else None


class ProfileRead(CamelModel):
    """Account and profile fields combined."""

    id: UUID
    email: EmailStr
    avatar_url: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    title: str | None = None
    bio: str | None = None
    location: str | None = None
    education: str | None = None
    experience: str | None = None
    skills: list[str] = []
    industry: str | None = None
    github_url: str | None = None
    linkedin_url: str | None = None
    created_at: datetime

"""Account and profile models."""

from datetime import datetime
from uuid import UUID, uuid7

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel

from src.cobrew.models.base import utc_now


class User(SQLModel, table=True):
    """Identity record. The password hash never leaves the service layer."""

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid7, primary_key=True)
    email: str = Field(max_length=255, unique=True, index=True)
    hashed_password: str = Field(max_length=255)
    avatar_url: str | None = Field(default=None, max_length=2048)
    is_active: bool = Field(default=True)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class Profile(SQLModel, table=True):
    """One-to-one extension of User with display fields."""

    __tablename__ = "profiles"

    id: UUID = Field(default_factory=uuid7, primary_key=True)
    user_id: UUID = Field(foreign_key="users.id", unique=True, index=True)
    first_name: str | None = Field(default=None, max_length=100)
    last_name: str | None = Field(default=None, max_length=100)
    title: str | None = Field(default=None, max_length=200)
    bio: str | None = Field(default=None, max_length=5000)
    location: str | None = Field(default=None, max_length=200)
    education: str | None = Field(default=None, max_length=5000)
    experience: str | None = Field(default=None, max_length=5000)
    skills: list[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    industry: str | None = Field(default=None, max_length=200)
    github_url: str | None = Field(default=None, max_length=2048)
    linkedin_url: str | None = Field(default=None, max_length=2048)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @property
    def display_name(self) -> str | None:
        """'First Last' when either part is set."""
        parts = [part.strip() for part in (self.first_name, self.last_name) if part and part.strip()]
        return " ".join(parts) or None

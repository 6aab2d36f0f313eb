from datetime import datetime
from uuid import UUID

from pydantic import EmailStr

from src.cobrew.schemas.base import CamelModel


class UserRead(CamelModel):
    id: UUID
    email: EmailStr
    avatar_url: str | None = None
    created_at: datetime


class PersonSummary(CamelModel):
    """Display fields of another account, joined into responses."""

    id: UUID
    name: str
    avatar_url: str = ""

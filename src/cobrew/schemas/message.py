"""Message schemas for API request/response."""

from datetime import datetime
from uuid import UUID

from pydantic import Field, field_validator

from src.cobrew.schemas.base import CamelModel
from src.cobrew.schemas.user import PersonSummary


class MessageCreate(CamelModel):
    content: str = Field(max_length=5000)

    @field_validator("content")
    @classmethod
    def validate_content(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Message content is required")
        return v


class MessageRead(CamelModel):
    id: UUID
    content: str
    created_at: datetime
    sender: PersonSummary
    is_own: bool


class LastMessage(CamelModel):
    content: str
    created_at: datetime
    sender_id: UUID


class ConversationRead(CamelModel):
    """One project thread the caller may read and post to."""

    project_id: UUID
    project_title: str
    participants: list[PersonSummary]
    is_owner: bool
    message_count: int
    last_message: LastMessage | None = None

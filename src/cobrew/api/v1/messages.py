"""Project message thread endpoints."""

from uuid import UUID

from fastapi import APIRouter, status

from src.cobrew.api.dependencies import CurrentCaller, MessagingServiceDep
from src.cobrew.schemas.message import ConversationRead, MessageCreate, MessageRead

router = APIRouter(prefix="/messages", tags=["messages"])


@router.get(
    "",
    response_model=list[ConversationRead],
    summary="List conversations",
    description="Project threads the caller may read, most recently active first.",
)
async def list_conversations(
    caller: CurrentCaller, service: MessagingServiceDep
) -> list[ConversationRead]:
    return await service.conversations(caller)


@router.get(
    "/{project_id}",
    response_model=list[MessageRead],
    summary="List project messages",
    description="Oldest first. Owner and approved applicants only.",
    responses={
        403: {"description": "Caller is not owner or approved applicant"},
        404: {"description": "Project not found"},
    },
)
async def list_messages(
    project_id: UUID, caller: CurrentCaller, service: MessagingServiceDep
) -> list[MessageRead]:
    return await service.list_messages(caller, project_id)


@router.post(
    "/{project_id}",
    response_model=MessageRead,
    status_code=status.HTTP_201_CREATED,
    summary="Post a message",
    responses={
        400: {"description": "Message content is required"},
        403: {"description": "Caller is not owner or approved applicant"},
        404: {"description": "Project not found"},
    },
)
async def post_message(
    project_id: UUID,
    data: MessageCreate,
    caller: CurrentCaller,
    service: MessagingServiceDep,
) -> MessageRead:
    return await service.post(caller, project_id, data.content)

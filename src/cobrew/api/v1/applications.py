"""Application endpoints."""

from enum import Enum
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Query, status

from src.cobrew.api.dependencies import ApplicationServiceDep, CurrentCaller
from src.cobrew.core.exceptions import DomainValidationError
from src.cobrew.schemas.application import (
    ApplicationCreate,
    ApplicationDetail,
    ApplicationRead,
    ApplicationStatusUpdate,
    ReceivedApplication,
    SubmittedApplication,
)

router = APIRouter(prefix="/applications", tags=["applications"])


class ApplicationListType(str, Enum):
    SUBMITTED = "submitted"
    RECEIVED = "received"


@router.post(
    "",
    response_model=ApplicationRead,
    status_code=status.HTTP_201_CREATED,
    summary="Apply to a project",
    responses={
        201: {"description": "Application submitted as pending"},
        400: {"description": "Invalid fields or applying to own project"},
        404: {"description": "Project not found"},
        409: {"description": "Already applied to this project"},
    },
)
async def submit_application(
    data: ApplicationCreate, caller: CurrentCaller, service: ApplicationServiceDep
) -> ApplicationRead:
    application = await service.submit(caller, data)
    return ApplicationRead.model_validate(application)


@router.get(
    "",
    response_model=list[SubmittedApplication] | list[ReceivedApplication],
    summary="List applications",
    description="`type=submitted` lists the caller's applications; "
    "`type=received` lists applications to the caller's projects.",
    responses={400: {"description": "Missing or invalid type"}},
)
async def list_applications(
    caller: CurrentCaller,
    service: ApplicationServiceDep,
    type: Annotated[str | None, Query(description="submitted or received")] = None,
) -> list[SubmittedApplication] | list[ReceivedApplication]:
    try:
        list_type = ApplicationListType(type) if type else None
    except ValueError:
        list_type = None
    if list_type is None:
        raise DomainValidationError("Please specify type parameter (submitted or received)")

    if list_type is ApplicationListType.SUBMITTED:
        return await service.list_submitted(caller)
    return await service.list_received(caller)


@router.get(
    "/{application_id}",
    response_model=ApplicationDetail,
    summary="Get application",
    description="Visible to the applicant and the project owner.",
    responses={
        403: {"description": "Caller is neither applicant nor owner"},
        404: {"description": "Application or project not found"},
    },
)
async def get_application(
    application_id: UUID, caller: CurrentCaller, service: ApplicationServiceDep
) -> ApplicationDetail:
    return await service.get(caller, application_id)


@router.put(
    "/{application_id}/status",
    response_model=ApplicationRead,
    summary="Approve or reject an application",
    responses={
        400: {"description": "Invalid status value"},
        403: {"description": "Caller is not the project owner"},
        404: {"description": "Application or project not found"},
        409: {"description": "Application already decided"},
    },
)
async def decide_application(
    application_id: UUID,
    data: ApplicationStatusUpdate,
    caller: CurrentCaller,
    service: ApplicationServiceDep,
) -> ApplicationRead:
    application = await service.decide(caller, application_id, data.status)
    return ApplicationRead.model_validate(application)

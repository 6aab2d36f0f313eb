"""Project directory and project management endpoints."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Query, status

from src.cobrew.api.dependencies import CurrentCaller, OptionalCaller, ProjectServiceDep
from src.cobrew.core.config import get_settings
from src.cobrew.models import ProjectStage
from src.cobrew.repositories import ProjectFilters
from src.cobrew.schemas.pagination import PaginatedResponse
from src.cobrew.schemas.project import ProjectCreate, ProjectRead, ProjectUpdate

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get(
    "",
    response_model=PaginatedResponse[ProjectRead],
    summary="List projects",
    description="Browse all projects, newest first. `search` matches any of its "
    "whitespace-separated terms against title, description, category, tags and "
    "roles. `skills` may be repeated and matches projects needing any of them.",
    responses={
        200: {"description": "Paginated list of projects"},
        400: {"description": "Invalid stage or limit"},
    },
)
async def list_projects(
    caller: OptionalCaller,
    service: ProjectServiceDep,
    search: Annotated[str | None, Query(max_length=200, description="Free-text search")] = None,
    stage: Annotated[ProjectStage | None, Query(description="Exact stage")] = None,
    skills: Annotated[list[str] | None, Query(description="Roles needed (any of)")] = None,
    cursor: Annotated[str | None, Query(description="Cursor for pagination")] = None,
    limit: Annotated[int | None, Query(ge=1, le=100, description="Max items to return")] = None,
) -> PaginatedResponse[ProjectRead]:
    filters = ProjectFilters(
        search=search.strip() if search and search.strip() else None,
        stage=stage.value if stage else None,
        roles=tuple(s.strip() for s in skills or [] if s.strip()),
    )
    return await service.search(
        caller,
        filters,
        cursor=cursor,
        limit=limit or get_settings().projects_page_size,
    )


@router.get(
    "/{project_id}",
    response_model=ProjectRead,
    summary="Get project",
    responses={
        200: {"description": "Project with owner summary"},
        404: {"description": "Project not found"},
    },
)
async def get_project(
    project_id: UUID, caller: OptionalCaller, service: ProjectServiceDep
) -> ProjectRead:
    return await service.get(caller, project_id)


@router.post(
    "",
    response_model=ProjectRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create project",
    description="Create a project owned by the caller.",
    responses={
        201: {"description": "Project created"},
        400: {"description": "Missing or invalid fields"},
        401: {"description": "Not authenticated"},
    },
)
async def create_project(
    data: ProjectCreate, caller: CurrentCaller, service: ProjectServiceDep
) -> ProjectRead:
    return await service.create(caller, data)


@router.put(
    "/{project_id}",
    response_model=ProjectRead,
    summary="Update project",
    description="Replace the editable fields of a project. Owner only.",
    responses={
        200: {"description": "Project updated"},
        403: {"description": "Caller is not the owner"},
        404: {"description": "Project not found"},
    },
)
async def update_project(
    project_id: UUID,
    data: ProjectUpdate,
    caller: CurrentCaller,
    service: ProjectServiceDep,
) -> ProjectRead:
    return await service.update(caller, project_id, data)


@router.delete(
    "/{project_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete project",
    description="Delete a project together with its applications and messages. Owner only.",
    responses={
        204: {"description": "Project deleted"},
        403: {"description": "Caller is not the owner"},
        404: {"description": "Project not found"},
    },
)
async def delete_project(
    project_id: UUID, caller: CurrentCaller, service: ProjectServiceDep
) -> None:
    await service.delete(caller, project_id)

"""FastAPI dependency injection definitions.

Re-exports all dependencies so routers import from one place.
"""

# Auth
from src.cobrew.api.dependencies.auth import (
    CurrentCaller,
    CurrentUser,
    OptionalCaller,
    get_current_caller,
    get_current_user,
    get_optional_caller,
)

# Database
from src.cobrew.api.dependencies.db import DBSession, get_db_session

# Repositories
from src.cobrew.api.dependencies.repositories import (
    ApplicationRepo,
    MessageRepo,
    ProfileRepo,
    ProjectRepo,
    UserRepo,
)

# Services
from src.cobrew.api.dependencies.services import (
    ApplicationServiceDep,
    AuthServiceDep,
    MessagingServiceDep,
    People,
    ProfileServiceDep,
    ProjectServiceDep,
)

__all__ = [
    # Auth
    "CurrentCaller",
    "CurrentUser",
    "OptionalCaller",
    "get_current_caller",
    "get_current_user",
    "get_optional_caller",
    # Database
    "DBSession",
    "get_db_session",
    # Repositories
    "ApplicationRepo",
    "MessageRepo",
    "ProfileRepo",
    "ProjectRepo",
    "UserRepo",
    # Services
    "ApplicationServiceDep",
    "AuthServiceDep",
    "MessagingServiceDep",
    "People",
    "ProfileServiceDep",
    "ProjectServiceDep",
]

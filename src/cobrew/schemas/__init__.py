from src.cobrew.schemas.application import (
    ApplicationCreate,
    ApplicationDetail,
    ApplicationRead,
    ApplicationStatusUpdate,
    ReceivedApplication,
    SubmittedApplication,
)
from src.cobrew.schemas.auth import AuthResponse, LoginRequest, RegisterRequest
from src.cobrew.schemas.message import ConversationRead, MessageCreate, MessageRead
from src.cobrew.schemas.pagination import PaginatedResponse
from src.cobrew.schemas.profile import ProfileRead, ProfileUpdate
from src.cobrew.schemas.project import ProjectCreate, ProjectRead, ProjectSummary, ProjectUpdate
from src.cobrew.schemas.user import PersonSummary, UserRead

__all__ = [
    # Application
    "ApplicationCreate",
    "ApplicationDetail",
    "ApplicationRead",
    "ApplicationStatusUpdate",
    "ReceivedApplication",
    "SubmittedApplication",
    # Auth
    "AuthResponse",
    "LoginRequest",
    "RegisterRequest",
    # Message
    "ConversationRead",
    "MessageCreate",
    "MessageRead",
    # Pagination
    "PaginatedResponse",
    # Profile
    "ProfileRead",
    "ProfileUpdate",
    # Project
    "ProjectCreate",
    "ProjectRead",
    "ProjectSummary",
    "ProjectUpdate",
    # User
    "PersonSummary",
    "UserRead",
]

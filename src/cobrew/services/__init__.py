from src.cobrew.services.application_service import ApplicationService
from src.cobrew.services.auth_service import AuthService
from src.cobrew.services.messaging_service import MessagingService
from src.cobrew.services.people import PeopleDirectory
from src.cobrew.services.profile_service import ProfileService
from src.cobrew.services.project_service import ProjectService

__all__ = [
    "ApplicationService",
    "AuthService",
    "MessagingService",
    "PeopleDirectory",
    "ProfileService",
    "ProjectService",
]

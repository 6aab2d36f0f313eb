"""Model exports.

Import from here: `from src.cobrew.models import User, Project`
"""

from src.cobrew.models.enums import ApplicationStatus, ProjectStage
from src.cobrew.models.project import Message, Project, ProjectApplication
from src.cobrew.models.user import Profile, User

__all__ = [
    # Enums
    "ApplicationStatus",
    "ProjectStage",
    # Models
    "Message",
    "Profile",
    "Project",
    "ProjectApplication",
    "User",
]

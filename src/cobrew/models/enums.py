"""Shared enums for models."""

from enum import Enum


class ProjectStage(str, Enum):
    """Lifecycle stage of a project, in order of progression.

    The order is informational only; any stage may follow any other.
    """

    IDEA = "idea"
    CONCEPT = "concept"
    PROTOTYPE = "prototype"
    MVP = "mvp"
    GROWTH = "growth"
    SCALING = "scaling"


class ApplicationStatus(str, Enum):
    """Decision state of an application to join a project."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"

    @property
    def is_terminal(self) -> bool:
        return self is not ApplicationStatus.PENDING

"""Application decision state machine.

    pending --> approved
    pending --> rejected

Restating the current status is accepted and changes nothing. Every other
move (re-deciding, reverting to pending) is refused.
"""

from src.cobrew.core.exceptions import ConflictError
from src.cobrew.models import ApplicationStatus


class InvalidTransitionError(ConflictError):
    def __init__(self, current: ApplicationStatus, requested: ApplicationStatus):
        self.current = current
        self.requested = requested
        super().__init__(
            f"Application is already {current.value} and cannot be changed to {requested.value}"
        )


def can_transition(current: ApplicationStatus, requested: ApplicationStatus) -> bool:
    if requested == current:
        return True
    return current == ApplicationStatus.PENDING and requested.is_terminal


def transition(current: ApplicationStatus, requested: ApplicationStatus) -> ApplicationStatus:
    """Return the resulting status or raise InvalidTransitionError."""
    if not can_transition(current, requested):
        raise InvalidTransitionError(current, requested)
    return requested

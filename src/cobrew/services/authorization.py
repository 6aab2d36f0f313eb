"""Authorization predicates for projects, applications and messaging.

Every predicate is a pure function of the caller and records the service has
already loaded. Nothing here performs I/O or caches a decision, so each
protected request re-evaluates from current state.
"""

from dataclasses import dataclass
from uuid import UUID

from src.cobrew.models import ApplicationStatus, Project, ProjectApplication


@dataclass(frozen=True)
class Caller:
    """Identity of the authenticated account making the current request.

    Resolved once per request by the API layer and passed explicitly to
    every service call.
    """

    user_id: UUID


def caller_id(caller: Caller | None) -> UUID | None:
    return caller.user_id if caller is not None else None


def is_owner(account_id: UUID | None, project: Project) -> bool:
    return account_id is not None and project.creator_id == account_id


def is_approved_applicant(
    account_id: UUID | None,
    project: Project,
    application: ProjectApplication | None,
) -> bool:
    """True if ``application`` is the account's approved application to ``project``."""
    return (
        account_id is not None
        and application is not None
        and application.project_id == project.id
        and application.applicant_id == account_id
        and application.status == ApplicationStatus.APPROVED.value
    )


def can_read_messages(
    account_id: UUID | None,
    project: Project,
    application: ProjectApplication | None,
) -> bool:
    return is_owner(account_id, project) or is_approved_applicant(
        account_id, project, application
    )


# Posting is governed by the same gate as reading.
can_post_messages = can_read_messages


def can_apply(
    account_id: UUID | None,
    project: Project,
    existing: ProjectApplication | None,
) -> bool:
    return account_id is not None and not is_owner(account_id, project) and existing is None


def can_decide_application(account_id: UUID | None, project: Project) -> bool:
    return is_owner(account_id, project)


def can_view_application(
    account_id: UUID | None,
    application: ProjectApplication,
    project: Project,
) -> bool:
    if account_id is None:
        return False
    return application.applicant_id == account_id or is_owner(account_id, project)

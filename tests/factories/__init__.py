"""Test factories for generating test data.

Re-exports all factories for convenient imports:
    from tests.factories import UserFactory, ProjectFactory, ...
"""

from tests.factories.base import BaseFactory, generate_uuid7, utc_now
from tests.factories.project import (
    ApplicationFactory,
    MessageFactory,
    ProjectFactory,
)
from tests.factories.user import DEFAULT_TEST_PASSWORD, ProfileFactory, UserFactory

__all__ = [
    # Base
    "BaseFactory",
    "generate_uuid7",
    "utc_now",
    # User
    "DEFAULT_TEST_PASSWORD",
    "ProfileFactory",
    "UserFactory",
    # Project
    "ApplicationFactory",
    "MessageFactory",
    "ProjectFactory",
]
